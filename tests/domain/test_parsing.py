"""Tests for date-string and week-start parsing."""

from datetime import datetime

import pytest

from timetraveller.domain.errors import InvalidWeekStart, MalformedDateString
from timetraveller.domain.parsing import parse_date_string, parse_week_start
from timetraveller.domain.types import Weekday


class TestParseDateString:
    def test_midnight(self) -> None:
        assert parse_date_string("2018-09-01") == datetime(2018, 9, 1, 0, 0, 0)

    def test_result_is_naive(self) -> None:
        assert parse_date_string("2018-09-01").tzinfo is None

    def test_leap_day(self) -> None:
        assert parse_date_string("2020-02-29") == datetime(2020, 2, 29)

    @pytest.mark.parametrize(
        "text",
        [
            "2018-9-1",  # not zero-padded
            "2018-09-1",
            "18-09-01",  # two-digit year
            "2018/09/01",  # wrong separator
            "2018-09-01T00:00:00",  # trailing time
            " 2018-09-01",  # leading space
            "2018-09-01\n",  # trailing newline
            "",
            "２０１８-09-01",  # fullwidth digits
            "2018-13-01",  # month out of range
            "2018-00-10",
            "2018-02-30",  # day out of range
            "2019-02-29",  # not a leap year
        ],
    )
    def test_malformed(self, text: str) -> None:
        with pytest.raises(MalformedDateString) as excinfo:
            parse_date_string(text)
        assert excinfo.value.value == text
        assert excinfo.value.code == "MALFORMED_DATE_STRING"

    def test_malformed_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            parse_date_string("2018-9-1")


class TestParseWeekStart:
    @pytest.mark.parametrize(
        "value,expected",
        [
            (None, Weekday.SUNDAY),
            (Weekday.FRIDAY, Weekday.FRIDAY),
            (1, Weekday.MONDAY),
            (7, Weekday.SUNDAY),
            ("mon", Weekday.MONDAY),
            (":mon", Weekday.MONDAY),
            ("SAT", Weekday.SATURDAY),
            ("Monday", Weekday.MONDAY),
            ("wednesday", Weekday.WEDNESDAY),
            (" Sunday ", Weekday.SUNDAY),
        ],
    )
    def test_accepted_encodings(self, value: object, expected: Weekday) -> None:
        assert parse_week_start(value) is expected

    @pytest.mark.parametrize(
        "value",
        [0, 8, -1, "funday", "", "mo", "1", True, 1.5, ["mon"]],
    )
    def test_invalid(self, value: object) -> None:
        with pytest.raises(InvalidWeekStart) as excinfo:
            parse_week_start(value)
        assert excinfo.value.code == "INVALID_WEEK_START"
