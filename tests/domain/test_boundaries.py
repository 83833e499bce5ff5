"""Tests for the wall-clock boundary operators."""

from datetime import datetime
from zoneinfo import ZoneInfo

import pytest

from timetraveller.domain.boundaries import (
    apply_boundary,
    days_since_week_start,
    start_of_day,
    start_of_month,
    start_of_week,
    start_of_year,
)
from timetraveller.domain.errors import UnresolvableLocalTime
from timetraveller.domain.types import Period, Weekday

# 2018-09-01 was a Saturday
SATURDAY = datetime(2018, 9, 1, 15, 42, 7, 123456)


class TestStartOfDay:
    def test_zeroes_time(self) -> None:
        assert start_of_day(SATURDAY) == datetime(2018, 9, 1)

    def test_keeps_tzinfo(self) -> None:
        tz = ZoneInfo("America/Denver")
        assert start_of_day(SATURDAY.replace(tzinfo=tz)).tzinfo is tz

    def test_fixed_point(self) -> None:
        once = start_of_day(SATURDAY)
        assert start_of_day(once) == once


class TestStartOfWeek:
    @pytest.mark.parametrize(
        "week_start,expected",
        [
            (Weekday.SUNDAY, datetime(2018, 8, 26)),
            (Weekday.MONDAY, datetime(2018, 8, 27)),
            (Weekday.FRIDAY, datetime(2018, 8, 31)),
            (Weekday.SATURDAY, datetime(2018, 9, 1)),
        ],
    )
    def test_week_start(self, week_start: Weekday, expected: datetime) -> None:
        assert start_of_week(SATURDAY, week_start) == expected

    def test_default_sunday(self) -> None:
        assert start_of_week(SATURDAY) == datetime(2018, 8, 26)

    def test_crosses_year(self) -> None:
        # 2019-01-01 was a Tuesday
        assert start_of_week(datetime(2019, 1, 1), Weekday.SUNDAY) == datetime(2018, 12, 30)

    def test_days_since_week_start(self) -> None:
        assert days_since_week_start(SATURDAY, Weekday.SUNDAY) == 6
        assert days_since_week_start(SATURDAY, Weekday.SATURDAY) == 0

    def test_calendar_days_across_dst(self) -> None:
        """Stepping back over the spring-forward day keeps local midnight."""
        tz = ZoneInfo("America/Denver")
        wednesday = datetime(2018, 3, 14, 9, 0, tzinfo=tz)
        result = start_of_week(wednesday)
        assert result.replace(tzinfo=None) == datetime(2018, 3, 11)
        assert result.tzinfo is tz


class TestStartOfMonthAndYear:
    def test_month(self) -> None:
        assert start_of_month(SATURDAY) == datetime(2018, 9, 1)
        assert start_of_month(datetime(2018, 9, 30, 23, 59)) == datetime(2018, 9, 1)

    def test_year(self) -> None:
        assert start_of_year(SATURDAY) == datetime(2018, 1, 1)
        assert start_of_year(datetime(2018, 12, 31, 23, 59, 59)) == datetime(2018, 1, 1)


class TestApplyBoundary:
    @pytest.mark.parametrize(
        "period,expected",
        [
            (Period.DAY, datetime(2018, 9, 1)),
            (Period.WEEK, datetime(2018, 8, 27)),
            (Period.MONTH, datetime(2018, 9, 1)),
            (Period.YEAR, datetime(2018, 1, 1)),
        ],
    )
    def test_dispatch(self, period: Period, expected: datetime) -> None:
        assert apply_boundary(period, SATURDAY, Weekday.MONDAY) == expected

    def test_accepts_period_string(self) -> None:
        assert apply_boundary("week", SATURDAY) == datetime(2018, 8, 26)  # type: ignore[arg-type]


class TestRangeEdges:
    def test_week_before_min_date(self) -> None:
        # 0001-01-01 was a Monday; its Sunday-started week begins in year 0
        with pytest.raises(UnresolvableLocalTime) as excinfo:
            start_of_week(datetime(1, 1, 1, 8))
        assert excinfo.value.value == datetime(1, 1, 1, 8)

    def test_week_starting_on_min_date(self) -> None:
        assert start_of_week(datetime(1, 1, 3), Weekday.MONDAY) == datetime(1, 1, 1)
