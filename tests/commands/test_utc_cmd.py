"""Tests for the utc command."""

import json

from click.testing import CliRunner

from timetraveller.cli import cli


class TestUtc:
    def test_projects_wall_clock(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["--json", "utc", "2018-09-03T00:00:00", "--tz", "America/Denver"]
        )
        assert result.exit_code == 0
        parsed = json.loads(result.output)
        assert parsed["op"] == "to_utc"
        assert parsed["data"]["utc"] == "2018-09-03T06:00:00+00:00"

    def test_space_separated(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["--json", "utc", "2018-11-04 01:30:00", "--tz", "America/Denver"]
        )
        assert json.loads(result.output)["data"]["utc"] == "2018-11-04T07:30:00+00:00"

    def test_gap_warning(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["utc", "2018-03-11T02:30:00", "--tz", "America/Denver"])
        assert result.exit_code == 0
        assert "2018-03-11T09:00:00+00:00" in result.output
        assert "WARNING:" in result.output

    def test_bad_timestamp(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["utc", "yesterday"])
        assert result.exit_code == 2

    def test_unknown_zone(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["utc", "2018-09-03T00:00:00", "--tz", "Mars/Olympus"])
        assert result.exit_code == 1
        assert "UNKNOWN_TIMEZONE" in result.output
