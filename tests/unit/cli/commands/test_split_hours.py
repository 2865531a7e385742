"""Unit tests for split-hours command."""

import json
from decimal import Decimal

import pytest
from click.testing import CliRunner

from staffing_billing.cli.commands.split_hours import split_hours_command


class TestSplitHoursCommand:
    """Test suite for split-hours command."""

    @pytest.fixture
    def runner(self, mock_env):
        """Create a Click CLI test runner."""
        return CliRunner()

    def test_business_day(self, runner):
        result = runner.invoke(split_hours_command, ["--start", "09:00", "--end", "17:00"])

        assert result.exit_code == 0
        assert "8.00" in result.output
        assert "business" in result.output

    def test_minimum_marked(self, runner):
        result = runner.invoke(split_hours_command, ["--start", "09:00", "--end", "09:30"])

        assert result.exit_code == 0
        assert "2.00 (min)" in result.output

    def test_json_output(self, runner):
        result = runner.invoke(
            split_hours_command,
            ["--start", "22:00", "--end", "02:00", "--minimum", "3", "--json"],
        )

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert Decimal(data["total_hours"]) == Decimal("4")
        assert Decimal(data["after_hours"]) == Decimal("4")
        assert Decimal(data["business_hours"]) == Decimal("0")
        assert data["hours_type"] == "after"

    def test_json_minute_level_split(self, runner):
        """Test a 20-minute job straddling 08:00 without rounding residue."""
        result = runner.invoke(
            split_hours_command,
            ["--start", "07:50", "--end", "08:10", "--minimum", "0", "--json"],
        )

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["minimum_applied"] == "0"
        assert Decimal(data["business_hours"]) + Decimal(data["after_hours"]) == (
            Decimal(data["total_hours"])
        )
        assert data["hours_type"] == "mixed"

    def test_minimum_defaults_to_setting(self, runner, monkeypatch):
        monkeypatch.setenv("DEFAULT_MINIMUM_HOURS", "4")

        result = runner.invoke(
            split_hours_command, ["--start", "09:00", "--end", "10:00", "--json"]
        )

        assert Decimal(json.loads(result.output)["billable_hours"]) == Decimal("4")

    def test_invalid_time(self, runner):
        result = runner.invoke(split_hours_command, ["--start", "9am", "--end", "17:00"])

        assert result.exit_code == 3
        assert "Invalid time format" in result.output

    def test_negative_minimum(self, runner):
        result = runner.invoke(
            split_hours_command, ["--start", "09:00", "--end", "17:00", "--minimum=-1"]
        )

        assert result.exit_code == 3
        assert "cannot be negative" in result.output

    def test_non_numeric_minimum(self, runner):
        result = runner.invoke(
            split_hours_command, ["--start", "09:00", "--end", "17:00", "--minimum", "two"]
        )
        assert result.exit_code == 3

    def test_missing_end(self, runner):
        result = runner.invoke(split_hours_command, ["--start", "09:00"])
        assert result.exit_code == 2
