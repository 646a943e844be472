"""Tests for the finperiod command line."""

from datetime import date
from pathlib import Path

import pytest
from typer.testing import CliRunner

from finperiod.cli import app
from finperiod.commands.chart import normalize_date, parse_money

runner = CliRunner()


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the config lookup at an empty temporary directory."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    return tmp_path


class TestLabel:
    """Tests for the label command."""

    def test_current_month(self) -> None:
        """Should print the current-month token."""
        result = runner.invoke(app, ["label", "--type", "month", "--date", "2024-06-03", "--today", "2024-06-15"])

        assert result.exit_code == 0
        assert "This month" in result.output

    def test_reversed_custom_range_fails(self) -> None:
        """Should exit with an error for a reversed custom range."""
        result = runner.invoke(app, ["label", "--type", "custom", "--start", "2024-03-10", "--end", "2024-03-01"])

        assert result.exit_code == 1
        assert "Invalid period" in result.output

    def test_unknown_type_fails(self) -> None:
        """Should exit with an error for an unknown period type."""
        result = runner.invoke(app, ["label", "--type", "fortnight"])

        assert result.exit_code == 1

    def test_malformed_config_fails(self, isolated_config: Path) -> None:
        """Should exit with a readable error when config.toml is not valid TOML."""
        config_path = isolated_config / "config" / "finperiod" / "config.toml"
        config_path.parent.mkdir(parents=True)
        config_path.write_text("[labels\nseparator = \" | \"\n")

        result = runner.invoke(app, ["label", "--type", "day", "--date", "2024-03-05"])

        assert result.exit_code == 1
        assert "Config file is invalid" in result.output
        assert not isinstance(result.exception, ValueError)


class TestNavigate:
    """Tests for the next and prev commands."""

    def test_next_custom(self) -> None:
        """Should print the next custom window."""
        result = runner.invoke(app, ["next", "--type", "custom", "--start", "2024-03-01", "--end", "2024-03-10"])

        assert result.exit_code == 0
        assert "custom 2024-03-11..2024-03-20" in result.output

    def test_prev_month(self) -> None:
        """Should print the previous month anchored on day 1."""
        result = runner.invoke(app, ["prev", "--type", "month", "--date", "2024-03-31", "--today", "2024-06-15"])

        assert result.exit_code == 0
        assert "month 2024-02-01" in result.output


class TestRange:
    """Tests for the range command."""

    def test_week_range(self) -> None:
        """Should print the report type and ISO week bounds."""
        result = runner.invoke(app, ["range", "--type", "week", "--date", "2024-03-13"])

        assert result.exit_code == 0
        assert "WEEKLY" in result.output
        assert "2024-03-11" in result.output
        assert "2024-03-17" in result.output


class TestWeeks:
    """Tests for the weeks command."""

    def test_lists_segments(self) -> None:
        """Should list each week segment key."""
        result = runner.invoke(app, ["weeks", "2024-01"])

        assert result.exit_code == 0
        assert "2024-01-29_to_2024-01-31" in result.output

    def test_invalid_month(self) -> None:
        """Should exit with an error for month 13."""
        result = runner.invoke(app, ["weeks", "2024-13"])

        assert result.exit_code == 1
        assert "Invalid month" in result.output


class TestChart:
    """Tests for the chart command."""

    def test_buckets_csv(self, tmp_path: Path) -> None:
        """Should total daily values per week segment."""
        csv_path = tmp_path / "daily.csv"
        csv_path.write_text("date,value\n2024-01-02,10.50\n2024-01-05,4.50\n2024-01-30,3\n2024-02-01,100\n")

        result = runner.invoke(
            app,
            ["chart", str(csv_path), "--type", "month", "--date", "2024-01-15", "--today", "2024-06-15"],
        )

        assert result.exit_code == 0
        assert "15.00" in result.output
        assert "18.00" in result.output
        assert "1 record(s) outside this period were ignored" in result.output

    def test_missing_file(self, tmp_path: Path) -> None:
        """Should exit with an error when the CSV is missing."""
        result = runner.invoke(app, ["chart", str(tmp_path / "missing.csv")])

        assert result.exit_code == 1

    def test_missing_columns(self, tmp_path: Path) -> None:
        """Should exit with an error when columns are missing."""
        csv_path = tmp_path / "daily.csv"
        csv_path.write_text("day,amount\n2024-01-02,10\n")

        result = runner.invoke(app, ["chart", str(csv_path), "--date", "2024-01-15"])

        assert result.exit_code == 1

    def test_malformed_config_fails(self, isolated_config: Path) -> None:
        """Should report the config error rather than blame the CSV."""
        config_path = isolated_config / "config" / "finperiod" / "config.toml"
        config_path.parent.mkdir(parents=True)
        config_path.write_text("labels = [\n")
        csv_path = isolated_config / "daily.csv"
        csv_path.write_text("date,value\n2024-01-02,10\n")

        result = runner.invoke(app, ["chart", str(csv_path), "--date", "2024-01-15"])

        assert result.exit_code == 1
        assert "Config file is invalid" in result.output
        assert "Could not read" not in result.output

    def test_non_finite_amount_fails(self, tmp_path: Path) -> None:
        """Should exit with an error for infinite or overflowing amounts."""
        for raw_amount in ("inf", "1e400", "-Infinity"):
            csv_path = tmp_path / "daily.csv"
            csv_path.write_text(f"date,value\n2024-01-02,{raw_amount}\n")

            result = runner.invoke(app, ["chart", str(csv_path), "--date", "2024-01-15"])

            assert result.exit_code == 1
            assert "Could not read" in result.output


class TestInit:
    """Tests for the init command."""

    def test_creates_then_refuses_overwrite(self, isolated_config: Path) -> None:
        """Should create the config once and refuse to overwrite without --force."""
        first = runner.invoke(app, ["init"])
        second = runner.invoke(app, ["init"])
        forced = runner.invoke(app, ["init", "--force"])

        assert first.exit_code == 0
        assert (isolated_config / "config" / "finperiod" / "config.toml").exists()
        assert second.exit_code == 1
        assert forced.exit_code == 0


class TestNormalizeDate:
    """Tests for CSV date parsing."""

    def test_iso_dates_are_year_month_day(self) -> None:
        """Should not swap month and day in ISO dates."""
        assert normalize_date("2024-01-02") == date(2024, 1, 2)

    def test_day_first_dates(self) -> None:
        """Should read slash dates day first."""
        assert normalize_date("31/01/2024") == date(2024, 1, 31)

    def test_garbage_raises_valueerror(self) -> None:
        """Should raise ValueError for unparseable dates."""
        with pytest.raises(ValueError):
            normalize_date("not a date")


class TestParseMoney:
    """Tests for CSV amount parsing."""

    def test_major_units_to_minor_units(self) -> None:
        """Should convert to minor units with rounding."""
        assert parse_money("10.50") == 1050
        assert parse_money("-3.25") == -325

    def test_non_finite_raises_valueerror(self) -> None:
        """Should raise ValueError instead of OverflowError for huge amounts."""
        for raw_amount in ("inf", "nan", "1e400", "1e307"):
            with pytest.raises(ValueError):
                parse_money(raw_amount)
