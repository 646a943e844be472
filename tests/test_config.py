"""Tests for finperiod.config."""

import stat
import tomllib
from pathlib import Path

import pytest

from finperiod.config import (
    create_default_config,
    get_config_path,
    load_config,
    load_label_style,
    save_config,
)
from finperiod.domain.periods import LabelStyle


class TestConfigPath:
    """Tests for get_config_path."""

    def test_uses_xdg_config_home(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Should place config under XDG_CONFIG_HOME when set."""
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))

        assert get_config_path() == tmp_path / "finperiod" / "config.toml"


class TestDefaultConfig:
    """Tests for create_default_config and load_config."""

    def test_creates_labels_table(self, tmp_path: Path) -> None:
        """Should write the default label settings."""
        config_path = tmp_path / "nested" / "config.toml"
        create_default_config(config_path)

        config = load_config(config_path)
        assert config["labels"]["date_format"] == "%d/%m/%Y"
        assert config["labels"]["separator"] == " - "
        assert config["labels"]["current_month"] == "This month"

    def test_secure_permissions(self, tmp_path: Path) -> None:
        """Should restrict the config file to its owner."""
        config_path = tmp_path / "config.toml"
        create_default_config(config_path)

        assert stat.S_IMODE(config_path.stat().st_mode) == 0o600

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        """Should raise FileNotFoundError from load_config."""
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.toml")


class TestLoadLabelStyle:
    """Tests for load_label_style."""

    def test_missing_file_gives_defaults(self, tmp_path: Path) -> None:
        """Should fall back to default settings."""
        assert load_label_style(tmp_path / "missing.toml") == LabelStyle()

    def test_partial_override(self, tmp_path: Path) -> None:
        """Should override only the keys present."""
        config_path = tmp_path / "config.toml"
        save_config({"labels": {"current_month": "Tháng này"}}, config_path)

        style = load_label_style(config_path)

        assert style.current_month == "Tháng này"
        assert style.date_format == "%d/%m/%Y"

    def test_ignores_malformed_labels(self, tmp_path: Path) -> None:
        """Should fall back to defaults when labels is not a table."""
        config_path = tmp_path / "config.toml"
        save_config({"labels": "oops"}, config_path)

        assert load_label_style(config_path) == LabelStyle()

    def test_invalid_toml_raises(self, tmp_path: Path) -> None:
        """Should surface a TOML syntax error to the caller."""
        config_path = tmp_path / "config.toml"
        config_path.write_text("labels = [\n")

        with pytest.raises(tomllib.TOMLDecodeError):
            load_label_style(config_path)
