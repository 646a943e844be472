"""Configuration file management for finperiod."""

import os
import tomllib
from pathlib import Path
from typing import Any

import tomli_w

from finperiod.domain.periods import LabelStyle

DEFAULT_LABELS: dict[str, str] = {
    "date_format": LabelStyle.date_format,
    "separator": LabelStyle.separator,
    "current_month": LabelStyle.current_month,
}


def get_xdg_config_home() -> Path:
    """Get XDG config directory, with fallback to ~/.config."""
    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        return Path(xdg_config)
    return Path.home() / ".config"


def get_config_path() -> Path:
    """Get the config file path (XDG compliant).

    Returns:
        Path to the config file.
    """
    return get_xdg_config_home() / "finperiod" / "config.toml"


def create_default_config(config_path: Path | None = None) -> None:
    """Create default config file with secure permissions.

    Args:
        config_path: Path to config file. If None, uses default location.
    """
    if config_path is None:
        config_path = get_config_path()

    config_path.parent.mkdir(parents=True, exist_ok=True)

    default_config: dict[str, Any] = {
        "labels": dict(DEFAULT_LABELS),
    }

    save_config(default_config, config_path)


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """Load configuration from TOML file.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        Configuration dictionary.

    Raises:
        FileNotFoundError: If config file doesn't exist.
    """
    if config_path is None:
        config_path = get_config_path()

    with open(config_path, "rb") as f:
        return tomllib.load(f)


def save_config(config: dict[str, Any], config_path: Path | None = None) -> None:
    """Save configuration to TOML file.

    Args:
        config: Configuration dictionary.
        config_path: Path to config file. If None, uses default location.
    """
    if config_path is None:
        config_path = get_config_path()

    with open(config_path, "wb") as f:
        tomli_w.dump(config, f)

    os.chmod(config_path, 0o600)


def load_label_style(config_path: Path | None = None) -> LabelStyle:
    """Build label display settings from the [labels] table.

    Missing files and missing keys fall back to the defaults.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        LabelStyle for rendering period labels.
    """
    try:
        config = load_config(config_path)
    except FileNotFoundError:
        return LabelStyle()

    labels = config.get("labels", {})
    if not isinstance(labels, dict):
        return LabelStyle()

    settings = {key: str(labels[key]) for key in DEFAULT_LABELS if key in labels}
    return LabelStyle(**settings)
