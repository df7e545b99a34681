"""Configuration file management for fundwarrior."""

import os
import tomllib
from pathlib import Path
from typing import Any

import tomli_w


def get_xdg_config_home() -> Path:
    """Get XDG config directory, with fallback to ~/.config."""
    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        return Path(xdg_config)
    return Path.home() / ".config"


def get_xdg_data_home() -> Path:
    """Get XDG data directory, with fallback to ~/.local/share."""
    xdg_data = os.environ.get("XDG_DATA_HOME")
    if xdg_data:
        return Path(xdg_data)
    return Path.home() / ".local" / "share"


def get_config_path() -> Path:
    """Get the config file path (XDG compliant).

    Returns:
        Path to the config file.
    """
    return get_xdg_config_home() / "fundwarrior" / "config.toml"


def get_default_fund_path() -> Path:
    """Get the default fund file path (XDG compliant)."""
    return get_xdg_data_home() / "fundwarrior" / "funds"


def create_default_config(config_path: Path | None = None) -> None:
    """Create default config file with secure permissions.

    Args:
        config_path: Path to config file. If None, uses default location.
    """
    if config_path is None:
        config_path = get_config_path()

    config_path.parent.mkdir(parents=True, exist_ok=True)

    default_config: dict[str, Any] = {
        "fund_file": str(get_default_fund_path()),
    }

    save_config(default_config, config_path)


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """Load configuration from TOML file.

    A missing config file is not an error: fundwarrior works on defaults
    until 'fund init' writes one.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        Configuration dictionary, empty if the file does not exist.

    Raises:
        tomllib.TOMLDecodeError: If the config file is not valid TOML.
    """
    if config_path is None:
        config_path = get_config_path()

    try:
        with open(config_path, "rb") as f:
            return tomllib.load(f)
    except FileNotFoundError:
        return {}


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


def get_fund_path(config: dict[str, Any]) -> Path:
    """Resolve the fund file location from a loaded config.

    Args:
        config: Configuration dictionary.

    Returns:
        The configured 'fund_file' with '~' expanded, or the default location.

    Raises:
        ValueError: If 'fund_file' is present but not a string.
    """
    fund_file = config.get("fund_file")
    if fund_file is None:
        return get_default_fund_path()
    if not isinstance(fund_file, str):
        raise ValueError("'fund_file' in config must be a string")
    return Path(fund_file).expanduser()
