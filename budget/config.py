"""Configuration file management for budget."""

import os
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import tomli_w

from budget.store.schema import get_data_path

DEFAULT_EXPORT_FILE = "budget_export.csv"


class ConfigError(ValueError):
    """Config file holds a value of the wrong type."""


@dataclass(frozen=True)
class Settings:
    """Resolved runtime settings."""

    data_file: Path
    export_file: str = DEFAULT_EXPORT_FILE


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
    return get_xdg_config_home() / "budget" / "config.toml"


def default_config(data_file: Path | None = None) -> dict[str, Any]:
    """Config written by 'budget init'."""
    return {
        "data_file": str(data_file or get_data_path()),
        "export_file": DEFAULT_EXPORT_FILE,
    }


def create_default_config(config_path: Path | None = None, data_file: Path | None = None) -> None:
    """Create default config file with secure permissions.

    Args:
        config_path: Path to config file. If None, uses default location.
        data_file: Ledger path to record. If None, uses default location.
    """
    save_config(default_config(data_file), config_path)


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """Load configuration from TOML file.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        Configuration dictionary, empty if the file doesn't exist.

    Raises:
        tomllib.TOMLDecodeError: If the file is not valid TOML.
    """
    if config_path is None:
        config_path = get_config_path()

    if not config_path.exists():
        return {}

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

    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, "wb") as f:
        tomli_w.dump(config, f)

    os.chmod(config_path, 0o600)


def resolve_settings(data_file: Path | None = None, config_path: Path | None = None) -> Settings:
    """Merge command line overrides, config file and defaults.

    Args:
        data_file: Ledger path given on the command line, if any.
        config_path: Path to config file. If None, uses default location.

    Returns:
        Settings with every value filled in.

    Raises:
        tomllib.TOMLDecodeError: If the config file is not valid TOML.
        ConfigError: If a config value has the wrong type.
    """
    config = load_config(config_path)

    for key in ("data_file", "export_file"):
        if key in config and not isinstance(config[key], str):
            raise ConfigError(f"'{key}' must be a string, got {config[key]!r}")

    if data_file is None:
        configured = config.get("data_file")
        data_file = Path(configured).expanduser() if configured else get_data_path()

    export_file = config.get("export_file") or DEFAULT_EXPORT_FILE

    return Settings(data_file=data_file, export_file=str(export_file))
