"""Tests for budget.config."""

import stat
import tomllib
from pathlib import Path

import pytest

from budget.config import (
    DEFAULT_EXPORT_FILE,
    ConfigError,
    create_default_config,
    get_config_path,
    load_config,
    resolve_settings,
    save_config,
)


class TestConfigPath:
    """Tests for get_config_path."""

    def test_uses_xdg_config_home(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Should place the config under XDG_CONFIG_HOME."""
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))

        assert get_config_path() == tmp_path / "budget" / "config.toml"


class TestLoadAndSave:
    """Tests for load_config and save_config."""

    def test_missing_file_is_empty(self, tmp_path: Path) -> None:
        """Should return an empty config when no file exists."""
        assert load_config(tmp_path / "config.toml") == {}

    def test_round_trip(self, tmp_path: Path) -> None:
        """Should read back saved values."""
        path = tmp_path / "budget" / "config.toml"

        save_config({"data_file": "/tmp/ledger.json", "export_file": "out.csv"}, path)

        assert load_config(path) == {"data_file": "/tmp/ledger.json", "export_file": "out.csv"}

    def test_secure_permissions(self, tmp_path: Path) -> None:
        """Should make the config readable by the owner only."""
        path = tmp_path / "config.toml"

        create_default_config(path, tmp_path / "data.json")

        assert stat.S_IMODE(path.stat().st_mode) == 0o600

    def test_default_config_contents(self, tmp_path: Path) -> None:
        """Should record the ledger path and export file name."""
        path = tmp_path / "config.toml"

        create_default_config(path, tmp_path / "data.json")

        assert load_config(path) == {
            "data_file": str(tmp_path / "data.json"),
            "export_file": DEFAULT_EXPORT_FILE,
        }

    def test_invalid_toml_raises(self, tmp_path: Path) -> None:
        """Should surface TOML errors."""
        path = tmp_path / "config.toml"
        path.write_text("data_file = ", encoding="utf-8")

        with pytest.raises(tomllib.TOMLDecodeError):
            load_config(path)


class TestResolveSettings:
    """Tests for resolve_settings."""

    def test_defaults_without_config(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Should fall back to the XDG ledger path and default export name."""
        monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "data"))

        settings = resolve_settings(config_path=tmp_path / "missing.toml")

        assert settings.data_file == tmp_path / "data" / "budget" / "data.json"
        assert settings.export_file == DEFAULT_EXPORT_FILE

    def test_config_values(self, tmp_path: Path) -> None:
        """Should use values from the config file."""
        path = tmp_path / "config.toml"
        save_config({"data_file": str(tmp_path / "mine.json"), "export_file": "mine.csv"}, path)

        settings = resolve_settings(config_path=path)

        assert settings.data_file == tmp_path / "mine.json"
        assert settings.export_file == "mine.csv"

    def test_command_line_overrides_config(self, tmp_path: Path) -> None:
        """Should prefer an explicit ledger path."""
        path = tmp_path / "config.toml"
        save_config({"data_file": str(tmp_path / "mine.json")}, path)

        settings = resolve_settings(tmp_path / "other.json", config_path=path)

        assert settings.data_file == tmp_path / "other.json"

    @pytest.mark.parametrize("content", ["data_file = 5\n", "export_file = true\n", "data_file = [\"a\"]\n"])
    def test_wrong_type_raises(self, tmp_path: Path, content: str) -> None:
        """Should raise ConfigError for non-string paths."""
        path = tmp_path / "config.toml"
        path.write_text(content, encoding="utf-8")

        with pytest.raises(ConfigError):
            resolve_settings(config_path=path)

    def test_expands_user(self, tmp_path: Path) -> None:
        """Should expand ~ in the configured ledger path."""
        path = tmp_path / "config.toml"
        save_config({"data_file": "~/ledger.json"}, path)

        settings = resolve_settings(config_path=path)

        assert settings.data_file == Path.home() / "ledger.json"
