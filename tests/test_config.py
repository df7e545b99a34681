"""Tests for fundwarrior.config."""

import stat
from pathlib import Path

import pytest

from fundwarrior.config import (
    create_default_config,
    get_config_path,
    get_default_fund_path,
    get_fund_path,
    load_config,
    save_config,
)


@pytest.fixture(autouse=True)
def xdg_dirs(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "data"))
    return tmp_path


class TestPaths:
    """Tests for XDG path resolution."""

    def test_config_path_uses_xdg_config_home(self, xdg_dirs: Path) -> None:
        """Should place config.toml under XDG_CONFIG_HOME."""
        assert get_config_path() == xdg_dirs / "config" / "fundwarrior" / "config.toml"

    def test_fund_path_uses_xdg_data_home(self, xdg_dirs: Path) -> None:
        """Should place the fund file under XDG_DATA_HOME."""
        assert get_default_fund_path() == xdg_dirs / "data" / "fundwarrior" / "funds"

    def test_falls_back_to_home(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        """Should fall back to ~/.config and ~/.local/share."""
        monkeypatch.delenv("XDG_CONFIG_HOME")
        monkeypatch.delenv("XDG_DATA_HOME")
        monkeypatch.setenv("HOME", str(tmp_path))

        assert get_config_path() == tmp_path / ".config" / "fundwarrior" / "config.toml"
        assert get_default_fund_path() == tmp_path / ".local" / "share" / "fundwarrior" / "funds"


class TestLoadAndSave:
    """Tests for reading and writing the config file."""

    def test_missing_config_is_empty(self) -> None:
        """Should return an empty config when no file exists."""
        assert load_config() == {}

    def test_default_config(self, xdg_dirs: Path) -> None:
        """Should write the default fund file location with mode 600."""
        create_default_config()

        config_path = get_config_path()
        assert load_config() == {"fund_file": str(xdg_dirs / "data" / "fundwarrior" / "funds")}
        assert stat.S_IMODE(config_path.stat().st_mode) == 0o600

    def test_save_then_load(self, tmp_path: Path) -> None:
        """Should round-trip a config dictionary."""
        config_path = tmp_path / "custom.toml"

        save_config({"fund_file": "/somewhere/funds"}, config_path)

        assert load_config(config_path) == {"fund_file": "/somewhere/funds"}


class TestGetFundPath:
    """Tests for get_fund_path."""

    def test_default_when_unset(self, xdg_dirs: Path) -> None:
        """Should use the XDG default without a fund_file key."""
        assert get_fund_path({}) == xdg_dirs / "data" / "fundwarrior" / "funds"

    def test_configured_path(self) -> None:
        """Should use the configured fund_file."""
        assert get_fund_path({"fund_file": "/srv/funds"}) == Path("/srv/funds")

    def test_expands_home(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        """Should expand '~' in fund_file."""
        monkeypatch.setenv("HOME", str(tmp_path))

        assert get_fund_path({"fund_file": "~/funds"}) == tmp_path / "funds"

    def test_rejects_non_string(self) -> None:
        """Should raise ValueError when fund_file is not a string."""
        with pytest.raises(ValueError):
            get_fund_path({"fund_file": 5})
