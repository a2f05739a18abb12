"""Shared fixtures."""

from pathlib import Path

import pytest

import budget.domain.transactions as transactions_module


@pytest.fixture(autouse=True)
def reset_id_sequence(monkeypatch: pytest.MonkeyPatch) -> None:
    """Start every test with a fresh transaction id sequence."""
    monkeypatch.setattr(transactions_module, "_last_issued_id", 0)


@pytest.fixture
def isolated_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point XDG config and data directories into a temporary folder."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "data"))
    monkeypatch.chdir(tmp_path)
    return tmp_path
