"""Tests for infrastructure settings."""

from unittest.mock import MagicMock

import pytest

from src.infrastructure import settings as settings_module
from src.infrastructure.settings import LedgerSettings


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch):
    monkeypatch.setattr(settings_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.setattr(settings_module, "get_app_logger", MagicMock)
    for name in (
        "LEDGER_TABLE_PREFIX",
        "LEDGER_YEAR_START",
        "LEDGER_CODE_RETRIES",
    ):
        monkeypatch.delenv(name, raising=False)


def test_from_env_uses_defaults() -> None:
    """Unset variables fall back to the defaults."""
    settings = LedgerSettings.from_env()

    assert settings == LedgerSettings()
    assert settings.table_prefix == "ifrs_"
    assert settings.year_start == 1
    assert settings.code_assignment_retries == 3


def test_from_env_reads_values(monkeypatch) -> None:
    """Configured values are parsed."""
    monkeypatch.setenv("LEDGER_TABLE_PREFIX", "acct_")
    monkeypatch.setenv("LEDGER_YEAR_START", "4")
    monkeypatch.setenv("LEDGER_CODE_RETRIES", "5")

    settings = LedgerSettings.from_env()

    assert settings.table_prefix == "acct_"
    assert settings.year_start == 4
    assert settings.code_assignment_retries == 5


def test_from_env_ignores_invalid_values(monkeypatch) -> None:
    """Invalid numbers fall back to defaults."""
    monkeypatch.setenv("LEDGER_YEAR_START", "13")
    monkeypatch.setenv("LEDGER_CODE_RETRIES", "many")

    settings = LedgerSettings.from_env()

    assert settings.year_start == 1
    assert settings.code_assignment_retries == 3
