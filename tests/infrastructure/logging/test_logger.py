"""Tests for the ledger and audit loggers."""

import logging
from unittest.mock import MagicMock

import pytest

from src.infrastructure.logging import logger as logger_module

STAMP = "20240630"


@pytest.fixture
def log_root(tmp_path, monkeypatch):
    """Point log files at a temporary project root with fresh singletons."""
    monkeypatch.setattr(logger_module, "get_project_root", lambda: tmp_path)
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "_today_stamp",
        staticmethod(lambda: STAMP),
    )
    _reset_loggers()
    yield tmp_path
    _reset_loggers()


def _reset_loggers() -> None:
    for name in ("ledger", "ledger.audit"):
        stdlib_logger = logging.getLogger(name)
        for handler in list(stdlib_logger.handlers):
            stdlib_logger.removeHandler(handler)
            handler.close()
    logger_module.AppLogger._instance = None
    logger_module.AuditLogger._instance = None


def test_app_logger_writes_ledger_log_file(log_root):
    """The application logger is named ledger and logs under logs/app."""
    app_logger = logger_module.get_app_logger()
    app_logger.info("Section balances for %s account types", 2)

    assert app_logger.logger.name == "ledger"
    log_file = log_root / "logs" / "app" / f"{STAMP}_app_logs.log"
    content = log_file.read_text(encoding="utf-8")
    assert "ledger | INFO | Section balances for 2 account types" in content


def test_audit_logger_writes_under_audit_directory(log_root):
    """Audit events land in their own file and stay out of the app log."""
    app_logger = logger_module.get_app_logger()
    audit_logger = logger_module.get_audit_logger()

    audit_logger.info("Deleted account id=7 code=501 type=BANK")

    assert audit_logger.logger.name == "ledger.audit"
    assert audit_logger is not app_logger
    audit_file = log_root / "logs" / "audit" / f"{STAMP}_audit_logs.log"
    assert "Deleted account id=7" in audit_file.read_text(encoding="utf-8")
    app_file = log_root / "logs" / "app" / f"{STAMP}_app_logs.log"
    assert "Deleted account" not in app_file.read_text(encoding="utf-8")


def test_loggers_are_singletons_with_one_set_of_handlers(log_root):
    """Repeated lookups share one logger and never stack handlers."""
    first = logger_module.get_app_logger()
    second = logger_module.get_app_logger()
    rebuilt = logger_module.LoggerBuilder().name("ledger").build()

    assert first is second
    assert rebuilt is first.logger
    assert len(first.logger.handlers) == 2
    assert first.logger.propagate is False


def test_builder_without_console_only_writes_file(log_root):
    """Disabling the console leaves the file handler alone."""
    built = (
        logger_module.LoggerBuilder()
        .name("ledger.reports")
        .subdir("reports")
        .prefix("movement")
        .console(False)
        .level(logging.WARNING)
        .build()
    )

    assert built.level == logging.WARNING
    assert [type(handler) for handler in built.handlers] == [
        logging.FileHandler
    ]
    assert (log_root / "logs" / "reports").is_dir()
    for handler in list(built.handlers):
        built.removeHandler(handler)
        handler.close()


def test_warning_and_error_reach_wrapped_logger(monkeypatch):
    """Severity methods forward arguments unchanged."""
    fake_logger = MagicMock()
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "build",
        lambda self: fake_logger,
    )
    monkeypatch.setattr(logger_module.AuditLogger, "_instance", None)

    audit_logger = logger_module.get_audit_logger()
    audit_logger.warning("code %s taken", 501)
    audit_logger.error("save failed", exc_info=True)

    fake_logger.warning.assert_called_once_with("code %s taken", 501)
    fake_logger.error.assert_called_once_with("save failed", exc_info=True)
