"""Tests for the structlog-backed logging setup."""

from __future__ import annotations

import logging

import pytest
import structlog

from sm_common.logging import configure_logging


pytestmark = pytest.mark.unit_common


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


def test_configure_logging_force_installs_structlog_formatter(restore_root_logger, monkeypatch) -> None:
    monkeypatch.delenv("SM_LOG_LEVEL", raising=False)
    monkeypatch.delenv("SM_LOG_FILE", raising=False)

    configure_logging(level="debug", force=True)

    root = restore_root_logger
    assert root.level == logging.DEBUG
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0].formatter, structlog.stdlib.ProcessorFormatter)


def test_configure_logging_reads_env_level(restore_root_logger, monkeypatch) -> None:
    monkeypatch.setenv("SM_LOG_LEVEL", "ERROR")
    monkeypatch.delenv("SM_LOG_FILE", raising=False)

    configure_logging(force=True)

    assert restore_root_logger.level == logging.ERROR


def test_configure_logging_writes_log_file(restore_root_logger, monkeypatch, tmp_path) -> None:
    monkeypatch.delenv("SM_LOG_LEVEL", raising=False)
    log_path = tmp_path / "sm.log"

    configure_logging(level="INFO", log_file=str(log_path), json=True, force=True)
    logging.getLogger("sm_test").info("hello")
    for handler in restore_root_logger.handlers:
        handler.flush()

    assert "hello" in log_path.read_text()


def test_debug_flag_wins_over_level(restore_root_logger, monkeypatch) -> None:
    monkeypatch.delenv("SM_LOG_FILE", raising=False)
    configure_logging(level="ERROR", debug=True, force=True)
    assert restore_root_logger.level == logging.DEBUG
