"""
Tests for logging setup.

Run with: python -m pytest tests/test_logging_config.py -v
"""

import logging
from logging.handlers import RotatingFileHandler

import structlog

from config.logging_config import bind_context, clear_context, setup_logging


def test_log_file_gets_rotating_handler(tmp_path):
    log_file = tmp_path / "logs" / "ledger.log"
    root = logging.getLogger()
    before = list(root.handlers)

    setup_logging(log_level="INFO", log_file=log_file)
    added = [h for h in root.handlers if h not in before]
    try:
        assert any(
            isinstance(h, RotatingFileHandler) and h.baseFilename == str(log_file)
            for h in added
        )
        assert log_file.exists()
    finally:
        for handler in added:
            root.removeHandler(handler)
            handler.close()


def test_context_bound_and_cleared():
    bind_context(command="show_ledger")
    assert structlog.contextvars.get_contextvars() == {"command": "show_ledger"}
    clear_context()
    assert structlog.contextvars.get_contextvars() == {}
