"""Tests for polydts.logging."""

from __future__ import annotations

import logging
from pathlib import Path

from polydts.logging import configure_logging, get_logger, resolve_level


def test_get_logger_names_children() -> None:
    assert get_logger().name == "polydts"
    assert get_logger("pipeline").name == "polydts.pipeline"


def test_resolve_level() -> None:
    assert resolve_level() == logging.INFO
    assert resolve_level(verbose=True) == logging.DEBUG
    assert resolve_level(quiet=True) == logging.WARNING


def test_configure_logging_replaces_handlers(tmp_path: Path) -> None:
    logger = configure_logging(verbose=True)
    configure_logging(quiet=True, log_file=tmp_path / "run.log")
    try:
        assert len(logger.handlers) == 2
        console, file_handler = logger.handlers
        assert console.level == logging.WARNING
        assert file_handler.level == logging.DEBUG
        assert logger.level == logging.DEBUG

        get_logger("test").debug("detail only in the file")
        file_handler.flush()
        assert "detail only in the file" in (tmp_path / "run.log").read_text(encoding="utf-8")
    finally:
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()
