"""Tests for tarloc.logging."""

from __future__ import annotations

import logging
from pathlib import Path

from tarloc.logging import configure_logging, get_logger


def test_configure_logging_replaces_handlers(tmp_path: Path) -> None:
    log_file = tmp_path / "tarloc.log"

    configure_logging()
    logger = configure_logging(verbose=True, log_file=log_file)

    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 2
    get_logger("pipeline").debug("hello from the pipeline")
    for handler in logger.handlers:
        handler.flush()
    assert "hello from the pipeline" in log_file.read_text(encoding="utf-8")

    configure_logging()
    assert len(logger.handlers) == 1


def test_get_logger_uses_tarloc_hierarchy() -> None:
    assert get_logger().name == "tarloc"
    assert get_logger("aggregator").name == "tarloc.aggregator"


def test_quiet_raises_threshold_unless_verbose() -> None:
    assert configure_logging(quiet=True).level == logging.WARNING
    assert configure_logging(quiet=True, verbose=True).level == logging.DEBUG
