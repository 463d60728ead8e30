"""Configuring and resetting the arc42docs logger hierarchy."""

from __future__ import annotations

import logging
from pathlib import Path

from arc42docs.logging import configure_logging, get_logger, reset_logging


def test_get_logger_names_components() -> None:
    assert get_logger().name == "arc42docs"
    assert get_logger("workspace.accessor").name == "arc42docs.workspace.accessor"


def test_configure_installs_console_and_file_handlers(tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "arc42docs.log"

    logger = configure_logging(verbose=True, log_file=log_file)
    get_logger("tools").debug("wrote %s", "12_glossary")
    for handler in logger.handlers:
        handler.flush()

    assert logger.level == logging.DEBUG
    assert logger.propagate is False
    assert len(logger.handlers) == 2
    assert "DEBUG arc42docs.tools: wrote 12_glossary" in log_file.read_text(encoding="utf-8")


def test_configure_replaces_previous_handlers() -> None:
    configure_logging()
    logger = configure_logging()

    assert logger.level == logging.INFO
    assert len(logger.handlers) == 1


def test_reset_restores_propagation(tmp_path: Path) -> None:
    configure_logging(log_file=tmp_path / "arc42docs.log")

    logger = reset_logging()

    assert logger.handlers == []
    assert logger.propagate is True
    assert logger.level == logging.NOTSET
