"""Diagnostics for arc42docs.

Command output (JSON responses, guides, templates) goes to stdout; everything
logged under the ``arc42docs`` hierarchy goes to stderr and, optionally, to a
log file. Fallback warnings from the language and format factories travel
through these loggers instead of through the responses.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

ROOT_LOGGER = "arc42docs"
CONSOLE_FORMAT = "[arc42docs] %(levelname)s %(message)s"
FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(component: str | None = None) -> logging.Logger:
    """Return ``arc42docs.<component>``, or the package logger itself."""
    return logging.getLogger(f"{ROOT_LOGGER}.{component}" if component else ROOT_LOGGER)


def configure_logging(
    *, verbose: bool = False, log_file: Path | None = None
) -> logging.Logger:
    """Route arc42docs diagnostics to stderr, plus ``log_file`` when given.

    Safe to call more than once per process: handlers installed by an earlier
    call are closed and replaced.
    """
    level = logging.DEBUG if verbose else logging.INFO
    logger = _detach(get_logger())
    logger.setLevel(level)
    logger.propagate = False

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    logger.addHandler(console)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        sink = logging.FileHandler(log_file, encoding="utf-8")
        sink.setFormatter(logging.Formatter(FILE_FORMAT))
        logger.addHandler(sink)

    return logger


def reset_logging() -> logging.Logger:
    """Undo ``configure_logging`` so records propagate to the root logger again."""
    logger = _detach(get_logger())
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
    return logger


def _detach(logger: logging.Logger) -> logging.Logger:
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    return logger


__all__ = ["configure_logging", "get_logger", "reset_logging"]
