from __future__ import annotations

import logging
import sys
from typing import TextIO

"""Run output for the validator: one labeled line per event on stdout.

Labels are INFO, WARN, ERROR and SUMMARY. The final count line of a run is
logged at a dedicated SUMMARY level so it can be grepped apart from the
INFO chatter. All package modules log through ``logging.getLogger(__name__)``
and inherit the handler installed on the ``pan_validation`` logger here.
"""

__all__ = [
    "SUMMARY_LEVEL",
    "LabeledFormatter",
    "setup_logging",
    "set_debug",
    "get_logger",
    "log_summary",
    "reset_logging",
]

LOGGER_NAME = "pan_validation"

# sits between INFO (20) and WARNING (30)
SUMMARY_LEVEL = 25

# label printed in front of each line; unknown levels fall back to levelname
_LABELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
    "SUMMARY": SUMMARY_LEVEL,
}

_logger: logging.Logger | None = None


class LabeledFormatter(logging.Formatter):
    """Render ``<LABEL> <message>`` without timestamps or logger names."""

    LEVEL_LABELS = {level: label for label, level in _LABELS.items()}

    def format(self, record: logging.LogRecord) -> str:
        label = self.LEVEL_LABELS.get(record.levelno, record.levelname)
        return f"{label} {record.getMessage()}"


def _apply_level(logger: logging.Logger, level: int) -> None:
    logger.setLevel(level)
    for handler in logger.handlers:
        handler.setLevel(level)


def _detach_handlers(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        logger.removeHandler(handler)


def setup_logging(
    level: int = logging.INFO,
    *,
    stream: TextIO | None = None,
    debug: bool = False,
) -> logging.Logger:
    """Install the labeled handler on the package logger and return it.

    Only the first call configures anything; later calls hand back the same
    logger until reset_logging() is called.

    Args:
        level: Threshold for the logger and its handler
        stream: Where lines go (default: the current sys.stdout)
        debug: Shortcut for level=DEBUG
    """
    global _logger
    if _logger is not None:
        return _logger

    logging.addLevelName(SUMMARY_LEVEL, "SUMMARY")
    logger = logging.getLogger(LOGGER_NAME)
    _detach_handlers(logger)

    handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
    handler.setFormatter(LabeledFormatter())
    logger.addHandler(handler)
    # the package handler is the only sink; the root logger stays untouched
    logger.propagate = False
    _apply_level(logger, logging.DEBUG if debug else level)

    _logger = logger
    return logger


def set_debug(logger: logging.Logger) -> None:
    """Switch an already configured logger to DEBUG (CLI --debug)."""
    _apply_level(logger, logging.DEBUG)


def get_logger() -> logging.Logger:
    return _logger if _logger is not None else setup_logging()


def log_summary(message: str) -> None:
    """Emit ``SUMMARY <message>``."""
    get_logger().log(SUMMARY_LEVEL, message)


def reset_logging() -> None:
    """Drop the configured handler so the next setup_logging() starts fresh (tests)."""
    global _logger
    _detach_handlers(logging.getLogger(LOGGER_NAME))
    _logger = None
