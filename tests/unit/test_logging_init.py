from __future__ import annotations

import logging
import sys
from io import StringIO

from pan_validation.logging.init import (
    SUMMARY_LEVEL,
    LabeledFormatter,
    get_logger,
    log_summary,
    reset_logging,
    set_debug,
    setup_logging,
)


def test_setup_logging_creates_logger_with_labeled_formatter():
    logger = setup_logging()
    assert logger.name == "pan_validation"
    assert logger.level == logging.INFO
    assert len(logger.handlers) == 1
    handler = logger.handlers[0]
    assert isinstance(handler, logging.StreamHandler)
    assert isinstance(handler.formatter, LabeledFormatter)
    assert handler.stream is sys.stdout
    assert logger.propagate is False


def test_logging_labeled_prefixes():
    out = StringIO()
    logger = setup_logging(stream=out)

    logger.info("Test info message")
    logger.warning("Test warning message")
    logger.error("Test error message")
    logger.log(SUMMARY_LEVEL, "Test summary message")

    assert out.getvalue().splitlines() == [
        "INFO Test info message",
        "WARN Test warning message",
        "ERROR Test error message",
        "SUMMARY Test summary message",
    ]


def test_unknown_level_falls_back_to_level_name():
    out = StringIO()
    setup_logging(stream=out).log(35, "odd")
    assert out.getvalue() == "Level 35 odd\n"


def test_module_loggers_propagate_to_package_logger():
    out = StringIO()
    setup_logging(stream=out)
    logging.getLogger("pan_validation.services.pipeline").info("from module")
    assert out.getvalue() == "INFO from module\n"


def test_debug_hidden_until_enabled():
    out = StringIO()
    logger = setup_logging(stream=out)
    logger.debug("hidden")
    set_debug(logger)
    logger.debug("shown")
    assert out.getvalue() == "DEBUG shown\n"
    assert logger.handlers[0].level == logging.DEBUG


def test_debug_flag_at_setup():
    out = StringIO()
    logger = setup_logging(stream=out, debug=True)
    logger.debug("early")
    assert logger.level == logging.DEBUG
    assert out.getvalue() == "DEBUG early\n"


def test_level_threshold_applies_to_handler():
    out = StringIO()
    logger = setup_logging(logging.WARNING, stream=out)
    logger.info("dropped")
    log_summary("dropped too")
    logger.warning("kept")
    assert out.getvalue() == "WARN kept\n"


def test_get_logger_returns_configured_logger():
    assert get_logger() is setup_logging()


def test_get_logger_configures_on_first_use():
    logger = get_logger()
    assert len(logger.handlers) == 1


def test_setup_logging_idempotent():
    first = StringIO()
    logger1 = setup_logging(stream=first)
    logger2 = setup_logging(stream=StringIO(), debug=True)
    assert logger1 is logger2
    assert len(logger1.handlers) == 1
    assert logger1.handlers[0].stream is first
    assert logger1.level == logging.INFO


def test_reset_then_setup_does_not_duplicate_handlers():
    setup_logging()
    reset_logging()
    assert logging.getLogger("pan_validation").handlers == []
    assert len(setup_logging().handlers) == 1


def test_summary_level_name():
    setup_logging()
    assert logging.getLevelName(SUMMARY_LEVEL) == "SUMMARY"


def test_log_summary_convenience_function():
    out = StringIO()
    setup_logging(stream=out)
    log_summary("processed=5 valid=0 invalid=2 blank=3")
    assert out.getvalue() == "SUMMARY processed=5 valid=0 invalid=2 blank=3\n"
