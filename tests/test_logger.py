"""Test the package logger configuration."""
import logging

from parse_equation.common.logger import LOGGER_NAME, configure_logging, logger


def test_configure_logging_sets_level() -> None:
    """Level names are accepted in any case."""
    configure_logging("debug")
    assert logger.level == logging.DEBUG

    configure_logging(logging.WARNING)
    assert logger.level == logging.WARNING


def test_configure_logging_does_not_stack_handlers() -> None:
    """Repeated calls keep a single named stream handler."""
    configure_logging("INFO")
    configure_logging("INFO")

    named = [handler for handler in logger.handlers if handler.get_name() == LOGGER_NAME]
    assert len(named) == 1
    assert isinstance(named[0], logging.StreamHandler)
