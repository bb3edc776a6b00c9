"""Shared logger for the parse_equation package."""
import logging
from typing import Union


LOGGER_NAME = "parse_equation"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

logger: logging.Logger = logging.getLogger(LOGGER_NAME)


def configure_logging(level: Union[int, str] = logging.INFO) -> logging.Logger:
    """
    Attach a stream handler to the package logger and set its level.

    Calling it several times replaces the level but never stacks handlers.

    :param Union[int, str] level: Logging level, as a number or a name such as "DEBUG"

    :return: The configured package logger
    :rtype: logging.Logger
    """
    if isinstance(level, str):
        level = level.upper()
    logger.setLevel(level)

    if not any(handler.get_name() == LOGGER_NAME for handler in logger.handlers):
        handler = logging.StreamHandler()
        handler.set_name(LOGGER_NAME)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    return logger
