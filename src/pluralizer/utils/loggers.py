# SPDX-FileCopyrightText: © pluralizer contributors
# SPDX-License-Identifier: AGPL-3.0-or-later
import logging
from typing import Final

__all__ = [
    "CRITICAL",
    "DEBUG",
    "ERROR",
    "INFO",
    "WARNING",
    "Logger",
    "get_logger",
]

CRITICAL:Final[int] = logging.CRITICAL
ERROR:Final[int] = logging.ERROR
WARNING:Final[int] = logging.WARNING
INFO:Final[int] = logging.INFO
DEBUG:Final[int] = logging.DEBUG

Logger = logging.Logger

ROOT_LOGGER_NAME:Final[str] = "pluralizer"

# library code: leave handler configuration to the host application
logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name:str | None = None) -> Logger:
    """
    Returns a logger below the package's root logger.

    >>> get_logger("pluralizer.engine").name
    'pluralizer.engine'
    >>> get_logger().name
    'pluralizer'
    """
    return logging.getLogger(name or ROOT_LOGGER_NAME)
