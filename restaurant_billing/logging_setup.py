"""Centralized logging configuration.

Usage:
    from restaurant_billing.logging_setup import get_logger
    logger = get_logger(__name__)

Records go to a debug log file rather than stderr, since the terminal is owned
by the Textual screen while the app runs.

Environment variables:
    RESTAURANT_BILLING_LOG_LEVEL: DEBUG, INFO, WARNING or ERROR. Default: INFO
"""

from __future__ import annotations

import logging
import os

from restaurant_billing.config import DEBUG_LOG_PATH, LOG_LEVEL_ENV

DEFAULT_LOG_LEVEL = logging.INFO

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
LOG_FORMAT_DEBUG = "%(asctime)s %(levelname)s [%(name)s:%(lineno)d] %(message)s"

ROOT_LOGGER_NAME = "restaurant_billing"

_logging_configured = False


def configure_logging(level: int | None = None, log_path: str = DEBUG_LOG_PATH) -> None:
    """Configure the package logger once.

    Args:
        level: Log level to use. If None, reads RESTAURANT_BILLING_LOG_LEVEL
               or falls back to DEFAULT_LOG_LEVEL.
        log_path: File that receives log records.
    """
    global _logging_configured

    if _logging_configured:
        return

    if level is None:
        env_level = os.environ.get(LOG_LEVEL_ENV, "").upper()
        level_map = {
            "DEBUG": logging.DEBUG,
            "INFO": logging.INFO,
            "WARNING": logging.WARNING,
            "WARN": logging.WARNING,
            "ERROR": logging.ERROR,
        }
        level = level_map.get(env_level, DEFAULT_LOG_LEVEL)

    log_format = LOG_FORMAT_DEBUG if level == logging.DEBUG else LOG_FORMAT

    # delay=True: the file is only opened on the first emitted record.
    handler = logging.FileHandler(log_path, encoding="utf-8", delay=True)
    handler.setFormatter(logging.Formatter(log_format))

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level)
    root_logger.addHandler(handler)
    root_logger.propagate = False

    _logging_configured = True


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given module name, configuring logging on first use."""
    configure_logging()
    if name == ROOT_LOGGER_NAME or name.startswith(f"{ROOT_LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
