"""
Logging configuration for the Teams API.

This module provides a centralized configuration for all loggers in the application.
It allows setting different log levels for different components.
"""

import logging
from typing import Dict, Optional

from config.base import LoggingConfig
from shared.constants import LOG_FORMAT

# Application packages sharing the LOG_LEVEL_TEAMS_API level
_APP_LOGGERS = ("routes", "services", "repositories", "startup", "app")


def configure_logging(logging_config: Optional[LoggingConfig] = None):
    """Configure logging for the application."""
    if logging_config is None:
        logging_config = LoggingConfig.from_env()

    log_level = getattr(logging, logging_config.level, logging.INFO)

    # Configure root logger
    logging.basicConfig(level=log_level, format=LOG_FORMAT)

    loggers_config = {name: logging_config.teams_level for name in _APP_LOGGERS}
    # SQLAlchemy engine logging is noisy, keep it at WARNING unless asked
    loggers_config["sqlalchemy.engine"] = logging_config.sqlalchemy_level
    loggers_config["uvicorn.access"] = "WARNING"

    for logger_name, level_name in loggers_config.items():
        logger = logging.getLogger(logger_name)
        logger.setLevel(getattr(logging, level_name, log_level))


def get_logger_levels() -> Dict[str, str]:
    """Get current log levels for all configured loggers."""
    result = {"root": logging.getLevelName(logging.getLogger().level)}

    for logger_name in _APP_LOGGERS + ("sqlalchemy.engine",):
        logger = logging.getLogger(logger_name)
        result[logger_name] = logging.getLevelName(logger.getEffectiveLevel())

    return result
