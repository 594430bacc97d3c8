"""Startup orchestrator - coordinates all bootstrap phases."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from config import get_config
from config.base import BaseConfig
from shared.exceptions import ConfigurationError
from startup.db_init import ensure_db_ready

logger = logging.getLogger(__name__)


def run_startup_tasks(config: Optional[BaseConfig] = None) -> Dict[str, Any]:
    """
    Run startup tasks in order:
    1. Configuration validation (fatal in production, logged elsewhere)
    2. Database engine binding and schema

    Returns:
        Summary of the startup results

    Raises:
        ConfigurationError: If a production configuration has problems
    """
    config = config or get_config()
    logger.info("Starting application bootstrap (%s)", config.environment)
    results: Dict[str, Any] = {"environment": config.environment}

    problems = config.validate()
    for problem in problems:
        logger.warning("Configuration problem: %s", problem)
    if problems and config.is_production:
        raise ConfigurationError(config.environment, problems)
    results["config_problems"] = problems

    db_ready = ensure_db_ready(config.database)
    results["database"] = db_ready
    results["status"] = "ok" if db_ready else "failed"
    if not db_ready:
        logger.error("Database not ready - API requests will fail with store errors")
    else:
        logger.info("Application bootstrap completed")
    return results
