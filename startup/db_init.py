from __future__ import annotations

import logging

from sqlalchemy.exc import SQLAlchemyError  # type: ignore

from config.base import DatabaseConfig
from core import db as _db

logger = logging.getLogger(__name__)


def ensure_db_ready(db_config: DatabaseConfig) -> bool:
    """Create the schema when configured to; report whether the DB is usable."""
    if _db.ensure_engine(db_config) is None:
        logger.error("Database engine is not configured")
        return False
    if not db_config.create_tables:
        logger.info("Table creation disabled (DB_CREATE_TABLES=0)")
        return True
    try:
        _db.create_all_tables()
        return True
    except SQLAlchemyError as exc:
        logger.error("Creating tables failed: %s", exc)
        return False
