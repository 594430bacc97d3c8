from __future__ import annotations

import logging
from typing import Optional

from sqlalchemy import create_engine  # type: ignore
from sqlalchemy.engine import Engine  # type: ignore
from sqlalchemy.orm import Session, sessionmaker, declarative_base  # type: ignore
from sqlalchemy.pool import StaticPool  # type: ignore

from config import get_config
from config.base import DatabaseConfig


logger = logging.getLogger(__name__)

Base = declarative_base()


def _make_engine(db_config: DatabaseConfig) -> Optional[Engine]:
    url = db_config.url
    if not url:
        return None
    try:
        if db_config.is_sqlite:
            kwargs = {"connect_args": {"check_same_thread": False}}
            # In-memory SQLite lives per connection, keep a single one
            if url in ("sqlite://", "sqlite:///:memory:"):
                kwargs["poolclass"] = StaticPool
            return create_engine(url, echo=db_config.echo, **kwargs)

        return create_engine(
            url,
            pool_pre_ping=True,
            echo=db_config.echo,
            pool_size=db_config.pool_size,
            max_overflow=db_config.max_overflow,
            pool_timeout=db_config.pool_timeout,
            pool_recycle=db_config.pool_recycle,
        )
    except Exception as exc:
        logger.error("Cannot create database engine for %s: %s",
                     url.split(":", 1)[0], exc)
        return None


engine: Optional[Engine] = None
SessionLocal: Optional[sessionmaker] = None


def configure_engine(db_config: Optional[DatabaseConfig] = None) -> Optional[Engine]:
    """(Re)build the module engine and session factory."""
    global engine, SessionLocal
    if db_config is None:
        db_config = get_config().database
    if engine is not None:
        engine.dispose()
    engine = _make_engine(db_config)
    SessionLocal = (
        sessionmaker(bind=engine, expire_on_commit=False)
        if engine is not None else None
    )
    return engine


def engine_url() -> Optional[str]:
    if engine is None:
        return None
    return engine.url.render_as_string(hide_password=False)


def ensure_engine(db_config: DatabaseConfig) -> Optional[Engine]:
    """Rebuild the engine only when it is missing or bound to another URL."""
    if engine is None or engine_url() != db_config.url:
        logger.info("Binding database engine to %s", db_config.url.split(":", 1)[0])
        return configure_engine(db_config)
    return engine


def get_db_session() -> Optional[Session]:
    if SessionLocal is None:
        return None
    return SessionLocal()


def create_all_tables() -> bool:
    if engine is None:
        return False
    # Register ORM models on Base.metadata
    import core.models  # noqa: F401
    Base.metadata.create_all(bind=engine)
    return True


configure_engine()
