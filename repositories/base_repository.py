"""
Base Repository class providing common database operations.
"""

from __future__ import annotations
from contextlib import contextmanager
from typing import Any, Callable, Generic, Iterator, Optional, Type, TypeVar
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError
from core.db import get_db_session
from core.db import Base
from shared.exceptions import DatabaseConfigurationError, StoreError
import logging

logger = logging.getLogger(__name__)

T = TypeVar('T', bound=Base)


class BaseRepository(Generic[T]):
    """Base repository class with session handling shared by all stores.

    Every public operation is one unit of work: a fresh session is opened,
    committed or rolled back, and closed before returning. Persistence
    failures are raised as StoreError, never swallowed.
    """

    def __init__(
        self,
        model: Type[T],
        session_factory: Optional[Callable[[], Optional[Session]]] = None,
    ):
        self.model = model
        self._session_factory = session_factory or get_db_session

    @property
    def entity_name(self) -> str:
        return self.model.__name__.replace("Record", "")

    def get_session(self, operation: str = "connect") -> Session:
        """Get database session."""
        session = self._session_factory()
        if session is None:
            raise DatabaseConfigurationError(operation)
        return session

    @contextmanager
    def session_scope(self, operation: str) -> Iterator[Session]:
        """Open a session, commit on success, roll back and raise StoreError on failure."""
        session = self.get_session(operation)
        try:
            yield session
            session.commit()
        except SQLAlchemyError as e:
            logger.error(f"Error during {operation} on {self.entity_name}: {e}")
            session.rollback()
            raise StoreError(
                operation,
                entity_type=self.entity_name,
                original_exception=e,
            ) from e
        finally:
            session.close()

    def _get_row(self, session: Session, id: Any) -> Optional[T]:
        return session.get(self.model, id)

    def count(self) -> int:
        """Count total entities."""
        with self.session_scope("count") as session:
            return session.query(self.model).count()

