"""
Team store: the CRUD contract and its SQLAlchemy adapter.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Callable, List, Optional
import logging

from sqlalchemy.orm import Session

from core.models import TeamRecord
from domain.models.team import Team
from repositories.base_repository import BaseRepository

logger = logging.getLogger(__name__)


class TeamsRepository(ABC):
    """Persistence contract for Team records."""

    @abstractmethod
    def list_all(self) -> List[Team]:
        """Return every stored team; empty list when there are none."""

    @abstractmethod
    def get_by_id(self, team_id: int) -> Optional[Team]:
        """Return the team or None when absent."""

    @abstractmethod
    def add(self, team: Team) -> Team:
        """Persist a new team and return it with its assigned id."""

    @abstractmethod
    def update(self, team: Team) -> Optional[Team]:
        """Overwrite the stored team with the same id; None when absent."""

    @abstractmethod
    def delete(self, team_id: int) -> bool:
        """Remove the team if present. Deleting a missing id is not an error."""

    @abstractmethod
    def exists(self, team_id: int) -> bool:
        """True iff a team with this id is stored."""


class SqlAlchemyTeamsRepository(BaseRepository[TeamRecord], TeamsRepository):
    """TeamsRepository backed by the `teams` table."""

    def __init__(self, session_factory: Optional[Callable[[], Optional[Session]]] = None):
        super().__init__(TeamRecord, session_factory)

    @staticmethod
    def _to_domain(row: TeamRecord) -> Team:
        return Team(
            id=row.id,
            name=row.name,
            sport_type=row.sport_type,
            founded_date=row.founded_date,
            home_stadium=row.home_stadium,
            max_roster_size=row.max_roster_size,
        )

    @staticmethod
    def _apply(row: TeamRecord, team: Team) -> None:
        row.name = team.name
        row.sport_type = team.sport_type
        row.founded_date = team.founded_date
        row.home_stadium = team.home_stadium
        row.max_roster_size = team.max_roster_size

    def list_all(self) -> List[Team]:
        with self.session_scope("list_all") as session:
            rows = session.query(TeamRecord).order_by(TeamRecord.id).all()
            return [self._to_domain(r) for r in rows]

    def get_by_id(self, team_id: int) -> Optional[Team]:
        with self.session_scope("get_by_id") as session:
            row = self._get_row(session, team_id)
            return self._to_domain(row) if row is not None else None

    def add(self, team: Team) -> Team:
        with self.session_scope("add") as session:
            row = TeamRecord()
            self._apply(row, team)
            session.add(row)
            session.flush()
            created = self._to_domain(row)
        logger.debug("Inserted team id=%s", created.id)
        return created

    def update(self, team: Team) -> Optional[Team]:
        if team.id is None:
            return None
        with self.session_scope("update") as session:
            row = self._get_row(session, team.id)
            if row is None:
                return None
            self._apply(row, team)
            session.flush()
            updated = self._to_domain(row)
        return updated

    def delete(self, team_id: int) -> bool:
        with self.session_scope("delete") as session:
            row = self._get_row(session, team_id)
            if row is None:
                return False
            session.delete(row)
        return True

    def exists(self, team_id: int) -> bool:
        with self.session_scope("exists") as session:
            found = (
                session.query(TeamRecord.id)
                .filter(TeamRecord.id == team_id)
                .first()
            )
            return found is not None
