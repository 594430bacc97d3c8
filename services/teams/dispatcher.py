"""
Single dispatcher for Teams commands and queries.

The handler set is fixed: each request type maps to exactly one handler
function in services.teams.handlers.
"""

from __future__ import annotations
import logging
from typing import Any, Callable, Dict, Optional, Type

from repositories.teams_repository import SqlAlchemyTeamsRepository, TeamsRepository
from services.teams import handlers
from services.teams.requests import (
    CreateTeamCommand,
    DeleteTeamCommand,
    GetTeamByIdQuery,
    GetTeamsQuery,
    UpdateTeamCommand,
)
from shared.exceptions import UnsupportedOperationError

logger = logging.getLogger(__name__)


_HANDLERS: Dict[Type[Any], Callable[[TeamsRepository, Any], Any]] = {
    CreateTeamCommand: handlers.handle_create_team,
    UpdateTeamCommand: handlers.handle_update_team,
    DeleteTeamCommand: handlers.handle_delete_team,
    GetTeamByIdQuery: handlers.handle_get_team_by_id,
    GetTeamsQuery: handlers.handle_get_teams,
}


class TeamsDispatcher:
    """Routes a Teams request to its handler."""

    def __init__(self, repository: Optional[TeamsRepository] = None):
        self.repository = repository or SqlAlchemyTeamsRepository()

    def send(self, request: Any) -> Any:
        handler = _HANDLERS.get(type(request))
        if handler is None:
            raise UnsupportedOperationError(
                type(request).__name__, "no Teams handler for this request"
            )
        logger.debug("Dispatching %s", type(request).__name__)
        return handler(self.repository, request)
