"""
Teams application services - commands, queries and their dispatcher.
"""

from services.teams.dispatcher import TeamsDispatcher
from services.teams.dto import TeamDto, TeamPayload
from services.teams.requests import (
    CreateTeamCommand,
    DeleteTeamCommand,
    GetTeamByIdQuery,
    GetTeamsQuery,
    UpdateTeamCommand,
)

__all__ = [
    "TeamsDispatcher",
    "TeamDto",
    "TeamPayload",
    "CreateTeamCommand",
    "UpdateTeamCommand",
    "DeleteTeamCommand",
    "GetTeamByIdQuery",
    "GetTeamsQuery",
]
