"""
Request handlers for the Teams feature.

One plain function per request type. Each takes the store and the request,
calls the store once (twice for update) and maps the result to TeamDto.
Store errors propagate unchanged.
"""

from __future__ import annotations
import logging
from typing import List, Optional

from domain.models.team import Team
from repositories.teams_repository import TeamsRepository
from services.teams.dto import TeamDto
from services.teams.requests import (
    CreateTeamCommand,
    DeleteTeamCommand,
    GetTeamByIdQuery,
    GetTeamsQuery,
    UpdateTeamCommand,
)

logger = logging.getLogger(__name__)


def handle_create_team(repository: TeamsRepository, command: CreateTeamCommand) -> TeamDto:
    team = Team.create(**command.team_fields())
    created = repository.add(team)
    logger.info("Created team id=%s name=%r", created.id, created.name)
    return TeamDto.from_team(created)


def handle_update_team(
    repository: TeamsRepository, command: UpdateTeamCommand
) -> Optional[TeamDto]:
    """Overwrite all fields of an existing team; None when the id is unknown."""
    team = Team(**command.team_fields())
    updated = repository.update(team)
    if updated is None:
        logger.info("Update skipped, team id=%s not found", command.id)
        return None
    logger.info("Updated team id=%s", updated.id)
    return TeamDto.from_team(updated)


def handle_delete_team(repository: TeamsRepository, command: DeleteTeamCommand) -> None:
    removed = repository.delete(command.id)
    if removed:
        logger.info("Deleted team id=%s", command.id)


def handle_get_team_by_id(
    repository: TeamsRepository, query: GetTeamByIdQuery
) -> Optional[TeamDto]:
    team = repository.get_by_id(query.id)
    if team is None:
        return None
    return TeamDto.from_team(team)


def handle_get_teams(repository: TeamsRepository, query: GetTeamsQuery) -> List[TeamDto]:
    return [TeamDto.from_team(t) for t in repository.list_all()]
