"""
Teams CRUD routes.

Translates HTTP requests into Teams commands/queries and handler results
into responses. Validation and store errors are turned into responses by
the exception handlers registered in app.py.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request, Response  # type: ignore

from services.teams import (
    CreateTeamCommand,
    DeleteTeamCommand,
    GetTeamByIdQuery,
    GetTeamsQuery,
    TeamDto,
    TeamPayload,
    TeamsDispatcher,
)
from shared.constants import TEAMS_ROUTE_PREFIX

_LOG = logging.getLogger(__name__)

router = APIRouter(prefix=TEAMS_ROUTE_PREFIX, tags=["teams"])


def get_dispatcher() -> TeamsDispatcher:
    return TeamsDispatcher()


@router.get("", response_model=List[TeamDto])
def get_teams(dispatcher: TeamsDispatcher = Depends(get_dispatcher)) -> List[TeamDto]:
    return dispatcher.send(GetTeamsQuery())


@router.get("/{team_id}", response_model=TeamDto)
def get_team(
    team_id: int,
    dispatcher: TeamsDispatcher = Depends(get_dispatcher),
) -> TeamDto:
    team = dispatcher.send(GetTeamByIdQuery(id=team_id))
    if team is None:
        raise HTTPException(404, f"Team {team_id} not found")
    return team


@router.post("", response_model=TeamDto, status_code=201)
def create_team(
    payload: TeamPayload,
    request: Request,
    response: Response,
    dispatcher: TeamsDispatcher = Depends(get_dispatcher),
) -> TeamDto:
    command: CreateTeamCommand = payload.to_create_command()
    created = dispatcher.send(command)
    response.headers["Location"] = str(request.url_for("get_team", team_id=created.id))
    return created


@router.put("/{team_id}", status_code=204, response_class=Response)
def update_team(
    team_id: int,
    payload: TeamPayload,
    dispatcher: TeamsDispatcher = Depends(get_dispatcher),
) -> Response:
    if payload.id != team_id:
        _LOG.info("Rejected update: path id %s != body id %s", team_id, payload.id)
        raise HTTPException(400, "Path id and body id do not match")
    updated = dispatcher.send(payload.to_update_command(team_id))
    if updated is None:
        raise HTTPException(404, f"Team {team_id} not found")
    return Response(status_code=204)


@router.delete("/{team_id}", status_code=204, response_class=Response)
def delete_team(
    team_id: int,
    dispatcher: TeamsDispatcher = Depends(get_dispatcher),
) -> Response:
    dispatcher.send(DeleteTeamCommand(id=team_id))
    return Response(status_code=204)
