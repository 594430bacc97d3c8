"""
Wire models for the Teams API.

Field names are the camelCase names used in JSON bodies. These models only
enforce types; field rules live on the domain Team.
"""

from __future__ import annotations
from datetime import date
from typing import Optional

from pydantic import BaseModel  # type: ignore

from domain.models.team import Team
from shared.constants import TEAM_FIELD_ALIASES
from services.teams.requests import CreateTeamCommand, UpdateTeamCommand


class TeamDto(BaseModel):
    id: int
    name: str
    sportType: str
    foundedDate: date
    homeStadium: str
    maxRosterSize: int

    @classmethod
    def from_team(cls, team: Team) -> TeamDto:
        payload = {
            TEAM_FIELD_ALIASES[key]: value
            for key, value in team.to_dict().items()
        }
        return cls(**payload)


class TeamPayload(BaseModel):
    """Request body for create (id ignored) and update (id required)."""
    id: Optional[int] = None
    name: str
    sportType: str
    foundedDate: date
    homeStadium: str
    maxRosterSize: int

    def to_create_command(self) -> CreateTeamCommand:
        return CreateTeamCommand(
            name=self.name,
            sport_type=self.sportType,
            founded_date=self.foundedDate,
            home_stadium=self.homeStadium,
            max_roster_size=self.maxRosterSize,
        )

    def to_update_command(self, team_id: int) -> UpdateTeamCommand:
        return UpdateTeamCommand(
            id=team_id,
            name=self.name,
            sport_type=self.sportType,
            founded_date=self.foundedDate,
            home_stadium=self.homeStadium,
            max_roster_size=self.maxRosterSize,
        )
