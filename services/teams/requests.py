"""
Command and query types for the Teams feature.

Each request type is handled by exactly one handler in
services.teams.handlers.
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from typing import Any, Dict


@dataclass(frozen=True)
class CreateTeamCommand:
    name: str
    sport_type: str
    founded_date: date
    home_stadium: str
    max_roster_size: int

    def team_fields(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "sport_type": self.sport_type,
            "founded_date": self.founded_date,
            "home_stadium": self.home_stadium,
            "max_roster_size": self.max_roster_size,
        }


@dataclass(frozen=True)
class UpdateTeamCommand:
    id: int
    name: str
    sport_type: str
    founded_date: date
    home_stadium: str
    max_roster_size: int

    def team_fields(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "sport_type": self.sport_type,
            "founded_date": self.founded_date,
            "home_stadium": self.home_stadium,
            "max_roster_size": self.max_roster_size,
        }


@dataclass(frozen=True)
class DeleteTeamCommand:
    id: int


@dataclass(frozen=True)
class GetTeamByIdQuery:
    id: int


@dataclass(frozen=True)
class GetTeamsQuery:
    pass
