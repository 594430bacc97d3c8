"""
Team domain model.

Pure business entity for a sports club record, independent of the ORM
schema and of the HTTP wire format.
"""

from __future__ import annotations
from dataclasses import dataclass, replace
from datetime import date
from typing import Any, Dict, Optional

from shared.exceptions import ValidationError
from shared.validators import (
    validate_identity,
    validate_non_negative_int,
    validate_not_future,
    validate_required_text,
)


@dataclass(frozen=True)
class Team:
    """
    Immutable team value.

    Every business field is validated before the instance becomes
    reachable, so an invalid Team can never be observed. Changes go through
    with_changes(), which validates the new values the same way.
    """

    name: str
    sport_type: str
    founded_date: date
    home_stadium: str
    max_roster_size: int
    id: Optional[int] = None

    def __post_init__(self):
        """Validate all fields."""
        validate_identity(self.id, "id")
        validate_required_text(self.name, "name")
        validate_required_text(self.sport_type, "sport_type")
        validate_required_text(self.home_stadium, "home_stadium")
        validate_non_negative_int(self.max_roster_size, "max_roster_size")

        founded = validate_not_future(self.founded_date, "founded_date")
        object.__setattr__(self, 'founded_date', founded)

    @classmethod
    def create(
        cls,
        name: str,
        sport_type: str,
        founded_date: Any,
        home_stadium: str,
        max_roster_size: int,
    ) -> Team:
        """Factory method for a team that has not been persisted yet."""
        return cls(
            name=name,
            sport_type=sport_type,
            founded_date=founded_date,
            home_stadium=home_stadium,
            max_roster_size=max_roster_size,
        )

    @property
    def is_persisted(self) -> bool:
        return self.id is not None

    def with_id(self, team_id: int) -> Team:
        """Return the persisted copy carrying the store-assigned id."""
        if self.id is not None and self.id != team_id:
            raise ValidationError("id", "Team id cannot be changed", team_id)
        return replace(self, id=team_id)

    def with_changes(self, **changes: Any) -> Team:
        """Return a copy with the given fields replaced and re-validated."""
        if "id" in changes and changes["id"] != self.id:
            raise ValidationError("id", "Team id cannot be changed", changes["id"])
        return replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "sport_type": self.sport_type,
            "founded_date": self.founded_date,
            "home_stadium": self.home_stadium,
            "max_roster_size": self.max_roster_size,
        }
