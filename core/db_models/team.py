from datetime import datetime, timezone
from sqlalchemy import (  # type: ignore
    CheckConstraint,
    Column,
    Date,
    DateTime,
    Integer,
    String,
)

from core.db import Base
from shared.constants import (
    HOME_STADIUM_MAX_LENGTH,
    NAME_MAX_LENGTH,
    SPORT_TYPE_MAX_LENGTH,
    TEAMS_TABLE,
)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class TeamRecord(Base):
    __tablename__ = TEAMS_TABLE

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(NAME_MAX_LENGTH), nullable=False)
    sport_type = Column(String(SPORT_TYPE_MAX_LENGTH), nullable=False)
    founded_date = Column(Date, nullable=False)
    home_stadium = Column(String(HOME_STADIUM_MAX_LENGTH), nullable=False)
    max_roster_size = Column(Integer, nullable=False, default=0)
    created_at_utc = Column(DateTime(timezone=True), nullable=False, default=_utc_now)
    updated_at_utc = Column(
        DateTime(timezone=True), nullable=False, default=_utc_now, onupdate=_utc_now
    )

    __table_args__ = (
        CheckConstraint("max_roster_size >= 0", name="ck_teams_roster_non_negative"),
    )


__all__ = ["TeamRecord"]
