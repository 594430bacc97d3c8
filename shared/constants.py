"""
Application-wide constants.

Single source of truth for table names, field limits and formats shared by
the domain, persistence and API layers.
"""


# =================== TEAM FIELD CONSTANTS ===================

TEAMS_TABLE = "teams"

# Column lengths for the teams table
NAME_MAX_LENGTH = 200
SPORT_TYPE_MAX_LENGTH = 100
HOME_STADIUM_MAX_LENGTH = 200

# Domain field names (snake_case) mapped to wire names (camelCase)
TEAM_FIELD_ALIASES = {
    "id": "id",
    "name": "name",
    "sport_type": "sportType",
    "founded_date": "foundedDate",
    "home_stadium": "homeStadium",
    "max_roster_size": "maxRosterSize",
}


# =================== FORMATS ===================

DATE_FORMAT = "%Y-%m-%d"
LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s: %(message)s"


# =================== API CONSTANTS ===================

DEFAULT_API_PREFIX = "/api"
TEAMS_ROUTE_PREFIX = "/teams"
DEFAULT_DATABASE_URL = "sqlite:///./teams.db"


__all__ = [
    "TEAMS_TABLE",
    "NAME_MAX_LENGTH",
    "SPORT_TYPE_MAX_LENGTH",
    "HOME_STADIUM_MAX_LENGTH",
    "TEAM_FIELD_ALIASES",
    "DATE_FORMAT",
    "LOG_FORMAT",
    "DEFAULT_API_PREFIX",
    "TEAMS_ROUTE_PREFIX",
    "DEFAULT_DATABASE_URL",
]
