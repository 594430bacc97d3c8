"""Facade re-export for ORM models.

All real model definitions live under core/db_models/.
"""

# flake8: noqa

from core.db import Base

from core.db_models.team import TeamRecord

__all__ = [
    # Base
    "Base",
    # Teams
    "TeamRecord",
]
