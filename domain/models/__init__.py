"""
Domain models - Pure business entities without infrastructure dependencies.

These models represent core business concepts and rules independent
of database schemas, external APIs, or framework specifics.
"""

from domain.models.team import Team

__all__ = [
    "Team",
]
