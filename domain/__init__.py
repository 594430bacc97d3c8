"""
Domain layer - Pure business logic without infrastructure dependencies.

This package contains domain models and the business rules
that are independent of external frameworks, databases, or APIs.
"""
