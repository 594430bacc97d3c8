"""
Base configuration class with all application settings.

Every setting is read from the environment once, when a configuration
instance is built. Environment-specific subclasses adjust the defaults.
"""

import os
from dataclasses import dataclass, field
from typing import List

from shared.constants import DEFAULT_API_PREFIX, DEFAULT_DATABASE_URL


def _get_bool(name: str, default: bool) -> bool:
    """Parse boolean environment variable."""
    val = os.getenv(name)
    if val is None:
        return default
    v = val.strip().lower()
    return v in ("1", "true", "yes", "on")


def _get_int(name: str, default: int) -> int:
    """Parse integer environment variable."""
    try:
        return int(os.getenv(name, str(default)))
    except (ValueError, TypeError):
        return default


def _get_list(name: str, default: List[str] = None, separator: str = ",") -> List[str]:
    """Parse comma-separated list environment variable."""
    if default is None:
        default = []

    val = os.getenv(name, "")
    if not val.strip():
        return default

    return [item.strip() for item in val.split(separator) if item.strip()]


@dataclass
class DatabaseConfig:
    """Database connection configuration."""
    url: str = DEFAULT_DATABASE_URL
    echo: bool = False
    create_tables: bool = True
    pool_size: int = 20
    max_overflow: int = 40
    pool_timeout: int = 5
    pool_recycle: int = 1800

    @property
    def is_sqlite(self) -> bool:
        return self.url.startswith("sqlite")

    @classmethod
    def from_env(cls) -> 'DatabaseConfig':
        return cls(
            url=os.getenv("DATABASE_URL", DEFAULT_DATABASE_URL).strip(),
            echo=_get_bool("DB_ECHO", False),
            create_tables=_get_bool("DB_CREATE_TABLES", True),
            pool_size=_get_int("DB_POOL_SIZE", 20),
            max_overflow=_get_int("DB_MAX_OVERFLOW", 40),
            pool_timeout=_get_int("DB_POOL_TIMEOUT", 5),
            pool_recycle=_get_int("DB_POOL_RECYCLE", 1800),
        )


@dataclass
class ApiConfig:
    """HTTP API configuration."""
    title: str = "Teams API"
    prefix: str = DEFAULT_API_PREFIX
    allowed_origins: List[str] = field(default_factory=lambda: ["*"])

    @classmethod
    def from_env(cls) -> 'ApiConfig':
        prefix = os.getenv("API_PREFIX", DEFAULT_API_PREFIX).strip().rstrip("/")
        return cls(
            title=os.getenv("API_TITLE", "Teams API"),
            prefix=prefix,
            allowed_origins=_get_list("ALLOWED_ORIGINS", ["*"]),
        )


@dataclass
class LoggingConfig:
    """Log level configuration."""
    level: str = "INFO"
    teams_level: str = "INFO"
    sqlalchemy_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> 'LoggingConfig':
        level = os.getenv("LOG_LEVEL", "INFO").upper()
        return cls(
            level=level,
            teams_level=os.getenv("LOG_LEVEL_TEAMS_API", level).upper(),
            sqlalchemy_level=os.getenv("LOG_LEVEL_SQLALCHEMY", "WARNING").upper(),
        )


class BaseConfig:
    """
    Base configuration class that consolidates all application settings.
    """

    def __init__(self):
        # Core app configuration
        self.app_name: str = "Teams API"
        self.app_version: str = "1.0.0"
        self.debug: bool = _get_bool("DEBUG", False)
        self.environment: str = os.getenv("TEAMS_ENV", "development")

        # Configuration groups
        self.database = DatabaseConfig.from_env()
        self.api = ApiConfig.from_env()
        self.logging = LoggingConfig.from_env()

        # Initialize environment-specific settings
        self._setup_environment()

    def _setup_environment(self):
        """Setup environment-specific configuration. Override in subclasses."""
        pass

    @property
    def is_development(self) -> bool:
        return self.environment.lower() in ("development", "dev")

    @property
    def is_production(self) -> bool:
        return self.environment.lower() in ("production", "prod")

    @property
    def is_testing(self) -> bool:
        return self.environment.lower() in ("testing", "test")

    def validate(self) -> List[str]:
        """
        Validate configuration and return list of validation errors.

        Returns:
            List of validation error messages (empty if valid)
        """
        errors = []

        if not self.database.url:
            errors.append("DATABASE_URL is empty")

        if self.is_production and self.database.is_sqlite:
            errors.append("SQLite database is not allowed in production")

        if self.api.prefix and not self.api.prefix.startswith("/"):
            errors.append("API_PREFIX must start with '/'")

        return errors

    def to_dict(self) -> dict:
        return {
            "app_name": self.app_name,
            "app_version": self.app_version,
            "environment": self.environment,
            "debug": self.debug,
            "database": {
                "backend": self.database.url.split(":", 1)[0],
                "create_tables": self.database.create_tables,
            },
            "api": {"prefix": self.api.prefix, "title": self.api.title},
            "logging": {"level": self.logging.level},
        }
