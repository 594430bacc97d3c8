"""Development environment configuration."""

from config.base import BaseConfig


class DevelopmentConfig(BaseConfig):
    """Configuration for development environment."""

    def _setup_environment(self):
        """Setup development-specific configuration."""
        self.environment = "development"
        self.debug = True

        # Local SQLite file, tables created on startup
        self.database.create_tables = True
        if self.logging.level == "INFO":
            self.logging.teams_level = "DEBUG"
