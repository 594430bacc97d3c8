"""Testing environment configuration."""

from config.base import BaseConfig, DatabaseConfig


class TestingConfig(BaseConfig):
    """Configuration for testing environment."""

    __test__ = False  # not a pytest test class

    def _setup_environment(self):
        """Setup testing-specific configuration."""
        self.environment = "testing"
        self.debug = True

        # In-memory database shared by every session of the process
        self.database = DatabaseConfig(
            url="sqlite://",
            echo=False,
            create_tables=True,
        )
        self.logging.level = "DEBUG"
        self.logging.teams_level = "DEBUG"

    def validate(self):
        """Testing-specific validation (very permissive)."""
        errors = []
        if not self.database.url:
            errors.append("Test database URL is required")
        return errors
