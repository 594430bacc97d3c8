"""Production environment configuration."""

import os
from config.base import BaseConfig


class ProductionConfig(BaseConfig):
    """Configuration for production environment."""

    def _setup_environment(self):
        """Setup production-specific configuration."""
        self.environment = "production"
        self.debug = False

        # Schema is managed outside the app in production
        self.database.create_tables = os.getenv("DB_CREATE_TABLES", "0").lower() in (
            "1", "true", "yes", "on",
        )

        # Strict CORS in production
        if self.api.allowed_origins == ["*"]:
            self.api.allowed_origins = []

    def validate(self):
        """Production validation requires an explicit database URL."""
        errors = super().validate()
        if not os.getenv("DATABASE_URL"):
            errors.append("DATABASE_URL is required in production")
        return errors
