"""Tests for environment-specific configuration and logging setup."""

import logging

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from app import create_app
from config import DevelopmentConfig, ProductionConfig, TestingConfig, get_config
from config.base import DatabaseConfig
from core import db as _db
from core.models import TeamRecord
from shared.exceptions import ConfigurationError
from logging_config import configure_logging, get_logger_levels
from startup import run_startup_tasks


class TestConfig:

    @pytest.mark.parametrize("name,expected", [
        ("testing", TestingConfig),
        ("test", TestingConfig),
        ("prod", ProductionConfig),
        ("development", DevelopmentConfig),
        ("unknown", DevelopmentConfig),
    ])
    def test_get_config_selects_environment(self, name, expected):
        assert isinstance(get_config(name), expected)

    def test_env_variables_are_read(self, monkeypatch):
        monkeypatch.setenv("DATABASE_URL", "sqlite:///./other.db")
        monkeypatch.setenv("API_PREFIX", "/v2/")
        monkeypatch.setenv("DB_CREATE_TABLES", "false")

        config = DevelopmentConfig()

        assert config.database.url == "sqlite:///./other.db"
        assert config.api.prefix == "/v2"
        assert config.is_development

    def test_testing_uses_in_memory_database(self):
        config = TestingConfig()
        assert config.database.url == "sqlite://"
        assert config.validate() == []

    def test_production_requires_database_url(self, monkeypatch):
        monkeypatch.delenv("DATABASE_URL", raising=False)

        errors = ProductionConfig().validate()

        assert "DATABASE_URL is required in production" in errors
        assert "SQLite database is not allowed in production" in errors

    def test_production_with_postgres_url_is_valid(self, monkeypatch):
        monkeypatch.setenv("DATABASE_URL", "postgresql+psycopg2://u:p@db:5432/teams")

        config = ProductionConfig()

        assert config.validate() == []
        assert config.database.create_tables is False


class TestLoggingAndStartup:

    def test_configure_logging_sets_component_levels(self):
        config = TestingConfig()
        config.logging.sqlalchemy_level = "ERROR"

        configure_logging(config.logging)

        levels = get_logger_levels()
        assert levels["services"] == "DEBUG"
        assert levels["sqlalchemy.engine"] == "ERROR"
        assert logging.getLogger("repositories.teams_repository").isEnabledFor(logging.DEBUG)

    def test_startup_creates_schema(self):
        results = run_startup_tasks(TestingConfig())

        assert results["status"] == "ok"
        assert results["database"] is True
        assert results["config_problems"] == []


class TestDatabaseBinding:

    @pytest.fixture
    def file_config(self, tmp_path):
        config = TestingConfig()
        config.database = DatabaseConfig(
            url=f"sqlite:///{tmp_path / 'chosen.db'}",
            create_tables=True,
        )
        yield config
        _db.configure_engine(TestingConfig().database)

    def test_create_app_writes_to_configured_database(self, file_config, team_json):
        application = create_app(file_config)

        with TestClient(application) as client:
            response = client.post("/api/teams", json=team_json)
        assert response.status_code == 201

        assert _db.engine_url() == file_config.database.url
        file_engine = create_engine(file_config.database.url)
        try:
            with sessionmaker(bind=file_engine)() as session:
                names = [r.name for r in session.query(TeamRecord).all()]
        finally:
            file_engine.dispose()
        assert names == ["Pallokuninkaat"]

    def test_startup_rebinds_engine_to_config_url(self, file_config):
        results = run_startup_tasks(file_config)

        assert results["database"] is True
        assert _db.engine_url() == file_config.database.url

    def test_production_problems_abort_startup(self, monkeypatch):
        monkeypatch.delenv("DATABASE_URL", raising=False)
        url_before = _db.engine_url()

        with pytest.raises(ConfigurationError) as exc_info:
            run_startup_tasks(ProductionConfig())

        assert "DATABASE_URL is required in production" in exc_info.value.problems
        assert exc_info.value.to_dict()["code"] == "configuration_error"
        assert _db.engine_url() == url_before
