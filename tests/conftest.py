"""Shared fixtures: isolated in-memory SQLite per test and a wired app."""

import os

os.environ["TEAMS_ENV"] = "testing"

from datetime import date

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import core.models  # noqa: F401  registers TeamRecord on Base.metadata
from app import create_app
from config import TestingConfig
from core.db import Base
from domain.models.team import Team
from repositories.teams_repository import SqlAlchemyTeamsRepository
from routes.teams import get_dispatcher
from services.teams import TeamsDispatcher


@pytest.fixture
def engine():
    eng = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=eng)
    yield eng
    eng.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, expire_on_commit=False)


@pytest.fixture
def repository(session_factory):
    return SqlAlchemyTeamsRepository(session_factory=session_factory)


@pytest.fixture
def dispatcher(repository):
    return TeamsDispatcher(repository)


@pytest.fixture
def app(dispatcher):
    application = create_app(TestingConfig())
    application.dependency_overrides[get_dispatcher] = lambda: dispatcher
    return application


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def pallokuninkaat():
    return Team.create(
        name="Pallokuninkaat",
        sport_type="Jalkapallo",
        founded_date=date(2025, 2, 1),
        home_stadium="Hirvensalmi",
        max_roster_size=25,
    )


@pytest.fixture
def team_json():
    return {
        "name": "Pallokuninkaat",
        "sportType": "Jalkapallo",
        "foundedDate": "2025-02-01",
        "homeStadium": "Hirvensalmi",
        "maxRosterSize": 25,
    }
