"""Shared fixtures: a fresh in-memory SQLite database per test."""

import datetime
import os

# Point the application engine at SQLite before anything imports app.db.session
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, create_engine

from app.db.init_db import init_db
from app.db.session import get_db
from app.main import app as fastapi_app


@pytest.fixture
def engine():
    engine = create_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def client(engine):
    def _get_test_db():
        with Session(engine) as session:
            yield session

    fastapi_app.dependency_overrides[get_db] = _get_test_db
    with TestClient(fastapi_app) as test_client:
        yield test_client
    fastapi_app.dependency_overrides.clear()


@pytest.fixture
def practice_input():
    return {
        "date": datetime.date(2024, 1, 15),
        "duration_minutes": 60,
        "distance_meters": 2000.5,
        "notes": "Great practice session with focus on freestyle technique",
    }
