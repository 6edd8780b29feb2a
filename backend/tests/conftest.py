"""
Shared fixtures. Every test gets a fresh in-memory SQLite database with the
schema created from the models; the app's get_db dependency is pointed at it.
"""
import os

# Must be set before workout_tracker is imported: settings are read once.
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("RUN_MIGRATIONS", "false")

from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from workout_tracker.db import Base, get_db, make_engine
from workout_tracker.main import create_app
from workout_tracker.settings import Settings

T0 = datetime(2024, 3, 1, 18, 0, tzinfo=timezone.utc)


def at(seconds: int) -> datetime:
    """A fixed instant `seconds` after T0."""
    return T0 + timedelta(seconds=seconds)


@pytest.fixture
def engine():
    engine = make_engine("sqlite://", poolclass=StaticPool)
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autocommit=False, autoflush=False)


@pytest.fixture
def db(session_factory):
    with session_factory() as session:
        yield session


@pytest.fixture
def app(session_factory):
    app = create_app(Settings(RUN_MIGRATIONS=False))

    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    return app


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c
