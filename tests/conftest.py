"""Shared fixtures: a seeded in-memory database and an API client bound to it."""

from datetime import date, datetime

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from safetyboard.db.session import get_db, make_engine
from safetyboard.models.base import Base
from safetyboard.services.seed import seed_defaults

TODAY = date(2025, 1, 1)
NOW = datetime(2025, 1, 1, 12, 15)


@pytest.fixture
def engine():
    """Fresh in-memory SQLite engine per test."""
    eng = make_engine("sqlite://")
    Base.metadata.create_all(bind=eng)
    yield eng
    eng.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    """Seeded session."""
    session = session_factory()
    seed_defaults(session)
    yield session
    session.close()


@pytest.fixture
def client(db, session_factory, monkeypatch):
    """API client whose requests share the seeded database."""
    from main import app

    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    monkeypatch.setattr("safetyboard.core.config.CLOCK_DATE", TODAY.isoformat())
    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()
