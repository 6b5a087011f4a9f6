"""
Pytest fixtures for the Job Finder API.
"""

import os

# Set environment before importing backend so Settings picks it up.
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["JSEARCH_API_KEY"] = "test-rapidapi-key"
os.environ["REQUIRE_USER_HEADER"] = "false"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from backend.db import get_db, init_db
from backend.search import JobListing, get_gateway


class FakeGateway:
    """Stands in for the JSearch gateway and records every call."""

    def __init__(self):
        self.calls: list[tuple[str, str]] = []
        self.jobs: list[JobListing] = []
        self.error: Exception | None = None

    def search(self, profession: str, location: str) -> list[JobListing]:
        self.calls.append((profession, location))
        if self.error is not None:
            raise self.error
        return list(self.jobs)


@pytest.fixture
def engine():
    """In-memory SQLite shared across threads for one test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session(session_factory):
    db = session_factory()
    yield db
    db.close()


@pytest.fixture
def fake_gateway():
    return FakeGateway()


@pytest.fixture
def client(session_factory, fake_gateway):
    """FastAPI test client wired to the in-memory database and fake gateway."""
    from backend.api.app import app

    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_gateway] = lambda: fake_gateway
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def sample_job():
    return {
        "title": "Backend Engineer",
        "company": "Acme",
        "location": "Remote",
        "url": "https://x.test/1",
    }


@pytest.fixture
def apply_body(sample_job):
    """Apply payload in the shape the browser client sends."""

    def _build(user_id: str = "u1", **overrides) -> dict:
        body = {
            "clerkUserId": user_id,
            "userEmail": f"{user_id}@example.com",
            "jobTitle": sample_job["title"],
            "company": sample_job["company"],
            "location": sample_job["location"],
            "jobUrl": sample_job["url"],
        }
        body.update(overrides)
        return body

    return _build
