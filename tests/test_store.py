"""
Tests for ApplicationStore against an in-memory database.
"""

import pytest
from sqlalchemy.exc import OperationalError

from backend.db import Application, ApplicationStore


def _create(store: ApplicationStore, user_id: str = "u1", **overrides) -> Application:
    fields = {
        "clerk_user_id": user_id,
        "job_title": "Backend Engineer",
        "company": "Acme",
        "location": "Remote",
        "job_url": "https://x.test/1",
    }
    fields.update(overrides)
    return store.create(**fields)


def test_create_assigns_id_and_timestamp(db_session):
    application = _create(ApplicationStore(db_session))
    assert application.id
    assert application.applied_at is not None
    assert application.user_email is None


def test_list_for_user_only_returns_own(db_session):
    store = ApplicationStore(db_session)
    mine = _create(store, "u1")
    _create(store, "u2")

    assert [a.id for a in store.list_for_user("u1")] == [mine.id]
    assert store.list_for_user("u3") == []


def test_delete_for_user_checks_owner(db_session):
    store = ApplicationStore(db_session)
    application = _create(store, "owner")

    assert store.delete_for_user("intruder", application.id) is False
    assert store.get_for_user("owner", application.id) is not None

    assert store.delete_for_user("owner", application.id) is True
    assert store.delete_for_user("owner", application.id) is False
    assert store.list_for_user("owner") == []


def test_failed_commit_leaves_no_record(db_session, monkeypatch):
    """A persistence failure rolls back instead of leaving a partial write."""
    store = ApplicationStore(db_session)

    def failing_commit():
        raise OperationalError("INSERT INTO applications", {}, Exception("database is locked"))

    monkeypatch.setattr(db_session, "commit", failing_commit)
    with pytest.raises(OperationalError):
        _create(store)
    monkeypatch.undo()

    assert db_session.query(Application).count() == 0
