import pytest
from sqlalchemy.exc import OperationalError

from app.api.deps import get_store
from app.core.errors import NotFound, StorageFailure
from app.core.time_utils import utcnow
from app.db import SessionLocal
from app.main import app
from app.models.idea import Idea
from app.models.workout import Exercise, Workout
from app.services.resources import ResourceService
from app.services.store import IDEAS, WORKOUTS, EntityStore


def _failing_session():
    session = SessionLocal()

    def commit():
        raise OperationalError("COMMIT", {}, Exception("database is locked"))

    session.commit = commit
    return session


def _failing_refresh_session():
    session = SessionLocal()

    def refresh(instance, *args, **kwargs):
        raise OperationalError("SELECT", {}, Exception("connection lost"))

    session.refresh = refresh
    return session


def test_store_contract(db):
    store = EntityStore(db)
    now = utcnow()
    idea = store.insert(IDEAS, Idea(id="i-1", content="x", created_at=now, updated_at=now))
    assert store.get(IDEAS, "i-1") is idea
    assert [i.id for i in store.list(IDEAS)] == ["i-1"]

    store.update(IDEAS, "i-1", {"content": "y"})
    assert store.get(IDEAS, "i-1").content == "y"

    store.delete(IDEAS, "i-1")
    assert store.find(IDEAS, "i-1") is None
    with pytest.raises(NotFound):
        store.get(IDEAS, "i-1")
    with pytest.raises(NotFound):
        store.update(IDEAS, "i-1", {"content": "z"})
    with pytest.raises(NotFound):
        store.delete(IDEAS, "i-1")


def test_commit_failure_rolls_back(client, db):
    session = _failing_session()
    svc = ResourceService(EntityStore(session))
    try:
        with pytest.raises(StorageFailure):
            svc.create(
                WORKOUTS,
                {"type": "PUSH", "date": utcnow().date(), "exercises": [{"name": "Bench"}]},
            )
        # nothing pending after the rollback
        assert not session.new
    finally:
        session.close()
    assert db.query(Workout).count() == 0
    assert db.query(Exercise).count() == 0
    assert client.get("/api/workouts").json() == []


def test_storage_failure_is_500(client):
    def failing_store():
        session = _failing_session()
        try:
            yield EntityStore(session)
        finally:
            session.close()

    app.dependency_overrides[get_store] = failing_store
    r = client.post("/api/ideas", json={"content": "lost"})
    assert r.status_code == 500
    assert r.json()["error"] == "storage_failure"

    app.dependency_overrides.clear()
    assert client.get("/api/ideas").json() == []


def test_equal_created_at_ordered_by_id(db):
    store = EntityStore(db)
    now = utcnow()
    for idea_id in ("i-b", "i-c", "i-a"):
        store.insert(IDEAS, Idea(id=idea_id, content=idea_id, created_at=now, updated_at=now))
    assert [i.id for i in store.list(IDEAS)] == ["i-a", "i-b", "i-c"]


def test_refresh_failure_is_storage_failure(client):
    session = _failing_refresh_session()
    store = EntityStore(session)
    now = utcnow()
    try:
        with pytest.raises(StorageFailure):
            store.insert(IDEAS, Idea(id="i-1", content="x", created_at=now, updated_at=now))
        with pytest.raises(StorageFailure):
            store.update(IDEAS, "i-1", {"content": "y"})
    finally:
        session.close()


def test_refresh_failure_returns_structured_500(client):
    def failing_store():
        session = _failing_refresh_session()
        try:
            yield EntityStore(session)
        finally:
            session.close()

    app.dependency_overrides[get_store] = failing_store
    r = client.post("/api/ideas", json={"content": "half saved"})
    assert r.status_code == 500
    assert r.json()["error"] == "storage_failure"
