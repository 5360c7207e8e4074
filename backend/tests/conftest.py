import os

# Use in-memory sqlite for tests; must be set before the app (and engine) is imported
os.environ["DATABASE_URL"] = "sqlite+pysqlite:///:memory:"

from datetime import datetime  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from app.db import Base, SessionLocal, engine  # noqa: E402
from app.main import app  # noqa: E402


@pytest.fixture()
def client():
    # fresh tables for every test
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture()
def db(client):
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def make_class(client):
    def _make(name="Algorithms"):
        r = client.post("/api/classes", json={"name": name})
        assert r.status_code == 200, r.text
        return r.json()

    return _make


def ts(value: str) -> datetime:
    """Parse an API timestamp ('...Z' or '+00:00')."""
    return datetime.fromisoformat(value.replace("Z", "+00:00"))
