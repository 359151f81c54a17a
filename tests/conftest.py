import pytest
from fastapi.testclient import TestClient

from exercise_tracker_api.app.core.config import settings
from exercise_tracker_api.app.core.db import init_db
from exercise_tracker_api.app.main import app


@pytest.fixture
def db_path(tmp_path, monkeypatch):
    path = tmp_path / "test.db"
    monkeypatch.setattr(settings, "database_url", str(path))
    init_db()
    return path


@pytest.fixture
def client(db_path):
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def user(client):
    resp = client.post("/api/users", data={"username": "fcc_test"})
    assert resp.status_code == 200
    return resp.json()
