import re
import sqlite3

from exercise_tracker_api.app.core.db import get_db
from exercise_tracker_api.app.main import app


class FailingConnection:
    """Stand-in store connection whose every query fails."""

    def execute(self, *args, **kwargs):
        raise sqlite3.OperationalError("database is locked")


async def failing_db():
    yield FailingConnection()


def test_create_user_returns_username_and_id(client):
    resp = client.post("/api/users", data={"username": "fcc_test"})
    assert resp.status_code == 200
    body = resp.json()
    assert list(body) == ["username", "id"]
    assert body["username"] == "fcc_test"
    assert re.fullmatch(r"[0-9a-f]{24}", body["id"])


def test_create_user_accepts_json(client):
    resp = client.post("/api/users", json={"username": "json_user"})
    assert resp.json()["username"] == "json_user"


def test_usernames_are_not_unique(client):
    first = client.post("/api/users", data={"username": "same"}).json()
    second = client.post("/api/users", data={"username": "same"}).json()
    assert first["id"] != second["id"]


def test_create_user_without_username_reports_error(client):
    resp = client.post("/api/users", data={})
    assert resp.status_code == 200
    assert resp.json() == {"error": "Error creating user"}


def test_create_user_store_failure_reports_error(client):
    app.dependency_overrides[get_db] = failing_db
    resp = client.post("/api/users", data={"username": "x"})
    assert resp.status_code == 200
    assert resp.json() == {"error": "Error creating user"}


def test_list_users_returns_created_users(client):
    created = [
        client.post("/api/users", data={"username": f"user{i}"}).json() for i in range(3)
    ]
    resp = client.get("/api/users")
    assert resp.status_code == 200
    users = resp.json()
    assert isinstance(users, list)
    assert len(users) == 3
    for entry in users:
        assert set(entry) == {"id", "username"}
    assert [u["id"] for u in users] == [c["id"] for c in created]
    assert [u["username"] for u in users] == ["user0", "user1", "user2"]


def test_list_users_empty(client):
    assert client.get("/api/users").json() == []


def test_index_page_is_served(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/html")
    assert "/api/users" in resp.text
    assert client.get("/public/style.css").status_code == 200


def test_non_string_username_is_rejected_without_storing(client):
    resp = client.post("/api/users", json={"username": 5})
    assert resp.status_code == 200
    assert resp.json() == {"error": "Error creating user"}
    assert client.get("/api/users").json() == []
