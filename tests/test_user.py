import uuid

import pytest

pytestmark = pytest.mark.anyio


async def test_create_user(client):
    payload = {"name": "Alice", "username": "alice"}
    res = await client.post("/users", json=payload)
    assert res.status_code == 201
    data = res.json()
    assert data["name"] == "Alice"
    assert data["username"] == "alice"
    assert data["todos"] == []
    uuid.UUID(data["id"])


async def test_duplicate_username_is_rejected(client, db):
    first = await client.post("/users", json={"name": "Alice", "username": "alice"})
    assert first.status_code == 201

    res = await client.post("/users", json={"name": "Impostor", "username": "alice"})
    assert res.status_code == 400
    assert res.json() == {"error": "User already exists"}

    # registry keeps only the first registration
    assert len(db.users) == 1
    assert db.users[0].name == "Alice"
    assert str(db.users[0].id) == first.json()["id"]


async def test_username_match_is_case_sensitive(client):
    await client.post("/users", json={"name": "Alice", "username": "alice"})
    res = await client.post("/users", json={"name": "Alice", "username": "Alice"})
    assert res.status_code == 201


async def test_create_user_requires_name_and_username(client, db):
    res = await client.post("/users", json={"name": "Nobody"})
    assert res.status_code == 400
    body = res.json()
    assert body["error"] == "Invalid request data"
    assert any(d["field"] == "body.username" for d in body["details"])
    assert db.users == []


async def test_health(client):
    res = await client.get("/")
    assert res.status_code == 200
    assert res.json() == {"status": "ok"}


async def test_cors_allows_any_origin(client):
    res = await client.get("/", headers={"Origin": "http://elsewhere.example"})
    assert res.headers["access-control-allow-origin"] == "*"


async def test_create_user_keeps_extra_fields(client):
    res = await client.post(
        "/users", json={"name": "Alice", "username": "alice", "email": "alice@example.com"}
    )
    assert res.status_code == 201
    assert res.json()["email"] == "alice@example.com"
    assert res.json()["todos"] == []
