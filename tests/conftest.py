import pytest
from httpx import ASGITransport, AsyncClient

from todo_api.database import InMemoryDatabase, get_db
from todo_api.main import app


@pytest.fixture(scope="session")
def anyio_backend():
    return "asyncio"

@pytest.fixture
def db():
    # fresh registry per test
    test_db = InMemoryDatabase()
    app.dependency_overrides[get_db] = lambda: test_db
    yield test_db
    app.dependency_overrides.pop(get_db, None)

@pytest.fixture
async def client(db):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

@pytest.fixture
def create_user(client):
    async def _create_user(username, name="John Doe"):
        res = await client.post("/users", json={"name": name, "username": username})
        assert res.status_code == 201
        return res.json()
    return _create_user

@pytest.fixture
def create_todo(client):
    async def _create_todo(username, **fields):
        res = await client.post("/todos", json=fields, headers={"username": username})
        assert res.status_code == 201
        return res.json()
    return _create_todo
