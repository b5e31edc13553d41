"""API test fixtures — FastAPI test client bound to the in-memory test database.

Invariants:
    - get_db dependency overridden to use a fresh test session per request
    - db_manager patched so readiness probes hit the test engine

Design Decisions:
    - httpx AsyncClient over ASGITransport: lifespan is not run, so the
      startup schema check never touches the configured DATABASE_URL
"""

import pytest
from httpx import ASGITransport, AsyncClient

from users_api.infrastructure.database import get_db, DatabaseSessionManager
import users_api.infrastructure.database as db_module
from users_api.main import app


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
def create_user(client):
    """POST a user and return the response JSON (asserts 201)."""
    async def _create(name="Ana", email="ana@x.com", password="p1"):
        res = await client.post(
            "/api/v1/users",
            json={"name": name, "email": email, "password": password},
        )
        assert res.status_code == 201, res.text
        return res.json()
    return _create
