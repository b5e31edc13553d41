"""Error Handlers — global handlers render the structured error envelope.

Invariants:
    - UsersApiError subclasses answer with their own http_status and code
    - Unhandled exceptions answer 500 INTERNAL_ERROR without internal details
"""

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from users_api.api.error_handlers import register_error_handlers
from users_api.core.errors import (
    DatabaseError, EmailConflictError,
)


@pytest.fixture
async def error_client():
    app = FastAPI()
    register_error_handlers(app)

    @app.get("/conflict")
    async def conflict():
        raise EmailConflictError("dup@x.com")

    @app.get("/db")
    async def db_down():
        raise DatabaseError("Connection or operational error", "execute")

    @app.get("/boom")
    async def boom():
        raise RuntimeError("secret internal detail")

    # raise_app_exceptions=False: ServerErrorMiddleware re-raises after responding
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


async def test_email_conflict_maps_to_409(error_client):
    res = await error_client.get("/conflict")
    assert res.status_code == 409
    assert res.json()["error"]["code"] == "EMAIL_CONFLICT"


async def test_database_error_maps_to_503(error_client):
    res = await error_client.get("/db")
    assert res.status_code == 503
    error = res.json()["error"]
    assert error["code"] == "DATABASE_ERROR"
    assert error["severity"] == "critical"


async def test_unhandled_exception_hides_details(error_client):
    res = await error_client.get("/boom")
    assert res.status_code == 500
    assert res.json()["error"]["code"] == "INTERNAL_ERROR"
    assert "secret internal detail" not in res.text
