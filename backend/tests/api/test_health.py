"""Health Probes — liveness always up, readiness tracks database connectivity.

Invariants:
    - GET /api/v1/health/ returns 200 with service name and version
    - GET /api/v1/health/ready returns 200 when SELECT 1 succeeds
    - GET /api/v1/health/ready returns 503 when no database is configured
"""

import users_api.infrastructure.database as db_module


async def test_liveness_returns_service_identity(client):
    res = await client.get("/api/v1/health/")
    assert res.status_code == 200
    body = res.json()
    assert body["status"] == "healthy"
    assert body["service"] == "Users API"
    assert body["version"] == "1.0.0"


async def test_readiness_ok_with_reachable_database(client):
    res = await client.get("/api/v1/health/ready")
    assert res.status_code == 200
    assert res.json() == {"status": "ready", "checks": {"database": "healthy"}}


async def test_readiness_503_without_database(client, monkeypatch):
    monkeypatch.setattr(db_module, "db_manager", None)

    res = await client.get("/api/v1/health/ready")

    assert res.status_code == 503
    assert res.json()["reason"] == "database_unavailable"
