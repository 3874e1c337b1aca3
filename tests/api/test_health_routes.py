"""Health Checks — liveness and readiness behind the API key."""

import task_api.infrastructure.database as db_module


async def test_liveness_returns_200(client):
    res = await client.get("/api/health/")
    assert res.status_code == 200
    assert res.json()["status"] == "healthy"


async def test_readiness_checks_database(client):
    res = await client.get("/api/health/ready")
    assert res.status_code == 200
    assert res.json()["checks"]["database"] == "healthy"


async def test_readiness_without_database_returns_503(client, monkeypatch):
    monkeypatch.setattr(db_module, "db_manager", None)
    res = await client.get("/api/health/ready")
    assert res.status_code == 503
    assert res.json()["reason"] == "database_unavailable"


async def test_health_requires_api_key(anon_client):
    res = await anon_client.get("/api/health/")
    assert res.status_code == 401
