"""Health & Readiness — liveness always up, readiness checks the database."""

from pollen8.main import app


async def test_liveness(client):
    res = await client.get("/api/v1/health/")
    assert res.status_code == 200
    assert res.json()["status"] == "healthy"


async def test_readiness_with_database(client):
    res = await client.get("/api/v1/health/ready")
    assert res.status_code == 200
    assert res.json()["checks"]["database"] == "healthy"


async def test_readiness_without_database(client):
    manager = app.state.db_manager
    app.state.db_manager = None
    try:
        res = await client.get("/api/v1/health/ready")
    finally:
        app.state.db_manager = manager
    assert res.status_code == 503
