"""Health Check: /health answers 200 with the configured environment.

Tests cover:
    - Every method returns the health envelope, TRACE and custom verbs included
    - environment mirrors NODE_ENV (development and production)
    - Body is never decoded: malformed JSON on /health still returns 200
"""

import pytest

from app.main import create_app
from tests.helpers import build_settings, client_for


@pytest.mark.parametrize("method", [
    "GET", "POST", "PUT", "PATCH", "DELETE", "TRACE", "PURGE",
])
async def test_health_returns_ok_for_every_method(client, method):
    res = await client.request(method, "/health")
    assert res.status_code == 200
    assert res.json() == {"status": "ok", "environment": "development"}


async def test_health_reports_production_environment(prod_client):
    res = await prod_client.get("/health")
    assert res.status_code == 200
    assert res.json() == {"status": "ok", "environment": "production"}


async def test_health_reports_arbitrary_environment_tag():
    app = create_app(build_settings(node_env="staging"))
    async with client_for(app) as c:
        res = await c.get("/health")
    assert res.json()["environment"] == "staging"


async def test_health_ignores_malformed_json_body(client):
    res = await client.post(
        "/health", content=b"{not json",
        headers={"Content-Type": "application/json"},
    )
    assert res.status_code == 200
    assert res.json()["status"] == "ok"


async def test_health_ignores_foreign_origin(client):
    res = await client.get("/health", headers={"Origin": "https://evil.com"})
    assert res.status_code == 200
    assert "access-control-allow-origin" not in res.headers


async def test_health_head_returns_200(client):
    res = await client.head("/health")
    assert res.status_code == 200
