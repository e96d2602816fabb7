"""Not-Found Fallback: everything outside /health and /api/* is 404.

Tests cover:
    - Exact body {"error": "Route not found"} for unmatched paths and methods
    - /api without trailing slash and /health/ are not routes
    - Docs/openapi endpoints are disabled
"""

import pytest


@pytest.mark.parametrize("path", [
    "/", "/foo", "/api", "/apiary", "/health/", "/healthz",
    "/docs", "/redoc", "/openapi.json", "/v1/api/users",
])
async def test_unmatched_paths_return_404_envelope(client, path):
    res = await client.get(path)
    assert res.status_code == 404
    assert res.json() == {"error": "Route not found"}


@pytest.mark.parametrize("method", ["POST", "PUT", "PATCH", "DELETE"])
async def test_unmatched_path_any_method(client, method):
    res = await client.request(method, "/nothing/here", json={"a": 1})
    assert res.status_code == 404
    assert res.json() == {"error": "Route not found"}


async def test_unmatched_path_in_production(prod_client):
    res = await prod_client.get("/admin")
    assert res.status_code == 404
    assert res.json() == {"error": "Route not found"}
