"""Root conftest: shared gateway fixtures.

Invariants:
    - Every test builds its own app via create_app (no shared module-level state)
    - Settings never read a .env file during tests
    - Clients run with raise_app_exceptions=False so catch-all 500s are observed the
      way a real ASGI server would send them

Design Decisions:
    - httpx AsyncClient + ASGITransport: in-process, no sockets, async like the app
"""

import pytest

from app.main import create_app
from app.services.route_table import StaticRouteTable
from tests.helpers import FRONTEND_URL, build_settings, client_for


@pytest.fixture
def route_table():
    return StaticRouteTable()


@pytest.fixture
def dev_app(route_table):
    return create_app(build_settings(node_env="development"), route_table)


@pytest.fixture
def prod_app(route_table):
    return create_app(
        build_settings(node_env="production", frontend_url=FRONTEND_URL),
        route_table,
    )


@pytest.fixture
async def client(dev_app):
    """Development-mode client (local dev origins allowed)."""
    async with client_for(dev_app) as c:
        yield c


@pytest.fixture
async def prod_client(prod_app):
    """Production-mode client (only FRONTEND_URL allowed)."""
    async with client_for(prod_app) as c:
        yield c
