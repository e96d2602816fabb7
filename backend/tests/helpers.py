"""Test helpers: settings and client builders shared by fixtures and tests."""

from httpx import ASGITransport, AsyncClient

from app.config import Settings

FRONTEND_URL = "https://example.com"


def build_settings(**overrides) -> Settings:
    """Settings isolated from any .env file in the working directory."""
    return Settings(_env_file=None, **overrides)


def client_for(app) -> AsyncClient:
    return AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    )
