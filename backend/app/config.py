"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - Settings are frozen: resolved once at startup, never mutated afterwards
    - get_settings() is cached (lru_cache) - single instance per process
    - Invalid or empty values fall back to defaults instead of failing startup

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support (ADR: developer UX)
    - Env var names kept as deployed (PORT, NODE_ENV, FRONTEND_URL) so existing
      deploy manifests keep working
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_PORT = 3000
DEFAULT_ENVIRONMENT = "development"
DEFAULT_FRONTEND_URL = "http://localhost"


class Settings(BaseSettings):
    """Gateway settings from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env", case_sensitive=False, frozen=True, extra="ignore",
    )

    # Server
    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT

    @field_validator("port", mode="before")
    @classmethod
    def fallback_port(cls, v: object) -> int:
        """Unset, empty, unparsable or out-of-range ports mean the default."""
        try:
            port = int(str(v).strip())
        except (TypeError, ValueError):
            return DEFAULT_PORT
        if not 1 <= port <= 65535:
            return DEFAULT_PORT
        return port

    # Environment
    node_env: str = DEFAULT_ENVIRONMENT
    frontend_url: str = DEFAULT_FRONTEND_URL

    @field_validator("node_env", mode="before")
    @classmethod
    def fallback_environment(cls, v: object) -> object:
        if isinstance(v, str) and not v.strip():
            return DEFAULT_ENVIRONMENT
        return v.strip() if isinstance(v, str) else v

    @field_validator("frontend_url", mode="before")
    @classmethod
    def fallback_frontend_url(cls, v: object) -> object:
        if isinstance(v, str) and not v.strip():
            return DEFAULT_FRONTEND_URL
        return v.strip() if isinstance(v, str) else v

    # Request bodies (body-parser default: 100kb)
    json_body_limit: int = 100 * 1024

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @property
    def api_base_url(self) -> str:
        return f"http://localhost:{self.port}/api"


@lru_cache
def get_settings() -> Settings:
    return Settings()
