"""Request Gateway: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery - ExMA anti-pattern)
    - Origin allow-list resolved once here from settings, never per request
    - Global error handlers map every unmatched/faulted request to a JSON envelope
    - Only /health and /api/* are served; docs/openapi routes are disabled

Design Decisions:
    - create_app factory over a bare module-level app: tests build apps with their own
      settings and route table; `app` below is the default composition
    - Lifespan over @app.on_event: FastAPI recommended pattern (ADR: FastAPI 0.128)
    - redirect_slashes disabled: /health/ is not /health
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.api.cors import CORSPolicyMiddleware
from app.api.error_handlers import register_error_handlers
from app.api.routes import api_gateway, health
from app.config import Settings, get_settings
from app.core.origin_policy import resolve_allowed_origins
from app.core.route_protocols import RouteTable
from app.infrastructure.observability import setup_logging
from app.services.route_table import StaticRouteTable

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings: Settings = app.state.settings
    setup_logging(settings.log_level, settings.log_format)
    banner = {
        "port": settings.port,
        "environment": settings.node_env,
        "api_base_url": settings.api_base_url,
    }
    logger.info(f"Server running on port {settings.port}", extra=banner)
    logger.info(f"Environment: {settings.node_env}", extra=banner)
    logger.info(f"API available at: {settings.api_base_url}", extra=banner)
    yield
    logger.info("Request gateway shutting down")


def create_app(
    settings: Settings | None = None,
    route_table: RouteTable | None = None,
) -> FastAPI:
    """Compose the gateway: CORS policy, error handlers, health and /api routes."""
    settings = settings or get_settings()

    app = FastAPI(
        title="Request Gateway",
        version="1.0.0",
        lifespan=lifespan,
        redirect_slashes=False,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.settings = settings
    app.state.route_table = route_table if route_table is not None else StaticRouteTable()

    # CORS - allow-list from settings, resolved once
    app.add_middleware(
        CORSPolicyMiddleware,
        allow_list=resolve_allowed_origins(settings.node_env, settings.frontend_url),
    )

    register_error_handlers(app)

    # Routes - explicit registration (ExMA: no convention-over-config)
    app.include_router(health.router)
    app.include_router(api_gateway.router)

    return app


app = create_app()
