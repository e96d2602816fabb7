"""Health Check: liveness endpoint for load balancers and container orchestration.

Invariants:
    - /health always returns 200 if the process is up, for any method (TRACE and
      custom verbs included)
    - environment field equals the configured NODE_ENV
    - Request body and headers are ignored (never decoded)

Design Decisions:
    - Plain Starlette route without a method list: FastAPI routes need an explicit
      method set, a bare route matches every method
"""

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from app.api.dependencies import get_app_settings
from app.schemas.envelopes import HealthResponse

router = APIRouter(tags=["health"])


async def health_check(request: Request) -> JSONResponse:
    """Basic liveness check. Returns 200 if the process is up."""
    settings = get_app_settings(request)
    return JSONResponse(
        HealthResponse(status="ok", environment=settings.node_env).model_dump(),
    )


router.add_route("/health", health_check, include_in_schema=False)
