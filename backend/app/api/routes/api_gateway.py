"""API Gateway Route: forwards every /api/* request to the delegated route table.

Invariants:
    - Body decoded BEFORE dispatch; decode failures surface as typed GatewayErrors (500)
    - Body never read past json_body_limit: declared Content-Length checked first,
      streamed size enforced while reading
    - Route table called through run_dispatch: every fault becomes a 500 with the fixed envelope
    - Fault cause logged with traceback; neither cause nor request payload reaches the client
    - Route table returning None → 404 not-found envelope

Design Decisions:
    - Single catch-all route over per-endpoint FastAPI routes: the table is opaque to
      the gateway (ADR: delegated router as capability)
    - Route stays thin: decoding and outcome mapping live in core/ (ADR: ExMA impureim sandwich)
"""

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from app.api.dependencies import get_app_settings, get_route_table
from app.config import Settings
from app.core.body_decoding import check_content_length, decode_json_body
from app.core.dispatch_outcome import (
    Faulted, outcome_body, outcome_headers, outcome_status, run_dispatch,
)
from app.core.errors import PayloadTooLargeError
from app.core.route_protocols import RequestContext, RouteTable

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["api"])

GATEWAY_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE"]


async def read_limited_body(request: Request, limit: int) -> bytes:
    """Read the request body, stopping as soon as it grows past limit."""
    check_content_length(request.headers.get("content-length"), limit)
    chunks: list[bytes] = []
    size = 0
    async for chunk in request.stream():
        size += len(chunk)
        if size > limit:
            raise PayloadTooLargeError(size, limit)
        chunks.append(chunk)
    return b"".join(chunks)


@router.api_route("/{path:path}", methods=GATEWAY_METHODS)
async def dispatch_api(
    path: str,
    request: Request,
    settings: Settings = Depends(get_app_settings),
    table: RouteTable = Depends(get_route_table),
):
    """Decode the body, hand the request to the route table, normalize the outcome."""
    raw = await read_limited_body(request, settings.json_body_limit)
    body = decode_json_body(
        request.headers.get("content-type"), raw, settings.json_body_limit,
    )
    ctx = RequestContext(
        method=request.method,
        path=f"/{path}",
        headers=dict(request.headers),
        query=dict(request.query_params),
        raw_body=raw,
        body=body,
    )

    outcome = await run_dispatch(table, ctx)
    if isinstance(outcome, Faulted):
        logger.error(
            f"Server error on {request.url.path}: {outcome.cause!r}",
            exc_info=outcome.cause,
            extra={"path": request.url.path, "method": request.method},
        )

    return JSONResponse(
        status_code=outcome_status(outcome),
        content=outcome_body(outcome),
        headers=outcome_headers(outcome),
    )
