"""CORS Middleware: applies the origin allow-list to every request.

Invariants:
    - Every OPTIONS request short-circuits: 200, empty body, regardless of path or origin
    - Allowed origins get reflected allow headers + credentials on every response,
      including the 500 envelope for faults that escape the exception handlers
    - Disallowed or missing origins get no allow headers; the request itself is never rejected
    - The allow-list is fixed at construction, never re-resolved per request

Design Decisions:
    - Own middleware over Starlette's CORSMiddleware: Starlette answers disallowed
      preflights with 400 and a text body, the gateway contract is 200 with no body
    - Unhandled faults are turned into the 500 envelope here, inside the middleware, because
      Starlette's catch-all handler runs outside user middleware and would drop the headers
    - Header computation delegated to core.origin_policy (pure, tested without a server)
"""

import logging

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response
from starlette.types import ASGIApp

from app.core.dispatch_outcome import INTERNAL_ERROR_BODY
from app.core.origin_policy import OriginAllowList, cors_headers

logger = logging.getLogger(__name__)


class CORSPolicyMiddleware(BaseHTTPMiddleware):
    """Middleware that enforces the gateway's cross-origin policy."""

    def __init__(self, app: ASGIApp, allow_list: OriginAllowList) -> None:
        super().__init__(app)
        self.allow_list = allow_list

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint,
    ) -> Response:
        origin = request.headers.get("origin")

        if request.method == "OPTIONS":
            headers = cors_headers(
                self.allow_list, origin, preflight=True,
                request_headers=request.headers.get("access-control-request-headers"),
            )
            return Response(status_code=200, headers=headers)

        try:
            response = await call_next(request)
        except Exception as exc:
            logger.error(
                f"Server error on {request.url.path}: {exc!r}",
                exc_info=True,
                extra={"path": request.url.path, "method": request.method},
            )
            response = JSONResponse(status_code=500, content=INTERNAL_ERROR_BODY)

        for name, value in cors_headers(self.allow_list, origin).items():
            response.headers[name] = value
        return response
