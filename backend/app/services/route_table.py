"""Route Table: explicit (method, path) → handler mapping mounted under /api.

Invariants:
    - Every route→handler mapping is visible - registered with add(), no auto-discovery
    - Unmatched requests return None (gateway answers 404), never raise
    - Handler exceptions propagate untouched: the dispatch boundary turns them into faults
    - Paths are relative to /api and compared exactly, trailing slash ignored

Design Decisions:
    - Explicit dict over decorators/getattr: every mapping visible in one place
      (ADR: ExMA no convention-over-config)
    - Empty by default: business routes live outside the gateway and are registered
      by whoever composes the app
"""

import logging
from collections.abc import Awaitable, Callable

from app.core.route_protocols import RequestContext, ResponseEnvelope

logger = logging.getLogger(__name__)

RouteHandler = Callable[[RequestContext], Awaitable[ResponseEnvelope]]


def normalize_path(path: str) -> str:
    """'users/' and '/users' both become '/users'; '' becomes '/'."""
    stripped = path.strip("/")
    return f"/{stripped}"


class StaticRouteTable:
    """Routes (METHOD, path) -> async handler. Explicit registration only."""

    def __init__(self) -> None:
        self._handlers: dict[tuple[str, str], RouteHandler] = {}

    def add(self, method: str, path: str, handler: RouteHandler) -> None:
        key = (method.upper(), normalize_path(path))
        if key in self._handlers:
            raise ValueError(f"Route already registered: {key[0]} {key[1]}")
        self._handlers[key] = handler
        logger.debug("Registered route %s %s", key[0], key[1])

    def routes(self) -> list[tuple[str, str]]:
        return sorted(self._handlers)

    async def dispatch(self, ctx: RequestContext) -> ResponseEnvelope | None:
        handler = self._handlers.get(
            (ctx.method.upper(), normalize_path(ctx.path)),
        )
        if handler is None:
            return None
        return await handler(ctx)
