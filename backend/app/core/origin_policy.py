"""Origin Policy: which browser origins receive CORS-enabling headers.

Invariants:
    - resolve_allowed_origins is PURE and evaluated once at app construction
    - Production allows exactly one origin (FRONTEND_URL); every other environment
      allows the two local dev origins
    - A missing or disallowed Origin gets NO allow headers (browser enforces, server never rejects)
    - cors_headers never mutates its inputs

Design Decisions:
    - Allow-list as frozen dataclass over a bare list: membership is the only question asked
    - Reflect the request origin instead of echoing the configured value, so a disallowed
      origin can never see an allow header
"""

from dataclasses import dataclass

PRODUCTION = "production"

DEV_ORIGINS: tuple[str, ...] = ("http://localhost:5173", "http://localhost:3000")
PREFLIGHT_METHODS = "GET,HEAD,PUT,PATCH,POST,DELETE"


@dataclass(frozen=True)
class OriginAllowList:
    """Origins permitted to receive CORS headers for one environment."""
    origins: tuple[str, ...]

    def allows(self, origin: str | None) -> bool:
        return origin is not None and origin in self.origins


def resolve_allowed_origins(
    environment: str, configured_origin: str,
) -> OriginAllowList:
    """Map (environment, FRONTEND_URL) to the active allow-list."""
    if environment == PRODUCTION:
        return OriginAllowList(origins=(configured_origin,))
    return OriginAllowList(origins=DEV_ORIGINS)


def cors_headers(
    allow_list: OriginAllowList,
    origin: str | None,
    preflight: bool = False,
    request_headers: str | None = None,
) -> dict[str, str]:
    """Headers to attach to a response for the given request origin."""
    if not allow_list.allows(origin):
        return {}
    headers = {
        "Access-Control-Allow-Origin": origin,
        "Access-Control-Allow-Credentials": "true",
        "Vary": "Origin",
    }
    if preflight:
        headers["Access-Control-Allow-Methods"] = PREFLIGHT_METHODS
        if request_headers:
            headers["Access-Control-Allow-Headers"] = request_headers
            headers["Vary"] = "Origin, Access-Control-Request-Headers"
    return headers
