"""Error Hierarchy: typed, categorized exceptions for gateway failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Body faults (malformed, oversized, undecodable) answer 500 with the generic envelope;
      their detail is for logs only
    - Unmatched routes answer 404
    - to_response() produces the flat REST envelope {"error": message}
    - Messages are fixed strings: no request payload or internal detail is ever embedded

Design Decisions:
    - Single hierarchy with GatewayError base: FastAPI global handler catches all (ADR: uniform error shape)
    - ErrorContext as dataclass: path/method for observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


class ErrorSeverity(str, Enum):
    """Error severity: selects the log level the shell records the error at."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories, surfaced in logs as error_category."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"


@dataclass
class ErrorContext:
    """Request coordinates attached to an error for diagnosis."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    path: str | None = None
    method: str | None = None


class GatewayError(Exception):
    """Base exception for all gateway errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
        detail: str | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status
        self.detail = detail

    def to_response(self) -> dict:
        """Convert to the client-facing envelope."""
        return {"error": self.message}


# ─── Body Faults (500, generic envelope) ────────────────────────

INTERNAL_ERROR_MESSAGE = "Internal server error"


class BodyDecodeError(GatewayError):
    """Request body could not be turned into a payload; answered as a server fault."""
    def __init__(self, code: str, detail: str, context: ErrorContext | None = None):
        super().__init__(
            INTERNAL_ERROR_MESSAGE, code, ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 500, detail,
        )


class MalformedBodyError(BodyDecodeError):
    """JSON body could not be decoded, or its top level is not an object/array."""
    def __init__(self, reason: str, context: ErrorContext | None = None):
        super().__init__("MALFORMED_BODY", reason, context)
        self.reason = reason


class PayloadTooLargeError(BodyDecodeError):
    """Body exceeds the configured limit."""
    def __init__(self, size: int, limit: int, context: ErrorContext | None = None):
        super().__init__(
            "PAYLOAD_TOO_LARGE", f"body of {size} bytes exceeds {limit}", context,
        )
        self.size = size
        self.limit = limit


class UnsupportedMediaTypeError(BodyDecodeError):
    """Non-empty body sent with a content type the gateway does not decode."""
    def __init__(self, content_type: str | None, context: ErrorContext | None = None):
        super().__init__(
            "UNSUPPORTED_MEDIA_TYPE",
            f"cannot decode body of type {content_type or 'unspecified'}", context,
        )
        self.content_type = content_type


# ─── Routing (404) ──────────────────────────────────────────────

class RouteNotFoundError(GatewayError):
    """No handler matched the request."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Route not found", "ROUTE_NOT_FOUND",
            ErrorCategory.RESOURCE_NOT_FOUND, ErrorSeverity.INFO, context, 404,
        )
