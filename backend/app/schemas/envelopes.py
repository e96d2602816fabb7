"""Envelope Schemas: Pydantic models for the gateway's own JSON responses.

Invariants:
    - /health always answers HealthResponse with status "ok"
    - Error envelopes are built by GatewayError.to_response and the fixed bodies
      in core.dispatch_outcome, never from exception text or request data
"""

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Liveness envelope for /health."""
    status: str = "ok"
    environment: str
