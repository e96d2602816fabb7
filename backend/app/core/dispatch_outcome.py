"""Dispatch Outcome: typed error boundary around the delegated route table.

Invariants:
    - Every dispatch ends in exactly one of Handled | Unmatched | Faulted
    - Faulted maps to the fixed 500 envelope; its cause goes to logs only, never to the client
    - Unmatched maps to the fixed 404 envelope
    - outcome_status/outcome_body are PURE

Design Decisions:
    - Sum type over try/except in the route: the mapping to HTTP is testable without a server
    - Catch Exception, not BaseException: cancellation must still propagate
"""

from dataclasses import dataclass
from typing import Any

from app.core.errors import INTERNAL_ERROR_MESSAGE
from app.core.route_protocols import RequestContext, ResponseEnvelope, RouteTable

NOT_FOUND_BODY = {"error": "Route not found"}
INTERNAL_ERROR_BODY = {"error": INTERNAL_ERROR_MESSAGE}


@dataclass(frozen=True)
class Handled:
    envelope: ResponseEnvelope


@dataclass(frozen=True)
class Unmatched:
    pass


@dataclass(frozen=True)
class Faulted:
    cause: Exception


DispatchOutcome = Handled | Unmatched | Faulted


async def run_dispatch(table: RouteTable, ctx: RequestContext) -> DispatchOutcome:
    """Await the route table and fold its result into a DispatchOutcome."""
    try:
        envelope = await table.dispatch(ctx)
    except Exception as exc:  # noqa: BLE001
        return Faulted(cause=exc)
    if envelope is None:
        return Unmatched()
    return Handled(envelope=envelope)


def outcome_status(outcome: DispatchOutcome) -> int:
    if isinstance(outcome, Handled):
        return outcome.envelope.status_code
    if isinstance(outcome, Unmatched):
        return 404
    return 500


def outcome_body(outcome: DispatchOutcome) -> Any:
    if isinstance(outcome, Handled):
        return outcome.envelope.body
    if isinstance(outcome, Unmatched):
        return NOT_FOUND_BODY
    return INTERNAL_ERROR_BODY


def outcome_headers(outcome: DispatchOutcome) -> dict[str, str]:
    if isinstance(outcome, Handled):
        return dict(outcome.envelope.headers)
    return {}
