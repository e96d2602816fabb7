"""Boundary Protocols: contract between the gateway and the delegated route table.

Invariants:
    - The gateway depends only on RouteTable, never on a concrete table's internals
    - RequestContext and ResponseEnvelope are immutable and live for one request only
    - dispatch returns None when nothing matched; raising means fault

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy (ADR: ExMA anti-pattern)
    - Async in Protocol: a delegated router may await its own IO; the gateway shell
      orchestrates the await around the pure outcome mapping
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Protocol


@dataclass(frozen=True)
class RequestContext:
    """One inbound /api request, as handed to the route table."""
    method: str
    path: str
    headers: Mapping[str, str] = field(default_factory=dict)
    query: Mapping[str, str] = field(default_factory=dict)
    raw_body: bytes = b""
    body: Any = field(default_factory=dict)


@dataclass(frozen=True)
class ResponseEnvelope:
    """Status code + JSON body produced by a route handler."""
    body: Any = None
    status_code: int = 200
    headers: Mapping[str, str] = field(default_factory=dict)


class RouteTable(Protocol):
    """Contract for the route table mounted at /api - implemented by services."""
    async def dispatch(self, ctx: RequestContext) -> ResponseEnvelope | None: ...
