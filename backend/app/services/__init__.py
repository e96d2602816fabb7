"""Services Layer: the delegated route table mounted under /api.

Invariants:
    - Route registration is explicit (no auto-discovery)

Design Decisions:
    - Table satisfies core.route_protocols.RouteTable structurally (ADR: ExMA anti-pattern)
"""
