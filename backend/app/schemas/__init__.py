"""Pydantic Schemas: response envelopes for gateway-generated bodies.

Invariants:
    - Schemas validate at system boundary (API responses)
"""
