"""Core Layer: pure gateway logic, no IO, no framework imports.

Invariants:
    - No module in core/ imports from services/, api/, or infrastructure/
    - Origin policy, body decoding and outcome mapping are pure and deterministic

Design Decisions:
    - Functional core separated from imperative shell (ADR: ExMA impureim sandwich)
"""
