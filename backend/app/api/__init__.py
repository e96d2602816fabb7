"""API Layer: FastAPI routes, CORS middleware and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return structured JSON envelopes

Design Decisions:
    - Thin routes delegate to core/ and the route table (ADR: ExMA impureim sandwich)
"""
