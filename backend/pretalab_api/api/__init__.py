"""API Layer — FastAPI routes, dependencies and error handlers.

Invariants:
    - All error responses are JSON with at least "message"
"""
