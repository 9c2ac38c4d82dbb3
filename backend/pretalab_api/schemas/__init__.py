"""Pydantic Schemas — document validation and JSON projection for API endpoints.

Invariants:
    - *Fields models are the schema engine: every write is validated through them
    - *Read models are the JSON projection: _id, client fields, createdAt, updatedAt

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
