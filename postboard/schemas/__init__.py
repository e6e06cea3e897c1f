"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate at system boundary (user input, API responses)
    - Response schemas are built from core dataclasses, never from raw dicts

Design Decisions:
    - Separate from core records: schemas are API contracts, records are storage
"""
