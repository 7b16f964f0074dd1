"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate at system boundary (user input, API responses)
    - Domain types from core/ are built from schemas, never passed raw dicts

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
