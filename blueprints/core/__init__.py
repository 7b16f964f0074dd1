"""Core Layer — pure domain logic with no I/O.

Invariants:
    - Nothing in core/ imports from infrastructure/, db/, models/ or api/
    - Filters and domain types are safe to share across concurrent requests
"""
