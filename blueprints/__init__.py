"""Blueprints Application Package — authored 2-D point collections behind a JWT-gated REST API.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)

Design Decisions:
    - Empty __init__.py: explicit imports only, no star exports
"""
