"""Services Layer — orchestration between the API and persistence.

Invariants:
    - Services receive collaborators through their constructor (no globals)
    - Services never import from api/
"""
