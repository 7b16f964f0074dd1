"""Infrastructure Layer — database, persistence adapters, security and logging.

Invariants:
    - Infrastructure may import core/; core/ never imports infrastructure/
    - All SQLAlchemy failures surface as DatabaseError (core/errors.py)
"""
