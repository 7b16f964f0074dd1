"""Database Infrastructure — SQLAlchemy declarative Base.

Invariants:
    - Every ORM record in blueprints.models derives from db.base.Base
    - Engine and sessions live in infrastructure/database.py

Design Decisions:
    - asyncpg driver for PostgreSQL, aiosqlite for tests and local runs
"""
