"""ORM Models — SQLAlchemy declarative models for blueprint storage.

Invariants:
    - All models inherit from Base (db/base.py)
    - BlueprintRecord is the aggregate root; BlueprintPointRecord rows are owned
      exclusively by one blueprint

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from blueprints.models.blueprint import BlueprintRecord  # noqa: F401
from blueprints.models.blueprint_point import BlueprintPointRecord  # noqa: F401
