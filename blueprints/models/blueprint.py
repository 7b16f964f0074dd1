"""Blueprint ORM — persists the (author, name) aggregate and its surrogate id.

Invariants:
    - id is UUID primary key assigned on insert, never reused
    - (author, name) is unique (uq_blueprints_author_name)
    - points ordered by position; owned exclusively (cascade delete-orphan)

Design Decisions:
    - Separate point table over a JSON column: one row per point keeps the
      ownership explicit and the append path a single INSERT
    - lazy="selectin": points loaded with the blueprint, no lazy IO in async context
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, DateTime, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from blueprints.core.domain_types import Blueprint, BlueprintId, Point
from blueprints.db.base import Base
from blueprints.models.blueprint_point import BlueprintPointRecord


class BlueprintRecord(Base):
    """Stored blueprint; owns its BlueprintPointRecord rows."""
    __tablename__ = "blueprints"
    __table_args__ = (
        UniqueConstraint("author", "name", name="uq_blueprints_author_name"),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    author: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )

    points: Mapped[list["BlueprintPointRecord"]] = relationship(
        "BlueprintPointRecord", back_populates="blueprint",
        cascade="all, delete-orphan", lazy="selectin",
        order_by="BlueprintPointRecord.position",
    )

    @classmethod
    def from_domain(cls, bp: Blueprint) -> "BlueprintRecord":
        record = cls(author=bp.author, name=bp.name)
        record.points = [
            BlueprintPointRecord(position=i, x=p.x, y=p.y)
            for i, p in enumerate(bp.points)
        ]
        return record

    def to_domain(self) -> Blueprint:
        """Detached domain copy: mutating it never touches the session."""
        return Blueprint(
            author=self.author,
            name=self.name,
            points=tuple(Point(p.x, p.y) for p in self.points),
            id=BlueprintId(self.id),
        )
