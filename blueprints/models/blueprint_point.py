"""BlueprintPoint ORM — one row per point, ordered by position within its blueprint.

Invariants:
    - blueprint_id links to the owning blueprint (ON DELETE CASCADE)
    - position is zero-based and contiguous within a blueprint
"""

import uuid

from sqlalchemy import Integer, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from blueprints.db.base import Base


class BlueprintPointRecord(Base):
    __tablename__ = "blueprint_points"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    blueprint_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("blueprints.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    position: Mapped[int] = mapped_column(Integer, nullable=False)
    x: Mapped[int] = mapped_column(Integer, nullable=False)
    y: Mapped[int] = mapped_column(Integer, nullable=False)

    blueprint: Mapped["BlueprintRecord"] = relationship(
        "BlueprintRecord", back_populates="points",
    )
