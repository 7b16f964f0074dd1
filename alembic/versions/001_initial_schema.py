"""Initial schema — blueprints and blueprint_points.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import UUID

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "blueprints",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("author", sa.String(255), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.UniqueConstraint("author", "name", name="uq_blueprints_author_name"),
    )
    op.create_index("ix_blueprints_author", "blueprints", ["author"])

    op.create_table(
        "blueprint_points",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column(
            "blueprint_id", UUID(as_uuid=True),
            sa.ForeignKey("blueprints.id", ondelete="CASCADE"), nullable=False,
        ),
        sa.Column("position", sa.Integer, nullable=False),
        sa.Column("x", sa.Integer, nullable=False),
        sa.Column("y", sa.Integer, nullable=False),
    )
    op.create_index(
        "ix_blueprint_points_blueprint_id", "blueprint_points", ["blueprint_id"],
    )


def downgrade() -> None:
    op.drop_index("ix_blueprint_points_blueprint_id", table_name="blueprint_points")
    op.drop_table("blueprint_points")
    op.drop_index("ix_blueprints_author", table_name="blueprints")
    op.drop_table("blueprints")
