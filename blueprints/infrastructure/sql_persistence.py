"""SQL Persistence — BlueprintPersistence over an AsyncSession (PostgreSQL / SQLite).

Invariants:
    - Each write operation commits exactly once; a raised domain error leaves
      the session without pending changes
    - Uniqueness is checked with a SELECT before INSERT; the database unique
      constraint backs it up (a racing writer surfaces as DatabaseError)
    - Rename deletes the original row (points cascade) and flushes before
      inserting the new one
    - Only domain Blueprints leave this module (BlueprintRecord.to_domain)

Design Decisions:
    - One instance per request, bound to the request's session (no shared state)
    - Explicit updated_at bump on point changes: child-row edits do not
      trigger the parent's onupdate
"""

import logging
from datetime import datetime, timezone

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from blueprints.core.domain_types import Blueprint, BlueprintId
from blueprints.core.errors import (
    BlueprintAlreadyExistsError, BlueprintNotFoundError,
)
from blueprints.core.persistence import BlueprintPersistence, is_rename
from blueprints.models.blueprint import BlueprintRecord
from blueprints.models.blueprint_point import BlueprintPointRecord

logger = logging.getLogger(__name__)


def _point_records(bp: Blueprint) -> list[BlueprintPointRecord]:
    return [
        BlueprintPointRecord(position=i, x=p.x, y=p.y)
        for i, p in enumerate(bp.points)
    ]


class SqlBlueprintPersistence(BlueprintPersistence):
    """Relational store: blueprints + blueprint_points tables."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def _find(self, author: str, name: str) -> BlueprintRecord | None:
        result = await self.db.execute(
            select(BlueprintRecord)
            .where(BlueprintRecord.author == author)
            .where(BlueprintRecord.name == name),
        )
        return result.scalar_one_or_none()

    async def _get_record(self, author: str, name: str) -> BlueprintRecord:
        record = await self._find(author, name)
        if record is None:
            raise BlueprintNotFoundError.for_key(author, name)
        return record

    async def save(self, bp: Blueprint) -> Blueprint:
        if await self._find(bp.author, bp.name) is not None:
            raise BlueprintAlreadyExistsError(bp.author, bp.name)
        record = BlueprintRecord.from_domain(bp)
        self.db.add(record)
        await self.db.commit()
        bp.id = BlueprintId(record.id)
        logger.info(
            "Blueprint saved",
            extra={"author": bp.author, "blueprint_name": bp.name, "blueprint_id": bp.id},
        )
        return bp

    async def get(self, author: str, name: str) -> Blueprint:
        record = await self._get_record(author, name)
        return record.to_domain()

    async def get_by_author(self, author: str) -> list[Blueprint]:
        result = await self.db.execute(
            select(BlueprintRecord)
            .where(BlueprintRecord.author == author)
            .order_by(BlueprintRecord.name),
        )
        records = result.scalars().all()
        if not records:
            raise BlueprintNotFoundError.for_author(author)
        return [r.to_domain() for r in records]

    async def get_all(self) -> list[Blueprint]:
        result = await self.db.execute(
            select(BlueprintRecord).order_by(
                BlueprintRecord.author, BlueprintRecord.name,
            ),
        )
        return [r.to_domain() for r in result.scalars().all()]

    async def add_point(self, author: str, name: str, x: int, y: int) -> None:
        record = await self._get_record(author, name)
        record.points.append(
            BlueprintPointRecord(position=len(record.points), x=x, y=y),
        )
        record.updated_at = datetime.now(timezone.utc)
        await self.db.commit()
        logger.info(
            "Point appended",
            extra={"author": author, "blueprint_name": name},
        )

    async def update(
        self, original_author: str, original_name: str, updated: Blueprint,
    ) -> Blueprint:
        original = await self._get_record(original_author, original_name)

        if not is_rename(original_author, original_name, updated):
            original.points = _point_records(updated)
            original.updated_at = datetime.now(timezone.utc)
            await self.db.commit()
            updated.id = BlueprintId(original.id)
            logger.info(
                "Blueprint points replaced",
                extra={"author": updated.author, "blueprint_name": updated.name},
            )
            return updated

        if await self._find(updated.author, updated.name) is not None:
            raise BlueprintAlreadyExistsError(updated.author, updated.name)

        await self.db.delete(original)
        await self.db.flush()
        record = BlueprintRecord.from_domain(updated)
        self.db.add(record)
        await self.db.commit()
        updated.id = BlueprintId(record.id)
        logger.info(
            f"Blueprint renamed from {original_author}/{original_name}",
            extra={
                "author": updated.author,
                "blueprint_name": updated.name,
                "blueprint_id": updated.id,
            },
        )
        return updated

    async def delete(self, author: str, name: str) -> None:
        record = await self._get_record(author, name)
        await self.db.delete(record)
        await self.db.commit()
        logger.info(
            "Blueprint deleted",
            extra={"author": author, "blueprint_name": name},
        )
