"""In-Memory Persistence — dict-backed BlueprintPersistence for development and tests.

Invariants:
    - Stored values are private copies; callers only ever see copies
    - Each operation finishes without awaiting, so it is atomic on the event loop
    - Same ordering and error semantics as the SQL store

Design Decisions:
    - Keyed by domain key (author, name); surrogate ids are fresh uuid4 values
    - State lives on the instance (owned by the app), not at module level
"""

import logging
import uuid

from blueprints.core.domain_types import Blueprint, BlueprintId, DomainKey, Point
from blueprints.core.errors import (
    BlueprintAlreadyExistsError, BlueprintNotFoundError,
)
from blueprints.core.persistence import BlueprintPersistence, is_rename

logger = logging.getLogger(__name__)


class InMemoryBlueprintPersistence(BlueprintPersistence):

    def __init__(self):
        self._blueprints: dict[DomainKey, Blueprint] = {}

    def _get_stored(self, author: str, name: str) -> Blueprint:
        stored = self._blueprints.get((author, name))
        if stored is None:
            raise BlueprintNotFoundError.for_key(author, name)
        return stored

    def _insert(self, bp: Blueprint) -> Blueprint:
        bp.id = BlueprintId(uuid.uuid4())
        self._blueprints[bp.key] = bp.copy()
        return bp

    def _sorted(self, blueprints) -> list[Blueprint]:
        return [bp.copy() for bp in sorted(blueprints, key=lambda b: b.key)]

    async def save(self, bp: Blueprint) -> Blueprint:
        if bp.key in self._blueprints:
            raise BlueprintAlreadyExistsError(bp.author, bp.name)
        self._insert(bp)
        logger.info(
            "Blueprint saved",
            extra={"author": bp.author, "blueprint_name": bp.name, "blueprint_id": bp.id},
        )
        return bp

    async def get(self, author: str, name: str) -> Blueprint:
        return self._get_stored(author, name).copy()

    async def get_by_author(self, author: str) -> list[Blueprint]:
        found = [bp for bp in self._blueprints.values() if bp.author == author]
        if not found:
            raise BlueprintNotFoundError.for_author(author)
        return self._sorted(found)

    async def get_all(self) -> list[Blueprint]:
        return self._sorted(self._blueprints.values())

    async def add_point(self, author: str, name: str, x: int, y: int) -> None:
        self._get_stored(author, name).add_point(Point(x, y))

    async def update(
        self, original_author: str, original_name: str, updated: Blueprint,
    ) -> Blueprint:
        original = self._get_stored(original_author, original_name)

        if not is_rename(original_author, original_name, updated):
            original.replace_points(updated.points)
            updated.id = original.id
            return updated

        if updated.key in self._blueprints:
            raise BlueprintAlreadyExistsError(updated.author, updated.name)
        del self._blueprints[original.key]
        self._insert(updated)
        logger.info(
            f"Blueprint renamed from {original_author}/{original_name}",
            extra={"author": updated.author, "blueprint_name": updated.name},
        )
        return updated

    async def delete(self, author: str, name: str) -> None:
        self._get_stored(author, name)
        del self._blueprints[(author, name)]
