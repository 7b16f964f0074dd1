"""Blueprint Service — orchestrates persistence and the active read-time filter.

Invariants:
    - Read paths (get, get_by_author, get_all) return filter(stored) values
    - Write paths (add_new, add_point, update, delete) never call the filter;
      stored state is always the raw point sequence
    - Domain errors from persistence propagate unchanged
    - Stateless: no cached copies across calls, safe to share

Design Decisions:
    - Filter injected as a function value chosen once at startup
"""

from blueprints.core.domain_types import Blueprint
from blueprints.core.filters import BlueprintFilter, identity_filter
from blueprints.core.persistence import BlueprintPersistence


class BlueprintService:
    """The only entry point the HTTP layer calls."""

    def __init__(
        self,
        persistence: BlueprintPersistence,
        blueprint_filter: BlueprintFilter = identity_filter,
    ):
        self.persistence = persistence
        self.filter = blueprint_filter

    async def add_new(self, bp: Blueprint) -> Blueprint:
        return await self.persistence.save(bp)

    async def get_all(self) -> list[Blueprint]:
        return [self.filter(bp) for bp in await self.persistence.get_all()]

    async def get_by_author(self, author: str) -> list[Blueprint]:
        blueprints = await self.persistence.get_by_author(author)
        return [self.filter(bp) for bp in blueprints]

    async def get(self, author: str, name: str) -> Blueprint:
        return self.filter(await self.persistence.get(author, name))

    async def add_point(self, author: str, name: str, x: int, y: int) -> None:
        await self.persistence.add_point(author, name, x, y)

    async def update(
        self, original_author: str, original_name: str, updated: Blueprint,
    ) -> Blueprint:
        return await self.persistence.update(original_author, original_name, updated)

    async def delete(self, author: str, name: str) -> None:
        await self.persistence.delete(author, name)
