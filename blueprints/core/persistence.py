"""Persistence Contract — the only storage surface the service depends on.

Invariants:
    - (author, name) is unique: save and rename raise BlueprintAlreadyExistsError
    - get / add_point / update / delete on a missing key raise BlueprintNotFoundError
    - get_by_author with zero results raises BlueprintNotFoundError;
      get_all with zero results returns [] (the asymmetry is deliberate)
    - Rename is delete + recreate: the surrogate id changes
    - Every returned Blueprint is detached: mutating it never changes stored state
    - Results are ordered by (author, name)

Design Decisions:
    - ABC over Protocol: implementations opt in explicitly and a missing
      method fails at instantiation
    - Async methods: the SQL implementation awaits the driver; the in-memory
      one keeps the same signature
"""

from abc import ABC, abstractmethod

from blueprints.core.domain_types import Blueprint


class BlueprintPersistence(ABC):
    """CRUD over Blueprints keyed by (author, name)."""

    @abstractmethod
    async def save(self, bp: Blueprint) -> Blueprint:
        """Store a new blueprint; assigns bp.id and returns bp."""

    @abstractmethod
    async def get(self, author: str, name: str) -> Blueprint:
        ...

    @abstractmethod
    async def get_by_author(self, author: str) -> list[Blueprint]:
        ...

    @abstractmethod
    async def get_all(self) -> list[Blueprint]:
        ...

    @abstractmethod
    async def add_point(self, author: str, name: str, x: int, y: int) -> None:
        """Append one point to the end of the stored sequence."""

    @abstractmethod
    async def update(
        self, original_author: str, original_name: str, updated: Blueprint,
    ) -> Blueprint:
        """Replace points in place, or rename via delete + recreate.

        Sets updated.id to the stored id (kept on identity update, fresh on
        rename) and returns updated.
        """

    @abstractmethod
    async def delete(self, author: str, name: str) -> None:
        ...


def is_rename(original_author: str, original_name: str, updated: Blueprint) -> bool:
    return updated.key != (original_author, original_name)
