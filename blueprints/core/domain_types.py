"""Domain Types — Point and Blueprint value types plus the identifiers around them.

Invariants:
    - Point is immutable; equality is structural (x, y)
    - Blueprint equality and hash use the domain key (author, name) only
    - Blueprint.points is a tuple: changed only by replace_points / add_point,
      never through a shared mutable list
    - id is None until the store assigns one on first save
    - author and name are fixed once set, so the hash never changes while a
      Blueprint sits in a set or dict key; renaming builds a new Blueprint

Design Decisions:
    - Frozen dataclass for Point: hashable, usable in sets and as dict values
    - eq=False on Blueprint with hand-written __eq__/__hash__: surrogate id and
      points must not take part in identity
"""

from dataclasses import FrozenInstanceError, dataclass, field
from enum import Enum
from typing import Iterable, NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

BlueprintId = NewType("BlueprintId", UUID)
DomainKey = tuple[str, str]  # (author, name)
KEY_FIELDS = ("author", "name")


# ─── Enums ───────────────────────────────────────────────────────

class FilterName(str, Enum):
    """Read-time filters selectable via BLUEPRINT_FILTER."""
    IDENTITY = "identity"
    REDUNDANCY = "redundancy"
    UNDERSAMPLING = "undersampling"


class PersistenceBackend(str, Enum):
    """Store implementations selectable via PERSISTENCE_BACKEND."""
    SQL = "sql"
    MEMORY = "memory"


class Scope(str, Enum):
    """JWT scopes granted at login and checked per route."""
    READ = "blueprints.read"
    WRITE = "blueprints.write"


# ─── Value Types ─────────────────────────────────────────────────

@dataclass(frozen=True)
class Point:
    x: int
    y: int


@dataclass(eq=False)
class Blueprint:
    """An authored, named, ordered sequence of points."""
    author: str
    name: str
    points: tuple[Point, ...] = field(default_factory=tuple)
    id: BlueprintId | None = None

    def __post_init__(self):
        self.points = tuple(self.points)

    def __setattr__(self, attr: str, value) -> None:
        if attr in KEY_FIELDS and attr in self.__dict__:
            raise FrozenInstanceError(f"cannot assign to field {attr!r}")
        super().__setattr__(attr, value)

    @property
    def key(self) -> DomainKey:
        return (self.author, self.name)

    def add_point(self, point: Point) -> None:
        self.points = self.points + (point,)

    def replace_points(self, points: Iterable[Point]) -> None:
        self.points = tuple(points)

    def with_points(self, points: Iterable[Point]) -> "Blueprint":
        """New Blueprint with the same author/name/id and the given points."""
        return Blueprint(self.author, self.name, tuple(points), self.id)

    def copy(self) -> "Blueprint":
        return self.with_points(self.points)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Blueprint):
            return NotImplemented
        return self.key == other.key

    def __hash__(self) -> int:
        return hash(self.key)
