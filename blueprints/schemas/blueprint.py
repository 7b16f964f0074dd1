"""Blueprint Schemas — request bodies, blueprint payloads and the response envelope.

Invariants:
    - author and name: stripped, non-blank
    - points default to []; coordinates are 32-bit ints, no geometry checks
    - Every blueprint route answers with ApiResponse {code, message, data}
"""

from typing import Generic, TypeVar
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from blueprints.core.domain_types import Blueprint, Point

T = TypeVar("T")

# Stored as 32-bit INTEGER columns
COORD_MIN = -2**31
COORD_MAX = 2**31 - 1


class PointSchema(BaseModel):
    x: int = Field(ge=COORD_MIN, le=COORD_MAX)
    y: int = Field(ge=COORD_MIN, le=COORD_MAX)

    def to_domain(self) -> Point:
        return Point(self.x, self.y)


class BlueprintWrite(BaseModel):
    """Body for create (POST) and update (PUT); validates the domain key."""
    author: str = Field(min_length=1, max_length=255)
    name: str = Field(min_length=1, max_length=255)
    points: list[PointSchema] = Field(default_factory=list)

    @field_validator("author", "name")
    @classmethod
    def strip_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("must not be blank")
        return v

    def to_domain(self) -> Blueprint:
        return Blueprint(
            author=self.author,
            name=self.name,
            points=tuple(p.to_domain() for p in self.points),
        )


class BlueprintOut(BaseModel):
    id: UUID | None = None
    author: str
    name: str
    points: list[PointSchema]

    @classmethod
    def from_domain(cls, bp: Blueprint) -> "BlueprintOut":
        return cls(
            id=bp.id,
            author=bp.author,
            name=bp.name,
            points=[PointSchema(x=p.x, y=p.y) for p in bp.points],
        )


class ApiResponse(BaseModel, Generic[T]):
    """Standard envelope for blueprint routes."""
    code: int
    message: str
    data: T | None = None
