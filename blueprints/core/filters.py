"""Blueprint Filters — pure read-time point-simplification strategies.

Invariants:
    - Every filter is PURE: never mutates its input, returns a new Blueprint
      when it changes anything
    - author, name and id are always preserved; only points are replaced
    - Filters run on read paths only (get, get_by_author, get_all)

Design Decisions:
    - Plain functions over a class hierarchy: a filter is a Callable value,
      resolved once at startup and handed to BlueprintService
    - Explicit dict registry (no auto-discovery)
"""

from typing import Callable

from blueprints.core.domain_types import Blueprint, FilterName

BlueprintFilter = Callable[[Blueprint], Blueprint]


def identity_filter(bp: Blueprint) -> Blueprint:
    return bp


def redundancy_filter(bp: Blueprint) -> Blueprint:
    """Collapse consecutive duplicate points. Non-consecutive repeats survive."""
    if len(bp.points) < 2:
        return bp
    kept = []
    for point in bp.points:
        if not kept or kept[-1] != point:
            kept.append(point)
    return bp.with_points(kept)


def undersampling_filter(bp: Blueprint) -> Blueprint:
    """Keep points at even zero-based index (0, 2, 4, ...)."""
    if len(bp.points) <= 2:
        return bp
    return bp.with_points(bp.points[::2])


FILTERS: dict[FilterName, BlueprintFilter] = {
    FilterName.IDENTITY: identity_filter,
    FilterName.REDUNDANCY: redundancy_filter,
    FilterName.UNDERSAMPLING: undersampling_filter,
}


def resolve_filter(name: FilterName | str) -> BlueprintFilter:
    """Look up the filter configured for this deployment. ValueError if unknown."""
    return FILTERS[FilterName(name)]
