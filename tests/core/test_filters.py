"""Blueprint Filters — tests for the pure read-time point filters.

Tests cover:
    - redundancy collapses consecutive duplicates only
    - undersampling keeps even indices
    - length guards (redundancy < 2, undersampling <= 2)
    - no filter mutates its input; author/name/id survive
    - resolve_filter maps configuration names to functions
"""

from uuid import uuid4

import pytest

from blueprints.core.domain_types import Blueprint, BlueprintId, FilterName, Point
from blueprints.core.filters import (
    FILTERS,
    identity_filter,
    redundancy_filter,
    resolve_filter,
    undersampling_filter,
)


def _bp(*coords, bp_id=None) -> Blueprint:
    return Blueprint("ana", "house", tuple(Point(x, y) for x, y in coords), bp_id)


# ─── identity ────────────────────────────────────────────────────

def test_identity_returns_input_unchanged():
    bp = _bp((1, 1), (1, 1), (2, 2))
    assert identity_filter(bp) is bp
    assert bp.points == (Point(1, 1), Point(1, 1), Point(2, 2))


# ─── redundancy ──────────────────────────────────────────────────

def test_redundancy_collapses_consecutive_duplicates():
    bp = _bp((1, 1), (2, 2), (2, 2), (3, 3), (3, 3), (4, 4))
    result = redundancy_filter(bp)
    assert result.points == (Point(1, 1), Point(2, 2), Point(3, 3), Point(4, 4))


def test_redundancy_keeps_non_consecutive_duplicates():
    bp = _bp((1, 1), (2, 2), (1, 1), (1, 1), (2, 2))
    result = redundancy_filter(bp)
    assert result.points == (Point(1, 1), Point(2, 2), Point(1, 1), Point(2, 2))


def test_redundancy_collapses_long_runs_to_one():
    result = redundancy_filter(_bp((5, 5), (5, 5), (5, 5), (5, 5)))
    assert result.points == (Point(5, 5),)


@pytest.mark.parametrize("coords", [(), ((1, 1),)])
def test_redundancy_passes_short_input_through(coords):
    bp = _bp(*coords)
    assert redundancy_filter(bp) is bp


# ─── undersampling ───────────────────────────────────────────────

def test_undersampling_keeps_even_indices():
    bp = _bp((1, 1), (2, 2), (3, 3), (4, 4), (5, 5), (6, 6))
    result = undersampling_filter(bp)
    assert result.points == (Point(1, 1), Point(3, 3), Point(5, 5))


def test_undersampling_odd_length_keeps_last_point():
    result = undersampling_filter(_bp((1, 1), (2, 2), (3, 3)))
    assert result.points == (Point(1, 1), Point(3, 3))


@pytest.mark.parametrize("coords", [(), ((1, 1),), ((1, 1), (2, 2))])
def test_undersampling_passes_short_input_through(coords):
    bp = _bp(*coords)
    assert undersampling_filter(bp) is bp


# ─── purity ──────────────────────────────────────────────────────

@pytest.mark.parametrize("blueprint_filter", list(FILTERS.values()))
def test_filters_never_mutate_input(blueprint_filter):
    bp = _bp((1, 1), (1, 1), (2, 2), (3, 3), (3, 3))
    before = bp.points
    blueprint_filter(bp)
    assert bp.points is before
    assert bp.points == (Point(1, 1), Point(1, 1), Point(2, 2), Point(3, 3), Point(3, 3))


@pytest.mark.parametrize("blueprint_filter", [redundancy_filter, undersampling_filter])
def test_filters_preserve_author_name_and_id(blueprint_filter):
    bp_id = BlueprintId(uuid4())
    bp = _bp((1, 1), (1, 1), (2, 2), (3, 3), bp_id=bp_id)
    result = blueprint_filter(bp)
    assert result is not bp
    assert (result.author, result.name, result.id) == ("ana", "house", bp_id)


# ─── resolve_filter ──────────────────────────────────────────────

def test_resolve_filter_accepts_names_and_enums():
    assert resolve_filter("redundancy") is redundancy_filter
    assert resolve_filter(FilterName.UNDERSAMPLING) is undersampling_filter
    assert resolve_filter("identity") is identity_filter


def test_resolve_filter_rejects_unknown_name():
    with pytest.raises(ValueError):
        resolve_filter("smoothing")
