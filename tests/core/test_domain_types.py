"""Domain Types — verifies Point/Blueprint value semantics and enum values.

Tests:
    - Point equality is structural and Points are immutable
    - Blueprint identity is (author, name), ignoring points and id
    - author and name cannot be reassigned once set
    - add_point / replace_points swap the tuple, never share a list
    - Enums carry the configuration/scope strings
"""

import dataclasses
from uuid import uuid4

import pytest

from blueprints.core.domain_types import (
    Blueprint, BlueprintId, FilterName, PersistenceBackend, Point, Scope,
)


def test_points_compare_by_coordinates():
    assert Point(1, 2) == Point(1, 2)
    assert Point(1, 2) != Point(2, 1)
    assert len({Point(1, 2), Point(1, 2), Point(3, 4)}) == 2


def test_point_is_immutable():
    p = Point(1, 2)
    with pytest.raises(dataclasses.FrozenInstanceError):
        p.x = 5


def test_blueprint_equality_uses_author_and_name_only():
    a = Blueprint("ana", "house", (Point(1, 1),), BlueprintId(uuid4()))
    b = Blueprint("ana", "house", (Point(9, 9), Point(8, 8)))
    assert a == b
    assert hash(a) == hash(b)
    assert a != Blueprint("ana", "garden", a.points)
    assert a != Blueprint("luis", "house", a.points)


def test_blueprint_set_collapses_same_domain_key():
    blueprints = {
        Blueprint("ana", "house", (Point(1, 1),)),
        Blueprint("ana", "house", (Point(2, 2),)),
        Blueprint("ana", "garden"),
    }
    assert len(blueprints) == 2


@pytest.mark.parametrize("field_name", ["author", "name"])
def test_blueprint_key_fields_cannot_be_reassigned(field_name):
    bp = Blueprint("ana", "house")
    members = {bp}

    with pytest.raises(dataclasses.FrozenInstanceError):
        setattr(bp, field_name, "changed")

    assert bp.key == ("ana", "house")
    assert Blueprint("ana", "house") in members


def test_blueprint_points_and_id_stay_assignable():
    bp = Blueprint("ana", "house")
    bp_id = BlueprintId(uuid4())
    bp.id = bp_id
    bp.points = (Point(1, 1),)
    assert (bp.id, bp.points) == (bp_id, (Point(1, 1),))


def test_blueprint_has_no_id_until_stored():
    assert Blueprint("ana", "house").id is None


def test_points_given_as_list_are_stored_as_tuple():
    source = [Point(1, 1), Point(2, 2)]
    bp = Blueprint("ana", "house", source)
    source.append(Point(3, 3))
    assert bp.points == (Point(1, 1), Point(2, 2))


def test_add_point_appends_at_end():
    bp = Blueprint("ana", "house", (Point(1, 1),))
    before = bp.points
    bp.add_point(Point(2, 2))
    assert bp.points == (Point(1, 1), Point(2, 2))
    assert before == (Point(1, 1),)


def test_replace_points_swaps_whole_sequence():
    bp = Blueprint("ana", "house", (Point(1, 1), Point(2, 2)))
    bp.replace_points([Point(7, 7)])
    assert bp.points == (Point(7, 7),)


def test_with_points_keeps_identity_fields():
    bp_id = BlueprintId(uuid4())
    bp = Blueprint("ana", "house", (Point(1, 1),), bp_id)
    other = bp.with_points([Point(5, 5)])
    assert other is not bp
    assert (other.author, other.name, other.id) == ("ana", "house", bp_id)
    assert bp.points == (Point(1, 1),)


def test_key_is_author_name_pair():
    assert Blueprint("ana", "house").key == ("ana", "house")


def test_enums_serialize_to_config_strings():
    assert {f.value for f in FilterName} == {"identity", "redundancy", "undersampling"}
    assert PersistenceBackend("memory") is PersistenceBackend.MEMORY
    assert Scope.READ.value == "blueprints.read"
    assert Scope.WRITE.value == "blueprints.write"
