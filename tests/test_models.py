"""Tests for the in-memory zone configuration catalog."""

import dataclasses

import pytest

from zonecat.models import (
    MAX_REPLICA_COUNT,
    Constraint,
    LocalityConstraint,
    ReplicaConstraints,
    ReplicaConstraintSet,
    Zone,
    ZoneConfig,
)


# -----------------------------------------------------------------------------
# LocalityConstraint
# -----------------------------------------------------------------------------


def test_constraint_accessors():
    c = LocalityConstraint(required=True, key="region", value="east")
    assert isinstance(c, Constraint)
    assert c.is_required() is True
    assert c.get_key() == "region"
    assert c.get_value() == "east"


def test_constraint_factories():
    assert LocalityConstraint.require("dc", "a").is_required()
    assert not LocalityConstraint.prohibit("dc", "a").is_required()


def test_constraint_empty_key_allowed():
    c = LocalityConstraint(required=False, key="", value="ssd")
    assert c.get_key() == ""
    assert c.get_value() == "ssd"


def test_constraint_empty_value_allowed():
    c = LocalityConstraint(required=True, key="region", value="")
    assert c.get_value() == ""


def test_constraint_is_immutable():
    c = LocalityConstraint.require("region", "east")
    with pytest.raises(dataclasses.FrozenInstanceError):
        c.value = "west"


# -----------------------------------------------------------------------------
# ReplicaConstraintSet
# -----------------------------------------------------------------------------


def test_replica_set_accessors():
    constraints = [
        LocalityConstraint.require("region", "east"),
        LocalityConstraint.prohibit("", "ssd"),
    ]
    rc = ReplicaConstraintSet(num_replicas=3, constraints=constraints)

    assert isinstance(rc, ReplicaConstraints)
    assert rc.replica_count() == 3
    assert rc.constraint_count() == 2
    assert rc.constraint(0) is constraints[0]
    assert rc.constraint(1) is constraints[1]


def test_replica_set_copies_input_into_tuple():
    constraints = [LocalityConstraint.require("region", "east")]
    rc = ReplicaConstraintSet(1, constraints)
    constraints.append(LocalityConstraint.require("region", "west"))

    assert isinstance(rc.constraints, tuple)
    assert rc.constraint_count() == 1


def test_replica_set_defaults_to_all_replicas():
    rc = ReplicaConstraintSet()
    assert rc.replica_count() == 0
    assert rc.constraint_count() == 0


@pytest.mark.parametrize("index", [-1, 1, 5])
def test_replica_set_index_out_of_range(index):
    rc = ReplicaConstraintSet(1, [LocalityConstraint.require("region", "east")])
    with pytest.raises(IndexError):
        rc.constraint(index)


@pytest.mark.parametrize("count", [-1, MAX_REPLICA_COUNT + 1])
def test_replica_count_outside_int32_range_rejected(count):
    with pytest.raises(ValueError, match="Replica count"):
        ReplicaConstraintSet(count)


def test_replica_count_must_be_int():
    with pytest.raises(ValueError):
        ReplicaConstraintSet(True)
    with pytest.raises(ValueError):
        ReplicaConstraintSet("2")


def test_replica_count_upper_bound_accepted():
    assert ReplicaConstraintSet(MAX_REPLICA_COUNT).replica_count() == MAX_REPLICA_COUNT


# -----------------------------------------------------------------------------
# ZoneConfig
# -----------------------------------------------------------------------------


def test_zone_accessors(east_west_zone):
    assert isinstance(east_west_zone, Zone)
    assert east_west_zone.replica_constraints_count() == 2
    assert east_west_zone.replica_constraints(0).replica_count() == 2
    assert east_west_zone.replica_constraints(1).replica_count() == 1


def test_empty_zone():
    zone = ZoneConfig.empty()
    assert zone.replica_constraints_count() == 0
    with pytest.raises(IndexError):
        zone.replica_constraints(0)


@pytest.mark.parametrize("index", [-1, 2])
def test_zone_index_out_of_range(east_west_zone, index):
    with pytest.raises(IndexError):
        east_west_zone.replica_constraints(index)


def test_zone_for_all_replicas():
    zone = ZoneConfig.for_all_replicas([LocalityConstraint.require("region", "east")])
    assert zone.replica_constraints_count() == 1
    assert zone.replica_constraints(0).replica_count() == 0


def test_all_replicas_set_must_be_alone():
    with pytest.raises(ValueError, match="only set"):
        ZoneConfig(constraint_sets=[
            ReplicaConstraintSet(0, [LocalityConstraint.require("region", "east")]),
            ReplicaConstraintSet(1, [LocalityConstraint.require("region", "west")]),
        ])


def test_single_counted_set_allowed():
    zone = ZoneConfig(constraint_sets=[ReplicaConstraintSet(3)])
    assert zone.replica_constraints(0).replica_count() == 3


def test_zones_with_same_content_are_equal():
    def build():
        return ZoneConfig.for_all_replicas([LocalityConstraint.require("region", "east")])

    assert build() == build()
    assert hash(build()) == hash(build())
