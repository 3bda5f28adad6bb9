"""Shared fixtures for the zonecat test suite."""

import pytest

from zonecat.config import AppConfig, TreeConfig
from zonecat.models import LocalityConstraint, ReplicaConstraintSet, ZoneConfig


@pytest.fixture(autouse=True)
def default_settings(monkeypatch):
    """Pin rendering settings so a local .env cannot change expected output."""
    monkeypatch.setattr(AppConfig, "DEFAULT_OUTPUT_FORMAT", "tree")
    monkeypatch.setattr(TreeConfig, "STYLE", "indent")
    monkeypatch.setattr(TreeConfig, "INDENT", 2)


@pytest.fixture
def east_west_zone() -> ZoneConfig:
    """Two replicas in east, one replica kept out of west."""
    return ZoneConfig(constraint_sets=[
        ReplicaConstraintSet(2, [LocalityConstraint.require("region", "east")]),
        ReplicaConstraintSet(1, [LocalityConstraint.prohibit("region", "west")]),
    ])
