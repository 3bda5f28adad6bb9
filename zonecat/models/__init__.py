"""
Data models and value objects.
Contracts for zone configuration plus an immutable in-memory catalog.
"""

from .contracts import Constraint, ReplicaConstraints, Zone
from .constraint import LocalityConstraint
from .zone_config import MAX_REPLICA_COUNT, ReplicaConstraintSet, ZoneConfig

__all__ = [
    'Constraint',
    'ReplicaConstraints',
    'Zone',
    'LocalityConstraint',
    'ReplicaConstraintSet',
    'ZoneConfig',
    'MAX_REPLICA_COUNT',
]
