"""
Zone configuration model.

In-memory catalog implementation of the Zone and ReplicaConstraints
contracts. Instances are frozen and hold tuples, so they can be shared
between readers freely.
"""

from dataclasses import dataclass
from typing import Iterable, Sequence, Tuple

from .constraint import LocalityConstraint
from .contracts import Constraint, ReplicaConstraints, Zone

# Replica counts are signed 32-bit integers
MAX_REPLICA_COUNT = 2 ** 31 - 1


def _check_index(i: int, count: int, what: str) -> None:
    """Fail fast on an out-of-range accessor index (no negative wraparound)"""
    if not 0 <= i < count:
        raise IndexError(f"{what} index {i} out of range [0, {count})")


@dataclass(frozen=True)
class ReplicaConstraintSet(ReplicaConstraints):
    """
    Constraints scoped to a number of replicas.

    Attributes:
        num_replicas: Replicas governed by this set; 0 means all replicas
        constraints: Ordered constraints (stored as a tuple)
    """
    num_replicas: int = 0
    constraints: Sequence[Constraint] = ()

    def __post_init__(self):
        """Validate invariants"""
        if isinstance(self.num_replicas, bool) or not isinstance(self.num_replicas, int):
            raise ValueError(f"Replica count must be an integer, got {self.num_replicas!r}")
        if not 0 <= self.num_replicas <= MAX_REPLICA_COUNT:
            raise ValueError(
                f"Replica count must be between 0 and {MAX_REPLICA_COUNT}, got {self.num_replicas}"
            )
        # Frozen dataclass: bypass __setattr__ to normalize into a tuple
        object.__setattr__(self, 'constraints', tuple(self.constraints))

    @classmethod
    def for_all_replicas(cls, constraints: Iterable[Constraint]) -> 'ReplicaConstraintSet':
        """Create a set that applies to every replica of the range"""
        return cls(num_replicas=0, constraints=tuple(constraints))

    def replica_count(self) -> int:
        return self.num_replicas

    def constraint_count(self) -> int:
        return len(self.constraints)

    def constraint(self, i: int) -> Constraint:
        _check_index(i, len(self.constraints), "Constraint")
        return self.constraints[i]


@dataclass(frozen=True)
class ZoneConfig(Zone):
    """
    Replica placement configuration for a table or range.

    Attributes:
        constraint_sets: Ordered replica constraint sets (stored as a tuple).
        A zone is either uniformly constrained (one set with num_replicas=0)
        or partitioned into replica-count-scoped sets, never both.
    """
    constraint_sets: Sequence[ReplicaConstraints] = ()

    def __post_init__(self):
        """Validate invariants"""
        sets: Tuple[ReplicaConstraints, ...] = tuple(self.constraint_sets)
        if len(sets) > 1 and any(s.replica_count() == 0 for s in sets):
            raise ValueError(
                "A replica constraint set that applies to all replicas "
                "must be the only set in the zone"
            )
        object.__setattr__(self, 'constraint_sets', sets)

    @classmethod
    def empty(cls) -> 'ZoneConfig':
        """Create a zone with no replica constraints"""
        return cls(constraint_sets=())

    @classmethod
    def for_all_replicas(cls, constraints: Iterable[Constraint]) -> 'ZoneConfig':
        """Create a zone whose constraints apply uniformly to all replicas"""
        return cls(constraint_sets=(ReplicaConstraintSet.for_all_replicas(constraints),))

    def replica_constraints_count(self) -> int:
        return len(self.constraint_sets)

    def replica_constraints(self, i: int) -> ReplicaConstraints:
        _check_index(i, len(self.constraint_sets), "Replica constraints")
        return self.constraint_sets[i]


__all__ = [
    'MAX_REPLICA_COUNT',
    'ReplicaConstraintSet',
    'ZoneConfig',
]
