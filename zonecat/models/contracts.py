"""
Zone configuration contracts.

Read-only views over zone configuration held by a catalog. The formatter
only ever talks to these interfaces; concrete storage is supplied by the
catalog provider (see zone_config.py for the in-memory one).
"""

from abc import ABC, abstractmethod


class Constraint(ABC):
    """
    Governs placement of range replicas on nodes.

    A required constraint's key/value pair must match one of the tiers of a
    node's locality for the range to locate there. A prohibited constraint's
    pair must *not* match any tier. For example:

        +region=east     Range can only be placed on nodes in region=east.
        -region=west     Range cannot be placed on nodes in region=west.
    """

    @abstractmethod
    def is_required(self) -> bool:
        """True for a required (+) constraint, False for a prohibited (-) one"""
        pass

    @abstractmethod
    def get_key(self) -> str:
        """Return the key (left of '='), or an empty string for value-only constraints"""
        pass

    @abstractmethod
    def get_value(self) -> str:
        """Return the value (right of '=')"""
        pass


class ReplicaConstraints(ABC):
    """
    A set of constraints that apply to one or more replicas of a range.

    For example, if a range has three replicas, two of them might be pinned
    to nodes in one region whereas the third is pinned to another region.
    """

    @abstractmethod
    def replica_count(self) -> int:
        """
        Number of replicas that should abide by this set of constraints.

        Returns:
            0 if the constraints apply to all replicas of the range (in which
            case this is the only set in the zone), otherwise a positive count
        """
        pass

    @abstractmethod
    def constraint_count(self) -> int:
        """Return the number of constraints in the set"""
        pass

    @abstractmethod
    def constraint(self, i: int) -> Constraint:
        """
        Return the ith constraint in the set.

        Raises:
            IndexError: If i is outside [0, constraint_count())
        """
        pass


class Zone(ABC):
    """
    Zone configuration information.

    The optimizer prefers indexes whose constraints best match the locality
    of the gateway node planning the query.
    """

    @abstractmethod
    def replica_constraints_count(self) -> int:
        """Return the number of replica constraint sets in this zone"""
        pass

    @abstractmethod
    def replica_constraints(self, i: int) -> ReplicaConstraints:
        """
        Return the ith set of replica constraints in the zone.

        Raises:
            IndexError: If i is outside [0, replica_constraints_count())
        """
        pass
