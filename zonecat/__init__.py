"""
Zone Constraint Catalog Package

Read-only contracts for zone configuration (zones, replica constraint sets
and locality constraints) plus formatters that render a zone as a tree for
debugging and test output.

Architecture:
- Abstract contracts for catalog-provided zone data
- Value Object Pattern for the immutable in-memory catalog
- Strategy Pattern for output formatters
"""

from .models import (
    Constraint,
    ReplicaConstraints,
    Zone,
    LocalityConstraint,
    ReplicaConstraintSet,
    ZoneConfig,
)
from .parsers import ConstraintParser, ZoneParser
from .formatters import (
    TreeNode,
    TreePrinter,
    ZoneFormatter,
    format_replica_constraint_set,
    format_zone,
)

__version__ = "1.0.0"

__all__ = [
    # Contracts
    "Constraint",
    "ReplicaConstraints",
    "Zone",
    # Models
    "LocalityConstraint",
    "ReplicaConstraintSet",
    "ZoneConfig",
    # Parsers
    "ConstraintParser",
    "ZoneParser",
    # Formatters
    "TreeNode",
    "TreePrinter",
    "ZoneFormatter",
    "format_replica_constraint_set",
    "format_zone",
]
