"""
Output formatters - tree sink contract, tree printer and zone formatting.
"""

from .base_formatter import OutputFormatter, TreeNode
from .tree_printer import TreePrinter
from .zone_formatter import (
    ZoneFormatter,
    format_constraint,
    format_replica_constraint_set,
    format_zone,
)

__all__ = [
    'OutputFormatter',
    'TreeNode',
    'TreePrinter',
    'ZoneFormatter',
    'format_constraint',
    'format_replica_constraint_set',
    'format_zone',
]
