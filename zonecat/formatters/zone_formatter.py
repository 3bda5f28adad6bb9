"""
Zone formatter - renders zone replica constraints for debugging and tests.

Output format (more than one constraint set):
ZONE
  replica constraints
    2 replicas: [+region=east]
    1 replicas: [-region=west]

A single set collapses the intermediate node:
ZONE
  constraints: [+region=east,-ssd]
"""

import json
import logging
from typing import Optional

from ..config import AppConfig
from ..models import Constraint, ReplicaConstraints, Zone
from .base_formatter import OutputFormatter, TreeNode
from .tree_printer import TreePrinter

logger = logging.getLogger(__name__)


def format_zone(zone: Zone, tp: TreeNode) -> TreeNode:
    """
    Add a ZONE subtree describing the zone's replica constraints under tp.

    With a single constraint set its replica count is not shown, whatever
    its value.

    Args:
        zone: Zone to format
        tp: Tree node to attach the ZONE node to

    Returns:
        The ZONE node
    """
    count = zone.replica_constraints_count()
    logger.debug(f"Formatting zone with {count} replica constraint set(s)")

    # Read the whole zone before touching tp, so a failing accessor leaves it unchanged
    labels = []
    for i in range(count):
        replica_constraints = zone.replica_constraints(i)
        constraint_str = format_replica_constraint_set(replica_constraints)
        if count > 1:
            labels.append("%d replicas: %s" % (replica_constraints.replica_count(), constraint_str))
        else:
            labels.append("constraints: %s" % constraint_str)

    root = tp.childf("ZONE")
    parent = root
    if count > 1:
        parent = root.childf("replica constraints")
    for label in labels:
        parent.childf("%s", label)

    return root


def format_replica_constraint_set(replica_constraints: ReplicaConstraints) -> str:
    """
    Format a constraint set as '[+key=value,-value,...]' in input order.

    Args:
        replica_constraints: Constraint set to format

    Returns:
        Bracketed, comma-separated constraint list ('[]' when empty)
    """
    parts = [
        format_constraint(replica_constraints.constraint(i))
        for i in range(replica_constraints.constraint_count())
    ]
    return "[" + ",".join(parts) + "]"


def format_constraint(constraint: Constraint) -> str:
    """Format one constraint as '+key=value', or '+value' when the key is empty"""
    sign = "+" if constraint.is_required() else "-"
    if constraint.get_key() != "":
        return f"{sign}{constraint.get_key()}={constraint.get_value()}"
    return sign + constraint.get_value()


class ZoneFormatter(OutputFormatter):
    """
    Formatter that renders a zone as a text tree or as JSON.

    Design Pattern: Strategy Pattern implementation
    """

    def __init__(self, output_format: Optional[str] = None, style: Optional[str] = None,
                 indent: Optional[int] = None):
        """
        Initialize formatter.

        Args:
            output_format: Output format type ('tree', 'json')
            style: Tree style passed to TreePrinter ('indent', 'box')
            indent: Spaces per level for the indent style
        """
        self.output_format = (output_format or AppConfig.DEFAULT_OUTPUT_FORMAT).lower()
        if self.output_format not in AppConfig.OUTPUT_FORMATS:
            raise ValueError(f"Unknown output format: {self.output_format}")
        self.style = style
        self.indent = indent

    def format(self, zone: Zone) -> str:
        """
        Format a zone.

        Args:
            zone: Zone configuration

        Returns:
            Formatted output string
        """
        if self.output_format == "json":
            return self._format_json(zone)
        return self._format_tree(zone)

    def _format_tree(self, zone: Zone) -> str:
        """Format as a text tree"""
        tp = TreePrinter.new(style=self.style, indent=self.indent)
        format_zone(zone, tp)
        return str(tp)

    def _format_json(self, zone: Zone) -> str:
        """Format as JSON, one entry per constraint set in input order"""
        output = {"replica_constraints": []}

        for i in range(zone.replica_constraints_count()):
            replica_constraints = zone.replica_constraints(i)
            output["replica_constraints"].append({
                "replicas": replica_constraints.replica_count(),
                "constraints": [
                    format_constraint(replica_constraints.constraint(j))
                    for j in range(replica_constraints.constraint_count())
                ],
            })

        return json.dumps(output, indent=2)
