"""
Zone parser for building catalog zones from mappings and CLI specs.

Accepted mapping shapes (the 'constraints' field of a zone configuration):

    {"constraints": ["+region=east", "-ssd"]}          one set, all replicas
    {"constraints": "[+region=east,-ssd]"}             same, as a list string
    {"constraints": {"+region=east": 2, "-region=west": 1}}
                                                        one set per entry
"""

import logging
import re
from typing import Any, Dict, List, Mapping, Sequence, Union

from pydantic import BaseModel

from ..models import ReplicaConstraintSet, ZoneConfig
from .constraint_parser import ConstraintParser

logger = logging.getLogger(__name__)


class ZoneDocument(BaseModel):
    """Raw zone configuration mapping"""
    constraints: Union[Dict[str, int], List[str], str] = []


class ZoneParser:
    """
    Parser for zone configuration documents.

    The mapping form keeps insertion order, so sets appear in the rendered
    output in the order they were written.
    """

    # Pattern: <count>:<constraint list>
    SPEC_PATTERN = re.compile(r'^\s*(?P<count>-?\d+)\s*:(?P<constraints>.*)$', re.DOTALL)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ZoneConfig:
        """
        Build a zone from a zone configuration mapping.

        Args:
            data: Mapping with an optional 'constraints' field

        Returns:
            ZoneConfig instance

        Raises:
            ValueError: If the mapping or any constraint is malformed
                (pydantic.ValidationError is a ValueError subclass)
        """
        document = ZoneDocument.model_validate(data)
        constraints = document.constraints

        if isinstance(constraints, dict):
            sets = [
                ReplicaConstraintSet(
                    num_replicas=count,
                    constraints=ConstraintParser.parse_list(text),
                )
                for text, count in constraints.items()
            ]
            zone = ZoneConfig(constraint_sets=sets)
        elif isinstance(constraints, str):
            zone = cls._single_set(ConstraintParser.parse_list(constraints))
        else:
            zone = cls._single_set(tuple(ConstraintParser.parse(c) for c in constraints))

        logger.debug(f"Parsed zone with {zone.replica_constraints_count()} constraint set(s)")
        return zone

    @classmethod
    def from_specs(cls, specs: Sequence[str]) -> ZoneConfig:
        """
        Build a zone from CLI-style specs.

        Args:
            specs: Items of the form '<count>:<constraint list>' or just
                '<constraint list>' (applies to all replicas)

        Returns:
            ZoneConfig instance

        Examples:
            >>> ZoneParser.from_specs(['2:+region=east', '1:-region=west']).replica_constraints_count()
            2
        """
        sets = []
        for spec in specs:
            match = cls.SPEC_PATTERN.match(spec)
            if match:
                count, list_text = int(match.group('count')), match.group('constraints')
            else:
                count, list_text = 0, spec
            sets.append(ReplicaConstraintSet(
                num_replicas=count,
                constraints=ConstraintParser.parse_list(list_text),
            ))

        return ZoneConfig(constraint_sets=sets)

    @staticmethod
    def _single_set(constraints) -> ZoneConfig:
        """Empty constraint lists give an empty zone"""
        if not constraints:
            return ZoneConfig.empty()
        return ZoneConfig.for_all_replicas(constraints)
