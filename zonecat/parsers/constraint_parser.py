"""
Constraint parser for the zone configuration constraint syntax.

Examples:
- +region=us-east1 → required, key 'region', value 'us-east1'
- -region=us-west1 → prohibited, key 'region', value 'us-west1'
- +ssd             → required, value-only constraint
- [+region=east,-ssd] → list of two constraints
"""

import logging
import re
from typing import Tuple

from ..models import LocalityConstraint

logger = logging.getLogger(__name__)


class ConstraintParser:
    """
    Parser for textual locality constraints.

    Every constraint carries a '+' (required) or '-' (prohibited) prefix,
    followed by either key=value or a bare value.
    """

    # Pattern: <+|-><key>=<value> or <+|-><value>
    CONSTRAINT_PATTERN = re.compile(r'^(?P<sign>[+-])(?:(?P<key>[^=]*)=)?(?P<value>.*)$')

    @classmethod
    def parse(cls, text: str) -> LocalityConstraint:
        """
        Parse a single constraint.

        Args:
            text: Constraint text such as '+region=east' or '-ssd'

        Returns:
            LocalityConstraint instance

        Raises:
            ValueError: If the text is not a well-formed constraint

        Examples:
            >>> ConstraintParser.parse('+region=east')
            LocalityConstraint(required=True, key='region', value='east')
            >>> ConstraintParser.parse('-ssd')
            LocalityConstraint(required=False, key='', value='ssd')
        """
        stripped = (text or "").strip()
        match = cls.CONSTRAINT_PATTERN.match(stripped)
        if not match:
            raise ValueError(f"Constraint must start with '+' or '-': {text!r}")

        key = match.group('key')
        value = match.group('value').strip()
        if key is not None:
            key = key.strip()
            if not key:
                raise ValueError(f"Constraint has an empty key before '=': {text!r}")
        if not value:
            raise ValueError(f"Constraint has an empty value: {text!r}")

        return LocalityConstraint(
            required=match.group('sign') == '+',
            key=key or "",
            value=value,
        )

    @classmethod
    def parse_list(cls, text: str) -> Tuple[LocalityConstraint, ...]:
        """
        Parse a comma-separated constraint list, optionally wrapped in brackets.

        Args:
            text: List text such as '[+region=east,-region=west]'

        Returns:
            Tuple of constraints in input order ('' and '[]' give an empty tuple)
        """
        body = (text or "").strip()
        if body.startswith('[') and body.endswith(']'):
            body = body[1:-1].strip()
        if not body:
            return ()

        constraints = tuple(cls.parse(part) for part in body.split(','))
        logger.debug(f"Parsed {len(constraints)} constraint(s) from {text!r}")
        return constraints
