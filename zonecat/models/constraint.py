"""
Locality constraint - Value Object pattern.
Immutable required/prohibited key=value predicate.
"""

from dataclasses import dataclass

from .contracts import Constraint


@dataclass(frozen=True)
class LocalityConstraint(Constraint):
    """
    Immutable locality constraint.

    Attributes:
        required: True for '+' (required), False for '-' (prohibited)
        key: Locality tier key (e.g., 'region'); empty for value-only constraints
        value: Locality tier value (e.g., 'us-east1')
    """
    required: bool
    key: str
    value: str

    @classmethod
    def require(cls, key: str, value: str) -> 'LocalityConstraint':
        """Create a required (+key=value) constraint"""
        return cls(required=True, key=key, value=value)

    @classmethod
    def prohibit(cls, key: str, value: str) -> 'LocalityConstraint':
        """Create a prohibited (-key=value) constraint"""
        return cls(required=False, key=key, value=value)

    def is_required(self) -> bool:
        return self.required

    def get_key(self) -> str:
        return self.key

    def get_value(self) -> str:
        return self.value
