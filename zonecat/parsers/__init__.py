"""
Parser utilities for building zone configuration from text and mappings.
"""

from .constraint_parser import ConstraintParser
from .zone_parser import ZoneDocument, ZoneParser

__all__ = ['ConstraintParser', 'ZoneDocument', 'ZoneParser']
