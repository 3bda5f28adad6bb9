"""
Base formatter contracts - tree sink and output formatter interfaces.
"""

from abc import ABC, abstractmethod

from ..models import Zone


class TreeNode(ABC):
    """
    A node of an output tree that accepts labeled children.

    Formatters only ever create children through this interface; they never
    inspect or serialize the nodes they get back.
    """

    @abstractmethod
    def childf(self, fmt: str, *args) -> 'TreeNode':
        """
        Create a new child under this node.

        Args:
            fmt: Label, or a %-style format string when args are given
            *args: Format arguments

        Returns:
            The newly created child node
        """
        pass


class OutputFormatter(ABC):
    """
    Abstract base class for zone output formatters.

    Design Pattern: Strategy Pattern
    Different formatters for different output styles (tree, JSON).
    """

    @abstractmethod
    def format(self, zone: Zone) -> str:
        """
        Format a zone for output.

        Args:
            zone: Zone configuration to format

        Returns:
            Formatted string for output
        """
        pass
