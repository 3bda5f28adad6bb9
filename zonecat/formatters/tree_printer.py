"""
Tree printer - in-memory TreeNode implementation that renders as text.

Indent style (default):
ZONE
  replica constraints
    2 replicas: [+region=east]
    1 replicas: [-region=west]

Box style:
ZONE
└── replica constraints
    ├── 2 replicas: [+region=east]
    └── 1 replicas: [-region=west]
"""

from typing import List, Optional

from ..config import TreeConfig
from .base_formatter import TreeNode


class TreePrinter(TreeNode):
    """
    Collects labeled nodes and renders them with str().

    The root returned by new() has no label of its own; its children are
    printed as the top-level lines of the tree.
    """

    def __init__(self, label: Optional[str] = None, style: Optional[str] = None,
                 indent: Optional[int] = None):
        """
        Initialize a node.

        Args:
            label: Node label (None for the root)
            style: 'indent' or 'box' (defaults to TreeConfig.STYLE)
            indent: Spaces per level in indent style (defaults to TreeConfig.INDENT)
        """
        self.style = (style or TreeConfig.STYLE).lower()
        if self.style not in TreeConfig.STYLES:
            raise ValueError(f"Unknown tree style: {self.style}")
        self.indent = TreeConfig.INDENT if indent is None else indent
        if self.indent < 1:
            raise ValueError(f"Tree indent must be at least 1, got {self.indent}")

        self.label = label
        self.children: List['TreePrinter'] = []

    @classmethod
    def new(cls, style: Optional[str] = None, indent: Optional[int] = None) -> 'TreePrinter':
        """Create an unlabeled root node"""
        return cls(label=None, style=style, indent=indent)

    def childf(self, fmt: str, *args) -> 'TreePrinter':
        label = fmt % args if args else fmt
        child = TreePrinter(label=label, style=self.style, indent=self.indent)
        self.children.append(child)
        return child

    def lines(self) -> List[str]:
        """Render this node's subtree as a list of lines"""
        nodes = self.children if self.label is None else [self]
        lines: List[str] = []
        for node in nodes:
            lines.append(node.label)
            if self.style == "box":
                node._box_lines(lines, "")
            else:
                node._indent_lines(lines, 1)
        return lines

    def _indent_lines(self, lines: List[str], depth: int):
        pad = " " * (self.indent * depth)
        for child in self.children:
            lines.append(pad + child.label)
            child._indent_lines(lines, depth + 1)

    def _box_lines(self, lines: List[str], prefix: str):
        for i, child in enumerate(self.children):
            last = i == len(self.children) - 1
            lines.append(prefix + ("└── " if last else "├── ") + child.label)
            child._box_lines(lines, prefix + ("    " if last else "│   "))

    def __str__(self) -> str:
        return "\n".join(self.lines())
