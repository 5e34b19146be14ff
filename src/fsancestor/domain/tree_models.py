from __future__ import annotations

"""
Tree Structure Data Models.

Provides the named node used to describe filesystem-like hierarchies.
Nodes compare by identity: two entries sharing a name are still
distinct members of the tree.
"""

from dataclasses import dataclass, field
from typing import List

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass(eq=False)
class Node:
    """
    Represents a directory or file entry in a named tree.

    Attributes:
        name: Display name of the entry (not unique across the tree).
        children: Ordered child entries owned by this node.
        path: Optional filesystem origin when the tree was scanned from disk.
    """
    name: str
    children: List["Node"] = field(default_factory=list)
    path: str = ""

    def add_child(self, child: "Node") -> "Node":
        """Append a child entry and return it."""
        self.children.append(child)
        return child

    @property
    def is_leaf(self) -> bool:
        return not self.children
