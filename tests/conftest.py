from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

1. Path manipulation to ensure the 'src' directory is importable.
2. Shared tree fixtures used across unit tests.
"""

import os
import sys
from types import SimpleNamespace

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from fsancestor.domain.tree_models import Node  # noqa: E402


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def example_tree() -> SimpleNamespace:
    """
    Return the reference tree and handles to each of its nodes.

    Structure:
    root
      a
        c
        d
      b
    """
    root = Node("root")
    a = root.add_child(Node("a"))
    b = root.add_child(Node("b"))
    c = a.add_child(Node("c"))
    d = a.add_child(Node("d"))
    return SimpleNamespace(root=root, a=a, b=b, c=c, d=d)


@pytest.fixture
def deep_chain() -> SimpleNamespace:
    """Return a linear tree far deeper than the default recursion limit."""
    depth = sys.getrecursionlimit() * 3
    root = Node("n0")
    current = root
    for i in range(1, depth):
        current = current.add_child(Node(f"n{i}"))
    return SimpleNamespace(root=root, leaf=current, depth=depth)
