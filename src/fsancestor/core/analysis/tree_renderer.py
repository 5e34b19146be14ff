from __future__ import annotations

"""
Tree Renderer.

Converts Node hierarchies into ASCII listings, optionally marking the
entries involved in a lookup.
"""

from typing import Iterable, List, Tuple

from fsancestor.domain.tree_models import Node

HIGHLIGHT_MARKER = " <-"

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_tree(root: Node, highlight: Iterable[Node] = ()) -> List[str]:
    """Render ``root`` and its descendants, root name first."""
    marked = {id(n) for n in highlight}
    lines = [_label(root, marked)]
    render_tree_structure(root, lines, prefix="", highlight=marked)
    return lines


def render_tree_structure(
        node: Node,
        lines: List[str],
        prefix: str = "",
        highlight: Iterable[int] = (),
) -> None:
    """
    Append the descendants of ``node`` to ``lines`` in depth-first order.

    Uses standard ASCII connectors (├──, └──) in stored child order. The
    walk keeps its own stack, so tree depth is not bounded by the
    interpreter recursion limit.

    Args:
        node: Node whose children are rendered.
        lines: Accumulator list for output strings.
        prefix: Indentation prefix for the first level.
        highlight: ``id()`` values of nodes to mark.
    """
    marked = highlight if isinstance(highlight, set) else set(highlight)
    stack: List[Tuple[Node, str, bool]] = _pending(node, prefix)

    while stack:
        child, child_prefix, is_last = stack.pop()
        connector = "└── " if is_last else "├── "
        lines.append(f"{child_prefix}{connector}{_label(child, marked)}")

        if child.children:
            stack.extend(_pending(child, child_prefix + ("    " if is_last else "│   ")))


def _pending(node: Node, prefix: str) -> List[Tuple[Node, str, bool]]:
    """Children of ``node`` in reverse, ready to be popped in stored order."""
    total = len(node.children)
    return [(child, prefix, i == total - 1) for i, child in reversed(list(enumerate(node.children)))]


def _label(node: Node, marked: set) -> str:
    return node.name + (HIGHLIGHT_MARKER if id(node) in marked else "")
