from __future__ import annotations

"""
Path Finder.

Locates a target node beneath a search root and reports the chain of
nodes connecting them. Traversal is depth-first in stored child order and
uses an explicit stack, so arbitrarily deep trees never exhaust the
interpreter call stack.
"""

import logging
from typing import Any, Iterator, List, Sequence, Tuple

from fsancestor.domain.resolution_models import PathLookup

logger = logging.getLogger(__name__)

_EXHAUSTED = object()

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def find_path(node: Any, target: Any) -> PathLookup:
    """
    Search the subtree rooted at ``node`` for ``target`` (by identity).

    The first occurrence in document order wins. On success the path runs
    leaf-first: ``[target, parent, ..., node]``.

    Args:
        node: Subtree root to search from.
        target: Entry to locate.

    Returns:
        PathLookup: ``(True, path)`` when found, ``(False, [])`` otherwise.
    """
    if node is target:
        return PathLookup(True, [node])

    stack: List[Tuple[Any, Iterator[Any]]] = [(node, iter(children_of(node)))]

    while stack:
        _, pending = stack[-1]
        child = next(pending, _EXHAUSTED)

        if child is _EXHAUSTED:
            stack.pop()
            continue

        if child is target:
            path = [child]
            path.extend(entry for entry, _ in reversed(stack))
            logger.debug(f"Target located at depth {len(path) - 1}.")
            return PathLookup(True, path)

        stack.append((child, iter(children_of(child))))

    return PathLookup(False, [])


def children_of(node: Any) -> Sequence[Any]:
    """Return the children of ``node``, or an empty sequence when absent."""
    children = getattr(node, "children", None)
    return children or ()
