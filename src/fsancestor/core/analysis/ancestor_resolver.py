from __future__ import annotations

"""
Ancestor Resolver.

Computes the lowest common ancestor of two entries by aligning their
root-to-entry paths. Failures never raise: they are reported through the
two public sentinel strings so existing callers can keep comparing text.
"""

import logging
from typing import Any, List, Optional

from fsancestor.core.analysis.path_finder import find_path
from fsancestor.domain.constants import PARENT_NOT_FOUND, ROOT_NOT_FOUND
from fsancestor.domain.resolution_models import AncestorResolution, ResolutionStatus

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def find_parent(root: Any, first_target: Any, second_target: Any, *, strict: bool = False) -> Optional[str]:
    """
    Return the name of the lowest common ancestor of two entries.

    Args:
        root: Tree root; must expose a ``children`` collection.
        first_target: First entry to locate.
        second_target: Second entry to locate.
        strict: When one target contains the other, report
            ``"Parent not found"`` instead of the root name.

    Returns:
        Optional[str]: Ancestor name (None for an unnamed node), ``"Root not found"``
            or ``"Parent not found"``.
    """
    return resolve_common_ancestor(root, first_target, second_target, strict=strict).text


def resolve_common_ancestor(
        root: Any,
        first_target: Any,
        second_target: Any,
        *,
        strict: bool = False,
) -> AncestorResolution:
    """
    Resolve the lowest common ancestor into a tagged result.

    Args:
        root: Tree root; must expose a ``children`` collection.
        first_target: First entry to locate.
        second_target: Second entry to locate.
        strict: Reject ancestors that coincide with a target even below root.

    Returns:
        AncestorResolution: Status, public text and the reported node.
    """
    # 1. Structural check (an empty children list is still traversable)
    if root is None or getattr(root, "children", None) is None:
        logger.debug("Root has no traversable children collection.")
        return AncestorResolution(ResolutionStatus.STRUCTURAL_ERROR, ROOT_NOT_FOUND)

    # 2. Independent path searches
    first_found, path_to_first = find_path(root, first_target)
    second_found, path_to_second = find_path(root, second_target)
    if not (first_found and second_found):
        logger.debug("At least one target is absent from the tree.")
        return AncestorResolution(ResolutionStatus.NOT_FOUND, PARENT_NOT_FOUND)

    # 3. Align root-first and keep the deepest shared entry
    path_to_first.reverse()
    path_to_second.reverse()
    candidate = _deepest_shared(path_to_first, path_to_second)

    if candidate is None:
        return AncestorResolution(ResolutionStatus.NOT_FOUND, PARENT_NOT_FOUND)

    # 4. An ancestor must not be one of the targets
    if candidate is first_target or candidate is second_target:
        if candidate is root:
            return AncestorResolution(ResolutionStatus.INVALID_ANCESTOR, ROOT_NOT_FOUND, candidate)
        if strict:
            return AncestorResolution(ResolutionStatus.INVALID_ANCESTOR, PARENT_NOT_FOUND, candidate)
        logger.warning(
            f"'{_name_of(candidate)}' contains the other target; reporting root '{_name_of(root)}' instead."
        )
        return AncestorResolution(ResolutionStatus.ROOT_FALLBACK, _name_of(root), root)

    return AncestorResolution(ResolutionStatus.FOUND, _name_of(candidate), candidate)

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _deepest_shared(first: List[Any], second: List[Any]) -> Optional[Any]:
    """Walk both root-first paths in lock-step until they diverge."""
    shared = None
    for left, right in zip(first, second):
        if left is not right:
            break
        shared = left
    return shared


def _name_of(node: Any) -> Optional[str]:
    """Read a node name without assuming the attribute exists."""
    return getattr(node, "name", None)
