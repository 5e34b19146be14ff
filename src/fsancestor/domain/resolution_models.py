from __future__ import annotations

"""
Ancestor Resolution Data Models.

Tagged result produced by the resolver before it is flattened into the
public sentinel-string channel.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, NamedTuple, Optional

from fsancestor.domain.tree_models import Node


class PathLookup(NamedTuple):
    """Outcome of a single path search. Unpacks as ``(found, path)``."""
    found: bool
    path: List[Node]


class ResolutionStatus(str, Enum):
    FOUND = "found"
    ROOT_FALLBACK = "root_fallback"
    STRUCTURAL_ERROR = "structural_error"
    NOT_FOUND = "not_found"
    INVALID_ANCESTOR = "invalid_ancestor"


@dataclass(frozen=True)
class AncestorResolution:
    """
    Result of a lowest-common-ancestor query.

    Attributes:
        status: Classification of the outcome.
        text: Public answer (ancestor name or sentinel string).
        ancestor: Node whose name was reported, if any.
    """
    status: ResolutionStatus
    text: Optional[str]
    ancestor: Optional[Node] = None

    @property
    def ok(self) -> bool:
        return self.status in (ResolutionStatus.FOUND, ResolutionStatus.ROOT_FALLBACK)

    def to_dict(self) -> Dict[str, Any]:
        return {"status": self.status.value, "result": self.text, "ok": self.ok}
