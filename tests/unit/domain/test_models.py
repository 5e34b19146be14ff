from __future__ import annotations

"""
Unit tests for domain models: Node identity semantics and the tagged
resolution result.
"""

from fsancestor.domain.constants import PARENT_NOT_FOUND
from fsancestor.domain.resolution_models import AncestorResolution, PathLookup, ResolutionStatus
from fsancestor.domain.tree_models import Node


def test_nodes_with_equal_names_are_distinct():
    assert Node("a") != Node("a")
    assert len({Node("a"), Node("a")}) == 2


def test_add_child_returns_child_and_keeps_order():
    root = Node("root")
    first = root.add_child(Node("1"))
    second = root.add_child(Node("2"))

    assert root.children == [first, second]
    assert not root.is_leaf
    assert first.is_leaf


def test_children_are_not_shared_between_instances():
    Node("x").add_child(Node("y"))
    assert Node("z").children == []


def test_path_lookup_unpacks_as_tuple():
    node = Node("n")
    found, path = PathLookup(True, [node])

    assert found is True
    assert path == [node]


def test_resolution_serialization():
    ok = AncestorResolution(ResolutionStatus.FOUND, "a", Node("a"))
    failed = AncestorResolution(ResolutionStatus.NOT_FOUND, PARENT_NOT_FOUND)

    assert ok.to_dict() == {"status": "found", "result": "a", "ok": True}
    assert failed.to_dict() == {"status": "not_found", "result": PARENT_NOT_FOUND, "ok": False}
