from __future__ import annotations

"""
Unit tests for the Tree Builder.

Verifies the example tree, manifest parsing, directory scanning with
exclusions, path resolution and source dispatch.
"""

import json
import sys
from unittest.mock import patch

import pytest

from fsancestor.core.analysis.tree_builder import (
    ManifestError,
    TreeSourceError,
    build_example_tree,
    build_tree_from_manifest,
    load_tree,
    locate_node,
    scan_directory,
)


@pytest.fixture
def project_structure(tmp_path):
    """
    Structure:
    /project
      /src
        main.py
        utils.py
      /node_modules
        lib.js
      README.md
      cache.pyc
    """
    root = tmp_path / "project"
    root.mkdir()

    src = root / "src"
    src.mkdir()
    (src / "main.py").write_text("", encoding="utf-8")
    (src / "utils.py").write_text("", encoding="utf-8")

    nm = root / "node_modules"
    nm.mkdir()
    (nm / "lib.js").write_text("", encoding="utf-8")

    (root / "README.md").write_text("", encoding="utf-8")
    (root / "cache.pyc").write_bytes(b"")

    return root


# -----------------------------------------------------------------------------
# Example tree
# -----------------------------------------------------------------------------

def test_example_tree_shape():
    root = build_example_tree()

    assert root.name == "root"
    assert [c.name for c in root.children] == ["a", "b"]
    assert [c.name for c in root.children[0].children] == ["c", "d"]
    assert root.children[1].is_leaf


# -----------------------------------------------------------------------------
# Manifest parsing
# -----------------------------------------------------------------------------

def test_manifest_builds_nested_nodes():
    data = {"name": "root", "children": [{"name": "a", "children": [{"name": "c"}]}, {"name": "b"}]}

    root = build_tree_from_manifest(data)

    assert root.name == "root"
    assert root.children[0].children[0].name == "c"
    assert root.children[1].children == []


def test_manifest_null_children_is_leaf():
    assert build_tree_from_manifest({"name": "x", "children": None}).is_leaf


@pytest.mark.parametrize(
    "data, fragment",
    [
        (["root"], "$: expected object"),
        ({"children": []}, "$: 'name'"),
        ({"name": ""}, "$: 'name'"),
        ({"name": "r", "children": {"name": "a"}}, "$.children: expected list"),
        ({"name": "r", "children": [{"name": "a"}, {"name": 3}]}, "$.children[1]: 'name'"),
    ],
)
def test_manifest_errors_report_location(data, fragment):
    with pytest.raises(ManifestError) as exc:
        build_tree_from_manifest(data)
    assert fragment in str(exc.value)


# -----------------------------------------------------------------------------
# Directory scanning
# -----------------------------------------------------------------------------

def test_scan_directory_mirrors_disk(project_structure):
    root = scan_directory(str(project_structure))

    assert root.name == "project"
    assert [c.name for c in root.children] == ["README.md", "cache.pyc", "node_modules", "src"]
    src = root.children[3]
    assert [c.name for c in src.children] == ["main.py", "utils.py"]
    assert src.children[0].path.endswith("main.py")


def test_scan_directory_applies_exclusions(project_structure):
    root = scan_directory(str(project_structure), [r"^node_modules$", r".*\.pyc$"])

    assert [c.name for c in root.children] == ["README.md", "src"]


def test_scan_directory_ignores_invalid_patterns(project_structure):
    root = scan_directory(str(project_structure), ["(unclosed", r"^src$"])

    assert "src" not in [c.name for c in root.children]


def test_scan_directory_rejects_files(project_structure):
    with pytest.raises(NotADirectoryError):
        scan_directory(str(project_structure / "README.md"))


# -----------------------------------------------------------------------------
# Path resolution
# -----------------------------------------------------------------------------

@pytest.mark.parametrize("node_path, expected", [("a/c", "c"), ("/a/d/", "d"), ("b", "b"), ("", "root"), (".", "root")])
def test_locate_node(node_path, expected):
    assert locate_node(build_example_tree(), node_path).name == expected


@pytest.mark.parametrize("node_path", ["x", "a/x", "b/c"])
def test_locate_node_missing(node_path):
    assert locate_node(build_example_tree(), node_path) is None


# -----------------------------------------------------------------------------
# Source dispatch
# -----------------------------------------------------------------------------

def test_load_tree_from_directory(project_structure):
    assert load_tree(str(project_structure)).name == "project"


def test_load_tree_from_manifest_file(tmp_path):
    manifest = tmp_path / "tree.json"
    manifest.write_text(json.dumps({"name": "root", "children": [{"name": "a"}]}), encoding="utf-8")

    root = load_tree(str(manifest))

    assert [c.name for c in root.children] == ["a"]


def test_load_tree_invalid_manifest_file(tmp_path):
    manifest = tmp_path / "tree.json"
    manifest.write_text("{not json", encoding="utf-8")

    with pytest.raises(TreeSourceError):
        load_tree(str(manifest))


def test_load_tree_manifest_schema_error(tmp_path):
    manifest = tmp_path / "tree.json"
    manifest.write_text(json.dumps({"children": []}), encoding="utf-8")

    with pytest.raises(TreeSourceError, match="Invalid manifest"):
        load_tree(str(manifest))


def test_load_tree_from_url():
    data = {"name": "remote", "children": [{"name": "x"}]}
    with patch("fsancestor.core.analysis.tree_builder.fetch_tree_manifest", return_value=data) as mock_fetch:
        root = load_tree("https://example.com/tree.json")

    mock_fetch.assert_called_once_with("https://example.com/tree.json")
    assert root.name == "remote"


def test_load_tree_url_failure():
    with patch("fsancestor.core.analysis.tree_builder.fetch_tree_manifest", return_value=None):
        with pytest.raises(TreeSourceError, match="Unable to fetch"):
            load_tree("http://example.com/missing.json")


def test_load_tree_missing_path(tmp_path):
    with pytest.raises(TreeSourceError):
        load_tree(str(tmp_path / "nowhere"))


def test_manifest_deeper_than_recursion_limit():
    depth = sys.getrecursionlimit() * 3
    data = {"name": f"n{depth - 1}"}
    for i in range(depth - 2, -1, -1):
        data = {"name": f"n{i}", "children": [data]}

    root = build_tree_from_manifest(data)

    node, levels = root, 1
    while node.children:
        node = node.children[0]
        levels += 1
    assert levels == depth
    assert node.name == f"n{depth - 1}"


def test_manifest_preserves_document_order():
    data = {
        "name": "root",
        "children": [
            {"name": "a", "children": [{"name": "a1"}, {"name": "a2"}]},
            {"name": "b"},
        ],
    }

    root = build_tree_from_manifest(data)

    assert [c.name for c in root.children] == ["a", "b"]
    assert [c.name for c in root.children[0].children] == ["a1", "a2"]


def test_manifest_reports_first_error_in_document_order():
    data = {"name": "r", "children": [{"name": "a", "children": [{"name": ""}]}, {"name": 1}]}

    with pytest.raises(ManifestError, match=r"\$\.children\[0\]\.children\[0\]"):
        build_tree_from_manifest(data)
