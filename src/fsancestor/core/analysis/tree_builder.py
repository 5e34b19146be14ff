from __future__ import annotations

"""
Tree Builder.

Constructs Node hierarchies from the supported sources: the built-in
example tree, JSON manifests (local or remote) and real directories.
Also resolves slash-separated paths to nodes so that callers can name
lookup targets from the command line.
"""

import json
import logging
import os
import re
from typing import Any, List, Optional, Tuple

from fsancestor.domain.constants import MANIFEST_EXTENSION, PATH_SEPARATOR, REMOTE_SCHEMES
from fsancestor.domain.tree_models import Node
from fsancestor.infra.network import fetch_tree_manifest

logger = logging.getLogger(__name__)


class ManifestError(ValueError):
    """Raised when a tree manifest does not describe a valid tree."""


class TreeSourceError(RuntimeError):
    """Raised when a tree source cannot be loaded."""

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def build_example_tree() -> Node:
    """
    Build the reference demonstration tree.

    Structure:
    root
      a
        c
        d
      b
    """
    root = Node("root")
    a, b, c, d = (Node(char) for char in "abcd")

    root.add_child(a)
    root.add_child(b)
    a.add_child(c)
    a.add_child(d)
    return root


def build_tree_from_manifest(data: Any, location: str = "$") -> Node:
    """
    Convert a JSON-like manifest into a Node hierarchy.

    A manifest entry is ``{"name": str, "children": [entry, ...]}``;
    ``children`` may be omitted for leaves. Entries are validated in
    document order using an explicit stack, so deeply nested manifests
    are accepted.

    Args:
        data: Parsed manifest.
        location: Position of ``data`` inside the document, for error messages.

    Returns:
        Node: Root of the constructed tree.

    Raises:
        ManifestError: If an entry is malformed.
    """
    root, raw_children = _manifest_entry(data, location)
    stack: List[Tuple[Node, Any, str]] = _pending_entries(root, raw_children, location)

    while stack:
        parent, entry, entry_location = stack.pop()
        node, raw_children = _manifest_entry(entry, entry_location)
        parent.add_child(node)
        stack.extend(_pending_entries(node, raw_children, entry_location))

    return root


def scan_directory(input_path: str, exclude_patterns: Optional[List[str]] = None) -> Node:
    """
    Mirror a directory on disk as a Node hierarchy.

    Entries are sorted by name. Names matching any exclusion regex are
    skipped; excluded directories are not descended into.

    Args:
        input_path: Directory to scan.
        exclude_patterns: Regular expressions matched against entry names.

    Returns:
        Node: Root node named after the scanned directory.

    Raises:
        NotADirectoryError: If ``input_path`` is not a directory.
    """
    base = os.path.abspath(input_path)
    if not os.path.isdir(base):
        raise NotADirectoryError(f"Not a directory: {input_path}")

    exclude_rx = _compile_patterns(exclude_patterns or [])
    root = Node(os.path.basename(base) or base, path=base)
    nodes = {base: root}

    logger.info(f"Scanning directory tree: {base}")

    # In-place modification of dirs prunes excluded branches during the walk
    for current, dirs, files in os.walk(base):
        dirs[:] = sorted(d for d in dirs if not _matches_any(d, exclude_rx))
        parent = nodes[current]

        for entry in sorted(dirs + [f for f in files if not _matches_any(f, exclude_rx)]):
            full_path = os.path.join(current, entry)
            child = parent.add_child(Node(entry, path=full_path))
            if entry in dirs:
                nodes[full_path] = child

    return root


def locate_node(root: Node, node_path: str) -> Optional[Node]:
    """
    Resolve a slash-separated path relative to ``root``.

    ``""`` and ``"."`` designate the root itself. At each level the first
    child carrying the segment name is taken.

    Args:
        root: Tree root.
        node_path: Path such as ``"a/c"``.

    Returns:
        Optional[Node]: The matching node, or None when unresolved.
    """
    current = root
    for segment in node_path.strip().split(PATH_SEPARATOR):
        if segment in ("", "."):
            continue
        current = next((c for c in current.children if c.name == segment), None)
        if current is None:
            logger.debug(f"Path segment '{segment}' not found while resolving '{node_path}'.")
            return None
    return current


def load_tree(source: str, exclude_patterns: Optional[List[str]] = None) -> Node:
    """
    Load a tree from a directory, a JSON manifest file or a manifest URL.

    Args:
        source: Directory path, ``.json`` file path or ``http(s)`` URL.
        exclude_patterns: Name exclusions applied when scanning directories.

    Returns:
        Node: Root of the loaded tree.

    Raises:
        TreeSourceError: If the source is missing, unreachable or malformed.
    """
    if source.startswith(REMOTE_SCHEMES):
        data = fetch_tree_manifest(source)
        if data is None:
            raise TreeSourceError(f"Unable to fetch tree manifest from {source}")
        return _from_manifest(data, source)

    if source.lower().endswith(MANIFEST_EXTENSION) and os.path.isfile(source):
        try:
            with open(source, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError, RecursionError) as e:
            raise TreeSourceError(f"Unable to read manifest '{source}': {e}") from e
        return _from_manifest(data, source)

    try:
        return scan_directory(source, exclude_patterns)
    except NotADirectoryError as e:
        raise TreeSourceError(str(e)) from e

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _from_manifest(data: Any, source: str) -> Node:
    try:
        return build_tree_from_manifest(data)
    except ManifestError as e:
        raise TreeSourceError(f"Invalid manifest '{source}': {e}") from e


def _manifest_entry(data: Any, location: str) -> Tuple[Node, List[Any]]:
    """Validate a single manifest entry and return its node and raw children."""
    if not isinstance(data, dict):
        raise ManifestError(f"{location}: expected object, received {type(data).__name__}.")

    name = data.get("name")
    if not isinstance(name, str) or not name:
        raise ManifestError(f"{location}: 'name' must be a non-empty string.")

    raw_children = data.get("children", [])
    if raw_children is None:
        raw_children = []
    if not isinstance(raw_children, list):
        raise ManifestError(f"{location}.children: expected list, received {type(raw_children).__name__}.")

    return Node(name), raw_children


def _pending_entries(parent: Node, raw_children: List[Any], location: str) -> List[Tuple[Node, Any, str]]:
    """Child entries in reverse, ready to be popped in document order."""
    return [
        (parent, child, f"{location}.children[{i}]")
        for i, child in reversed(list(enumerate(raw_children)))
    ]


def _compile_patterns(patterns: List[str]) -> List[re.Pattern]:
    """Compile exclusion regexes, skipping invalid ones."""
    compiled: List[re.Pattern] = []
    for p in patterns:
        try:
            compiled.append(re.compile(p))
        except re.error as e:
            logger.warning(f"Ignoring invalid exclusion pattern '{p}': {e}")
    return compiled


def _matches_any(name: str, patterns: List[re.Pattern]) -> bool:
    return any(rx.search(name) for rx in patterns)
