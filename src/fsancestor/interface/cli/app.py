from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: configuration resolution (defaults,
saved file, CLI overrides), logging bootstrap, tree loading, the
ancestor lookup itself and result rendering.
"""

import json
import sys
from typing import Any, Dict, List, Optional, Tuple

from fsancestor.core.analysis.ancestor_resolver import find_parent, resolve_common_ancestor
from fsancestor.core.analysis.tree_builder import (
    TreeSourceError,
    build_example_tree,
    load_tree,
    locate_node,
)
from fsancestor.core.analysis.tree_renderer import render_tree
from fsancestor.core.services.validator import validate_config
from fsancestor.domain.config import get_default_config, load_config, save_config
from fsancestor.infra.logging import LoggingConfig, configure_logging, get_default_log_path, get_logger
from fsancestor.interface.cli import args as cli_args

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Command line arguments. Defaults to sys.argv.

    Returns:
        int: 0 when an ancestor was resolved, 1 when a sentinel was
             returned, 2 on invalid input, 130 on interrupt.
    """
    # 1. Argument parsing
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Configuration hierarchy (defaults or saved file, then CLI overrides)
    base_conf = get_default_config() if args.use_defaults else load_config()
    raw_conf = _merge_config(base_conf, cli_args.args_to_overrides(args))
    clean_conf, warnings = validate_config(raw_conf, strict=False)

    # 3. Logging bootstrap (console stderr, optional file)
    log_file = get_default_log_path() if args.log_file == "" else args.log_file
    configure_logging(LoggingConfig(level=clean_conf["log_level"], console=True, log_file=log_file))
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.dump_config:
        print(json.dumps(clean_conf, ensure_ascii=False, indent=2))
        return 0

    if args.save_config:
        if not save_config(clean_conf):
            print("ERROR: Unable to save configuration.", file=sys.stderr)
            return 2
        print("Configuration saved.")
        return 0

    if args.demo:
        for line in run_demo(strict=clean_conf["strict"]):
            print(line)
        return 0

    if args.first is None or args.second is None:
        msg = "Two target paths are required (or use --demo)."
        logger.error(msg)
        print(f"ERROR: {msg}", file=sys.stderr)
        return 2

    # 4. Tree loading and lookup
    try:
        return _run_lookup(args.first, args.second, clean_conf, json_output=args.json_output)
    except TreeSourceError as e:
        logger.error(str(e))
        print(f"ERROR: {e}", file=sys.stderr)
        return 2
    except KeyboardInterrupt:
        logger.warning("Interrupted by user.")
        return 130


def run_demo(strict: bool = False) -> List[str]:
    """
    Evaluate the reference scenarios on the built-in example tree.

    Returns:
        List[str]: One ``call -> result`` line per scenario.
    """
    root = build_example_tree()
    a, b = root.children
    c, d = a.children

    scenarios: List[Tuple[str, Tuple[Any, Any, Any]]] = [
        ("find_parent(root, a, b)", (root, a, b)),
        ("find_parent(root, c, d)", (root, c, d)),
        ("find_parent(root, a, 'b')", (root, a, "b")),
        ("find_parent('root', a, b)", ("root", a, b)),
        ("find_parent(root, a, c)", (root, a, c)),
    ]

    lines = []
    for label, call in scenarios:
        lines.append(f"{label} -> {find_parent(*call, strict=strict)}")
    return lines

# -----------------------------------------------------------------------------
# LOOKUP EXECUTION
# -----------------------------------------------------------------------------

def _run_lookup(first: str, second: str, conf: Dict[str, Any], *, json_output: bool) -> int:
    """Load the tree, resolve both targets and print the answer."""
    logger.info(f"Loading tree from: {conf['source']}")
    tree = load_tree(conf["source"], conf["exclude_patterns"])

    first_node = locate_node(tree, first)
    second_node = locate_node(tree, second)
    for label, node in ((first, first_node), (second, second_node)):
        if node is None:
            logger.warning(f"Target '{label}' does not exist under '{tree.name}'.")

    resolution = resolve_common_ancestor(tree, first_node, second_node, strict=conf["strict"])
    logger.debug(f"Resolution status: {resolution.status.value}")

    if conf["print_tree"]:
        marked = [n for n in (first_node, second_node, resolution.ancestor) if n is not None]
        print("\n".join(render_tree(tree, highlight=marked)))

    if json_output:
        payload = {"first": first, "second": second}
        payload.update(resolution.to_dict())
        print(json.dumps(payload, ensure_ascii=False, indent=2))
    else:
        print(resolution.text)

    return 0 if resolution.ok else 1

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Shallow-merge known, non-None override keys into the base configuration."""
    out = dict(base)
    for k in ("source", "exclude_patterns", "strict", "print_tree", "log_level"):
        if k in overrides and overrides[k] is not None:
            out[k] = overrides[k]
    return out
