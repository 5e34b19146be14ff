from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates parsed arguments into
configuration overrides.
"""

import argparse
from typing import Any, Dict, List, Optional

from fsancestor.domain.constants import APP_VERSION

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the fsancestor CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="fsancestor",
        description="Find the lowest common ancestor of two entries in a directory tree.",
    )

    # --- Targets ---
    p.add_argument(
        "first",
        nargs="?",
        default=None,
        help="Slash-separated path of the first entry, relative to the tree root.",
    )
    p.add_argument(
        "second",
        nargs="?",
        default=None,
        help="Slash-separated path of the second entry, relative to the tree root.",
    )

    # --- Tree Source ---
    p.add_argument(
        "-s", "--source",
        dest="source",
        default=None,
        help="Directory to scan, JSON manifest file, or manifest URL.",
    )
    p.add_argument(
        "--exclude",
        dest="exclude_patterns",
        default=None,
        help="Comma-separated regexes of entry names to skip when scanning.",
    )

    # --- Lookup Behaviour ---
    p.add_argument(
        "--strict",
        action="store_true",
        help="Report 'Parent not found' when one target contains the other.",
    )
    p.add_argument(
        "--demo",
        action="store_true",
        help="Run the reference scenarios on the built-in example tree.",
    )

    # --- Output ---
    p.add_argument(
        "--print-tree",
        action="store_true",
        help="Print the loaded tree with the involved entries marked.",
    )
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Emit the result as JSON.",
    )

    # --- Configuration and Diagnostics ---
    p.add_argument(
        "--use-defaults",
        action="store_true",
        help="Ignore the saved configuration file.",
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the effective configuration and exit.",
    )
    p.add_argument(
        "--save-config",
        action="store_true",
        help="Persist the effective configuration as the new saved defaults and exit.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        nargs="?",
        const="",
        default=None,
        help="Also write diagnostics to this file (default location when no path is given).",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {APP_VERSION}")

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into configuration overrides.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {}

    overrides["source"] = args.source

    if args.exclude_patterns is not None:
        overrides["exclude_patterns"] = _split_csv(args.exclude_patterns)
    if args.strict:
        overrides["strict"] = True
    if args.print_tree:
        overrides["print_tree"] = True
    if args.debug:
        overrides["log_level"] = "DEBUG"

    return overrides

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _split_csv(value: Optional[str]) -> Optional[List[str]]:
    """Convert a comma-separated string into a list of trimmed items."""
    if value is None:
        return None
    parts = [x.strip() for x in value.split(",")]
    return [x for x in parts if x]
