from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates the parsed namespace into
configuration overrides understood by the validator.
"""

import argparse
from typing import Any, Dict

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the permwalk CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="permwalk",
        description="Apply an octal permission mode to a path, optionally to its whole tree.",
    )

    # --- Target ---
    p.add_argument(
        "target_path",
        help="File or directory to change.",
    )
    p.add_argument(
        "permission",
        help="Octal mode such as 755. The owner digit must include read (>= 4).",
    )

    # --- Traversal ---
    p.add_argument(
        "-R", "--recursive",
        action="store_true",
        help="Also change every file and directory below the target.",
    )
    p.add_argument(
        "--no-sort",
        action="store_true",
        help="Keep directory entries in the order the OS returns them.",
    )
    p.add_argument(
        "--follow-symlinks",
        action="store_true",
        help="Descend into symlinked directories and chmod link targets.",
    )

    # --- Safety ---
    p.add_argument(
        "--dry-run",
        action="store_true",
        help="Report what would change without touching permissions.",
    )
    p.add_argument(
        "--list",
        dest="list_only",
        action="store_true",
        help="Print the processing order and exit.",
    )

    # --- Diagnostics ---
    p.add_argument(
        "--error-log",
        dest="error_log_path",
        default=None,
        help="Write per-path failures to this file.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write log records to this rotating file.",
    )
    p.add_argument(
        "--use-defaults",
        action="store_true",
        help="Ignore the saved configuration file.",
    )
    p.add_argument(
        "--save-config",
        action="store_true",
        help="Remember the traversal and diagnostic options for later runs.",
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the resolved configuration as JSON and exit.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print the result as JSON.",
    )

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

    overrides["target_path"] = args.target_path
    overrides["permission"] = args.permission

    if args.recursive:
        overrides["recursive"] = True
    if args.no_sort:
        overrides["sort_entries"] = False
    if args.follow_symlinks:
        overrides["follow_symlinks"] = True
    if args.dry_run:
        overrides["dry_run"] = True
    if args.error_log_path:
        overrides["error_log_path"] = args.error_log_path
        overrides["save_error_log"] = True

    return overrides
