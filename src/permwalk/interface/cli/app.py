from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, merging of the saved
configuration with command-line overrides, validation, execution of the
batch permission change and rendering of the result.
"""

import json
import os
import sys
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from permwalk.core.services.chmod import (
    apply_permissions,
    plan_permissions,
    write_failure_report,
)
from permwalk.core.validator import validate_config
from permwalk.domain.config import get_default_config, load_config, save_config
from permwalk.domain.models import ChmodResult
from permwalk.infra.fs import LocalFileSystem
from permwalk.infra.logging import LoggingConfig, configure_logging, get_logger
from permwalk.interface.cli import args as cli_args

logger = get_logger(__name__)

_MERGE_KEYS = [
    "target_path", "permission", "recursive", "sort_entries",
    "follow_symlinks", "dry_run", "save_error_log", "error_log_path",
]

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 success, 1 failure, 2 missing target, 130 interrupted).
            Missing positionals make argparse exit with status 2.
    """
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    log_level = "DEBUG" if args.debug else "INFO"
    configure_logging(LoggingConfig(level=log_level, console=True, log_file=args.log_file))

    logger.debug("CLI execution initiated. Resolving configuration...")

    base_conf = get_default_config() if args.use_defaults else load_config()
    raw_conf = _merge_config(base_conf, cli_args.args_to_overrides(args))

    clean_conf, warnings = validate_config(raw_conf, strict=False)
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.save_config:
        save_config(clean_conf)
        logger.info("Options saved for later runs.")

    if args.dump_config:
        print(json.dumps(clean_conf, ensure_ascii=False, indent=2))
        return 0

    target_path = clean_conf["target_path"]
    if not os.path.lexists(target_path):
        msg = f"Path does not exist: {target_path}"
        logger.error(msg)
        print(f"ERROR: {msg}", file=sys.stderr)
        return 2

    fs = LocalFileSystem(
        sort_entries=clean_conf["sort_entries"],
        follow_symlinks=clean_conf["follow_symlinks"],
    )

    try:
        root = fs.stat(target_path)
        if args.list_only:
            for path in plan_permissions(root, fs, clean_conf["recursive"]):
                print(path.path)
            return 0

        result = apply_permissions(
            root,
            clean_conf["permission"],
            fs,
            recursive=clean_conf["recursive"],
            dry_run=clean_conf["dry_run"],
        )
    except KeyboardInterrupt:
        logger.warning("Interrupted by user.")
        print("Interrupted.", file=sys.stderr)
        return 130
    except OSError as e:
        msg = f"Cannot read directory tree: {e}"
        logger.critical(msg, exc_info=args.debug)
        print(f"ERROR: {msg}", file=sys.stderr)
        return 1

    if clean_conf["save_error_log"]:
        report = write_failure_report(clean_conf["error_log_path"], result.failures)
        if report:
            logger.info(f"Error report written to {report}")

    if args.json_output:
        print(json.dumps(asdict(result), ensure_ascii=False, indent=2))
    else:
        _print_human_summary(result)

    return 0 if result.ok else 1

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Shallow-merge non-None overrides over the base configuration.

    Only known keys are merged.
    """
    out = dict(base)
    for k in _MERGE_KEYS:
        if overrides.get(k) is not None:
            out[k] = overrides[k]
    return out


def _print_human_summary(result: ChmodResult) -> None:
    if not result.ok and not result.changed and not result.failures:
        print(f"ERROR: {result.error}", file=sys.stderr)
        return

    verb = "Would change" if result.dry_run else "Changed"
    print(f"{verb} {len(result.changed)} path(s) to {result.permission} under {result.root}")
    if result.skipped:
        print(f"Skipped {len(result.skipped)} path(s) left unchanged (symlinks not followed)")
        for path in result.skipped:
            print(f"  skipped {path}")
    if result.dry_run:
        for path in result.changed:
            print(f"  {path}")

    for failure in result.failures:
        print(f"FAILED {failure.path}: {failure.error}", file=sys.stderr)
