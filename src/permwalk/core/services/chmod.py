from __future__ import annotations

"""
Batch Permission Change Service.

Applies one permission mode to a path and, optionally, to everything beneath
it. The full set of descendants is collected before the first permission is
changed, then consumed from the top of the stack so that every directory is
handled before its contents.
"""

import logging
import os
from typing import List

from permwalk.core.permissions import check_file_permissions, is_valid_mode, parse_mode
from permwalk.core.traversal import traverse_folder
from permwalk.domain.models import (
    ChmodFailure,
    ChmodResult,
    DirectoryLister,
    FileSystemPort,
    FsPath,
    create_error_result,
)

logger = logging.getLogger(__name__)

OWNER_READ_REQUIRED = "owner must keep read permission"


# ==============================================================================
# PUBLIC API
# ==============================================================================

def plan_permissions(root: FsPath, fs: DirectoryLister, recursive: bool = False) -> List[FsPath]:
    """
    Compute the order in which paths would receive the new permission.

    Args:
        root: Requested path.
        fs: Directory lister.
        recursive: Include every descendant of a directory root.

    Returns:
        List[FsPath]: `root` first, then the traversal stack in pop order.
    """
    stack: List[FsPath] = []
    if recursive and root.is_dir:
        traverse_folder(root, fs, stack)

    order = [root]
    while stack:
        order.append(stack.pop())
    return order


def apply_permissions(
        root: FsPath,
        permission: str,
        fs: FileSystemPort,
        *,
        recursive: bool = False,
        dry_run: bool = False,
) -> ChmodResult:
    """
    Change the permission of `root` and optionally of all its descendants.

    Permission strings that would strip the owner's read access are refused
    before anything is listed or changed. Listing errors propagate to the
    caller. A failing chmod on one path is recorded and the remaining paths
    are still processed. Paths the filesystem declines to change are listed
    as skipped, not changed.

    Args:
        root: Path to change.
        permission: Octal permission string, e.g. "755".
        fs: Filesystem collaborator.
        recursive: Include every descendant of a directory root.
        dry_run: Report what would change without changing it.

    Returns:
        ChmodResult: Outcome of the run.
    """
    if not check_file_permissions(permission):
        logger.warning(f"Refusing permission '{permission}' for {root.path}: {OWNER_READ_REQUIRED}")
        return create_error_result(
            OWNER_READ_REQUIRED, root.path, permission, recursive=recursive, dry_run=dry_run
        )

    if not is_valid_mode(permission):
        msg = f"invalid permission mode '{permission}'"
        logger.warning(f"Refusing {msg} for {root.path}")
        return create_error_result(msg, root.path, permission, recursive=recursive, dry_run=dry_run)

    mode = parse_mode(permission)
    order = plan_permissions(root, fs, recursive)
    logger.info(
        f"{'Planning' if dry_run else 'Applying'} mode {permission} on {len(order)} path(s) under {root.path}"
    )

    changed: List[str] = []
    skipped: List[str] = []
    failures: List[ChmodFailure] = []

    for path in order:
        if dry_run:
            changed.append(path.path)
            continue
        try:
            applied = fs.set_permission(path, mode)
        except OSError as e:
            logger.error(f"chmod {permission} failed for {path.path}: {e}")
            failures.append(ChmodFailure(path=path.path, error=str(e)))
            continue
        if not applied:
            logger.info(f"Skipped {path.path}: left unchanged by the filesystem")
            skipped.append(path.path)
            continue
        logger.debug(f"chmod {permission} {path.path}")
        changed.append(path.path)

    return ChmodResult(
        ok=not failures,
        error=f"{len(failures)} path(s) could not be changed" if failures else "",
        root=root.path,
        permission=permission,
        recursive=recursive,
        dry_run=dry_run,
        changed=changed,
        skipped=skipped,
        failures=failures,
        summary={
            "planned": len(order),
            "changed": 0 if dry_run else len(changed),
            "skipped": len(skipped),
            "failed": len(failures),
        },
    )


def write_failure_report(report_path: str, failures: List[ChmodFailure]) -> str:
    """
    Persist per-path failures to a plain-text report.

    Args:
        report_path: Target file path.
        failures: Failures collected by `apply_permissions`.

    Returns:
        str: The path written, or an empty string if nothing was written.
    """
    if not failures:
        return ""

    try:
        os.makedirs(os.path.dirname(os.path.abspath(report_path)), exist_ok=True)
        with open(report_path, "w", encoding="utf-8") as f:
            f.write("PERMISSION CHANGE ERRORS REPORT:\n")
            f.write("=" * 80 + "\n")
            for failure in failures:
                f.write(f"PATH: {failure.path}\n")
                f.write(f"ERROR: {failure.error}\n")
                f.write("-" * 80 + "\n")
    except OSError as e:
        logger.error(f"Failed to write error report to '{report_path}': {e}")
        return ""

    return report_path
