from __future__ import annotations

"""
Filesystem Domain Data Models.

Defines the path handle consumed by the traversal layer, the collaborator
protocols used to list directories and change permissions, and the result
objects returned to the interface layer.
"""

import os
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Protocol, Sequence

# -----------------------------------------------------------------------------
# PATH HANDLE
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class FsPath:
    """
    Opaque handle to a filesystem location.

    Attributes:
        path: Location identifier (absolute path for the local adapter).
        is_dir: Whether the location is a directory that can be listed.
    """
    path: str
    is_dir: bool = False

    @property
    def name(self) -> str:
        return os.path.basename(self.path.rstrip("/\\")) or self.path

    def __str__(self) -> str:
        return self.path

# -----------------------------------------------------------------------------
# COLLABORATOR PROTOCOLS
# -----------------------------------------------------------------------------

class DirectoryLister(Protocol):
    """Anything able to enumerate the direct children of a path."""

    def list(self, path: FsPath) -> Optional[Sequence[FsPath]]:
        """Return the children of `path`; None or empty means no children."""
        ...


class PermissionSetter(Protocol):
    def set_permission(self, path: FsPath, mode: int) -> bool:
        """Return False when the path was deliberately left unchanged."""
        ...


class FileSystemPort(DirectoryLister, PermissionSetter, Protocol):
    """Collaborator able to both list directories and change permissions."""


# -----------------------------------------------------------------------------
# RESULT MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class ChmodFailure:
    """
    Encapsulates a permission change that could not be applied.

    Attributes:
        path: Path whose permission change failed.
        error: Descriptive exception or error message.
    """
    path: str
    error: str


@dataclass(frozen=True)
class ChmodResult:
    """
    Unified result of a batch permission change.

    Attributes:
        ok: Flag indicating success or failure.
        error: Descriptive message in case of failure.
        root: Path the operation was requested for.
        permission: Raw permission string requested by the caller.
        recursive: Whether descendants were included.
        dry_run: Whether permissions were left untouched.
        changed: Paths changed (or planned) in application order.
        skipped: Paths the filesystem declined to change (e.g. unfollowed symlinks).
        failures: Per-path errors collected during application.
        summary: Counters describing the run.
    """
    ok: bool
    error: str

    root: str
    permission: str
    recursive: bool = False
    dry_run: bool = False

    changed: List[str] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)
    failures: List[ChmodFailure] = field(default_factory=list)

    summary: Dict[str, Any] = field(default_factory=dict)

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_error_result(
        error: str,
        root: str,
        permission: str,
        *,
        recursive: bool = False,
        dry_run: bool = False,
) -> ChmodResult:
    """
    Build a failed result for a run rejected before touching the filesystem.

    Args:
        error: Reason for the rejection.
        root: Requested root path.
        permission: Requested permission string.
        recursive: Requested recursion flag.
        dry_run: Requested dry-run flag.

    Returns:
        ChmodResult: Result with `ok` set to False and no changes.
    """
    return ChmodResult(
        ok=False,
        error=error,
        root=root,
        permission=permission,
        recursive=recursive,
        dry_run=dry_run,
        summary={"changed": 0, "skipped": 0, "failed": 0},
    )
