from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides the local-disk adapter used for listing directories and changing
permissions, plus cross-platform path helpers. Acts as an abstraction over
the 'os' module so the core layer never touches the disk directly.
"""

import os
from typing import List, Optional

from permwalk.domain.models import FsPath

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

APP_DIR_NAME = "permwalk"
UNIX_APP_DIR_NAME = ".permwalk"

# -----------------------------------------------------------------------------
# LOCAL FILESYSTEM ADAPTER
# -----------------------------------------------------------------------------

class LocalFileSystem:
    """
    Directory lister and permission setter backed by the local disk.

    Args:
        sort_entries: Return children sorted by name for a stable order.
        follow_symlinks: Treat symlinks to directories as directories.
    """

    def __init__(self, sort_entries: bool = True, follow_symlinks: bool = False) -> None:
        self.sort_entries = sort_entries
        self.follow_symlinks = follow_symlinks

    def stat(self, path: str) -> FsPath:
        """
        Build a handle for an existing path.

        Raises:
            FileNotFoundError: If nothing exists at `path`.
        """
        abs_path = os.path.abspath(path)
        if not os.path.lexists(abs_path):
            raise FileNotFoundError(abs_path)
        is_dir = os.path.isdir(abs_path)
        if is_dir and os.path.islink(abs_path) and not self.follow_symlinks:
            is_dir = False
        return FsPath(abs_path, is_dir)

    def list(self, path: FsPath) -> Optional[List[FsPath]]:
        """
        List the direct children of a directory.

        OS errors (permission denied, vanished directory) are not caught.

        Returns:
            Optional[List[FsPath]]: Children, or None for a non-directory.
        """
        if not path.is_dir:
            return None

        children: List[FsPath] = []
        with os.scandir(path.path) as it:
            for entry in it:
                is_dir = entry.is_dir(follow_symlinks=self.follow_symlinks)
                children.append(FsPath(entry.path, is_dir))

        if self.sort_entries:
            children.sort(key=lambda p: p.name)
        return children

    def set_permission(self, path: FsPath, mode: int) -> bool:
        """
        Apply `mode` to `path`.

        A symlink that is not followed is changed in place where the platform
        supports it (lchmod) and left alone otherwise, so the link target is
        never modified.

        Returns:
            bool: False if the path was skipped, True if its mode was set.
        """
        if not self.follow_symlinks and os.path.islink(path.path):
            if os.chmod not in os.supports_follow_symlinks:
                return False
            os.chmod(path.path, mode, follow_symlinks=False)
            return True
        os.chmod(path.path, mode)
        return True

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def get_user_data_dir() -> str:
    """
    Resolve the standard OS-specific directory for persistent application data.

    Automatically creates the hierarchy if it does not exist.
    Standards:
    - Windows: %LOCALAPPDATA%/permwalk
    - Linux/Mac: ~/.permwalk

    Returns:
        str: Absolute path to the application data directory.
    """
    path: str = ""

    if os.name == "nt":
        base = os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA")
        if base:
            path = os.path.join(base, APP_DIR_NAME)

    # Posix fallback (Linux/Mac)
    if not path:
        home = os.path.expanduser("~")
        path = os.path.join(home, UNIX_APP_DIR_NAME)

    try:
        os.makedirs(path, exist_ok=True)
    except OSError:
        # Read-only home: callers fall back to defaults when the file is missing
        pass

    return os.path.abspath(path)


def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a path string into an absolute filesystem path.

    Handles environment variable expansion ($VAR/%VAR%) and user home
    shortcuts (~/). Reverts to fallback if the input is empty.

    Args:
        path: Raw input path string.
        fallback: Default path to use if the input is empty.

    Returns:
        str: Normalized absolute path.
    """
    p = (path or "").strip()
    if not p:
        p = fallback
    p = os.path.expandvars(os.path.expanduser(p))
    return os.path.abspath(p)
