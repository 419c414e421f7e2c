from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

1. Puts the 'src' directory on sys.path so the package imports uninstalled.
2. Provides an in-memory filesystem fake and a real on-disk sample tree.
"""

import os
import sys
from pathlib import Path
from typing import Dict, List, Optional, Sequence

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from permwalk.domain.models import FsPath  # noqa: E402


# -----------------------------------------------------------------------------
# Fakes
# -----------------------------------------------------------------------------
class FakeFileSystem:
    """
    In-memory lister/permission setter.

    `tree` maps a directory path to its children in listing order; a name
    ending in '/' is a directory. Directories absent from `tree` list as None.
    """

    def __init__(self, tree: Dict[str, List[str]]) -> None:
        self.tree = tree
        self.listed: List[str] = []
        self.chmods: List[tuple] = []
        self.fail_on: Dict[str, Exception] = {}
        self.skip: List[str] = []

    def handle(self, name: str) -> FsPath:
        return FsPath(name.rstrip("/"), name.endswith("/"))

    def list(self, path: FsPath) -> Optional[Sequence[FsPath]]:
        self.listed.append(path.path)
        children = self.tree.get(path.path)
        if children is None:
            return None
        return [self.handle(c) for c in children]

    def set_permission(self, path: FsPath, mode: int) -> bool:
        if path.path in self.fail_on:
            raise self.fail_on[path.path]
        if path.path in self.skip:
            return False
        self.chmods.append((path.path, mode))
        return True


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def fake_fs() -> FakeFileSystem:
    """
    Tree used by most traversal tests.

    root
      a
      b/
        c
    """
    return FakeFileSystem({
        "root": ["a", "b/"],
        "b": ["c"],
    })


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """
    Create a small real directory tree.

    /tree
      file1.txt
      /docs
        readme.md
        /nested
          deep.txt
      /empty
    """
    root = tmp_path / "tree"
    root.mkdir()
    (root / "file1.txt").write_text("one", encoding="utf-8")
    (root / "docs").mkdir()
    (root / "docs" / "readme.md").write_text("# docs", encoding="utf-8")
    (root / "docs" / "nested").mkdir()
    (root / "docs" / "nested" / "deep.txt").write_text("deep", encoding="utf-8")
    (root / "empty").mkdir()
    return root
