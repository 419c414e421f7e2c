from __future__ import annotations

"""
Unit tests for directory tree traversal.

Verifies:
1. Append order (directories after their descendants).
2. Empty and absent listings.
3. Existing stack entries are preserved.
4. Listing errors propagate unchanged.
5. Deep trees do not hit the recursion limit.
"""

import sys
from typing import List
from unittest.mock import MagicMock

import pytest

from conftest import FakeFileSystem
from permwalk.core.traversal import collect_descendants, pop_order, traverse_folder
from permwalk.domain.models import FsPath


def _paths(stack: List[FsPath]) -> List[str]:
    return [p.path for p in stack]


def test_example_tree_order(fake_fs: FakeFileSystem) -> None:
    """root -> [a, b/], b -> [c] yields [a, c, b] and pops b, c, a."""
    out: List[FsPath] = []
    traverse_folder(FsPath("root", True), fake_fs, out)

    assert _paths(out) == ["a", "c", "b"]
    assert [out.pop().path for _ in range(3)] == ["b", "c", "a"]


def test_empty_listing_leaves_stack_unchanged() -> None:
    fs = FakeFileSystem({"root": []})
    out = [FsPath("existing")]
    traverse_folder(FsPath("root", True), fs, out)
    assert _paths(out) == ["existing"]


def test_absent_listing_leaves_stack_unchanged() -> None:
    fs = FakeFileSystem({})
    out: List[FsPath] = []
    traverse_folder(FsPath("root", True), fs, out)
    assert out == []


def test_existing_entries_are_kept(fake_fs: FakeFileSystem) -> None:
    out = [FsPath("x"), FsPath("y")]
    traverse_folder(FsPath("root", True), fake_fs, out)
    assert _paths(out) == ["x", "y", "a", "c", "b"]


def test_empty_subdirectory_is_still_appended() -> None:
    fs = FakeFileSystem({"root": ["d/", "f"], "d": []})
    assert _paths(collect_descendants(FsPath("root", True), fs)) == ["d", "f"]


def test_directories_follow_all_descendants() -> None:
    fs = FakeFileSystem({
        "root": ["x/", "y", "z/"],
        "x": ["x1", "x2/"],
        "x2": ["x21", "x22/"],
        "x22": ["x221"],
        "z": [],
    })
    out = collect_descendants(FsPath("root", True), fs)
    names = _paths(out)

    assert names == ["x1", "x21", "x221", "x22", "x2", "x", "y", "z"]
    # One entry per descendant, root excluded
    assert len(names) == 9 - 1
    for directory, descendants in {"x": ["x1", "x2", "x21", "x22", "x221"], "x2": ["x21", "x22", "x221"]}.items():
        assert all(names.index(d) < names.index(directory) for d in descendants)


def test_listing_follows_traversal_order() -> None:
    fs = FakeFileSystem({"root": ["a/", "b/"], "a": ["a1/"], "a1": [], "b": []})
    collect_descendants(FsPath("root", True), fs)
    assert fs.listed == ["root", "a", "a1", "b"]


def test_listing_error_propagates_unchanged() -> None:
    error = PermissionError("denied")
    lister = MagicMock()
    lister.list.side_effect = [[FsPath("a"), FsPath("b", True)], error]

    out: List[FsPath] = []
    with pytest.raises(PermissionError) as exc_info:
        traverse_folder(FsPath("root", True), lister, out)

    assert exc_info.value is error
    # Entries appended before the failure stay in place
    assert _paths(out) == ["a"]


def test_deep_tree_does_not_recurse() -> None:
    depth = sys.getrecursionlimit() + 100
    tree = {f"d{i}": [f"d{i + 1}/"] for i in range(depth)}
    tree[f"d{depth}"] = ["leaf"]

    out = collect_descendants(FsPath("d0", True), FakeFileSystem(tree))

    assert len(out) == depth + 1
    assert out[0].path == "leaf"
    assert out[-1].path == "d1"


def test_pop_order_reverses() -> None:
    stack = [FsPath("a"), FsPath("c"), FsPath("b")]
    assert _paths(pop_order(stack)) == ["b", "c", "a"]
    assert _paths(stack) == ["a", "c", "b"]
