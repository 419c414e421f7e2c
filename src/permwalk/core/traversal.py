from __future__ import annotations

"""
Directory Tree Traversal.

Collects every descendant of a root directory into an ordered stack so that a
caller popping from the end receives each directory before its contents.
The walk keeps its own work stack instead of recursing, so tree depth is not
bounded by the interpreter's recursion limit.
"""

import logging
from typing import Iterator, List, MutableSequence, Optional, Sequence, Tuple

from permwalk.domain.models import DirectoryLister, FsPath

logger = logging.getLogger(__name__)

# A frame is the iterator over a directory's children plus the directory
# itself, which is appended once the iterator is exhausted.
_Frame = Tuple[Iterator[FsPath], Optional[FsPath]]


# ==============================================================================
# PUBLIC API
# ==============================================================================

def traverse_folder(
        root: FsPath,
        lister: DirectoryLister,
        out: MutableSequence[FsPath],
) -> None:
    """
    Append all descendants of `root` to `out`, depth first.

    Each directory is appended after all of its own descendants, so popping
    `out` from the end yields a directory ahead of anything beneath it.
    Entries already in `out` are left untouched. Errors raised by `lister`
    propagate unchanged.

    Args:
        root: Directory whose descendants are collected (not appended itself).
        lister: Collaborator returning the children of a directory.
        out: Caller-owned stack; only appended to.
    """
    children = lister.list(root)
    if not children:
        return

    appended = 0
    frames: List[_Frame] = [(iter(children), None)]

    while frames:
        pending, owner = frames[-1]
        child = next(pending, None)

        if child is None:
            frames.pop()
            if owner is not None:
                out.append(owner)
                appended += 1
            continue

        if child.is_dir:
            frames.append((iter(_children_of(child, lister)), child))
        else:
            out.append(child)
            appended += 1

    logger.debug(f"Collected {appended} descendants under '{root.path}'")


def collect_descendants(root: FsPath, lister: DirectoryLister) -> List[FsPath]:
    """
    Return the descendants of `root` as a new list in traversal order.

    Args:
        root: Directory to walk.
        lister: Collaborator returning the children of a directory.

    Returns:
        List[FsPath]: Same ordering `traverse_folder` would append.
    """
    out: List[FsPath] = []
    traverse_folder(root, lister, out)
    return out


def pop_order(stack: Sequence[FsPath]) -> List[FsPath]:
    """Return the order in which `stack` would be consumed from its end."""
    return list(reversed(stack))


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _children_of(path: FsPath, lister: DirectoryLister) -> Sequence[FsPath]:
    """Normalize an absent listing to an empty sequence."""
    children = lister.list(path)
    return children if children else ()
