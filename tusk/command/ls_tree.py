"""Builders for `git ls-tree`."""

from __future__ import annotations

from .base import GitCommand, check_ref

__all__ = ["tree"]


def tree(ref: str = "HEAD", path: str | None = None, recursive: bool = False) -> GitCommand:
    """List a tree with object sizes.

    Args:
        ref: Treeish to list
        path: Restrict the listing to this path. A trailing "/" lists the
            directory contents instead of the directory entry itself.
        recursive: Recurse into subtrees, still showing the tree entries
    """
    options = ["-l"]
    if recursive:
        options.extend(["-r", "-t"])
    return GitCommand(
        "ls-tree",
        options=tuple(options),
        subjects=(check_ref(ref),),
        paths=(path,) if path else (),
    )
