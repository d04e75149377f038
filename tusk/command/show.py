"""Builders for `git show`."""

from __future__ import annotations

from .base import GitCommand, check_ref

__all__ = ["show_commit"]


def show_commit(ref: str = "HEAD") -> GitCommand:
    """Raw headers and message of a single commit, without the patch.

    The ref is peeled so annotated tags show their commit, not the tag object.
    """
    return GitCommand(
        "show",
        options=("-s", "--pretty=raw", "--no-color"),
        subjects=(f"{check_ref(ref)}^{{commit}}",),
    )
