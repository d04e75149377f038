"""Builders for `git rev-parse`."""

from __future__ import annotations

from .base import GitCommand, check_ref

__all__ = ["abbrev_ref", "inside_work_tree", "toplevel", "upstream", "verify"]

REV_PARSE = "rev-parse"


def verify(ref: str) -> GitCommand:
    """Resolve ref to a full commit sha, failing if it is not a commit."""
    return GitCommand(
        REV_PARSE,
        options=("--verify", "--quiet"),
        subjects=(f"{check_ref(ref)}^{{commit}}",),
    )


def abbrev_ref(ref: str = "HEAD") -> GitCommand:
    return GitCommand(REV_PARSE, options=("--abbrev-ref",), subjects=(check_ref(ref),))


def upstream() -> GitCommand:
    """Upstream of the current branch; fails when none is configured."""
    return GitCommand(
        REV_PARSE,
        options=("--abbrev-ref", "--symbolic-full-name"),
        subjects=("@{u}",),
    )


def toplevel() -> GitCommand:
    return GitCommand(REV_PARSE, options=("--show-toplevel",))


def inside_work_tree() -> GitCommand:
    return GitCommand(REV_PARSE, options=("--is-inside-work-tree",))
