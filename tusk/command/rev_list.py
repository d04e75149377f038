"""Builders for `git rev-list`."""

from __future__ import annotations

from .base import GitCommand, check_ref

__all__ = ["count", "last_commit"]


def count(ref: str) -> GitCommand:
    """Number of commits reachable from ref."""
    return GitCommand("rev-list", options=("--count",), subjects=(check_ref(ref),))


def last_commit(ref: str) -> GitCommand:
    """Sha of the commit ref points to (tags are peeled)."""
    return GitCommand("rev-list", options=("--max-count=1",), subjects=(check_ref(ref),))
