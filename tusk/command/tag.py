"""Builders for tag commands."""

from __future__ import annotations

from .base import GitCommand, check_name, check_ref

__all__ = ["create", "delete", "last", "lists", "show_refs"]


def lists() -> GitCommand:
    """Tag names, one per line."""
    return GitCommand("tag", options=("--list",))


def show_refs() -> GitCommand:
    """Tags with their shas; annotated tags also get a peeled "^{}" line."""
    return GitCommand("show-ref", options=("--tags", "--dereference"))


def create(name: str, start_point: str | None = None, message: str | None = None) -> GitCommand:
    """Create a tag. A message makes it an annotated tag."""
    options: list[str] = []
    if message is not None:
        options.extend(["-a", "-m", message])
    subjects = [check_name(name, "tag name")]
    if start_point is not None:
        subjects.append(check_ref(start_point, "start point"))
    return GitCommand("tag", options=tuple(options), subjects=tuple(subjects))


def delete(name: str) -> GitCommand:
    return GitCommand("tag", options=("-d",), subjects=(check_name(name, "tag name"),))


def last(ref: str = "HEAD") -> GitCommand:
    """Most recent tag reachable from ref."""
    return GitCommand("describe", options=("--tags", "--abbrev=0"), subjects=(check_ref(ref),))
