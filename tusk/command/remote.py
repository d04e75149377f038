"""Builders for `git remote`."""

from __future__ import annotations

from .base import GitCommand, check_name, check_ref

__all__ = ["add", "lists", "remove"]


def lists() -> GitCommand:
    """Remotes with fetch and push urls."""
    return GitCommand("remote", options=("-v",))


def add(name: str, url: str) -> GitCommand:
    return GitCommand(
        "remote",
        subjects=("add", check_name(name, "remote name"), check_ref(url, "url")),
    )


def remove(name: str) -> GitCommand:
    return GitCommand("remote", subjects=("remove", check_name(name, "remote name")))
