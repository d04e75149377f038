"""Builders for `git cat-file`."""

from __future__ import annotations

from .base import GitCommand, check_ref

__all__ = ["content", "object_type", "size"]


def _object(ref: str, path: str | None) -> str:
    check_ref(ref)
    if path is None:
        return ref
    return f"{ref}:{path.lstrip('/')}"


def content(ref: str, path: str | None = None) -> GitCommand:
    """Pretty-printed content of an object, or of the blob at ref:path."""
    return GitCommand("cat-file", options=("-p",), subjects=(_object(ref, path),))


def object_type(ref: str, path: str | None = None) -> GitCommand:
    return GitCommand("cat-file", options=("-t",), subjects=(_object(ref, path),))


def size(ref: str, path: str | None = None) -> GitCommand:
    return GitCommand("cat-file", options=("-s",), subjects=(_object(ref, path),))
