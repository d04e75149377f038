"""Builders for `git log`.

Log output uses --pretty=raw so that each entry has exactly the layout
`git show -s --pretty=raw` produces and can be parsed by the same code.
"""

from __future__ import annotations

from .base import GitCommand, check_ref

__all__ = ["log", "log_range"]


def _options(limit: int | None, offset: int) -> tuple[str, ...]:
    if limit is not None and limit < 0:
        raise ValueError(f"invalid limit {limit}: must not be negative")
    if offset < 0:
        raise ValueError(f"invalid offset {offset}: must not be negative")
    options = ["-s", "--pretty=raw", "--no-color"]
    if limit is not None:
        options.append(f"--max-count={limit}")
    if offset:
        options.append(f"--skip={offset}")
    return tuple(options)


def log(
    ref: str = "HEAD",
    path: str | None = None,
    limit: int | None = 15,
    offset: int = 0,
) -> GitCommand:
    """History reachable from ref, newest first.

    Args:
        ref: Treeish to start from
        path: Only commits touching this path
        limit: Maximum number of commits (None for all)
        offset: Number of commits to skip
    """
    return GitCommand(
        "log",
        options=_options(limit, offset),
        subjects=(check_ref(ref),),
        paths=(path,) if path else (),
    )


def log_range(
    from_ref: str,
    to_ref: str,
    path: str | None = None,
    limit: int | None = 15,
    offset: int = 0,
) -> GitCommand:
    """Commits reachable from to_ref but not from from_ref."""
    check_ref(from_ref, "range start")
    check_ref(to_ref, "range end")
    return GitCommand(
        "log",
        options=_options(limit, offset),
        subjects=(f"{from_ref}..{to_ref}",),
        paths=(path,) if path else (),
    )
