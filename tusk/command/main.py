"""Builders for working tree commands: init, status, add, commit, checkout..."""

from __future__ import annotations

from .base import GitCommand, check_name, check_ref

__all__ = [
    "add",
    "checkout",
    "commit",
    "init",
    "merge",
    "move",
    "remove",
    "status",
    "unstage",
]


def init(bare: bool = False) -> GitCommand:
    return GitCommand("init", options=("--bare",) if bare else ())


def status() -> GitCommand:
    """Machine-readable status with a leading "## branch" line."""
    return GitCommand("status", options=("--porcelain=v1", "-b"))


def add(path: str | None = None) -> GitCommand:
    """Stage changes, including deletions. Without a path, stage everything."""
    return GitCommand("add", options=("--all",), paths=(path or ".",))


def unstage(path: str) -> GitCommand:
    return GitCommand("reset", options=("-q", "HEAD"), paths=(path,))


def remove(path: str, recursive: bool = False, cached: bool = False) -> GitCommand:
    options: list[str] = []
    if recursive:
        options.append("-r")
    if cached:
        options.append("--cached")
    return GitCommand("rm", options=tuple(options), paths=(path,))


def move(source: str, destination: str) -> GitCommand:
    # git mv takes no "--" before the destination; guard both ends manually.
    return GitCommand(
        "mv",
        subjects=(check_ref(source, "source path"), check_ref(destination, "destination path")),
    )


def commit(
    message: str,
    stage_all: bool = False,
    allow_empty: bool = False,
    author: str | None = None,
) -> GitCommand:
    """Record a commit.

    Args:
        message: Commit message
        stage_all: Stage modified and deleted tracked files first (-a)
        allow_empty: Allow a commit with no changes
        author: Override author, "Name <email>"
    """
    if not message.strip():
        raise ValueError("empty commit message")
    options = ["-m", message]
    if stage_all:
        options.append("--all")
    if allow_empty:
        options.append("--allow-empty")
    if author is not None:
        options.append(f"--author={author}")
    return GitCommand("commit", options=tuple(options))


def checkout(ref: str, create: bool = False) -> GitCommand:
    """Switch to ref. With create, ref is the name of a new branch."""
    if create:
        return GitCommand("checkout", options=("-b",), subjects=(check_name(ref, "branch name"),))
    return GitCommand("checkout", options=("-q",), subjects=(check_ref(ref),))


def merge(branch: str, message: str | None = None, no_ff: bool = True) -> GitCommand:
    options: list[str] = []
    if no_ff:
        options.append("--no-ff")
    if message is not None:
        options.extend(["-m", message])
    return GitCommand("merge", options=tuple(options), subjects=(check_ref(branch, "branch"),))
