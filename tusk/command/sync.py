"""Builders for commands that talk to remotes: clone, fetch, pull, push."""

from __future__ import annotations

import re

from .base import GitCommand, check_name, check_ref

__all__ = ["clone", "fetch", "humanish_name", "pull", "push"]

_SCHEME = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.-]*://")


def humanish_name(url: str) -> str:
    """Directory name git would pick when cloning url.

    "git@github.com:org/repo.git" -> "repo"
    "https://host/path/repo/.git" -> "repo"
    "/srv/git/project.bundle"     -> "project"

    Raises:
        ValueError: If no name can be derived.
    """
    s = url.strip().rstrip("/")
    if s.endswith("/.git"):
        s = s[: -len("/.git")]
    s = s.rstrip("/")
    if _SCHEME.match(s):
        s = _SCHEME.sub("", s)
        # bare host ("https://example.com") has no path component
        if "/" not in s:
            raise ValueError(f"cannot derive a directory name from '{url}'")
    name = re.split(r"[/:]", s)[-1]
    for suffix in (".git", ".bundle"):
        if name.endswith(suffix):
            name = name[: -len(suffix)]
            break
    if not name:
        raise ValueError(f"cannot derive a directory name from '{url}'")
    return name


def clone(url: str, directory: str | None = None) -> GitCommand:
    subjects = [check_ref(url, "url")]
    if directory is not None:
        subjects.append(check_ref(directory, "directory"))
    return GitCommand("clone", options=("--quiet",), subjects=tuple(subjects))


def fetch(remote: str | None = None, branch: str | None = None, tags: bool = False) -> GitCommand:
    """Fetch from a remote. A branch requires a remote."""
    if branch is not None and remote is None:
        raise ValueError("fetching a branch requires a remote")
    options = ["--quiet"]
    if tags:
        options.append("--tags")
    subjects: list[str] = []
    if remote is not None:
        subjects.append(check_name(remote, "remote name"))
    if branch is not None:
        subjects.append(check_ref(branch, "branch"))
    return GitCommand("fetch", options=tuple(options), subjects=tuple(subjects))


def pull(
    remote: str | None = None,
    branch: str | None = None,
    rebase: bool = False,
    ff_only: bool = False,
) -> GitCommand:
    if branch is not None and remote is None:
        raise ValueError("pulling a branch requires a remote")
    options: list[str] = []
    if rebase:
        options.append("--rebase")
    if ff_only:
        options.append("--ff-only")
    subjects: list[str] = []
    if remote is not None:
        subjects.append(check_name(remote, "remote name"))
    if branch is not None:
        subjects.append(check_ref(branch, "branch"))
    return GitCommand("pull", options=tuple(options), subjects=tuple(subjects))


def push(
    remote: str | None = None,
    branch: str | None = None,
    set_upstream: bool = False,
    tags: bool = False,
) -> GitCommand:
    if branch is not None and remote is None:
        raise ValueError("pushing a branch requires a remote")
    options = ["--quiet"]
    if set_upstream:
        options.append("--set-upstream")
    if tags:
        options.append("--tags")
    subjects: list[str] = []
    if remote is not None:
        subjects.append(check_name(remote, "remote name"))
    if branch is not None:
        subjects.append(check_ref(branch, "branch"))
    return GitCommand("push", options=tuple(options), subjects=tuple(subjects))
