"""Builders for `git branch`."""

from __future__ import annotations

from .base import GitCommand, check_name, check_ref

__all__ = ["contains", "create", "delete", "lists", "single_info", "tracking"]

BRANCH = "branch"


def contains(ref: str) -> GitCommand:
    """Locate branches that contain a reference."""
    return GitCommand(BRANCH, options=("--no-color", "--contains"), subjects=(check_ref(ref),))


def create(name: str, start_point: str | None = None) -> GitCommand:
    """Create a new branch, optionally from a start point."""
    subjects = [check_name(name, "branch name")]
    if start_point is not None:
        subjects.append(check_ref(start_point, "start point"))
    return GitCommand(BRANCH, subjects=tuple(subjects))


def lists(all: bool = False, simple: bool = False) -> GitCommand:
    """List branches.

    Args:
        all: Include remote-tracking branches
        simple: Only branch names, without sha and subject
    """
    options: list[str] = []
    if not simple:
        options.append("-v")
    options.extend(["--no-color", "--no-abbrev"])
    if all:
        options.append("-a")
    return GitCommand(BRANCH, options=tuple(options))


def single_info(
    name: str,
    all: bool = False,
    simple: bool = False,
    verbose: bool = False,
) -> GitCommand:
    """Info about a single branch.

    Args:
        name: Branch name (may be a glob, as accepted by --list)
        all: Also match remote-tracking branches
        simple: Only the branch name
        verbose: Also show the upstream branch and tracking counts
    """
    options: list[str] = []
    if not simple:
        options.append("-v")
    options.extend(["--list", "--no-color", "--no-abbrev"])
    if all:
        options.append("-a")
    if verbose:
        options.append("-vv")
    return GitCommand(BRANCH, options=tuple(options), subjects=(check_ref(name, "branch name"),))


def tracking(name: str) -> GitCommand:
    """Configured upstream of each local branch matching name.

    One "<branch> <upstream>" line per branch, the upstream empty when none is
    set. Read from the branch configuration, so upstreams that are gone
    still show.
    """
    return GitCommand(
        "for-each-ref",
        options=("--format=%(refname:lstrip=2) %(upstream:short)",),
        subjects=(f"refs/heads/{check_ref(name, 'branch name')}",),
    )


def delete(name: str, force: bool = False) -> GitCommand:
    """Delete a branch. Without force git refuses to drop unmerged work."""
    return GitCommand(
        BRANCH,
        options=("-D" if force else "-d",),
        subjects=(check_name(name, "branch name"),),
    )
