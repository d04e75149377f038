"""Git command assembly.

A GitCommand is an immutable argument vector for one git subcommand.
Builder modules (branch, show, ls_tree, ...) return GitCommand values;
nothing here executes anything.

Usage:
    cmd = GitCommand("branch", options=("-v", "--no-color"))
    cmd.args()  # ["branch", "-v", "--no-color"]
    str(cmd)    # "git branch -v --no-color"
"""

from __future__ import annotations

import shlex
from dataclasses import dataclass

__all__ = [
    "GitCommand",
    "NETWORK_COMMANDS",
    "check_name",
    "check_ref",
]

NETWORK_COMMANDS = frozenset({"clone", "fetch", "pull", "push"})


@dataclass(frozen=True, slots=True)
class GitCommand:
    """A single git invocation.

    Attributes:
        name: Subcommand name (e.g. "branch", "ls-tree")
        options: Flags placed right after the subcommand
        subjects: Positional arguments (refs, names, urls)
        paths: Pathspecs, emitted after a "--" separator
        config: Per-invocation "-c key=value" overrides
    """

    name: str
    options: tuple[str, ...] = ()
    subjects: tuple[str, ...] = ()
    paths: tuple[str, ...] = ()
    config: tuple[tuple[str, str], ...] = ()

    @property
    def is_network(self) -> bool:
        """True for commands that may talk to a remote."""
        return self.name in NETWORK_COMMANDS

    def args(self) -> list[str]:
        """Arguments to pass after the git binary."""
        out: list[str] = []
        for key, value in self.config:
            out.extend(["-c", f"{key}={value}"])
        out.append(self.name)
        out.extend(self.options)
        out.extend(self.subjects)
        if self.paths:
            out.append("--")
            out.extend(self.paths)
        return out

    def __str__(self) -> str:
        return shlex.join(["git", *self.args()])


def check_ref(ref: str, what: str = "reference") -> str:
    """Validate a reference passed as a positional argument.

    Raises:
        ValueError: If the reference is empty or would be read as an option.
    """
    if not ref or not ref.strip():
        raise ValueError(f"empty {what}")
    if ref.startswith("-"):
        raise ValueError(f"invalid {what} '{ref}': must not start with '-'")
    return ref


def check_name(name: str, what: str = "name") -> str:
    """Validate a branch, tag or remote name.

    Raises:
        ValueError: If the name is empty, starts with '-' or contains whitespace.
    """
    check_ref(name, what)
    if any(ch.isspace() for ch in name):
        raise ValueError(f"invalid {what} '{name}': must not contain whitespace")
    return name
