"""Commit sequences parsed from `git log --pretty=raw` output."""

from __future__ import annotations

import re
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import overload

from .commit import Commit

__all__ = ["Log"]

_HEADER_RE = re.compile(r"^commit \w+")


def _split_commits(output: str) -> Iterator[list[str]]:
    """Group raw log lines into one list per commit."""
    current: list[str] = []
    for line in output.splitlines():
        if _HEADER_RE.match(line) and current:
            yield current
            current = []
        current.append(line)
    if current:
        yield current


@dataclass(frozen=True, slots=True)
class Log(Sequence[Commit]):
    """An ordered list of commits, newest first."""

    commits: tuple[Commit, ...] = ()

    @classmethod
    def from_output(cls, output: str) -> Log:
        commits: list[Commit] = []
        for chunk in _split_commits(output):
            commit = Commit.from_output_lines(chunk)
            if commit is not None:
                commits.append(commit)
        return cls(tuple(commits))

    @property
    def first(self) -> Commit | None:
        return self.commits[0] if self.commits else None

    @property
    def last(self) -> Commit | None:
        return self.commits[-1] if self.commits else None

    def shas(self) -> list[str]:
        return [c.sha for c in self.commits]

    @overload
    def __getitem__(self, index: int) -> Commit: ...

    @overload
    def __getitem__(self, index: slice) -> Sequence[Commit]: ...

    def __getitem__(self, index: int | slice) -> Commit | Sequence[Commit]:
        return self.commits[index]

    def __len__(self) -> int:
        return len(self.commits)

    def __iter__(self) -> Iterator[Commit]:
        return iter(self.commits)
