"""Working tree status parsed from `git status --porcelain=v1 -b` output.

    ## main...origin/main [ahead 1, behind 2]
    M  staged.py
     M unstaged.py
    R  old.py -> new.py
    ?? untracked.py
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from .paths import unquote_path

__all__ = ["GitStatus", "StatusEntry", "parse_status"]

_NO_COMMITS_PREFIXES = ("No commits yet on ", "Initial commit on ")
_DETACHED = "HEAD (no branch)"


@dataclass(frozen=True, slots=True)
class StatusEntry:
    """A single entry in git status.

    Attributes:
        xy: Two-character status code (e.g. "M ", " M", "??")
        path: File path (the destination for renames and copies)
        orig_path: Source path for renames and copies
    """

    xy: str
    path: str
    orig_path: str | None = None

    @property
    def is_staged(self) -> bool:
        return self.xy not in ("??", "!!") and self.xy[0] != " "

    @property
    def is_unstaged(self) -> bool:
        return self.xy not in ("??", "!!") and self.xy[1] != " "

    @property
    def is_untracked(self) -> bool:
        return self.xy == "??"

    @property
    def is_conflicted(self) -> bool:
        return self.xy in ("DD", "AU", "UD", "UA", "DU", "AA", "UU")

    @property
    def is_renamed(self) -> bool:
        return "R" in self.xy

    def pretty_xy(self) -> str:
        """Format XY with dots for spaces (". M" instead of " M")."""
        return self.xy.replace(" ", ".")


@dataclass(frozen=True, slots=True)
class GitStatus:
    """Parsed git status.

    Attributes:
        branch: Current branch name, "" when HEAD is detached
        upstream: Upstream branch (e.g. "origin/main"), None if not set
        ahead: Number of commits ahead of upstream
        behind: Number of commits behind upstream
        upstream_gone: Upstream is configured but was deleted
        entries: All status entries (staged, unstaged, untracked)
    """

    branch: str
    upstream: str | None = None
    ahead: int = 0
    behind: int = 0
    upstream_gone: bool = False
    entries: tuple[StatusEntry, ...] = field(default_factory=tuple)

    @property
    def is_clean(self) -> bool:
        return len(self.entries) == 0

    @property
    def is_detached(self) -> bool:
        return self.branch == ""

    @property
    def has_divergence(self) -> bool:
        """True if branch has diverged from upstream or has no upstream."""
        return bool(self.ahead or self.behind or self.upstream is None)

    @property
    def staged(self) -> list[StatusEntry]:
        return [e for e in self.entries if e.is_staged]

    @property
    def unstaged(self) -> list[StatusEntry]:
        return [e for e in self.entries if e.is_unstaged]

    @property
    def untracked(self) -> list[StatusEntry]:
        return [e for e in self.entries if e.is_untracked]

    @property
    def conflicted(self) -> list[StatusEntry]:
        return [e for e in self.entries if e.is_conflicted]

    @property
    def staged_count(self) -> int:
        return len(self.staged)

    @property
    def unstaged_count(self) -> int:
        return len(self.unstaged)

    @property
    def untracked_count(self) -> int:
        return len(self.untracked)


def _parse_branch_line(line: str) -> tuple[str, str | None]:
    """Parse "## branch...upstream [info]" into (branch, upstream)."""
    s = line.strip()
    if s.startswith("##"):
        s = s[2:].lstrip()

    if s == _DETACHED:
        return ("", None)
    for prefix in _NO_COMMITS_PREFIXES:
        if s.startswith(prefix):
            return (s[len(prefix) :].strip(), None)

    s = s.split(" [", 1)[0].strip()
    if "..." in s:
        left, right = s.split("...", 1)
        return (left.strip(), right.strip())
    return (s, None)


def _parse_tracking(line: str) -> tuple[int, int, bool]:
    """Extract (ahead, behind, gone) from the bracketed branch line suffix."""
    match = re.search(r"\[([^\]]+)\]$", line.strip())
    if not match:
        return (0, 0, False)

    inside = match.group(1)
    if inside.strip() == "gone":
        return (0, 0, True)

    ahead_match = re.search(r"ahead\s+(\d+)", inside)
    behind_match = re.search(r"behind\s+(\d+)", inside)
    return (
        int(ahead_match.group(1)) if ahead_match else 0,
        int(behind_match.group(1)) if behind_match else 0,
        False,
    )


def _parse_entry(line: str) -> StatusEntry | None:
    """Parse a single "XY path" entry line."""
    if len(line) < 4:
        return None

    xy = line[:2]
    path = line[3:]
    if xy[0] in "RC" and " -> " in path:
        orig, dest = path.split(" -> ", 1)
        return StatusEntry(xy=xy, path=unquote_path(dest), orig_path=unquote_path(orig))
    return StatusEntry(xy=xy, path=unquote_path(path))


def parse_status(output: str) -> GitStatus:
    """Parse `git status --porcelain=v1 -b` output."""
    lines = [ln for ln in output.splitlines() if ln.strip()]
    if not lines:
        return GitStatus(branch="")

    entries: list[StatusEntry] = []
    branch, upstream = "", None
    ahead = behind = 0
    gone = False

    for line in lines:
        if line.startswith("## "):
            branch, upstream = _parse_branch_line(line)
            ahead, behind, gone = _parse_tracking(line)
            continue
        if entry := _parse_entry(line):
            entries.append(entry)

    return GitStatus(
        branch=branch,
        upstream=upstream,
        ahead=ahead,
        behind=behind,
        upstream_gone=gone,
        entries=tuple(entries),
    )
