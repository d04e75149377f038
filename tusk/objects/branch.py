"""Branch records parsed from `git branch -v --no-abbrev` output.

    * main                 2f1d0e...  Subject of the tip commit
      feature/x            8c3a11...  [origin/feature/x: ahead 2] Subject   (with -vv)
    + other-worktree       5e6f77...  (/srv/wt) [origin/other] Subject     (with -vv)
      remotes/origin/HEAD  -> origin/main
    * (HEAD detached at 1a2b3c4) 1a2b3c...  Subject
"""

from __future__ import annotations

import re
from dataclasses import dataclass

__all__ = ["Branch", "parse_branch_name"]

_LINE_RE = re.compile(
    r"^(?P<marker>[*+ ]) (?P<name>\([^)]*\)|\S+)\s+"
    r"(?P<sha>[0-9a-f]{40}|[0-9a-f]{64})(?: (?P<subject>.*))?$"
)
_WORKTREE_RE = re.compile(r"^\((?P<path>.*?)\) (?P<rest>.*)$")
_TRACKING_RE = re.compile(r"^\[(?P<upstream>[^\]:]+)(?::\s*(?P<track>[^\]]*))?\]\s?(?P<rest>.*)$")
_AHEAD_RE = re.compile(r"ahead (\d+)")
_BEHIND_RE = re.compile(r"behind (\d+)")

REMOTE_PREFIX = "remotes/"


def parse_branch_name(line: str) -> str | None:
    """Name from a plain `git branch` line ("* main" -> "main").

    Symbolic refs ("remotes/origin/HEAD -> origin/main") yield None.
    """
    if len(line) < 3 or " -> " in line:
        return None
    name = line[2:].strip()
    return name or None


@dataclass(frozen=True, slots=True)
class Branch:
    """A local or remote-tracking branch.

    Attributes:
        name: Branch name as git prints it ("main", "remotes/origin/main")
        sha: Tip commit
        subject: Subject line of the tip commit
        is_current: True for the checked-out branch
        upstream: Upstream branch, only known from verbose listings
        ahead: Commits ahead of upstream
        behind: Commits behind upstream
        upstream_gone: Upstream is configured but no longer exists
        worktree: Path of the other worktree that has the branch checked out
    """

    name: str
    sha: str
    subject: str = ""
    is_current: bool = False
    upstream: str | None = None
    ahead: int = 0
    behind: int = 0
    upstream_gone: bool = False
    worktree: str | None = None

    @classmethod
    def from_output_line(
        cls,
        line: str,
        verbose: bool = False,
        upstream: str | None = None,
    ) -> Branch | None:
        """Parse one `branch -v` line.

        A `-vv` subject can itself start with "[...]", so the tracking bracket
        is only read when it names the upstream configured for the branch.

        Args:
            line: Output line
            verbose: Line comes from `-vv` output
            upstream: Configured upstream ("origin/main"), None if there is none

        Returns:
            The branch, or None for symbolic refs and unparseable lines.
        """
        m = _LINE_RE.match(line.rstrip("\n"))
        if not m:
            return None

        subject = m.group("subject") or ""
        tracked: str | None = None
        worktree: str | None = None
        ahead = behind = 0
        gone = False

        if verbose and m.group("marker") == "+" and (w := _WORKTREE_RE.match(subject)):
            worktree = w.group("path")
            subject = w.group("rest")

        t = _TRACKING_RE.match(subject) if verbose and upstream else None
        if t is not None and t.group("upstream").strip() == upstream:
            tracked = upstream
            track = t.group("track") or ""
            subject = t.group("rest")
            gone = track.strip() == "gone"
            if a := _AHEAD_RE.search(track):
                ahead = int(a.group(1))
            if b := _BEHIND_RE.search(track):
                behind = int(b.group(1))

        return cls(
            name=m.group("name"),
            sha=m.group("sha"),
            subject=subject,
            is_current=m.group("marker") == "*",
            upstream=tracked,
            ahead=ahead,
            behind=behind,
            upstream_gone=gone,
            worktree=worktree,
        )

    @property
    def is_remote(self) -> bool:
        return self.name.startswith(REMOTE_PREFIX)

    @property
    def is_detached(self) -> bool:
        """True for the pseudo-branch git lists when HEAD is detached."""
        return self.name.startswith("(")

    @property
    def short_name(self) -> str:
        """Name without the "remotes/" prefix."""
        if self.is_remote:
            return self.name[len(REMOTE_PREFIX) :]
        return self.name

    @property
    def full_ref(self) -> str:
        if self.is_detached:
            return "HEAD"
        if self.is_remote:
            return f"refs/{self.name}"
        return f"refs/heads/{self.name}"

    def __str__(self) -> str:
        return self.name
