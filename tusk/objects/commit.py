"""Commit records parsed from `--pretty=raw` output.

A raw commit looks like:

    commit 9b1f0c...
    tree 4b825d...
    parent 1a2b3c...
    author Jane Doe <jane@example.com> 1700000000 +0100
    committer Jane Doe <jane@example.com> 1700000000 +0100

        Subject line

        Body paragraph.

Message lines are indented by four spaces; everything else is a header.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from .author import Author

__all__ = ["Commit", "CommitMessage", "parse_identity_line"]

_COMMIT_RE = re.compile(r"^commit (\w+)")
_TREE_RE = re.compile(r"^tree (\w+)$")
_PARENT_RE = re.compile(r"^parent (\w+)$")
_IDENTITY_RE = re.compile(r"^(author|committer) (.*) <(.*)> (\d+) (.*)$")
_MESSAGE_RE = re.compile(r"^    (.*)$")
_TZ_RE = re.compile(r"^([+-])(\d{2})(\d{2})$")

SHORT_SHA_LENGTH = 7


@dataclass(frozen=True, slots=True)
class CommitMessage:
    """A commit message, split into lines."""

    lines: tuple[str, ...] = ()

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> CommitMessage:
        out = list(lines)
        while out and not out[-1].strip():
            out.pop()
        return cls(tuple(out))

    @property
    def short(self) -> str:
        """The subject line."""
        return self.lines[0] if self.lines else ""

    @property
    def full(self) -> str:
        return "\n".join(self.lines)

    @property
    def body(self) -> str:
        """Everything after the subject and its separating blank line."""
        return "\n".join(self.lines[1:]).strip("\n")

    def __str__(self) -> str:
        return self.full


def _timezone(offset: str) -> timezone:
    m = _TZ_RE.match(offset.strip())
    if not m:
        return timezone.utc
    sign = -1 if m.group(1) == "-" else 1
    try:
        return timezone(sign * timedelta(hours=int(m.group(2)), minutes=int(m.group(3))))
    except ValueError:
        # git stores offsets of 24h or more, which datetime cannot represent
        return timezone.utc


def parse_identity_line(line: str) -> tuple[str, Author, datetime] | None:
    """Parse an "author ..." or "committer ..." header.

    Returns:
        (role, Author, timezone-aware datetime), or None if the line is not
        an identity header.
    """
    m = _IDENTITY_RE.match(line)
    if not m:
        return None
    role, name, email, stamp, offset = m.groups()
    when = datetime.fromtimestamp(int(stamp), tz=_timezone(offset))
    return role, Author(name=name, email=email), when


@dataclass(frozen=True, slots=True)
class Commit:
    """A single commit.

    Attributes:
        sha: Full object name
        tree: Sha of the root tree
        parents: Parent shas, first parent first
        author: Who wrote the change
        committer: Who recorded it
        author_date: When it was written
        committer_date: When it was recorded
        message: Commit message
    """

    sha: str
    tree: str
    parents: tuple[str, ...]
    author: Author
    committer: Author
    author_date: datetime
    committer_date: datetime
    message: CommitMessage

    @property
    def is_root(self) -> bool:
        """True for a commit without parents, usually the first of the repository."""
        return len(self.parents) == 0

    @property
    def is_merge(self) -> bool:
        return len(self.parents) > 1

    def short_sha(self, length: int = SHORT_SHA_LENGTH) -> str:
        return self.sha[:length]

    def __str__(self) -> str:
        return self.sha

    @classmethod
    def from_output_lines(cls, lines: Iterable[str]) -> Commit | None:
        """Build a commit from the lines of a single raw commit.

        Returns None if the lines lack a commit header, tree, author or committer.
        """
        sha: str | None = None
        tree: str | None = None
        parents: list[str] = []
        identities: dict[str, tuple[Author, datetime]] = {}
        message: list[str] = []

        for line in lines:
            if m := _MESSAGE_RE.match(line):
                message.append(m.group(1))
                continue
            if sha is None and (m := _COMMIT_RE.match(line)):
                sha = m.group(1)
            elif m := _TREE_RE.match(line):
                tree = m.group(1)
            elif m := _PARENT_RE.match(line):
                parents.append(m.group(1))
            elif identity := parse_identity_line(line):
                role, who, when = identity
                identities.setdefault(role, (who, when))

        if sha is None or tree is None:
            return None
        if "author" not in identities or "committer" not in identities:
            return None

        author, author_date = identities["author"]
        committer, committer_date = identities["committer"]
        return cls(
            sha=sha,
            tree=tree,
            parents=tuple(parents),
            author=author,
            committer=committer,
            author_date=author_date,
            committer_date=committer_date,
            message=CommitMessage.from_lines(message),
        )

    @classmethod
    def from_output(cls, output: str) -> Commit | None:
        return cls.from_output_lines(output.splitlines())
