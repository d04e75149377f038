"""Patch records parsed from `git diff` output.

unidiff does the parsing; this module converts its PatchSet into frozen
records with git's a/ b/ prefixes removed and the change kind derived
from the old and new paths.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import StrEnum

from unidiff import PatchSet
from unidiff.constants import DEV_NULL, LINE_TYPE_ADDED, LINE_TYPE_CONTEXT, LINE_TYPE_REMOVED
from unidiff.errors import UnidiffParseError
from unidiff.patch import Hunk, PatchedFile

from .paths import unquote_path

__all__ = [
    "Diff",
    "DiffChunk",
    "DiffFile",
    "DiffLine",
    "DiffLineKind",
    "DiffMode",
    "parse_diff",
]


class DiffMode(StrEnum):
    ADDED = "added"
    DELETED = "deleted"
    MODIFIED = "modified"
    RENAMED = "renamed"


class DiffLineKind(StrEnum):
    ADDED = "+"
    DELETED = "-"
    UNCHANGED = " "


_LINE_KINDS = {
    LINE_TYPE_ADDED: DiffLineKind.ADDED,
    LINE_TYPE_REMOVED: DiffLineKind.DELETED,
    LINE_TYPE_CONTEXT: DiffLineKind.UNCHANGED,
}


@dataclass(frozen=True, slots=True)
class DiffLine:
    """One line of a hunk.

    Attributes:
        kind: Added, deleted or context line
        content: Line text without the leading marker
        old_number: Line number in the old file, None for added lines
        new_number: Line number in the new file, None for deleted lines
    """

    kind: DiffLineKind
    content: str
    old_number: int | None
    new_number: int | None


@dataclass(frozen=True, slots=True)
class DiffChunk:
    """A hunk: a contiguous region of changes with its context."""

    old_start: int
    old_count: int
    new_start: int
    new_count: int
    header: str = ""
    lines: tuple[DiffLine, ...] = ()

    @property
    def additions(self) -> int:
        return sum(1 for ln in self.lines if ln.kind is DiffLineKind.ADDED)

    @property
    def deletions(self) -> int:
        return sum(1 for ln in self.lines if ln.kind is DiffLineKind.DELETED)


@dataclass(frozen=True, slots=True)
class DiffFile:
    """Changes to a single file.

    Attributes:
        old_path: Path before the change, None for added files
        new_path: Path after the change, None for deleted files
        mode: Kind of change
        chunks: Hunks, empty for binary files and pure renames
        is_binary: Git reported "Binary files ... differ"
    """

    old_path: str | None
    new_path: str | None
    mode: DiffMode
    chunks: tuple[DiffChunk, ...] = ()
    is_binary: bool = False

    @property
    def path(self) -> str:
        """The path that exists after the change (old path for deletions)."""
        return self.new_path or self.old_path or ""

    @property
    def additions(self) -> int:
        return sum(c.additions for c in self.chunks)

    @property
    def deletions(self) -> int:
        return sum(c.deletions for c in self.chunks)


@dataclass(frozen=True, slots=True)
class Diff:
    """A parsed patch."""

    files: tuple[DiffFile, ...] = ()

    @property
    def additions(self) -> int:
        return sum(f.additions for f in self.files)

    @property
    def deletions(self) -> int:
        return sum(f.deletions for f in self.files)

    def get(self, path: str) -> DiffFile | None:
        for f in self.files:
            if path in (f.new_path, f.old_path):
                return f
        return None

    def __len__(self) -> int:
        return len(self.files)

    def __iter__(self) -> Iterator[DiffFile]:
        return iter(self.files)


def _side_path(raw: str | None, prefix: str) -> str | None:
    if not raw or raw == DEV_NULL:
        return None
    return unquote_path(raw).removeprefix(prefix)


def _mode(old_path: str | None, new_path: str | None) -> DiffMode:
    if old_path is None:
        return DiffMode.ADDED
    if new_path is None:
        return DiffMode.DELETED
    if old_path != new_path:
        return DiffMode.RENAMED
    return DiffMode.MODIFIED


def _chunk(hunk: Hunk) -> DiffChunk:
    lines = []
    for line in hunk:
        kind = _LINE_KINDS.get(line.line_type)
        if kind is None:
            continue  # "\ No newline at end of file"
        lines.append(
            DiffLine(kind, line.value.removesuffix("\n"), line.source_line_no, line.target_line_no)
        )
    return DiffChunk(
        old_start=hunk.source_start,
        old_count=hunk.source_length,
        new_start=hunk.target_start,
        new_count=hunk.target_length,
        header=hunk.section_header,
        lines=tuple(lines),
    )


def _file(patched: PatchedFile) -> DiffFile:
    old_path = _side_path(patched.source_file, "a/")
    new_path = _side_path(patched.target_file, "b/")
    return DiffFile(
        old_path=old_path,
        new_path=new_path,
        mode=_mode(old_path, new_path),
        chunks=tuple(_chunk(h) for h in patched),
        is_binary=bool(patched.is_binary_file),
    )


def parse_diff(output: str) -> Diff:
    """Parse the output of `git diff` (as built by tusk.command.diff).

    Raises:
        ValueError: If the patch is malformed (e.g. a hunk shorter than its header).
    """
    try:
        patch = PatchSet(output)
    except UnidiffParseError as e:
        raise ValueError(f"malformed patch: {e}") from e
    return Diff(files=tuple(_file(p) for p in patch))
