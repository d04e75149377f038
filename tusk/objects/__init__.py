"""Typed records parsed from git output."""

from .author import Author
from .branch import Branch, parse_branch_name
from .commit import Commit, CommitMessage
from .diff import Diff, DiffChunk, DiffFile, DiffLine, DiffLineKind, DiffMode, parse_diff
from .log import Log
from .remote import Remote, parse_remotes
from .status import GitStatus, StatusEntry, parse_status
from .tag import Tag, parse_show_ref
from .tree import ObjectType, Tree, TreeObject

__all__ = [
    "Author",
    "Branch",
    "Commit",
    "CommitMessage",
    "Diff",
    "DiffChunk",
    "DiffFile",
    "DiffLine",
    "DiffLineKind",
    "DiffMode",
    "GitStatus",
    "Log",
    "ObjectType",
    "Remote",
    "StatusEntry",
    "Tag",
    "Tree",
    "TreeObject",
    "parse_branch_name",
    "parse_diff",
    "parse_remotes",
    "parse_show_ref",
    "parse_status",
]
