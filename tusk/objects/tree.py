"""Tree listings parsed from `git ls-tree -l` output.

Each line describes one node:

    100644 blob 3b18e512dba79e4c8300dd08aeb37f8e728b8dad      12\tsrc/main.py
    040000 tree 9bf5a6c3c1c1f1c9c3f0e0cb7f3c3a2c1b5a1f2e       -\tsrc/lib
    160000 commit 5f2c9a1e...                                    -\tvendor/dep

A "commit" node is a submodule link.
"""

from __future__ import annotations

import mimetypes
import re
from collections.abc import Iterator
from dataclasses import dataclass
from enum import StrEnum

from .paths import split_path, unquote_path

__all__ = ["ObjectType", "Tree", "TreeObject"]

_LINE_RE = re.compile(r"^(\d+) (\w+) ([a-z0-9]+) +(\d+|-)\t(.*)$")


class ObjectType(StrEnum):
    """Node types that appear in a tree."""

    BLOB = "blob"
    TREE = "tree"
    COMMIT = "commit"


@dataclass(frozen=True, slots=True)
class TreeObject:
    """A node in a git tree: a file, a directory or a submodule link.

    Attributes:
        mode: Octal file mode as printed by git (e.g. "100644")
        type: Node type
        sha: Object name
        size: Blob size in bytes, None for trees and links
        name: Last path component
        path: Directory containing the node, "" at the repository root
    """

    mode: str
    type: ObjectType
    sha: str
    size: int | None
    name: str
    path: str

    @classmethod
    def from_output_line(cls, line: str) -> TreeObject | None:
        """Parse one ls-tree line. Returns None if it does not match."""
        m = _LINE_RE.match(line)
        if not m:
            return None
        mode, kind, sha, size, full_path = m.groups()
        try:
            node_type = ObjectType(kind)
        except ValueError:
            return None
        path, name = split_path(unquote_path(full_path))
        return cls(
            mode=mode,
            type=node_type,
            sha=sha,
            size=None if size == "-" else int(size),
            name=name,
            path=path,
        )

    @property
    def full_path(self) -> str:
        return f"{self.path}/{self.name}" if self.path else self.name

    @property
    def is_tree(self) -> bool:
        return self.type is ObjectType.TREE

    @property
    def is_blob(self) -> bool:
        return self.type is ObjectType.BLOB

    @property
    def is_link(self) -> bool:
        """True for a submodule."""
        return self.type is ObjectType.COMMIT

    @property
    def is_executable(self) -> bool:
        return self.mode == "100755"

    @property
    def is_symlink(self) -> bool:
        return self.mode == "120000"

    @property
    def extension(self) -> str | None:
        """File extension without the dot; None for dotfiles and extensionless names."""
        pos = self.name.rfind(".")
        if pos <= 0 or pos == len(self.name) - 1:
            return None
        return self.name[pos + 1 :]

    def mime_type(self) -> str | None:
        """Mime type guessed from the name. None for trees, links and unknown types."""
        if not self.is_blob:
            return None
        return mimetypes.guess_type(self.name)[0]

    def __str__(self) -> str:
        return self.name


def _sort_key(node: TreeObject) -> tuple[bool, str]:
    return (not node.is_tree, node.name)


@dataclass(frozen=True, slots=True)
class Tree:
    """Contents of a path at a treeish.

    When the path names a directory, entries lists its children and blob is
    None. When it names a file or submodule, blob holds that node and
    entries is empty.

    Attributes:
        ref: Treeish the listing was taken from
        path: Listed path, "" for the root
        entries: Child nodes
        blob: The node itself when path is not a directory
    """

    ref: str
    path: str = ""
    entries: tuple[TreeObject, ...] = ()
    blob: TreeObject | None = None

    @classmethod
    def from_output(cls, ref: str, path: str, output: str, *, recursive: bool = False) -> Tree:
        """Build a directory listing from ls-tree output.

        Flat listings are ordered directories first, then by name. Recursive
        listings keep git's path order so that children follow their parent.
        """
        nodes = [
            node
            for node in (TreeObject.from_output_line(line) for line in output.splitlines())
            if node is not None
        ]
        if not recursive:
            nodes.sort(key=_sort_key)
        return cls(ref=ref, path=path.strip("/"), entries=tuple(nodes))

    @property
    def is_root(self) -> bool:
        return self.path == ""

    @property
    def is_blob(self) -> bool:
        return self.blob is not None

    @property
    def parent(self) -> str | None:
        """Path of the parent directory, None at the root."""
        if self.is_root:
            return None
        return split_path(self.path)[0]

    @property
    def trees(self) -> list[TreeObject]:
        return [e for e in self.entries if e.is_tree]

    @property
    def blobs(self) -> list[TreeObject]:
        return [e for e in self.entries if e.is_blob]

    @property
    def links(self) -> list[TreeObject]:
        return [e for e in self.entries if e.is_link]

    def get(self, name: str) -> TreeObject | None:
        """Find a child by name (or by full path in recursive listings)."""
        for entry in self.entries:
            if entry.name == name or entry.full_path == name:
                return entry
        return None

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[TreeObject]:
        return iter(self.entries)
