"""Tag records parsed from `git show-ref --tags --dereference` output.

    1a2b3c... refs/tags/v1.0
    9f8e7d... refs/tags/v1.1
    4c5d6e... refs/tags/v1.1^{}

An annotated tag is printed twice: the tag object, then ("^{}") the commit
it points to. Records keep the commit.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

__all__ = ["Tag", "parse_show_ref"]

_REF_RE = re.compile(r"^(?P<sha>[0-9a-f]+) refs/tags/(?P<name>.+?)(?P<peeled>\^\{\})?$")

TAG_PREFIX = "refs/tags/"


@dataclass(frozen=True, slots=True)
class Tag:
    """A tag and the commit it points to."""

    name: str
    sha: str

    @property
    def full_ref(self) -> str:
        return f"{TAG_PREFIX}{self.name}"

    def __str__(self) -> str:
        return self.name


def parse_show_ref(output: str) -> list[Tag]:
    """Parse show-ref output into tags, in the order git lists them."""
    shas: dict[str, str] = {}
    for line in output.splitlines():
        m = _REF_RE.match(line.strip())
        if not m:
            continue
        name = m.group("name")
        if m.group("peeled") or name not in shas:
            shas[name] = m.group("sha")
    return [Tag(name=name, sha=sha) for name, sha in shas.items()]
