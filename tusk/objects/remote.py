"""Remote records parsed from `git remote -v` output.

    origin\thttps://github.com/org/repo.git (fetch)
    origin\tgit@github.com:org/repo.git (push)
"""

from __future__ import annotations

import re
from dataclasses import dataclass

__all__ = ["Remote", "parse_remotes"]

_LINE_RE = re.compile(r"^(?P<name>\S+)\t(?P<url>.*?) \((?P<kind>fetch|push)\)$")


@dataclass(frozen=True, slots=True)
class Remote:
    """A configured remote.

    Attributes:
        name: Remote name
        fetch_url: Url used by fetch and pull
        push_url: Url used by push (same as fetch_url unless pushurl is set)
    """

    name: str
    fetch_url: str
    push_url: str

    def __str__(self) -> str:
        return self.name


def parse_remotes(output: str) -> list[Remote]:
    """Parse `remote -v` output, one record per remote name."""
    urls: dict[str, dict[str, str]] = {}
    for line in output.splitlines():
        m = _LINE_RE.match(line.rstrip())
        if not m:
            continue
        urls.setdefault(m.group("name"), {})[m.group("kind")] = m.group("url")

    remotes: list[Remote] = []
    for name, kinds in urls.items():
        fetch_url = kinds.get("fetch", kinds.get("push", ""))
        remotes.append(
            Remote(name=name, fetch_url=fetch_url, push_url=kinds.get("push", fetch_url))
        )
    return remotes
