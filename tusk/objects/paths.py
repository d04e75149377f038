"""Git path quoting.

Git prints paths that contain control characters, quotes, backslashes or
(by default) non-ASCII bytes as C-style quoted strings:

    "caf\303\251.txt"   ->  café.txt
    "tab\there"         ->  tab<TAB>here
"""

from __future__ import annotations

import codecs

__all__ = ["split_path", "unquote_path"]


def unquote_path(path: str) -> str:
    """Undo git's C-style quoting. Unquoted paths are returned as-is."""
    if len(path) < 2 or not (path.startswith('"') and path.endswith('"')):
        return path
    body = path[1:-1]
    # Octal escapes are UTF-8 bytes; escape_decode yields the raw bytes.
    raw, _ = codecs.escape_decode(body.encode("utf-8"))  # type: ignore[attr-defined]
    return raw.decode("utf-8", errors="replace")


def split_path(full_path: str) -> tuple[str, str]:
    """Split "a/b/c.txt" into ("a/b", "c.txt"). Root entries get an empty dir."""
    full_path = full_path.rstrip("/")
    head, sep, tail = full_path.rpartition("/")
    if not sep:
        return "", full_path
    return head, tail
