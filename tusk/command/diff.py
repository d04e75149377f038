"""Builders for `git diff`."""

from __future__ import annotations

from .base import GitCommand, check_ref

__all__ = ["diff"]

_DIFF_OPTIONS = (
    "--full-index",
    "--no-color",
    "--no-ext-diff",
    "--src-prefix=a/",
    "--dst-prefix=b/",
    "-M",
)


def diff(from_ref: str = "HEAD", to_ref: str | None = None, path: str | None = None) -> GitCommand:
    """Patch between two treeishes, or between from_ref and the working tree.

    Full indexes, fixed a/ b/ prefixes and unquoted non-ASCII paths keep the
    output stable for parsing regardless of the user's configuration.
    """
    subjects = [check_ref(from_ref)]
    if to_ref is not None:
        subjects.append(check_ref(to_ref))
    return GitCommand(
        "diff",
        options=_DIFF_OPTIONS,
        subjects=tuple(subjects),
        paths=(path,) if path else (),
        config=(("core.quotepath", "off"),),
    )
