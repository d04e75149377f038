"""Status command - branch, upstream and pending changes."""

from __future__ import annotations

import typer

from tusk.cli.context import build_context
from tusk.objects.status import GitStatus
from tusk.output.console import ConsoleProtocol, Style

from ._helpers import unwrap_or_exit


def _render_tracking(st: GitStatus) -> str:
    if st.upstream is None:
        return "no upstream"
    if st.upstream_gone:
        return f"{st.upstream} (gone)"
    parts: list[str] = []
    if st.ahead:
        parts.append(f"ahead {st.ahead}")
    if st.behind:
        parts.append(f"behind {st.behind}")
    return f"{st.upstream} ({', '.join(parts) or 'up to date'})"


def render_status(console: ConsoleProtocol, st: GitStatus, short: bool = False) -> None:
    if not short:
        branch = st.branch or "(detached HEAD)"
        console.print(f"{branch}  {_render_tracking(st)}", Style.REF)

    if st.is_clean:
        if not short:
            console.print("working tree clean", Style.DIM)
        return

    for entry in st.entries:
        style = Style.DEFAULT
        if entry.is_conflicted:
            style = Style.ERROR
        elif entry.is_untracked:
            style = Style.INFO
        elif entry.is_staged:
            style = Style.SUCCESS
        elif entry.is_unstaged:
            style = Style.WARNING
        path = f"{entry.orig_path} -> {entry.path}" if entry.orig_path else entry.path
        console.print(f"{entry.pretty_xy()} {path}", style)


def status(
    short: bool = typer.Option(False, "--short", "-s", help="Only list changed paths"),
) -> None:
    """Show the current branch and pending changes."""
    ctx = build_context()
    st = unwrap_or_exit(ctx, ctx.repo.status)
    render_status(ctx.console, st, short=short)
