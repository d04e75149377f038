"""Branch and tag listing commands."""

from __future__ import annotations

import typer

from tusk.cli.context import build_context
from tusk.output.console import Style

from ._helpers import unwrap_or_exit


def branches(
    all: bool = typer.Option(False, "--all", "-a", help="Include remote-tracking branches"),
) -> None:
    """List branches with their tip commits."""
    ctx = build_context()
    found = unwrap_or_exit(ctx, lambda: ctx.repo.branches(all=all))
    width = ctx.config.output.short_sha

    if not found:
        ctx.console.print("no branches", Style.DIM)
        return

    name_width = max(len(b.name) for b in found)
    for b in found:
        marker = "*" if b.is_current else " "
        line = f"{marker} {b.name:<{name_width}}  {b.sha[:width]}  {b.subject}"
        ctx.console.print(line.rstrip(), Style.REF if b.is_current else Style.DEFAULT)


def tags() -> None:
    """List tags and the commits they point to."""
    ctx = build_context()
    found = unwrap_or_exit(ctx, ctx.repo.tags)
    width = ctx.config.output.short_sha

    if not found:
        ctx.console.print("no tags", Style.DIM)
        return

    name_width = max(len(t.name) for t in found)
    for t in found:
        ctx.console.print(f"{t.name:<{name_width}}  {t.sha[:width]}")


def contains(
    ref: str = typer.Argument(..., help="Commit, tag or branch to look for"),
) -> None:
    """List local branches whose history contains REF."""
    ctx = build_context()
    names = unwrap_or_exit(ctx, lambda: ctx.repo.branches_containing(ref))
    if not names:
        ctx.console.print(f"no branch contains {ref}", Style.DIM)
        return
    for name in names:
        ctx.console.print(name, Style.REF)
