"""Commit, history, tree, content and diff inspection commands."""

from __future__ import annotations

import typer

from tusk.cli.context import build_context
from tusk.objects.commit import Commit
from tusk.objects.diff import Diff, DiffLineKind, DiffMode
from tusk.objects.tree import TreeObject
from tusk.output.console import ConsoleProtocol, Style

from ._helpers import unwrap_or_exit

_DATE_FORMAT = "%Y-%m-%d %H:%M:%S %z"
_MODE_MARKERS = {
    DiffMode.ADDED: "A",
    DiffMode.DELETED: "D",
    DiffMode.MODIFIED: "M",
    DiffMode.RENAMED: "R",
}


def render_commit(console: ConsoleProtocol, commit: Commit) -> None:
    console.print(f"commit {commit.sha}", Style.SHA)
    if commit.is_merge:
        console.print(f"Merge: {' '.join(p[:7] for p in commit.parents)}")
    console.print(f"Author: {commit.author}")
    console.print(f"Date:   {commit.author_date.strftime(_DATE_FORMAT)}")
    if commit.committer != commit.author:
        console.print(f"Commit: {commit.committer}", Style.DIM)
    console.newline()
    for line in commit.message.lines:
        console.print(f"    {line}")


def _render_node(node: TreeObject, width: int, full: bool) -> str:
    size = "-" if node.size is None else str(node.size)
    name = node.full_path if full else node.name
    if node.is_tree:
        name += "/"
    return f"{node.mode} {node.type:<6} {node.sha[:width]} {size:>8}  {name}"


def render_diff(console: ConsoleProtocol, found: Diff, patch: bool = False) -> None:
    for f in found:
        marker = _MODE_MARKERS[f.mode]
        path = f"{f.old_path} -> {f.new_path}" if f.mode is DiffMode.RENAMED else f.path
        stats = "binary" if f.is_binary else f"+{f.additions} -{f.deletions}"
        console.print(f"{marker} {path}  {stats}", Style.HEADER if patch else Style.DEFAULT)
        if not patch:
            continue
        for chunk in f.chunks:
            console.print(
                f"@@ -{chunk.old_start},{chunk.old_count} +{chunk.new_start},{chunk.new_count} @@",
                Style.INFO,
            )
            for line in chunk.lines:
                style = {
                    DiffLineKind.ADDED: Style.SUCCESS,
                    DiffLineKind.DELETED: Style.ERROR,
                }.get(line.kind, Style.DEFAULT)
                console.print(f"{line.kind.value}{line.content}", style)

    console.print(
        f"{len(found)} file(s) changed, {found.additions} insertion(s), "
        f"{found.deletions} deletion(s)",
        Style.DIM,
    )


def show(
    ref: str = typer.Argument("HEAD", help="Commit to show"),
) -> None:
    """Show a single commit."""
    ctx = build_context()
    commit = unwrap_or_exit(ctx, lambda: ctx.repo.get_commit(ref))
    render_commit(ctx.console, commit)


def log(
    ref: str = typer.Argument("HEAD", help="Where to start"),
    limit: int | None = typer.Option(None, "--limit", "-n", help="Number of commits (0: all)"),
    path: str | None = typer.Option(None, "--path", "-p", help="Only commits touching PATH"),
    skip: int = typer.Option(0, "--skip", help="Commits to skip"),
) -> None:
    """Show commit history, one line per commit."""
    ctx = build_context()
    history = unwrap_or_exit(
        ctx, lambda: ctx.repo.get_log(ref, path=path, limit=limit, offset=skip)
    )
    width = ctx.config.output.short_sha
    for commit in history:
        date = commit.author_date.strftime("%Y-%m-%d")
        subject = commit.message.short
        ctx.console.print(f"{commit.short_sha(width)} {date} {commit.author.name}: {subject}")


def tree(
    ref: str = typer.Argument("HEAD", help="Treeish to list"),
    path: str = typer.Argument("", help="Directory or file inside the tree"),
    recursive: bool = typer.Option(False, "--recursive", "-r", help="Recurse into subtrees"),
) -> None:
    """List the contents of a tree."""
    ctx = build_context()
    listing = unwrap_or_exit(ctx, lambda: ctx.repo.get_tree(ref, path, recursive=recursive))
    width = ctx.config.output.short_sha

    if listing.blob is not None:
        ctx.console.print(_render_node(listing.blob, width, full=True))
        return
    for node in listing:
        ctx.console.print(_render_node(node, width, full=recursive))


def cat(
    ref: str = typer.Argument(..., help="Treeish"),
    path: str = typer.Argument(..., help="File path inside the tree"),
) -> None:
    """Print the content of a file at REF."""
    ctx = build_context()
    content = unwrap_or_exit(ctx, lambda: ctx.repo.output_content(ref, path))
    typer.echo(content, nl=False)


def diff(
    from_ref: str = typer.Argument("HEAD", help="Old side"),
    to_ref: str | None = typer.Argument(None, help="New side (default: working tree)"),
    path: str | None = typer.Option(None, "--path", "-p", help="Limit to PATH"),
    patch: bool = typer.Option(False, "--patch", help="Show hunks, not only a summary"),
) -> None:
    """Summarize changes between two treeishes."""
    ctx = build_context()
    found = unwrap_or_exit(ctx, lambda: ctx.repo.diff(from_ref, to_ref, path=path))
    render_diff(ctx.console, found, patch=patch)
