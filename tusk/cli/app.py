from __future__ import annotations

import os
from pathlib import Path

import typer

from tusk import __version__
from tusk.cli.commands.history import cat, diff, log, show, tree
from tusk.cli.commands.refs import branches, contains, tags
from tusk.cli.commands.status import status
from tusk.cli.context import REPO_ENV_VAR, VERBOSE_ENV_VAR
from tusk.core.config import CONFIG_ENV_VAR
from tusk.core.errors import ErrorCode


app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    rich_markup_mode="rich",
)


# Commands
app.command()(status)
app.command()(branches)
app.command()(tags)
app.command()(contains)
app.command()(show)
app.command()(log)
app.command()(tree)
app.command()(cat)
app.command()(diff)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit(code=0)


@app.callback()
def _main(  # pyright: ignore[reportUnusedFunction]
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    repo: Path | None = typer.Option(
        None,
        "--repo",
        "-C",
        help="Repository to operate on (default: current directory)",
    ),
    config: Path | None = typer.Option(
        None,
        "--config",
        help=f"Config file (default: ${CONFIG_ENV_VAR} or <repo>/.tusk.toml)",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Echo git commands to stderr."),
) -> None:
    if repo is not None:
        try:
            root = repo.expanduser().resolve()
        except OSError as e:
            typer.echo(f"error: invalid --repo: {e}", err=True)
            raise typer.Exit(code=int(ErrorCode.USER_ERROR))

        if not root.is_dir():
            typer.echo(f"error: --repo '{root}' is not a directory", err=True)
            raise typer.Exit(code=int(ErrorCode.USER_ERROR))

        os.environ[REPO_ENV_VAR] = str(root)

    if config is not None:
        if not config.is_file():
            typer.echo(f"error: config file not found: {config}", err=True)
            raise typer.Exit(code=int(ErrorCode.IO_ERROR))
        os.environ[CONFIG_ENV_VAR] = str(config.expanduser().resolve())

    if verbose:
        os.environ[VERBOSE_ENV_VAR] = "1"


def main() -> None:
    app()
