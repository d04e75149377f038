from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

import typer

from tusk.core.config import Config, find_config, load_config
from tusk.core.errors import ErrorCode
from tusk.core.result import Err
from tusk.git.repository import Repository
from tusk.output.console import ConsoleProtocol, RichConsole

REPO_ENV_VAR = "TUSK_REPO"
VERBOSE_ENV_VAR = "TUSK_VERBOSE"


@dataclass(frozen=True, slots=True)
class CLIContext:
    repo: Repository
    config: Config
    console: ConsoleProtocol


def repo_path() -> Path:
    env = os.environ.get(REPO_ENV_VAR)
    if env:
        return Path(env).expanduser().resolve()
    return Path.cwd().resolve()


def build_context() -> CLIContext:
    path = repo_path()
    console = RichConsole()

    config = Config()
    config_path = find_config(repo=path)
    if config_path is not None:
        config_result = load_config(config_path)
        if isinstance(config_result, Err):
            typer.echo(f"error: {config_result.error.message}", err=True)
            raise typer.Exit(code=int(ErrorCode.ENV_ERROR))
        config = config_result.value

    verbose = os.environ.get(VERBOSE_ENV_VAR) == "1"
    repo = Repository(path, config=config, console=RichConsole(stderr=True), verbose=verbose)
    if not repo.is_inside_work_tree():
        typer.echo(f"error: not a git repository: {path}", err=True)
        raise typer.Exit(code=int(ErrorCode.ENV_ERROR))

    return CLIContext(repo=repo, config=config, console=console)
