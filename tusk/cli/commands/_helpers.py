"""Shared helpers for CLI commands."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, NoReturn, TypeVar

import typer

from tusk.core.errors import ErrorCode
from tusk.core.result import Err, Result

if TYPE_CHECKING:
    from tusk.cli.context import CLIContext
    from tusk.git.caller import GitError

T = TypeVar("T")


def unwrap_or_exit(
    ctx: CLIContext,
    call: Callable[[], Result[T, GitError]],
    error_code: ErrorCode = ErrorCode.GIT_ERROR,
) -> T:
    """Run a repository call and return its value, or exit.

    A GitError prints git's message and exits with error_code. A ValueError
    raised while building the command (bad reference) exits with USER_ERROR.
    """
    try:
        result = call()
    except ValueError as e:
        ctx.console.error(str(e))
        exit_with_code(int(ErrorCode.USER_ERROR))

    if isinstance(result, Err):
        ctx.console.error(result.error.message)
        exit_with_code(int(error_code))
    return result.value


def exit_with_code(code: int) -> NoReturn:
    raise typer.Exit(code=code)
