"""Git command execution.

GitCaller turns a GitCommand into a subprocess run against one repository
and maps process failures to GitError values.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from tusk.command.base import GitCommand
from tusk.core.config import GitConfig
from tusk.core.result import Err, Ok, Result
from tusk.platform.process import ProcessError, git_env
from tusk.platform.process import run as run_process

if TYPE_CHECKING:
    from tusk.output.console import ConsoleProtocol

__all__ = ["GitCaller", "GitError", "output_lines"]


@dataclass(frozen=True, slots=True)
class GitError:
    """Error from a git operation.

    Attributes:
        command: The git subcommand that failed (e.g. "ls-tree")
        message: Error message, usually git's own stderr
        returncode: Process return code (-1 if git never ran or timed out)
    """

    command: str
    message: str
    returncode: int = 1

    @classmethod
    def from_process(cls, command: GitCommand, error: ProcessError) -> GitError:
        message = error.stderr.strip() or error.stdout.strip() or f"git {command.name} failed"
        return cls(command=command.name, message=message, returncode=error.returncode)

    def __str__(self) -> str:
        return f"git {self.command}: {self.message}"


def output_lines(stdout: str, skip_empty: bool = False) -> list[str]:
    """Split command output into lines, dropping the trailing newline."""
    lines = stdout.splitlines()
    if skip_empty:
        return [ln for ln in lines if ln.strip()]
    return lines


class GitCaller:
    """Runs git commands in a repository.

    Attributes:
        path: Directory git runs in (passed as -C)
        config: Binary and timeouts
    """

    def __init__(
        self,
        path: Path,
        config: GitConfig | None = None,
        console: ConsoleProtocol | None = None,
        verbose: bool = False,
    ) -> None:
        self.path = path
        self.config = config or GitConfig()
        self._console = console
        self._verbose = verbose

    def argv(self, command: GitCommand) -> list[str]:
        """Full argument vector for command."""
        return [self.config.binary, "-C", str(self.path), *command.args()]

    def execute(self, command: GitCommand) -> Result[str, GitError]:
        """Run command and return its stdout.

        Returns:
            Ok(stdout) on success
            Err(GitError) on non-zero exit, timeout or missing binary
        """
        timeout = self.config.network_timeout if command.is_network else self.config.timeout
        if self._console is not None and self._verbose:
            self._console.trace(str(command))

        result = run_process(self.argv(command), cwd=self.path, env=git_env(), timeout=timeout)
        match result:
            case Err(e):
                error = GitError.from_process(command, e)
                if self._console is not None and self._verbose:
                    self._console.warning(str(error))
                return Err(error)
            case Ok(stdout):
                return Ok(stdout)

    def lines(self, command: GitCommand, skip_empty: bool = False) -> Result[list[str], GitError]:
        """Run command and return its stdout split into lines."""
        return self.execute(command).map(lambda out: output_lines(out, skip_empty))
