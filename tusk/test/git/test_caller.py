"""Tests for tusk.git.caller module."""

from __future__ import annotations

import subprocess
from pathlib import Path
from unittest.mock import MagicMock, patch

from tusk.command.base import GitCommand
from tusk.core.config import GitConfig
from tusk.core.result import Err, Ok
from tusk.git.caller import GitCaller, GitError, output_lines
from tusk.output.console import MockConsole
from tusk.platform.process import ProcessError


def make_completed_process(
    stdout: str = "",
    stderr: str = "",
    returncode: int = 0,
) -> subprocess.CompletedProcess[str]:
    """Create a mock CompletedProcess."""
    return subprocess.CompletedProcess(
        args=["git"],
        returncode=returncode,
        stdout=stdout,
        stderr=stderr,
    )


class TestGitError:
    def test_from_process_prefers_stderr(self) -> None:
        error = GitError.from_process(
            GitCommand("log"),
            ProcessError(("git", "log"), 128, "partial", "fatal: bad revision 'nope'\n"),
        )
        assert error == GitError("log", "fatal: bad revision 'nope'", 128)
        assert str(error) == "git log: fatal: bad revision 'nope'"

    def test_from_process_falls_back_to_stdout(self) -> None:
        error = GitError.from_process(
            GitCommand("merge"), ProcessError(("git",), 1, "CONFLICT (content)\n", "")
        )
        assert error.message == "CONFLICT (content)"

    def test_from_process_generic_message(self) -> None:
        error = GitError.from_process(GitCommand("show-ref"), ProcessError(("git",), 1, "", ""))
        assert error.message == "git show-ref failed"


class TestOutputLines:
    def test_split(self) -> None:
        assert output_lines("a\nb\n") == ["a", "b"]

    def test_skip_empty(self) -> None:
        assert output_lines("a\n\n  \nb\n", skip_empty=True) == ["a", "b"]
        assert output_lines("") == []


class TestGitCaller:
    def test_argv(self, tmp_path: Path) -> None:
        caller = GitCaller(tmp_path, GitConfig(binary="/opt/git"))
        assert caller.argv(GitCommand("status")) == ["/opt/git", "-C", str(tmp_path), "status"]

    @patch("subprocess.run")
    def test_execute_success(self, mock_run: MagicMock, tmp_path: Path) -> None:
        mock_run.return_value = make_completed_process(stdout="true\n")

        result = GitCaller(tmp_path).execute(GitCommand("rev-parse", ("--is-inside-work-tree",)))

        assert result == Ok("true\n")
        args, kwargs = mock_run.call_args
        assert args[0] == ["git", "-C", str(tmp_path), "rev-parse", "--is-inside-work-tree"]
        assert kwargs["cwd"] == str(tmp_path)
        assert kwargs["env"]["LC_ALL"] == "C"
        assert kwargs["timeout"] == 30.0

    @patch("subprocess.run")
    def test_network_timeout(self, mock_run: MagicMock, tmp_path: Path) -> None:
        mock_run.return_value = make_completed_process()
        config = GitConfig(timeout=5, network_timeout=99)

        GitCaller(tmp_path, config).execute(GitCommand("fetch"))

        assert mock_run.call_args.kwargs["timeout"] == 99

    @patch("subprocess.run")
    def test_execute_failure(self, mock_run: MagicMock, tmp_path: Path) -> None:
        mock_run.return_value = make_completed_process(
            returncode=128, stderr="fatal: not a git repository"
        )

        result = GitCaller(tmp_path).execute(GitCommand("status"))

        assert isinstance(result, Err)
        assert result.error.command == "status"
        assert result.error.returncode == 128

    @patch("subprocess.run")
    def test_missing_binary(self, mock_run: MagicMock, tmp_path: Path) -> None:
        mock_run.side_effect = FileNotFoundError("No such file or directory: 'git'")

        result = GitCaller(tmp_path).execute(GitCommand("status"))

        assert isinstance(result, Err)
        assert result.error.returncode == -1
        assert "No such file" in result.error.message

    @patch("subprocess.run")
    def test_verbose_traces(self, mock_run: MagicMock, tmp_path: Path) -> None:
        mock_run.return_value = make_completed_process(returncode=1, stderr="boom")
        console = MockConsole()

        GitCaller(tmp_path, console=console, verbose=True).execute(GitCommand("log", ("-s",)))

        assert console.traces == ["git log -s"]
        assert console.has_warning() is True

    @patch("subprocess.run")
    def test_quiet_without_verbose(self, mock_run: MagicMock, tmp_path: Path) -> None:
        mock_run.return_value = make_completed_process()
        console = MockConsole()

        GitCaller(tmp_path, console=console).execute(GitCommand("status"))

        assert console.outputs == []

    @patch("subprocess.run")
    def test_lines(self, mock_run: MagicMock, tmp_path: Path) -> None:
        mock_run.return_value = make_completed_process(stdout="* main\n  dev\n\n")

        result = GitCaller(tmp_path).lines(GitCommand("branch"), skip_empty=True)

        assert result == Ok(["* main", "  dev"])
