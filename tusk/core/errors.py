"""Exit codes for the tusk CLI."""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Process exit codes.

    These values are part of the CLI contract and should remain stable:
    - 0: Success
    - 1: User error (bad reference, invalid arguments)
    - 2: Environment error (not a repository, git binary missing, bad config)
    - 3: Git error (the git command itself failed)
    - 5: I/O error (file not found, permission denied)
    """

    OK = 0
    USER_ERROR = 1
    ENV_ERROR = 2
    GIT_ERROR = 3
    IO_ERROR = 5

    def __str__(self) -> str:
        return self.name.lower().replace("_", " ")

    @property
    def is_success(self) -> bool:
        return self == ErrorCode.OK

    @property
    def is_error(self) -> bool:
        return self != ErrorCode.OK
