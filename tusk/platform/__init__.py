"""Platform abstraction layer."""

from .process import (
    ProcessError,
    git_env,
    run,
)

__all__ = [
    "ProcessError",
    "git_env",
    "run",
]
