"""Git execution and the repository facade.

Usage:
    from tusk.git import Repository

    repo = Repository(Path("/path/to/repo"))
    for b in repo.branches(all=True).unwrap_or([]):
        print(b.name, b.sha)
"""

from tusk.git.caller import GitCaller, GitError, output_lines
from tusk.git.repository import Repository

__all__ = [
    "GitCaller",
    "GitError",
    "Repository",
    "output_lines",
]
