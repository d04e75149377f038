"""Commit author and committer identities."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["Author"]


@dataclass(frozen=True, slots=True)
class Author:
    """A git identity.

    Attributes:
        name: Display name
        email: Email address (may be empty)
    """

    name: str
    email: str

    def __str__(self) -> str:
        return f"{self.name} <{self.email}>"
