"""Repository-related data models."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any


@dataclass
class Repository:
    """Git repository hosted by Gandalf."""

    name: str
    users: list[str] = field(default_factory=list)
    is_public: bool = False
    ssh_url: str = ""  # populated by the server
    git_url: str = ""  # populated by the server

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON body Gandalf expects for this repository."""
        data: dict[str, Any] = {
            "name": self.name,
            "users": self.users,
            "ispublic": self.is_public,
        }
        if self.ssh_url:
            data["ssh_url"] = self.ssh_url
        if self.git_url:
            data["git_url"] = self.git_url
        return data


@dataclass
class Author:
    """Author or committer of a commit."""

    name: str
    email: str
    date: datetime | None


@dataclass
class Commit:
    """Single entry of a repository log."""

    ref: str
    author: Author
    committer: Author
    subject: str
    created_at: datetime | None
    parent: list[str]


@dataclass
class Log:
    """Page of commits, with the ref to request for the next page."""

    commits: list[Commit]
    next: str = ""
