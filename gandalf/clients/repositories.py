"""Repositories resource client."""

from typing import TYPE_CHECKING
from urllib.parse import urlencode

from gandalf.decoding import parse_log, parse_repository
from gandalf.types.repositories import Log, Repository

if TYPE_CHECKING:
    from gandalf.transport import HTTPTransport


def repository_path(name: str) -> str:
    return f"/repository/{name}"


def metadata_path(name: str) -> str:
    return f"/repository/{name}?:name={name}"


def diff_path(name: str, previous_commit: str, last_commit: str) -> str:
    return (
        f"/repository/{name}/diff/commits?:name={name}"
        f"&previous_commit={previous_commit}&last_commit={last_commit}"
    )


def log_path(name: str, ref: str, path: str = "", total: int = 0) -> str:
    """
    Build the log query path.

    Parameters are encoded in sorted key order; path and total are left out
    when empty or not positive.
    """
    params = {"ref": ref}
    if path:
        params["path"] = path
    if total > 0:
        params["total"] = str(total)
    return f"/repository/{name}/logs?{urlencode(sorted(params.items()))}"


class RepositoriesClient:
    """Client for repository-related operations."""

    def __init__(self, transport: "HTTPTransport") -> None:
        """
        Initialize the repositories client.

        Args:
            transport: HTTP transport for making requests
        """
        self.transport = transport

    def create(
        self,
        name: str,
        users: list[str] | None = None,
        is_public: bool = False,
    ) -> Repository:
        """
        Create a new repository.

        Args:
            name: Repository name
            users: Names of the users granted access to the repository
            is_public: Whether the repository is publicly readable

        Returns:
            The Repository that was sent to the server

        Raises:
            HTTPError: If the server rejects the repository
        """
        repository = Repository(name=name, users=users or [], is_public=is_public)
        self.transport.post("/repository", repository.to_dict())
        return repository

    def get(self, name: str) -> Repository:
        """
        Get repository metadata, including its clone URLs.

        Args:
            name: Repository name

        Returns:
            Repository with ssh_url and git_url filled in by the server

        Raises:
            HTTPError: If the repository is not found
            DecodeError: If the response is not a repository document
        """
        raw = self.transport.get(metadata_path(name))
        return parse_repository(raw)

    def remove(self, name: str) -> None:
        """
        Remove a repository.

        Args:
            name: Repository name
        """
        self.transport.delete(repository_path(name))

    def get_diff(self, name: str, previous_commit: str, last_commit: str) -> str:
        """
        Get the diff between two commits of a repository.

        Args:
            name: Repository name
            previous_commit: Older commit reference
            last_commit: Newer commit reference

        Returns:
            The diff output as text
        """
        raw = self.transport.get(diff_path(name, previous_commit, last_commit))
        return raw.decode("utf-8", errors="replace")

    def get_log(
        self,
        name: str,
        ref: str,
        path: str = "",
        total: int = 0,
    ) -> Log:
        """
        Get a page of the commit log of a repository.

        Args:
            name: Repository name
            ref: Reference to start the log from; use Log.next for the next page
            path: Restrict the log to commits touching this path (optional)
            total: Maximum number of commits to return; 0 lets the server decide

        Returns:
            Log with its commits and the cursor of the next page

        Raises:
            HTTPError: On a non-200 response
            DecodeError: If the response is not a log document
        """
        raw = self.transport.get(log_path(name, ref, path, total))
        return parse_log(raw)
