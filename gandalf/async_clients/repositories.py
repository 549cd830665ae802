"""Async Repositories resource client."""

from typing import TYPE_CHECKING

from gandalf.clients.repositories import (
    diff_path,
    log_path,
    metadata_path,
    repository_path,
)
from gandalf.decoding import parse_log, parse_repository
from gandalf.types.repositories import Log, Repository

if TYPE_CHECKING:
    from gandalf.async_transport import AsyncHTTPTransport


class AsyncRepositoriesClient:
    """Async client for repository-related operations."""

    def __init__(self, transport: "AsyncHTTPTransport") -> None:
        """
        Initialize the async repositories client.

        Args:
            transport: Async HTTP transport for making requests
        """
        self.transport = transport

    async def create(
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
        """
        repository = Repository(name=name, users=users or [], is_public=is_public)
        await self.transport.post("/repository", repository.to_dict())
        return repository

    async def get(self, name: str) -> Repository:
        """Get repository metadata, including its clone URLs."""
        raw = await self.transport.get(metadata_path(name))
        return parse_repository(raw)

    async def remove(self, name: str) -> None:
        """Remove a repository."""
        await self.transport.delete(repository_path(name))

    async def get_diff(self, name: str, previous_commit: str, last_commit: str) -> str:
        """Get the diff between two commits of a repository."""
        raw = await self.transport.get(diff_path(name, previous_commit, last_commit))
        return raw.decode("utf-8", errors="replace")

    async def get_log(
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
        """
        raw = await self.transport.get(log_path(name, ref, path, total))
        return parse_log(raw)
