"""Async Access control resource client."""

from typing import TYPE_CHECKING

from gandalf.clients.access import access_body

if TYPE_CHECKING:
    from gandalf.async_transport import AsyncHTTPTransport


class AsyncAccessClient:
    """Async client for repository access control operations."""

    def __init__(self, transport: "AsyncHTTPTransport") -> None:
        """
        Initialize the async access client.

        Args:
            transport: Async HTTP transport for making requests
        """
        self.transport = transport

    async def grant(self, repositories: list[str], users: list[str]) -> None:
        """Grant every user access to every repository."""
        await self.transport.post("/repository/grant", access_body(repositories, users))

    async def revoke(self, repositories: list[str], users: list[str]) -> None:
        """Revoke the access of every user to every repository."""
        await self.transport.delete("/repository/revoke", access_body(repositories, users))
