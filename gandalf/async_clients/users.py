"""Async Users resource client."""

from typing import TYPE_CHECKING

from gandalf.types.users import User

if TYPE_CHECKING:
    from gandalf.async_transport import AsyncHTTPTransport


class AsyncUsersClient:
    """Async client for user-related operations."""

    def __init__(self, transport: "AsyncHTTPTransport") -> None:
        """
        Initialize the async users client.

        Args:
            transport: Async HTTP transport for making requests
        """
        self.transport = transport

    async def create(self, name: str, keys: dict[str, str] | None = None) -> User:
        """Create a new user with the given public keys."""
        user = User(name=name, keys=keys or {})
        await self.transport.post("/user", user.to_dict())
        return user

    async def remove(self, name: str) -> None:
        """Remove a user."""
        await self.transport.delete(f"/user/{name}")
