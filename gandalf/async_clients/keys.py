"""Async SSH keys resource client."""

from typing import TYPE_CHECKING

from gandalf.decoding import parse_keys

if TYPE_CHECKING:
    from gandalf.async_transport import AsyncHTTPTransport


class AsyncKeysClient:
    """Async client for managing the public keys of a user."""

    def __init__(self, transport: "AsyncHTTPTransport") -> None:
        """
        Initialize the async keys client.

        Args:
            transport: Async HTTP transport for making requests
        """
        self.transport = transport

    async def add(self, user: str, keys: dict[str, str]) -> None:
        """Add public keys to a user."""
        await self.transport.post(f"/user/{user}/key", keys)

    async def update(self, user: str, key_name: str, key_body: str) -> None:
        """Replace the content of a user's key. The body is sent as-is."""
        await self.transport.put(f"/user/{user}/key/{key_name}", key_body)

    async def remove(self, user: str, key_name: str) -> None:
        """Remove a key from a user."""
        await self.transport.delete(f"/user/{user}/key/{key_name}")

    async def list(self, user: str) -> dict[str, str]:
        """List the public keys of a user, indexed by key name."""
        raw = await self.transport.get(f"/user/{user}/keys")
        return parse_keys(raw)
