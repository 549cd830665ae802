"""
Gandalf async client.

Provides the async interface for interacting with the Gandalf API.
"""

from typing import Any

import httpx

from gandalf.async_clients import (
    AsyncAccessClient,
    AsyncKeysClient,
    AsyncRepositoriesClient,
    AsyncUsersClient,
)
from gandalf.async_transport import AsyncHTTPTransport
from gandalf.client import DEFAULT_TIMEOUT, read_env_config


class AsyncGandalfClient:
    """
    Async client for interacting with the Gandalf API.

    Aggregates all async resource clients. Uses httpx for async HTTP operations.

    Example:
        ```python
        import asyncio
        from gandalf import AsyncGandalfClient

        async def main():
            async with AsyncGandalfClient("http://localhost:8000") as client:
                await client.repositories.create("project", users=["alice"])
                log = await client.repositories.get_log("project", "master", total=10)

        asyncio.run(main())
        ```
    """

    DEFAULT_TIMEOUT = DEFAULT_TIMEOUT

    def __init__(
        self,
        endpoint: str,
        http_client: httpx.AsyncClient | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        """
        Initialize the async Gandalf client.

        Args:
            endpoint: Base URL of the Gandalf server
            http_client: httpx async client to reuse (optional). When given,
                it is not closed by close().
            timeout: Request timeout in seconds (default: 30.0)
        """
        self.endpoint = endpoint
        self.timeout = timeout

        self._transport = AsyncHTTPTransport(
            endpoint=endpoint,
            http_client=http_client,
            timeout=timeout,
        )

        self.repositories = AsyncRepositoriesClient(self._transport)
        self.users = AsyncUsersClient(self._transport)
        self.keys = AsyncKeysClient(self._transport)
        self.access = AsyncAccessClient(self._transport)

    @classmethod
    def from_env(
        cls,
        http_client: httpx.AsyncClient | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> "AsyncGandalfClient":
        """
        Create an async client from GANDALF_ENDPOINT and GANDALF_TIMEOUT.

        Raises:
            ConfigurationError: If the environment is missing or invalid
        """
        endpoint, timeout = read_env_config(timeout)
        return cls(endpoint=endpoint, http_client=http_client, timeout=timeout)

    @property
    def transport(self) -> AsyncHTTPTransport:
        """Get the underlying async HTTP transport (for advanced use cases)."""
        return self._transport

    async def healthcheck(self) -> str:
        """Check that the Gandalf server is up and return its output."""
        raw = await self._transport.get("/healthcheck")
        return raw.decode("utf-8", errors="replace")

    async def close(self) -> None:
        """Close the client and release resources."""
        await self._transport.close()

    async def __aenter__(self) -> "AsyncGandalfClient":
        """Async context manager entry."""
        return self

    async def __aexit__(self, *args: Any) -> None:
        """Async context manager exit - closes the client."""
        await self.close()
