"""
Gandalf client.

Provides the primary interface for interacting with the Gandalf API.
"""

import os
from typing import Any

import httpx

from gandalf.clients import (
    AccessClient,
    KeysClient,
    RepositoriesClient,
    UsersClient,
)
from gandalf.exceptions import ConfigurationError
from gandalf.transport import HTTPTransport
from gandalf.types.repositories import Log, Repository
from gandalf.types.users import User

ENDPOINT_ENV = "GANDALF_ENDPOINT"
TIMEOUT_ENV = "GANDALF_TIMEOUT"
DEFAULT_TIMEOUT = 30.0


def read_env_config(default_timeout: float) -> tuple[str, float]:
    """
    Read the endpoint and timeout from the environment.

    Raises:
        ConfigurationError: If GANDALF_ENDPOINT is unset or GANDALF_TIMEOUT
            is not a number
    """
    endpoint = os.environ.get(ENDPOINT_ENV)
    if not endpoint:
        raise ConfigurationError(f"{ENDPOINT_ENV} environment variable not set")

    raw_timeout = os.environ.get(TIMEOUT_ENV)
    if not raw_timeout:
        return endpoint, default_timeout

    try:
        timeout = float(raw_timeout)
    except ValueError:
        raise ConfigurationError(
            f"Invalid {TIMEOUT_ENV}: {raw_timeout!r}. Must be a number of seconds"
        ) from None

    return endpoint, timeout


class GandalfClient:
    """
    Main client for interacting with the Gandalf API.

    Aggregates all resource clients around a single HTTP transport.

    Example:
        ```python
        from gandalf import GandalfClient

        with GandalfClient("http://localhost:8000") as client:
            client.users.create("alice", {"laptop": "ssh-ed25519 AAAA... alice@host"})
            client.repositories.create("project", users=["alice"])
            repo = client.repositories.get("project")
            print(repo.ssh_url)

        # Or configure from GANDALF_ENDPOINT / GANDALF_TIMEOUT
        client = GandalfClient.from_env()
        ```
    """

    DEFAULT_TIMEOUT = DEFAULT_TIMEOUT

    def __init__(
        self,
        endpoint: str,
        http_client: httpx.Client | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        """
        Initialize the Gandalf client.

        Args:
            endpoint: Base URL of the Gandalf server
            http_client: httpx client to reuse (optional). When given, it is
                not closed by close().
            timeout: Request timeout in seconds (default: 30.0)
        """
        self.endpoint = endpoint
        self.timeout = timeout

        self._transport = HTTPTransport(
            endpoint=endpoint,
            http_client=http_client,
            timeout=timeout,
        )

        self.repositories = RepositoriesClient(self._transport)
        self.users = UsersClient(self._transport)
        self.keys = KeysClient(self._transport)
        self.access = AccessClient(self._transport)

    @classmethod
    def from_env(
        cls,
        http_client: httpx.Client | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> "GandalfClient":
        """
        Create a client from environment variables.

        Environment variables:
            GANDALF_ENDPOINT: Base URL of the Gandalf server (required)
            GANDALF_TIMEOUT: Request timeout in seconds (optional)

        Raises:
            ConfigurationError: If the environment is missing or invalid
        """
        endpoint, timeout = read_env_config(timeout)
        return cls(endpoint=endpoint, http_client=http_client, timeout=timeout)

    @property
    def transport(self) -> HTTPTransport:
        """Get the underlying HTTP transport (for advanced use cases)."""
        return self._transport

    def healthcheck(self) -> str:
        """
        Check that the Gandalf server is up.

        Returns:
            The server's health check output (e.g., "WORKING")

        Raises:
            GandalfConnectionError: If the server cannot be reached
            HTTPError: If the server reports a failure
        """
        return self._transport.get("/healthcheck").decode("utf-8", errors="replace")

    # Flat aliases named after the Gandalf operations

    def new_repository(
        self, name: str, users: list[str] | None = None, is_public: bool = False
    ) -> Repository:
        return self.repositories.create(name, users, is_public)

    def get_repository(self, name: str) -> Repository:
        return self.repositories.get(name)

    def remove_repository(self, name: str) -> None:
        self.repositories.remove(name)

    def get_diff(self, name: str, previous_commit: str, last_commit: str) -> str:
        return self.repositories.get_diff(name, previous_commit, last_commit)

    def get_log(self, name: str, ref: str, path: str = "", total: int = 0) -> Log:
        return self.repositories.get_log(name, ref, path, total)

    def new_user(self, name: str, keys: dict[str, str] | None = None) -> User:
        return self.users.create(name, keys)

    def remove_user(self, name: str) -> None:
        self.users.remove(name)

    def grant_access(self, repositories: list[str], users: list[str]) -> None:
        self.access.grant(repositories, users)

    def revoke_access(self, repositories: list[str], users: list[str]) -> None:
        self.access.revoke(repositories, users)

    def add_key(self, user: str, keys: dict[str, str]) -> None:
        self.keys.add(user, keys)

    def update_key(self, user: str, key_name: str, key_body: str) -> None:
        self.keys.update(user, key_name, key_body)

    def remove_key(self, user: str, key_name: str) -> None:
        self.keys.remove(user, key_name)

    def list_keys(self, user: str) -> dict[str, str]:
        return self.keys.list(user)

    def get_health_check(self) -> str:
        return self.healthcheck()

    def close(self) -> None:
        """Close the client and release resources."""
        self._transport.close()

    def __enter__(self) -> "GandalfClient":
        """Context manager entry."""
        return self

    def __exit__(self, *args: Any) -> None:
        """Context manager exit - closes the client."""
        self.close()
