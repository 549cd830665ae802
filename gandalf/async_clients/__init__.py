"""Gandalf async resource clients."""

from gandalf.async_clients.access import AsyncAccessClient
from gandalf.async_clients.keys import AsyncKeysClient
from gandalf.async_clients.repositories import AsyncRepositoriesClient
from gandalf.async_clients.users import AsyncUsersClient

__all__ = [
    "AsyncRepositoriesClient",
    "AsyncUsersClient",
    "AsyncKeysClient",
    "AsyncAccessClient",
]
