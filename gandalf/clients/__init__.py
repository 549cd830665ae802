"""Gandalf resource clients."""

from gandalf.clients.access import AccessClient
from gandalf.clients.keys import KeysClient
from gandalf.clients.repositories import RepositoriesClient
from gandalf.clients.users import UsersClient

__all__ = [
    "RepositoriesClient",
    "UsersClient",
    "KeysClient",
    "AccessClient",
]
