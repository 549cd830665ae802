"""Users resource client."""

from typing import TYPE_CHECKING

from gandalf.types.users import User

if TYPE_CHECKING:
    from gandalf.transport import HTTPTransport


class UsersClient:
    """Client for user-related operations."""

    def __init__(self, transport: "HTTPTransport") -> None:
        """
        Initialize the users client.

        Args:
            transport: HTTP transport for making requests
        """
        self.transport = transport

    def create(self, name: str, keys: dict[str, str] | None = None) -> User:
        """
        Create a new user with the given public keys.

        Args:
            name: User name
            keys: Public keys indexed by key name

        Returns:
            The User that was sent to the server

        Raises:
            HTTPError: If the server rejects the user
        """
        user = User(name=name, keys=keys or {})
        self.transport.post("/user", user.to_dict())
        return user

    def remove(self, name: str) -> None:
        """Remove a user."""
        self.transport.delete(f"/user/{name}")
