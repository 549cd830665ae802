"""SSH keys resource client."""

from typing import TYPE_CHECKING

from gandalf.decoding import parse_keys

if TYPE_CHECKING:
    from gandalf.transport import HTTPTransport


class KeysClient:
    """Client for managing the public keys of a user."""

    def __init__(self, transport: "HTTPTransport") -> None:
        """
        Initialize the keys client.

        Args:
            transport: HTTP transport for making requests
        """
        self.transport = transport

    def add(self, user: str, keys: dict[str, str]) -> None:
        """
        Add public keys to a user.

        Args:
            user: User name
            keys: Public keys indexed by key name

        Raises:
            HTTPError: If a key is invalid or already registered
        """
        self.transport.post(f"/user/{user}/key", keys)

    def update(self, user: str, key_name: str, key_body: str) -> None:
        """
        Replace the content of a user's key.

        The key body is sent as-is, it is not JSON encoded.

        Args:
            user: User name
            key_name: Name of the key to replace
            key_body: New public key text
        """
        self.transport.put(f"/user/{user}/key/{key_name}", key_body)

    def remove(self, user: str, key_name: str) -> None:
        """Remove a key from a user."""
        self.transport.delete(f"/user/{user}/key/{key_name}")

    def list(self, user: str) -> dict[str, str]:
        """
        List the public keys of a user.

        Returns:
            Public keys indexed by key name

        Raises:
            HTTPError: If the user is not found
            DecodeError: If the response is not a key mapping
        """
        raw = self.transport.get(f"/user/{user}/keys")
        return parse_keys(raw)
