"""Access control resource client."""

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from gandalf.transport import HTTPTransport


def access_body(repositories: list[str], users: list[str]) -> dict[str, Any]:
    """Body shared by grant and revoke, order of both lists preserved."""
    return {"repositories": list(repositories), "users": list(users)}


class AccessClient:
    """Client for repository access control operations."""

    def __init__(self, transport: "HTTPTransport") -> None:
        """
        Initialize the access client.

        Args:
            transport: HTTP transport for making requests
        """
        self.transport = transport

    def grant(self, repositories: list[str], users: list[str]) -> None:
        """
        Grant every user access to every repository.

        Args:
            repositories: Repository names
            users: User names

        Raises:
            HTTPError: If a repository or user is unknown
        """
        self.transport.post("/repository/grant", access_body(repositories, users))

    def revoke(self, repositories: list[str], users: list[str]) -> None:
        """
        Revoke the access of every user to every repository.

        Args:
            repositories: Repository names
            users: User names

        Raises:
            HTTPError: If a repository or user is unknown
        """
        self.transport.delete("/repository/revoke", access_body(repositories, users))
