"""Gandalf client exception classes."""


class GandalfError(Exception):
    """Base exception for all Gandalf client errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ConfigurationError(GandalfError):
    """Raised when client configuration is invalid or missing."""

    pass


class GandalfConnectionError(GandalfError):
    """Raised when the Gandalf server cannot be reached."""

    def __init__(self, endpoint: str, detail: str) -> None:
        self.endpoint = endpoint
        self.detail = detail
        super().__init__(
            f"failed to connect to Gandalf server ({endpoint}) - {detail}"
        )


class SerializationError(GandalfError):
    """Raised when a request body cannot be encoded as JSON."""

    pass


class HTTPError(GandalfError):
    """
    Raised when the server answers with a non-200 status.

    The message is the response body exactly as the server sent it.
    """

    def __init__(self, code: int, reason: str) -> None:
        self.code = code
        self.reason = reason
        super().__init__(reason)

    def __repr__(self) -> str:
        return f"HTTPError(code={self.code}, reason={self.reason!r})"


class DecodeError(GandalfError):
    """Raised when a response body does not decode to the expected shape."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"error decoding returned json: {detail}")
