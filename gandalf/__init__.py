"""Gandalf client - Python client for the Gandalf git repository manager."""

from gandalf.async_client import AsyncGandalfClient
from gandalf.client import GandalfClient
from gandalf.exceptions import (
    ConfigurationError,
    DecodeError,
    GandalfConnectionError,
    GandalfError,
    HTTPError,
    SerializationError,
)
from gandalf.logging import configure_logging, get_logger
from gandalf.transport import HTTPTransport, format_body
from gandalf.types import Author, Commit, Log, Repository, User

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Main Clients
    "GandalfClient",
    "AsyncGandalfClient",
    # Types
    "Repository",
    "User",
    "Author",
    "Commit",
    "Log",
    # Exceptions
    "GandalfError",
    "ConfigurationError",
    "GandalfConnectionError",
    "SerializationError",
    "HTTPError",
    "DecodeError",
    # Transport
    "HTTPTransport",
    "format_body",
    # Logging
    "configure_logging",
    "get_logger",
]
