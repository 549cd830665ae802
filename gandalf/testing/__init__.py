"""Gandalf client testing utilities.

Provides mock clients and fixtures for testing applications that use the
Gandalf client.
"""

from gandalf.testing.fixtures import (
    create_mock_commit,
    create_mock_log,
    create_mock_repository,
    create_mock_user,
)
from gandalf.testing.mock import MockCall, MockGandalfClient, MockResponse

__all__ = [
    # Mock client
    "MockGandalfClient",
    "MockCall",
    "MockResponse",
    # Helper functions
    "create_mock_repository",
    "create_mock_user",
    "create_mock_commit",
    "create_mock_log",
]
