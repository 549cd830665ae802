"""
Pytest plugin for Gandalf client testing fixtures.

This module re-exports all fixtures from fixtures.py so they can be
automatically discovered by pytest.

To use these fixtures in your tests, add this to your conftest.py:

    pytest_plugins = ["gandalf.testing.conftest"]

Or import the fixtures directly:

    from gandalf.testing.fixtures import mock_client, sample_repository
"""

# Re-export all fixtures for pytest auto-discovery
from gandalf.testing.fixtures import (
    mock_client,
    mock_client_with_log,
    mock_client_with_repository,
    mock_repository_name,
    mock_user_name,
    sample_commit,
    sample_log,
    sample_public_key,
    sample_repository,
    sample_user,
)

__all__ = [
    "mock_client",
    "mock_repository_name",
    "mock_user_name",
    "sample_public_key",
    "sample_repository",
    "sample_user",
    "sample_commit",
    "sample_log",
    "mock_client_with_repository",
    "mock_client_with_log",
]
