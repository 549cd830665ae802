"""
Pytest fixtures for Gandalf client testing.

Provides common fixtures for testing applications that use the Gandalf client.
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Generator

import pytest

from gandalf.testing.mock import MockGandalfClient
from gandalf.types.repositories import Author, Commit, Log, Repository
from gandalf.types.users import User

SAMPLE_PUBLIC_KEY = (
    "ssh-rsa AAAAB3NzaC1yc2EAAAADAQABAAABAQC7Mg5ksQ1vK2bUuJr0b8gW7Kc3e9t"
    "mQbT5rC2k3q8u9m4z1J6b0f2Hc8pYx2lE9nR3wZ5 alice@gandalf.local"
)


# ============================================================================
# Mock Client Fixtures
# ============================================================================


@pytest.fixture
def mock_client() -> Generator[MockGandalfClient, None, None]:
    """
    Provide a MockGandalfClient for testing.

    Example:
        ```python
        def test_my_feature(mock_client):
            mock_client.repositories.configure("get", response=my_repo)
            result = my_function(mock_client)
            assert mock_client.was_called("repositories.get")
        ```
    """
    client = MockGandalfClient()
    yield client
    client.reset()


@pytest.fixture
def mock_repository_name() -> str:
    """Provide a test repository name."""
    return "test-repository"


@pytest.fixture
def mock_user_name() -> str:
    """Provide a test user name."""
    return "test-user"


# ============================================================================
# Sample Data Fixtures
# ============================================================================


@pytest.fixture
def sample_public_key() -> str:
    """Provide a sample OpenSSH public key."""
    return SAMPLE_PUBLIC_KEY


@pytest.fixture
def sample_repository() -> Repository:
    """Provide a sample Repository object."""
    return create_mock_repository()


@pytest.fixture
def sample_user() -> User:
    """Provide a sample User object."""
    return create_mock_user()


@pytest.fixture
def sample_commit() -> Commit:
    """Provide a sample Commit object."""
    return create_mock_commit()


@pytest.fixture
def sample_log() -> Log:
    """Provide a sample Log with three commits and a next page."""
    return create_mock_log(count=3, next_ref="a3f5c2d")


# ============================================================================
# Pre-configured Mock Client Fixtures
# ============================================================================


@pytest.fixture
def mock_client_with_repository(
    mock_client: MockGandalfClient,
    sample_repository: Repository,
) -> MockGandalfClient:
    """Provide a mock client that returns sample_repository from repositories.get()."""
    mock_client.repositories.configure("get", response=sample_repository)
    return mock_client


@pytest.fixture
def mock_client_with_log(
    mock_client: MockGandalfClient,
    sample_log: Log,
) -> MockGandalfClient:
    """Provide a mock client that returns sample_log from repositories.get_log()."""
    mock_client.repositories.configure("get_log", response=sample_log)
    return mock_client


# ============================================================================
# Helper Functions
# ============================================================================


def create_mock_repository(
    name: str = "sample-repository",
    users: list[str] | None = None,
    is_public: bool = False,
    **kwargs: Any,
) -> Repository:
    """
    Create a mock Repository with clone URLs filled in.

    Args:
        name: Repository name
        users: Users with access (default: ["sample-user"])
        is_public: Whether the repository is public
        **kwargs: Override ssh_url or git_url
    """
    return Repository(
        name=name,
        users=users if users is not None else ["sample-user"],
        is_public=is_public,
        ssh_url=kwargs.get("ssh_url", f"git@gandalf.local:{name}.git"),
        git_url=kwargs.get("git_url", f"git://gandalf.local/{name}.git"),
    )


def create_mock_user(
    name: str = "sample-user",
    keys: dict[str, str] | None = None,
) -> User:
    """Create a mock User with one public key by default."""
    return User(
        name=name,
        keys=keys if keys is not None else {"default": SAMPLE_PUBLIC_KEY},
    )


def create_mock_commit(
    ref: str = "1b970b076bbb30d708e262b402d4e31910e1dc10",
    subject: str = "Initial commit",
    created_at: datetime | None = None,
    parent: list[str] | None = None,
    author_name: str = "Sample Author",
    author_email: str = "author@gandalf.local",
) -> Commit:
    """Create a mock Commit whose author is also its committer."""
    when = created_at or datetime(2024, 1, 15, 10, 30, 0, tzinfo=timezone.utc)
    author = Author(name=author_name, email=author_email, date=when)
    return Commit(
        ref=ref,
        author=author,
        committer=Author(name=author_name, email=author_email, date=when),
        subject=subject,
        created_at=when,
        parent=parent if parent is not None else [],
    )


def create_mock_log(count: int = 1, next_ref: str = "") -> Log:
    """
    Create a mock Log of count commits, newest first.

    Each commit is the parent of the one listed before it.
    """
    start = datetime(2024, 1, 15, 10, 30, 0, tzinfo=timezone.utc)
    refs = [f"{index:040x}" for index in range(count, 0, -1)]
    commits = [
        create_mock_commit(
            ref=ref,
            subject=f"Commit {count - position}",
            created_at=start - timedelta(minutes=position),
            parent=refs[position + 1:position + 2],
        )
        for position, ref in enumerate(refs)
    ]
    return Log(commits=commits, next=next_ref)
