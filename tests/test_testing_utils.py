"""
Tests for Gandalf client testing utilities.

Verifies that MockGandalfClient and fixtures work correctly.
"""

import pytest

from gandalf.client import GandalfClient
from gandalf.exceptions import HTTPError
from gandalf.testing import (
    MockGandalfClient,
    create_mock_commit,
    create_mock_log,
    create_mock_repository,
    create_mock_user,
)
from gandalf.types import Log, Repository, User


class TestMockGandalfClient:
    """Tests for MockGandalfClient."""

    def test_default_responses(self) -> None:
        mock = MockGandalfClient()

        repository = mock.repositories.create("proj1", ["someuser"])
        assert repository == Repository(name="proj1", users=["someuser"])

        assert mock.repositories.get("proj1").ssh_url == "git@gandalf.local:proj1.git"
        assert mock.users.create("alice").keys == {}
        assert mock.keys.list("alice") == {}
        assert mock.repositories.get_log("proj1", "master").commits == []
        assert mock.healthcheck() == "WORKING"

    def test_configured_responses(self) -> None:
        mock = MockGandalfClient()
        mock.repositories.configure("get", response=create_mock_repository(name="custom"))
        mock.keys.configure("list", response={"laptop": "ssh-rsa x"})

        assert mock.repositories.get("anything").name == "custom"
        assert mock.keys.list("alice") == {"laptop": "ssh-rsa x"}

    def test_configured_errors(self) -> None:
        mock = MockGandalfClient()
        mock.users.configure("remove", error=HTTPError(404, "User not found\n"))
        mock.configure_healthcheck(error=HTTPError(500, "down"))

        with pytest.raises(HTTPError) as exc_info:
            mock.users.remove("nobody")
        assert exc_info.value.code == 404

        with pytest.raises(HTTPError):
            mock.healthcheck()

    def test_call_tracking(self) -> None:
        mock = MockGandalfClient()

        mock.repositories.create("repo1")
        mock.repositories.create("repo2")
        mock.access.grant(["repo1"], ["alice"])

        assert mock.was_called("repositories.create")
        assert mock.call_count("repositories.create") == 2
        assert mock.call_count("access.grant") == 1
        assert not mock.was_called("access.revoke")

    def test_get_calls(self) -> None:
        mock = MockGandalfClient()

        mock.keys.update("alice", "laptop", "ssh-rsa y")
        mock.repositories.get_log("repo", "master", total=5)

        calls = mock.get_calls("keys.update")
        assert len(calls) == 1
        assert calls[0].args == ("alice", "laptop", "ssh-rsa y")
        assert mock.get_calls("repositories.get_log")[0].kwargs == {"path": "", "total": 5}
        assert len(mock.get_calls()) == 2

    def test_reset(self) -> None:
        mock = MockGandalfClient()
        mock.keys.configure("list", response={"k": "v"})
        mock.keys.list("alice")

        mock.reset()

        assert mock.get_calls() == []
        assert mock.keys.list("alice") == {}

    def test_flat_aliases_delegate_to_resources(self) -> None:
        mock = MockGandalfClient()
        mock.keys.configure("list", response={"laptop": "ssh-rsa x"})

        repository = mock.new_repository("proj1", ["alice"], is_public=True)
        mock.grant_access(["proj1"], ["bob"])
        keys = mock.list_keys("alice")

        assert repository == Repository(name="proj1", users=["alice"], is_public=True)
        assert keys == {"laptop": "ssh-rsa x"}
        assert mock.get_health_check() == "WORKING"
        assert [call.method for call in mock.get_calls()] == [
            "repositories.create",
            "access.grant",
            "keys.list",
            "healthcheck",
        ]

    def test_mirrors_client_methods(self) -> None:
        public = {
            name
            for name, value in vars(GandalfClient).items()
            if callable(value) and not name.startswith("_") and name != "from_env"
        }

        missing = [name for name in public if not callable(getattr(MockGandalfClient, name, None))]

        assert missing == []

    def test_context_manager(self) -> None:
        with MockGandalfClient() as mock:
            mock.repositories.remove("repo")

        assert mock.was_called("repositories.remove")


class TestFactories:
    def test_create_mock_repository(self) -> None:
        repository = create_mock_repository(name="proj", users=[], ssh_url="ssh://x")

        assert repository.users == []
        assert repository.ssh_url == "ssh://x"
        assert repository.git_url == "git://gandalf.local/proj.git"

    def test_create_mock_user(self) -> None:
        assert create_mock_user(keys={}).keys == {}
        assert "default" in create_mock_user().keys

    def test_create_mock_commit(self) -> None:
        commit = create_mock_commit(subject="Fix", parent=["abc"])

        assert commit.subject == "Fix"
        assert commit.parent == ["abc"]
        assert commit.author == commit.committer
        assert commit.created_at is not None

    def test_create_mock_log_links_parents(self) -> None:
        log = create_mock_log(count=3, next_ref="cafe")

        assert log.next == "cafe"
        assert [commit.parent for commit in log.commits] == [
            [log.commits[1].ref],
            [log.commits[2].ref],
            [],
        ]
        dates = [commit.created_at for commit in log.commits]
        assert dates == sorted(dates, reverse=True)


class TestFixtures:
    def test_mock_client_fixture(self, mock_client: MockGandalfClient) -> None:
        mock_client.users.remove("alice")
        assert mock_client.was_called("users.remove")

    def test_sample_data_fixtures(
        self,
        sample_repository: Repository,
        sample_user: User,
        sample_log: Log,
        sample_public_key: str,
    ) -> None:
        assert sample_repository.ssh_url
        assert sample_user.keys["default"] == sample_public_key
        assert len(sample_log.commits) == 3

    def test_preconfigured_clients(
        self,
        mock_client_with_repository: MockGandalfClient,
        sample_repository: Repository,
    ) -> None:
        assert mock_client_with_repository.repositories.get("x") == sample_repository
