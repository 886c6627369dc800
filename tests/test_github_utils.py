"""
Tests for GitHub utilities module.
"""

from unittest.mock import Mock, patch

import pytest
from github import GithubException, UnknownObjectException

from gh_issue_migrator import MigrationError
from gh_issue_migrator.github_utils import PER_PAGE, get_authenticated_login, get_client, get_repo


@pytest.mark.unit
class TestGetClient:
    @patch("gh_issue_migrator.github_utils.Github")
    @patch("gh_issue_migrator.github_utils.Auth.Token")
    def test_token_auth_without_retries(self, mock_token: Mock, mock_github: Mock) -> None:
        client = get_client("t" * 40)

        assert client is mock_github.return_value
        mock_token.assert_called_once_with("t" * 40)
        mock_github.assert_called_once_with(auth=mock_token.return_value, per_page=PER_PAGE, retry=None)

    @patch("gh_issue_migrator.github_utils.Github")
    def test_anonymous_client(self, mock_github: Mock) -> None:
        _ = get_client(None)
        assert mock_github.call_args.kwargs["auth"] is None


@pytest.mark.unit
class TestGetRepo:
    def test_found(self) -> None:
        client = Mock()
        assert get_repo(client, "owner/repo") is client.get_repo.return_value
        client.get_repo.assert_called_once_with("owner/repo")

    def test_not_found(self) -> None:
        client = Mock()
        client.get_repo.side_effect = UnknownObjectException(404, {"message": "Not Found"}, headers={})

        with pytest.raises(MigrationError, match="Repository owner/repo not found"):
            get_repo(client, "owner/repo")

    def test_other_errors_propagate(self) -> None:
        client = Mock()
        client.get_repo.side_effect = GithubException(500, {"message": "Server Error"}, headers={})

        with pytest.raises(GithubException):
            get_repo(client, "owner/repo")


@pytest.mark.unit
class TestGetAuthenticatedLogin:
    def test_returns_login(self) -> None:
        client = Mock()
        client.get_user.return_value.login = "octocat"
        assert get_authenticated_login(client) == "octocat"

    def test_wraps_github_errors(self) -> None:
        client = Mock()
        client.get_user.side_effect = GithubException(401, {"message": "Bad credentials"}, headers={})

        with pytest.raises(MigrationError, match="GitHub API access failed"):
            get_authenticated_login(client)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
