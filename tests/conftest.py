"""
Pytest configuration and fixtures.

Unit tests build PyGithub stand-ins from ``unittest.mock.Mock``. Integration
tests talk to the real GitHub API and are skipped unless the environment
provides a token and a source repository to read from.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING
from unittest.mock import Mock

import pytest

if TYPE_CHECKING:
    from collections.abc import Sequence

INTEGRATION_ENV_VARS: tuple[str, ...] = ("GITHUB_OAUTH_TOKEN", "INTEGRATION_SOURCE_REPO")


@pytest.fixture(autouse=True)
def check_integration_test_env_vars(request: pytest.FixtureRequest) -> None:
    """Skip integration tests with a clear message when required environment variables are missing."""
    if request.node.get_closest_marker("integration") is None:
        return
    missing = [name for name in INTEGRATION_ENV_VARS if not os.environ.get(name)]
    if missing:
        pytest.skip(f"Integration tests require environment variables: {', '.join(missing)}")


def make_label(name: str, color: str = "d73a4a", description: str | None = "") -> Mock:
    """A PyGithub Label stand-in. ``name`` has to be set after construction on a Mock."""
    label = Mock()
    label.name = name
    label.color = color
    label.description = description
    return label


def make_issue(
    number: int,
    *,
    title: str | None = None,
    body: str | None = "Issue body",
    state: str = "open",
    author: str = "octocat",
    labels: Sequence[Mock] = (),
    comments: Sequence[str] = (),
    pull_request: bool = False,
) -> Mock:
    """A PyGithub Issue stand-in with comments and an optional pull request marker."""
    issue = Mock()
    issue.number = number
    issue.title = title or f"Issue {number}"
    issue.body = body
    issue.state = state
    issue.user.login = author
    issue.user.html_url = f"https://github.com/{author}"
    issue.html_url = f"https://github.com/source-org/source-repo/issues/{number}"
    issue.labels = list(labels)
    issue.pull_request = Mock() if pull_request else None

    comment_mocks = []
    for text in comments:
        comment = Mock()
        comment.body = text
        comment_mocks.append(comment)
    issue.get_comments.return_value = comment_mocks
    return issue


@pytest.fixture
def gh_mocks() -> type[_Factories]:
    return _Factories


class _Factories:
    """Access to the mock builders from tests (``gh_mocks.issue(...)``)."""

    issue = staticmethod(make_issue)
    label = staticmethod(make_label)
