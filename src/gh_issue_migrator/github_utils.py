from __future__ import annotations

import logging
from typing import Final

from github import Auth, Github, GithubException, UnknownObjectException
from github.Repository import Repository

from .exceptions import MigrationError

# Module-wide logger
logger: logging.Logger = logging.getLogger(__name__)

# Largest page size the REST API accepts; keeps paginated listings to few requests
PER_PAGE: Final = 100


def get_client(token: str | None = None) -> Github:
    """Get a GitHub client using the token.

    Falls back to anonymous access if no token is provided. PyGithub's own retry
    policy is disabled: a failed request is reported, not repeated.
    """
    auth = Auth.Token(token) if token else None
    return Github(auth=auth, per_page=PER_PAGE, retry=None)


def get_repo(client: Github, repo_path: str) -> Repository:
    """Look up a repository, turning a 404 into a readable MigrationError."""
    try:
        repo = client.get_repo(repo_path)
    except UnknownObjectException as e:
        msg = f"Repository {repo_path} not found or not accessible with this token"
        raise MigrationError(msg) from e
    logger.debug(f"Loaded repository {repo.full_name}")
    return repo


def get_authenticated_login(client: Github) -> str:
    """Return the login of the token owner (costs one request)."""
    try:
        login = client.get_user().login
    except GithubException as e:
        msg = f"GitHub API access failed: {e}"
        raise MigrationError(msg) from e
    logger.info(f"Authenticated as {login}")
    return login
