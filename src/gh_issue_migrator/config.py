"""
Run configuration, resolved once from command-line arguments and environment.
"""

from __future__ import annotations

import enum
import os
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from .exceptions import ConfigurationError, TokenValidationError
from .models import ISSUE_STATES, IssueSelector

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

TOKEN_ENV_VAR: Final = "GITHUB_OAUTH_TOKEN"
TOKEN_LENGTH: Final = 40

# Seconds to pause after each migrated issue and after each created label
DEFAULT_ISSUE_DELAY: Final = 5.0
DEFAULT_LABEL_DELAY: Final = 2.0


class Mode(enum.Enum):
    """The single operation a run performs."""

    LIST = "list"
    COPY_LABELS = "copy-labels"
    MIGRATE = "migrate"
    RATE_LIMIT = "rate-limit"
    REPO_ACCESS = "repo-access"

    @property
    def repo_count(self) -> int:
        """Number of repository positionals the mode expects."""
        return _REPO_COUNTS[self]


_REPO_COUNTS: Final[dict[Mode, int]] = {
    Mode.LIST: 1,
    Mode.COPY_LABELS: 2,
    Mode.MIGRATE: 2,
    Mode.RATE_LIMIT: 0,
    Mode.REPO_ACCESS: 0,
}


@dataclass(frozen=True)
class MigratorConfig:
    """Everything a run needs, fixed before any request is sent."""

    mode: Mode
    token: str | None = None
    source_repo: str | None = None
    target_repo: str | None = None
    selector: IssueSelector | None = None
    list_state: str = "open"
    issue_delay: float = DEFAULT_ISSUE_DELAY
    label_delay: float = DEFAULT_LABEL_DELAY
    debug: bool = False


def validate_token(token: str) -> str:
    """Return the token if it has the length of a classic OAuth2 token."""
    if len(token) != TOKEN_LENGTH:
        raise TokenValidationError(len(token))
    return token


def validate_repo_path(repo_path: str) -> str:
    """Check an ``owner/name`` repository identifier and return it stripped."""
    stripped = repo_path.strip()
    parts = stripped.split("/")
    if len(parts) != 2:  # noqa: PLR2004
        msg = f"Invalid GitHub repository path: '{repo_path}'. Expected format: 'owner/repository'"
        raise ConfigurationError(msg)
    if not all(parts):
        msg = f"Invalid GitHub repository path: '{repo_path}'. Both owner and repository name must be non-empty"
        raise ConfigurationError(msg)
    return stripped


def validate_state(state: str) -> str:
    if state not in ISSUE_STATES:
        msg = f"Invalid issue type: '{state}'. Expected one of: {', '.join(ISSUE_STATES)}"
        raise ConfigurationError(msg)
    return state


def split_positionals(mode: Mode, positionals: Sequence[str]) -> tuple[str | None, list[str]]:
    """Separate the optional leading token from the repository arguments.

    Returns:
        (token or None, repository paths)
    """
    expected = mode.repo_count
    if len(positionals) == expected:
        return None, list(positionals)
    if len(positionals) == expected + 1:
        return positionals[0], list(positionals[1:])
    msg = (
        f"Mode '{mode.value}' expects [<oauth2_token>] followed by {expected} repository argument(s), "
        f"got {len(positionals)} positional argument(s)"
    )
    raise ConfigurationError(msg)


def resolve_token(mode: Mode, positional_token: str | None, environ: Mapping[str, str] | None = None) -> str | None:
    """Pick the positional token over the environment and validate its length.

    Only the rate-limit report may run without a token (unauthenticated access).
    """
    env = os.environ if environ is None else environ
    token = positional_token or env.get(TOKEN_ENV_VAR) or None
    if token is None:
        if mode is Mode.RATE_LIMIT:
            return None
        msg = f"No GitHub token given: pass <oauth2_token> or set {TOKEN_ENV_VAR}"
        raise ConfigurationError(msg)
    return validate_token(token)
