"""
Read-only reports: API rate limit status and repository access.
"""

from __future__ import annotations

import datetime as dt
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Final

import requests

from .exceptions import RemoteServiceError
from .utils import mask_token

if TYPE_CHECKING:
    from github import Github

logger: logging.Logger = logging.getLogger(__name__)

RATE_LIMIT_URL: Final = "https://api.github.com/rate_limit"
USER_AGENT: Final = "gh-issue-migrator"

H_LINE: Final = "-" * 72
RED_W: Final = "\x1b[1;49;31mW\x1b[0m"
GREEN_R: Final = "\x1b[1;49;32mR\x1b[0m"


@dataclass(frozen=True)
class RateLimitStatus:
    """Quota of one API resource."""

    limit: int
    remaining: int
    reset: dt.datetime

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> RateLimitStatus:
        return cls(
            limit=int(payload["limit"]),
            remaining=int(payload["remaining"]),
            reset=dt.datetime.fromtimestamp(int(payload["reset"]), tz=dt.UTC),
        )


@dataclass(frozen=True)
class RateLimitReport:
    """Quotas of the general REST API (core) and of the search API."""

    core: RateLimitStatus
    search: RateLimitStatus


def parse_rate_limit(payload: dict[str, Any]) -> RateLimitReport:
    """Parse the JSON body of GET /rate_limit."""
    resources: dict[str, Any] = payload["resources"]
    return RateLimitReport(
        core=RateLimitStatus.from_payload(resources["core"]),
        search=RateLimitStatus.from_payload(resources["search"]),
    )


def fetch_rate_limit(token: str | None = None, *, timeout: float = 30) -> RateLimitReport:
    """Query the rate limit endpoint (does not count against the core quota).

    Raises:
        RemoteServiceError: If GitHub answers with anything other than 200
    """
    headers = {"Accept": "application/vnd.github+json", "User-Agent": USER_AGENT}
    if token:
        headers["Authorization"] = f"Bearer {token}"
    logger.debug(f"GET {RATE_LIMIT_URL} (token: {mask_token(token)})")

    response = requests.get(RATE_LIMIT_URL, headers=headers, timeout=timeout)
    logger.debug(f"Response headers: {dict(response.headers)}")
    logger.debug(f"Response body: {response.text}")

    if response.status_code != requests.codes.ok:
        raise RemoteServiceError(response.status_code, response.text)
    return parse_rate_limit(response.json())


def format_rate_limit(report: RateLimitReport) -> str:
    return "\n".join(
        [
            "Core",
            f"  Rate limit   : {report.core.limit}",
            f"  Remaining    : {report.core.remaining}",
            f"  Refresh at   : {report.core.reset.astimezone()}",
            "Search",
            f"  Search limit : {report.search.limit}",
            f"  Remaining    : {report.search.remaining}",
            f"  Refresh at   : {report.search.reset.astimezone()}",
        ]
    )


def show_rate_limit(token: str | None = None) -> RateLimitReport:
    """Print the current core and search quotas."""
    if token is None:
        print("No token found: using basic access")
    report = fetch_rate_limit(token)
    print()
    print(format_rate_limit(report))
    return report


def show_repo_access(client: Github) -> list[tuple[str, bool]]:
    """Print every repository visible to the token with its write access, then the organizations.

    Returns:
        (full name, has push access) per repository
    """
    user = client.get_user()
    access: list[tuple[str, bool]] = []

    print(f"\n{H_LINE}\n Repo Access\n{H_LINE}")
    for repo in user.get_repos():
        writable = bool(repo.permissions and repo.permissions.push)
        access.append((repo.full_name, writable))
        print(f"  {RED_W if writable else GREEN_R}  : {repo.full_name}")

    print(f"\n{H_LINE}\n Organizations\n{H_LINE}")
    for org in user.get_orgs():
        print(f"  {org.login}")
    print(H_LINE)

    logger.info(f"{sum(w for _, w in access)} of {len(access)} repositories are writable")
    return access
