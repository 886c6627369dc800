"""
Main migration class for moving issues between GitHub repositories.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from . import github_utils as ghu
from . import labels as lbl
from .exceptions import MigrationError
from .issue_builder import build_issue_body, comment_bodies, label_names
from .models import Comment, Issue, IssueSelector
from .throttle import FixedDelayThrottle

if TYPE_CHECKING:
    import github.Issue
    from github import Github
    from github.Repository import Repository

    from .config import MigratorConfig
    from .models import Label
    from .throttle import Throttle

# Module-wide logger
logger: logging.Logger = logging.getLogger(__name__)


class IssueMigrator:
    """Lists, copies and migrates issues and labels from one repository to another."""

    def __init__(
        self,
        config: MigratorConfig,
        *,
        client: Github | None = None,
        issue_throttle: Throttle | None = None,
        label_throttle: Throttle | None = None,
    ) -> None:
        self.config: MigratorConfig = config

        self.github_client: Github = client if client is not None else ghu.get_client(config.token)
        self.issue_throttle: Throttle = issue_throttle or FixedDelayThrottle(config.issue_delay)
        self.label_throttle: Throttle = label_throttle or FixedDelayThrottle(config.label_delay)

        self._source_repo: Repository | None = None
        self._target_repo: Repository | None = None

        logger.info(f"Initialized migrator for {config.source_repo} -> {config.target_repo}")

    @property
    def source_repo(self) -> Repository:
        if self._source_repo is None:
            if not self.config.source_repo:
                msg = "No source repository configured"
                raise MigrationError(msg)
            self._source_repo = ghu.get_repo(self.github_client, self.config.source_repo)
        return self._source_repo

    @property
    def target_repo(self) -> Repository:
        if self._target_repo is None:
            if not self.config.target_repo:
                msg = "No target repository configured"
                raise MigrationError(msg)
            self._target_repo = ghu.get_repo(self.github_client, self.config.target_repo)
        return self._target_repo

    def validate_api_access(self) -> str:
        """Check the token works by fetching the authenticated user."""
        return ghu.get_authenticated_login(self.github_client)

    def fetch_issues(self, selector: IssueSelector) -> list[github.Issue.Issue]:
        """Fetch source issues by state filter or by explicit numbers.

        The state filter returns issues and pull requests alike, newest first, across all pages.
        Explicit numbers are fetched one request each, in ascending order.
        """
        print(f"\n  <itype>: {selector.state}")
        print(f"  <ilist>: {list(selector.numbers) or None}\n")

        if selector.state is not None:
            issues = list(self.source_repo.get_issues(state=selector.state))
        else:
            issues = []
            for number in selector.numbers:
                print(f"Adding issue [#]: {number} \t from: {self.config.source_repo}")
                issues.append(self.source_repo.get_issue(number))

        logger.debug(f"Fetched issues ({selector}): {[issue.number for issue in issues]}")
        print(f"\nFound {len(issues)} issues of status: {selector.state}\n")
        return issues

    def list_issues(self, state: str) -> list[Issue]:
        """Fetch and print all source issues in the given state."""
        issues = [Issue.from_github(issue) for issue in self.fetch_issues(IssueSelector.from_state(state))]
        for issue in issues:
            print(f"[{issue.number}]".ljust(10) + issue.title)
        print()
        return issues

    def list_labels(self) -> list[Label]:
        """Fetch and print all source labels with a color swatch."""
        labels = lbl.fetch_labels(self.source_repo)
        lbl.print_labels(labels)
        return labels

    def copy_labels(self) -> list[Label]:
        return lbl.copy_labels(self.source_repo, self.target_repo, self.label_throttle)

    def migrate_issue(self, source_issue: github.Issue.Issue) -> github.Issue.Issue | None:
        """Recreate one source issue on the target repository.

        Returns:
            The created target issue, or None when the source is a pull request
        """
        issue = Issue.from_github(source_issue)
        if issue.is_pull_request:
            logger.info(f"Skipping #{issue.number}: it is a pull request")
            return None

        issue.comments = [Comment(body=comment.body) for comment in source_issue.get_comments()]

        target_issue = self.target_repo.create_issue(
            title=issue.title,
            body=build_issue_body(issue),
            labels=label_names(issue),
        )
        logger.debug(f"Created issue #{target_issue.number} from #{issue.number}: {issue.title}")

        for body in comment_bodies(issue):
            _ = target_issue.create_comment(body)
        if issue.comments:
            logger.debug(f"Migrated {len(issue.comments)} comments to #{target_issue.number}")

        if issue.state == "closed":
            target_issue.edit(state="closed")
            logger.debug(f"Closed target issue #{target_issue.number}")

        return target_issue

    def migrate(self, selector: IssueSelector) -> list[tuple[int, int]]:
        """Migrate the selected issues, oldest first.

        Every step writes to the target immediately. If the run stops partway,
        the issues created so far stay on the target.

        Returns:
            (source number, target number) for every issue created
        """
        source_issues = self.fetch_issues(selector)
        source_issues.reverse()

        total = len(source_issues)
        migrated: list[tuple[int, int]] = []
        for n, source_issue in enumerate(source_issues, start=1):
            print(f"Pushing issue: {source_issue.number}  ({n}/{total})", end="\r")
            target_issue = self.migrate_issue(source_issue)
            if target_issue is not None:
                migrated.append((source_issue.number, target_issue.number))
            if total > 1:
                self.issue_throttle.pause()
        print()

        logger.info(f"Migrated {len(migrated)} of {total} issues to {self.config.target_repo}")
        return migrated
