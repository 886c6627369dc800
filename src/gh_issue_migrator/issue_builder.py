"""Build the target issue payload from a source issue."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models import Issue


def attribution_line(issue: Issue) -> str:
    """Credit line naming the original author and linking the original issue."""
    return f"*Originally created by @{issue.author} ({issue.html_url}):*"


def build_issue_body(issue: Issue) -> str:
    """Build the target issue body: attribution line, blank line, original body.

    Args:
        issue: Source issue snapshot

    Returns:
        Complete issue body for the target repository
    """
    return f"{attribution_line(issue)}\n\n{issue.body}"


def label_names(issue: Issue) -> list[str]:
    """Names of the labels to attach when creating the target issue.

    GitHub creates any label that does not exist on the target yet (with a default color).
    """
    return [label.name for label in issue.labels]


def comment_bodies(issue: Issue) -> list[str]:
    return [comment.body for comment in issue.comments]
