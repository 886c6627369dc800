"""Data models for issues and labels moved between two GitHub repositories.

These are normalized, read-only snapshots of what PyGithub returns. The
migrator builds them from API objects and hands them to the issue body
builder and the console output.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Literal, cast

if TYPE_CHECKING:
    from collections.abc import Iterable

    import github.Issue
    import github.Label

IssueState = Literal["open", "closed", "all"]

ISSUE_STATES: tuple[str, ...] = ("open", "closed", "all")


@dataclass
class Label:
    """A label/tag that can be applied to issues."""

    name: str
    color: str  # Hex color without '#' prefix (e.g., "d73a4a")
    description: str = ""

    @classmethod
    def from_github(cls, label: github.Label.Label) -> Label:
        return cls(name=label.name, color=label.color, description=label.description or "")


@dataclass
class Comment:
    """A comment on an issue. Only the text survives migration."""

    body: str


@dataclass
class Issue:
    """An issue from the source repository.

    Pull requests show up in the issues API as well; ``is_pull_request``
    marks them so the migrator can skip them.
    """

    number: int
    title: str
    body: str
    state: Literal["open", "closed"]
    author: str = ""
    author_url: str = ""
    html_url: str = ""
    labels: list[Label] = field(default_factory=list)
    comments: list[Comment] = field(default_factory=list)
    is_pull_request: bool = False

    @classmethod
    def from_github(cls, issue: github.Issue.Issue) -> Issue:
        """Snapshot a PyGithub issue. Comments are not fetched here."""
        return cls(
            number=issue.number,
            title=issue.title,
            body=issue.body or "",
            state=cast('Literal["open", "closed"]', issue.state),
            author=issue.user.login,
            author_url=issue.user.html_url,
            html_url=issue.html_url,
            labels=[Label.from_github(label) for label in issue.labels],
            is_pull_request=issue.pull_request is not None,
        )


@dataclass(frozen=True)
class IssueSelector:
    """Which source issues to migrate: a state filter or explicit numbers, never both."""

    state: IssueState | None = None
    numbers: tuple[int, ...] = ()

    def __post_init__(self) -> None:
        if (self.state is None) == (not self.numbers):
            msg = "IssueSelector needs exactly one of a state filter or issue numbers"
            raise ValueError(msg)
        if self.state is not None and self.state not in ISSUE_STATES:
            msg = f"Invalid issue state: {self.state!r} (expected one of {', '.join(ISSUE_STATES)})"
            raise ValueError(msg)

    @classmethod
    def from_state(cls, state: str) -> IssueSelector:
        return cls(state=cast("IssueState", state))

    @classmethod
    def from_numbers(cls, numbers: Iterable[int]) -> IssueSelector:
        return cls(numbers=tuple(sorted(set(numbers))))

    def __str__(self) -> str:
        if self.state is not None:
            return f"state={self.state}"
        return "numbers=" + ",".join(str(n) for n in self.numbers)
