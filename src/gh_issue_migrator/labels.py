"""
Label listing and copying between GitHub repositories.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .models import Label
from .utils import color_swatch

if TYPE_CHECKING:
    from github.Repository import Repository as GithubRepository

    from .throttle import Throttle

logger: logging.Logger = logging.getLogger(__name__)


def fetch_labels(github_repo: GithubRepository) -> list[Label]:
    """Fetch all labels of a repository (all pages)."""
    labels = [Label.from_github(label) for label in github_repo.get_labels()]
    logger.debug(f"Fetched {len(labels)} labels from {github_repo.full_name}")
    return labels


def format_label(label: Label) -> str:
    """One console line: hex code, color swatch, padded name and description."""
    return f"[{label.color}]  {color_swatch(label.color)}  {label.name.ljust(20)}: {label.description}"


def print_labels(labels: list[Label]) -> None:
    print(f"Found {len(labels)} issue labels:")
    for label in labels:
        print(format_label(label))
    print()


def copy_labels(
    source_repo: GithubRepository,
    target_repo: GithubRepository,
    throttle: Throttle,
) -> list[Label]:
    """Create every source label on the target repository.

    Labels are created in source order, one request each, with a throttle pause
    after every request. Existing target labels are neither checked, updated nor
    deleted: a name collision surfaces as the GithubException GitHub answers with.

    Args:
        source_repo: Repository to read labels from
        target_repo: Repository to create labels in
        throttle: Pacing between create requests

    Returns:
        The labels that were created
    """
    source_labels = fetch_labels(source_repo)
    print(f"Found {len(source_labels)} issue labels in <source_repo>:")
    print("Copying labels...")

    created: list[Label] = []
    for label in source_labels:
        print(format_label(label))
        _ = target_repo.create_label(name=label.name, color=label.color, description=label.description)
        created.append(label)
        logger.debug(f"Created label: {label.name}")
        throttle.pause()

    print("done.")
    logger.info(f"Copied {len(created)} labels to {target_repo.full_name}")
    return created
