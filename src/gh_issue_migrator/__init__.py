"""
GitHub Issue Migration Tool

Migrates issues with their labels, comments and closed state from one GitHub
repository to another, crediting the original author on every migrated issue.
"""

from __future__ import annotations

# Package version (defined before importing cli, which reports it)
__version__ = "1.0.3"

from .cli import main  # noqa: E402
from .config import MigratorConfig, Mode  # noqa: E402
from .exceptions import (  # noqa: E402
    ConfigurationError,
    MigrationError,
    RemoteServiceError,
    TokenValidationError,
)
from .migrator import IssueMigrator  # noqa: E402
from .utils import parse_issue_list, setup_logging  # noqa: E402

__all__ = [
    "ConfigurationError",
    "IssueMigrator",
    "MigrationError",
    "MigratorConfig",
    "Mode",
    "RemoteServiceError",
    "TokenValidationError",
    "main",
    "parse_issue_list",
    "setup_logging",
]
