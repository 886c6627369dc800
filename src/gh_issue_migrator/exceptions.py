"""
Custom exception classes for the GitHub issue migration tool.
"""

from __future__ import annotations


class MigrationError(Exception):
    """Base exception for migration errors."""


class ConfigurationError(MigrationError):
    """Raised when command-line arguments or environment do not form a valid configuration."""


class TokenValidationError(ConfigurationError):
    """Raised when the OAuth2 token does not have the expected length."""

    def __init__(self, length: int) -> None:
        self.length: int = length
        super().__init__(f"The github access token has to be 40 characters long! (Yours was: {length} characters.)")


class RemoteServiceError(MigrationError):
    """Raised when the GitHub API answers with a non-2xx status."""

    def __init__(self, status: int, body: str) -> None:
        self.status: int = status
        self.body: str = body
        super().__init__(f"Bad response code: {status}")
