"""
Custom exception classes for the Jira to GitHub migration tool.
"""

from __future__ import annotations


class MigrationError(Exception):
    """Base exception for migration errors."""


class GitHubAuthenticationError(MigrationError):
    """Raised when the GitHub token does not resolve to a user login."""


class NoChoicesError(MigrationError):
    """Raised when a single-choice prompt has nothing to choose from."""
