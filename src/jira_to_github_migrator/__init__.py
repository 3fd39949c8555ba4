"""
Jira to GitHub Migration Tool

Interactively copies the issues of a Jira project into a GitHub repository
as labeled issues that link back to their Jira source.
"""

from __future__ import annotations

from .cli import main
from .exceptions import GitHubAuthenticationError, MigrationError, NoChoicesError
from .issue_builder import build_issue_request, extract_description
from .jira_utils import build_jql
from .migrator import PAGE_SIZE, IssueBatch, migrate_issues
from .session import run
from .utils import setup_logging

# Package version
__version__ = "0.1.0"

__all__ = [
    "PAGE_SIZE",
    "GitHubAuthenticationError",
    "IssueBatch",
    "MigrationError",
    "NoChoicesError",
    "build_issue_request",
    "build_jql",
    "extract_description",
    "main",
    "migrate_issues",
    "run",
    "setup_logging",
]
