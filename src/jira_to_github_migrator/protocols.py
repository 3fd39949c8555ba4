"""Protocols defining the contracts for the Jira source and the GitHub target.

The interactive pipeline only talks to these two interfaces, so tests can
substitute fakes for both systems:

1. JiraClient: lists projects and runs paged JQL searches
2. GitHubClient: resolves the authenticated user, lists organizations,
   repositories and labels, and creates issues

The concrete implementations are ``jira_utils.JiraSource`` (backed by the
``jira`` library) and ``github_utils.GitHubTarget`` (backed by PyGithub).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from .models import IssueRequest, SearchPage


class JiraClient(Protocol):
    """Protocol for reading issues from Jira."""

    def list_projects(self) -> list[tuple[str, str]]:
        """Return ``(name, id)`` for every project the user can browse."""
        ...

    def search(self, jql: str, start_at: int | None = None, max_results: int | None = None) -> SearchPage:
        """Run a JQL search.

        ``start_at`` and ``max_results`` address the page. When both are None
        only ``SearchPage.total`` is meaningful and is always set; callers use
        that form to count. Pages must be read in increasing ``start_at`` order.
        """
        ...


class GitHubClient(Protocol):
    """Protocol for the GitHub side of the migration."""

    def authenticated_login(self) -> str | None:
        """Return the login of the user the token belongs to."""
        ...

    def list_organizations(self) -> list[str]:
        """Return the logins of the organizations the user belongs to."""
        ...

    def list_repositories(self, organization: str) -> list[tuple[str, str]]:
        """Return ``(name, owner login)`` for the first page of the organization's repositories."""
        ...

    def list_labels(self, owner: str, repository: str) -> list[str]:
        """Return the label names defined in the repository."""
        ...

    def create_issue(self, owner: str, repository: str, request: IssueRequest) -> int:
        """Create an issue and return its GitHub number."""
        ...


class ProgressReporter(Protocol):
    """Protocol for the progress display driven by the migration loop."""

    def start(self, maximum: int, initial: int = 0) -> None: ...

    def increment(self, amount: int = 1) -> None: ...

    def stop(self) -> None: ...
