"""Data models exchanged between the prompts, the Jira source and the GitHub target.

Everything here lives only for the duration of one run. Nothing is persisted.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Generic, TypeVar

if TYPE_CHECKING:
    from .protocols import GitHubClient, JiraClient

T = TypeVar("T")


@dataclass(frozen=True)
class Choice(Generic[T]):
    """A name/value pair offered by a single-choice prompt."""

    name: str
    value: T


@dataclass(frozen=True)
class StatusFilter:
    """A JQL fragment appended right after the project clause."""

    name: str
    jql_fragment: str


@dataclass(frozen=True)
class JiraCredentials:
    host: str
    username: str
    api_token: str


@dataclass(frozen=True)
class SessionContext:
    """Authenticated clients for both systems, built once at startup."""

    jira_host: str
    jira_credentials: JiraCredentials
    jira: JiraClient
    github: GitHubClient


@dataclass(frozen=True)
class MigrationTarget:
    """Everything the user selected before the migration starts."""

    jira_project_id: str
    status_fragment: str
    github_organization: str
    github_owner: str
    github_repository: str
    github_label: str


@dataclass
class SourceIssue:
    """A Jira issue as returned by the search endpoint.

    ``description`` is the Atlassian Document Format body, or None when the
    issue has no description.
    """

    key: str
    summary: str
    description: dict[str, Any] | None = None

    @classmethod
    def from_json(cls, raw: dict[str, Any]) -> SourceIssue:
        fields = raw.get("fields") or {}
        return cls(
            key=raw["key"],
            summary=fields.get("summary") or "",
            description=fields.get("description"),
        )


@dataclass
class SearchPage:
    """One page of a JQL search, together with the total the server reported.

    ``total`` is None for Jira Cloud pages, whose endpoint does not count.
    """

    total: int | None
    issues: list[SourceIssue] = field(default_factory=list)


@dataclass
class IssueRequest:
    """Payload for creating one GitHub issue."""

    title: str
    body: str
    labels: list[str] = field(default_factory=list)
