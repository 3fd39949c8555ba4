"""
Pytest configuration and fixtures.

Provides in-memory fakes for the Jira and GitHub protocols and for the
progress display, so the pipeline can run without any network access.
"""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING, Any

import pytest
from github import GithubException

from jira_to_github_migrator.models import SearchPage, SourceIssue

if TYPE_CHECKING:
    from jira_to_github_migrator.models import IssueRequest

JIRA_HOST = "https://example.atlassian.net"


def paragraph(*texts: str) -> dict[str, Any]:
    return {"type": "paragraph", "content": [{"type": "text", "text": text} for text in texts]}


def make_issue(number: int, description: dict[str, Any] | None = None) -> SourceIssue:
    return SourceIssue(key=f"PROJ-{number}", summary=f"Issue {number}", description=description)


class FakeJira:
    """Serves a fixed list of issues; records every search it receives."""

    def __init__(self, issues: list[SourceIssue], projects: list[tuple[str, str]] | None = None) -> None:
        self.issues: list[SourceIssue] = issues
        self.projects: list[tuple[str, str]] = projects if projects is not None else [("Project", "10001")]
        self.searches: list[tuple[str, int | None, int | None]] = []

    def list_projects(self) -> list[tuple[str, str]]:
        return self.projects

    def search(self, jql: str, start_at: int | None = None, max_results: int | None = None) -> SearchPage:
        self.searches.append((jql, start_at, max_results))
        start = start_at or 0
        end = start + (max_results if max_results is not None else 50)
        return SearchPage(total=len(self.issues), issues=self.issues[start:end])


class FakeGitHub:
    """Records created issues; fails creation for titles listed in ``fail_titles``."""

    def __init__(
        self,
        *,
        login: str | None = "octocat",
        labels: list[str] | None = None,
        fail_titles: set[str] | None = None,
    ) -> None:
        self.login: str | None = login
        self.organizations: list[str] = ["acme"]
        self.repositories: list[tuple[str, str]] = [("widgets", "acme"), ("gadgets", "acme")]
        self.labels: list[str] = labels if labels is not None else ["jira", "bug"]
        self.fail_titles: set[str] = fail_titles or set()
        self.created: list[tuple[str, str, IssueRequest]] = []
        self._lock: threading.Lock = threading.Lock()

    def authenticated_login(self) -> str | None:
        return self.login

    def list_organizations(self) -> list[str]:
        return self.organizations

    def list_repositories(self, organization: str) -> list[tuple[str, str]]:
        return [repo for repo in self.repositories if repo[1] == organization]

    def list_labels(self, owner: str, repository: str) -> list[str]:
        return self.labels

    def create_issue(self, owner: str, repository: str, request: IssueRequest) -> int:
        if request.title in self.fail_titles:
            raise GithubException(500, {"message": "Server Error"}, None)
        with self._lock:
            self.created.append((owner, repository, request))
            return len(self.created)


class FakeProgress:
    def __init__(self) -> None:
        self.started: tuple[int, int] | None = None
        self.increments: list[int] = []
        self.stopped: bool = False

    def start(self, maximum: int, initial: int = 0) -> None:
        self.started = (maximum, initial)

    def increment(self, amount: int = 1) -> None:
        self.increments.append(amount)

    def stop(self) -> None:
        self.stopped = True


@pytest.fixture
def fake_github() -> FakeGitHub:
    return FakeGitHub()


@pytest.fixture
def fake_progress() -> FakeProgress:
    return FakeProgress()
