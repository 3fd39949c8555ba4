from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Final

from github import Auth, Github
from github.GithubRetry import GithubRetry

if TYPE_CHECKING:
    from github.Repository import Repository

    from .models import IssueRequest

# Module-wide logger
logger: logging.Logger = logging.getLogger(__name__)

# Only the first page of an organization's repositories is offered for selection
REPOSITORY_PAGE_SIZE: Final[int] = 100


def get_client(token: str) -> Github:
    """Get a GitHub client using the token.

    Objects are lazy: a repository picked by name is not fetched before use.
    GithubRetry waits out primary and secondary rate limits and logs each wait
    through the ``github.GithubRetry`` logger.
    """
    return Github(auth=Auth.Token(token), per_page=REPOSITORY_PAGE_SIZE, retry=GithubRetry(), lazy=True)


class GitHubTarget:
    """Write side of the migration, backed by PyGithub."""

    def __init__(self, client: Github) -> None:
        self.client: Github = client

    def _repo(self, owner: str, repository: str) -> Repository:
        return self.client.get_repo(f"{owner}/{repository}")

    def authenticated_login(self) -> str | None:
        return self.client.get_user().login

    def list_organizations(self) -> list[str]:
        return [org.login for org in self.client.get_user().get_orgs()]

    def list_repositories(self, organization: str) -> list[tuple[str, str]]:
        repos = self.client.get_organization(organization).get_repos().get_page(0)
        logger.info(f"Found {len(repos)} repositories in {organization}")
        return [(repo.name, repo.owner.login) for repo in repos]

    def list_labels(self, owner: str, repository: str) -> list[str]:
        return [label.name for label in self._repo(owner, repository).get_labels()]

    def create_issue(self, owner: str, repository: str, request: IssueRequest) -> int:
        issue = self._repo(owner, repository).create_issue(
            title=request.title,
            body=request.body,
            labels=request.labels,
        )
        logger.debug(f"Created GitHub issue #{issue.number}: {request.title}")
        return issue.number
