"""
Interactive pipeline: credentials, Jira selection, GitHub selection,
confirmation, then the migration loop.

Each stage runs once, in order, and feeds the next one.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from . import github_utils as ghu
from . import jira_utils as jru
from .exceptions import GitHubAuthenticationError, MigrationError
from .migrator import migrate_issues
from .models import Choice, JiraCredentials, MigrationTarget, SessionContext
from .prompts import ProgressBar, ask_text, confirm, select
from .utils import console

if TYPE_CHECKING:
    from collections.abc import Callable

    from .migrator import MigrationResult
    from .protocols import GitHubClient, JiraClient, ProgressReporter

# Module-wide logger
logger: logging.Logger = logging.getLogger(__name__)


def open_jira(credentials: JiraCredentials) -> JiraClient:
    return jru.JiraSource(jru.get_client(credentials))


def open_github(token: str) -> GitHubClient:
    return ghu.GitHubTarget(ghu.get_client(token))


def collect_jira_credentials() -> JiraCredentials:
    username = ask_text("Jira username:")
    api_token = ask_text("Jira api token:", password=True)
    host = ask_text("Jira host")
    return JiraCredentials(host=host, username=username, api_token=api_token)


def select_jira_project(jira: JiraClient) -> tuple[str, str]:
    """Let the user pick a project and a status filter.

    Returns:
        The Jira project id and the status JQL fragment
    """
    projects = jira.list_projects()
    project_id = select(
        "Which project to import?",
        [Choice(name=name, value=project_id) for name, project_id in projects],
    )
    status_fragment = select(
        "Import all issue or only not done",
        [Choice(name=status.name, value=status.jql_fragment) for status in jru.STATUS_FILTERS],
    )
    return project_id, status_fragment


def authenticate_github(github: GitHubClient) -> str:
    login = github.authenticated_login()
    if not login:
        msg = "Github authentication fail"
        raise GitHubAuthenticationError(msg)
    return login


def select_github_target(github: GitHubClient) -> tuple[str, str, str, str]:
    """Let the user pick an organization, a repository and a label.

    Returns:
        Organization login, repository owner login, repository name, label name
    """
    organization = select(
        "Select an organization from github",
        [Choice(name=login, value=login) for login in github.list_organizations()],
    )
    repository, owner = select(
        f"Select a repository from {organization}",
        [Choice(name=name, value=(name, owner)) for name, owner in github.list_repositories(organization)],
    )
    label = select(
        "Select a label",
        [Choice(name=name, value=name) for name in github.list_labels(owner, repository)],
    )
    return organization, owner, repository, label


def run(
    *,
    jira_factory: Callable[[JiraCredentials], JiraClient] = open_jira,
    github_factory: Callable[[str], GitHubClient] = open_github,
    progress: ProgressReporter | None = None,
) -> MigrationResult | None:
    """Run the whole interactive migration.

    Returns:
        The migration statistics, or None if the user declined the import
    """
    credentials = collect_jira_credentials()
    jira = jira_factory(credentials)

    project_id, status_fragment = select_jira_project(jira)
    jql = jru.build_jql(project_id, status_fragment)
    total = jira.search(jql).total
    if total is None:
        msg = f"Jira did not report how many issues match: {jql}"
        raise MigrationError(msg)
    logger.info(f"{total} Jira issues match: {jql}")

    github_token = ask_text("Github api token:", password=True)
    session = SessionContext(
        jira_host=credentials.host,
        jira_credentials=credentials,
        jira=jira,
        github=github_factory(github_token),
    )

    login = authenticate_github(session.github)
    console.print(f"Logged in github with user {login}.")

    organization, owner, repository, label = select_github_target(session.github)
    target = MigrationTarget(
        jira_project_id=project_id,
        status_fragment=status_fragment,
        github_organization=organization,
        github_owner=owner,
        github_repository=repository,
        github_label=label,
    )

    if not confirm(f"Are you sure that you want to import {total} issues?", default=False):
        logger.info("Import declined, nothing was created on GitHub")
        return None

    return migrate_issues(session, target, jql=jql, total=total, progress=progress or ProgressBar())
