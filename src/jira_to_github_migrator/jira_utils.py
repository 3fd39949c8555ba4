from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Final

from jira import JIRA

from .exceptions import MigrationError
from .models import SearchPage, SourceIssue, StatusFilter

if TYPE_CHECKING:
    from .models import JiraCredentials

# Module-wide logger
logger: logging.Logger = logging.getLogger(__name__)

# Version 3 returns descriptions as Atlassian Document Format instead of wiki markup
_REST_API_VERSION: Final[str] = "3"
_SEARCH_FIELDS: Final[str] = "summary,description"
_CLOUD_DEPLOYMENT: Final[str] = "Cloud"
_DEFAULT_PAGE_SIZE: Final[int] = 50

STATUS_FILTERS: Final[tuple[StatusFilter, ...]] = (
    StatusFilter(name="Not done", jql_fragment=" and status != done"),
    StatusFilter(name="All", jql_fragment=""),
)


def get_client(credentials: JiraCredentials) -> JIRA:
    """Get a Jira client using basic auth with an API token."""
    return JIRA(
        server=credentials.host,
        basic_auth=(credentials.username, credentials.api_token),
        options={"rest_api_version": _REST_API_VERSION},
    )


def build_jql(project_id: str, status_fragment: str) -> str:
    """Compose the query used for both the count fetch and every page fetch."""
    return f"project = {project_id}{status_fragment} AND type != Epic order by created DESC"


@dataclass
class _PageCursor:
    """Where the next Jira Cloud page of one query starts."""

    next_start: int = 0
    token: str | None = None
    is_last: bool = False


class JiraSource:
    """Read side of the migration, backed by the ``jira`` library.

    Jira Cloud no longer serves offset-based search: counts come from the
    approximate-count endpoint and pages are chained with ``nextPageToken``.
    The token of each query is kept here, so callers still address pages by
    ``start_at`` as long as they read them in order.
    """

    def __init__(self, client: JIRA) -> None:
        self.client: JIRA = client
        self._cursors: dict[str, _PageCursor] = {}

    @property
    def is_cloud(self) -> bool:
        return self.client.deploymentType == _CLOUD_DEPLOYMENT

    def list_projects(self) -> list[tuple[str, str]]:
        projects = self.client.projects()
        logger.info(f"Found {len(projects)} Jira projects")
        return [(project.name, str(project.id)) for project in projects]

    def search(self, jql: str, start_at: int | None = None, max_results: int | None = None) -> SearchPage:
        if self.is_cloud:
            if start_at is None and max_results is None:
                return SearchPage(total=self._cloud_count(jql))
            return self._cloud_page(jql, start_at or 0, max_results or _DEFAULT_PAGE_SIZE)

        kwargs: dict[str, int] = {}
        if start_at is not None:
            kwargs["startAt"] = start_at
        if max_results is not None:
            kwargs["maxResults"] = max_results

        logger.debug(f"Searching Jira: {jql} ({kwargs})")
        result = self.client.search_issues(jql, fields=_SEARCH_FIELDS, json_result=True, **kwargs)
        if "total" not in result:
            msg = f"Jira search did not report a total for: {jql}"
            raise MigrationError(msg)
        return SearchPage(total=int(result["total"]), issues=self._issues(result))

    @staticmethod
    def _issues(result: dict[str, Any]) -> list[SourceIssue]:
        return [SourceIssue.from_json(raw) for raw in result.get("issues", [])]

    def _cloud_count(self, jql: str) -> int:
        response = self.client.approximate_issue_count(jql, json_result=True)
        if not isinstance(response, dict) or "count" not in response:
            msg = f"Jira did not report an issue count for: {jql}"
            raise MigrationError(msg)
        return int(response["count"])

    def _cloud_page(self, jql: str, start_at: int, max_results: int) -> SearchPage:
        if start_at == 0:
            cursor = self._cursors[jql] = _PageCursor()
        else:
            cursor = self._cursors.get(jql)
            if cursor is None:
                msg = f"Jira Cloud pages must be read from the start, got start {start_at} for: {jql}"
                raise MigrationError(msg)
            if cursor.is_last and start_at >= cursor.next_start:
                return SearchPage(total=None)
            if start_at != cursor.next_start:
                msg = f"Jira Cloud pages must be read in order: expected start {cursor.next_start}, got {start_at}"
                raise MigrationError(msg)

        logger.debug(f"Searching Jira Cloud: {jql} (start {start_at}, token {cursor.token})")
        result = self.client.enhanced_search_issues(
            jql,
            nextPageToken=cursor.token,
            maxResults=max_results,
            fields=_SEARCH_FIELDS,
            json_result=True,
        )
        issues = self._issues(result)

        cursor.next_start = start_at + len(issues)
        cursor.token = result.get("nextPageToken")
        cursor.is_last = bool(result.get("isLast")) or not cursor.token
        return SearchPage(total=None, issues=issues)
