"""
Paged copy of Jira issues into GitHub issues.

The loop fetches ``PAGE_SIZE`` issues at a time with the same JQL that was
used for the initial count, creates the GitHub issues of a page concurrently,
and waits for all of them before fetching the next page. A failed creation
aborts the run; issues already created stay on GitHub.

The cursor runs while ``start_at <= total``. When ``total`` is a multiple of
the page size the last fetch starts exactly at ``total`` and returns nothing.
``total`` is the count captured before the confirmation prompt and is not
refreshed, so the progress bar may end below its maximum if issues vanished
in the meantime.
"""

from __future__ import annotations

import logging
from concurrent.futures import Future, ThreadPoolExecutor, wait
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final, ParamSpec, Self

from .issue_builder import build_issue_request

if TYPE_CHECKING:
    from collections.abc import Callable
    from types import TracebackType

    from .models import MigrationTarget, SessionContext
    from .protocols import ProgressReporter

P = ParamSpec("P")

# Module-wide logger
logger: logging.Logger = logging.getLogger(__name__)

PAGE_SIZE: Final[int] = 3


@dataclass
class MigrationResult:
    """Statistics collected during migration."""

    pages_fetched: int = 0
    issues_fetched: int = 0
    issues_created: int = 0


class IssueBatch:
    """Bounded task group with a single join point.

    At most ``max_workers`` submitted calls run at once. ``join()`` waits for
    every call submitted since the previous join to settle, then returns their
    results in submission order or re-raises the first failure in that order.
    """

    def __init__(self, max_workers: int) -> None:
        self.max_workers: int = max_workers
        self._executor: ThreadPoolExecutor = ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="create-issue"
        )
        self._pending: list[Future[int]] = []

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self._executor.shutdown(wait=True)

    def __len__(self) -> int:
        return len(self._pending)

    def submit(self, fn: Callable[P, int], *args: P.args, **kwargs: P.kwargs) -> None:
        self._pending.append(self._executor.submit(fn, *args, **kwargs))

    def join(self) -> list[int]:
        pending, self._pending = self._pending, []
        _ = wait(pending)
        return [future.result() for future in pending]


def migrate_issues(
    session: SessionContext,
    target: MigrationTarget,
    *,
    jql: str,
    total: int,
    progress: ProgressReporter,
    page_size: int = PAGE_SIZE,
) -> MigrationResult:
    """Copy every issue matched by ``jql`` into the selected GitHub repository.

    Args:
        session: Authenticated Jira and GitHub clients plus the Jira host
        target: Selected GitHub repository and label
        jql: Query used for the initial count
        total: Issue count captured before confirmation; sizes the progress bar
        progress: Progress display, advanced by the issues each page returned
        page_size: Issues per fetch, also the number of concurrent creations

    Returns:
        Counts of pages fetched and issues created

    Raises:
        Whatever the Jira search or a GitHub issue creation raises
    """
    result = MigrationResult()
    progress.start(total, 0)

    try:
        with IssueBatch(max_workers=page_size) as batch:
            for start_at in range(0, total + 1, page_size):
                page = session.jira.search(jql, start_at=start_at, max_results=page_size)
                result.pages_fetched += 1
                result.issues_fetched += len(page.issues)

                for issue in page.issues:
                    request = build_issue_request(issue, jira_host=session.jira_host, label=target.github_label)
                    batch.submit(
                        session.github.create_issue, target.github_owner, target.github_repository, request
                    )

                numbers = batch.join()
                result.issues_created += len(numbers)
                logger.debug(f"Page at {start_at}: created GitHub issues {numbers}")
                progress.increment(len(page.issues))
    finally:
        progress.stop()

    logger.info(
        f"Migrated {result.issues_created} issues to "
        f"{target.github_owner}/{target.github_repository} in {result.pages_fetched} pages"
    )
    return result
