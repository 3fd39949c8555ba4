"""Build GitHub issue requests from Jira issue data."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Final

from .models import IssueRequest

if TYPE_CHECKING:
    from .models import SourceIssue

# Jira descriptions are written with Windows line endings when flattened
LINE_SEPARATOR: Final[str] = "\r\n"


def extract_description(document: dict[str, Any] | None) -> str:
    """Flatten an Atlassian Document Format body to plain text.

    Only top-level ``paragraph`` nodes are read, and within them only ``text``
    nodes. Lists, headings, code blocks, media and so on are dropped.

    Args:
        document: ADF document (``{"type": "doc", "content": [...]}``) or None

    Returns:
        The text runs of each paragraph joined with CRLF, paragraphs joined
        with CRLF. Empty string if the document is absent or has no paragraphs.
    """
    if not document:
        return ""

    paragraphs = [
        LINE_SEPARATOR.join(
            child.get("text", "") for child in node.get("content") or [] if child.get("type") == "text"
        )
        for node in document.get("content") or []
        if node.get("type") == "paragraph"
    ]
    return LINE_SEPARATOR.join(paragraphs)


def build_issue_title(issue: SourceIssue) -> str:
    return f"{issue.summary} [{issue.key}]"


def build_issue_body(issue: SourceIssue, jira_host: str) -> str:
    """Build the GitHub issue body: plain description plus a link back to Jira.

    The trailing newline and indentation are part of the template.
    """
    description = extract_description(issue.description)
    return f"""
{description}
[#{issue.key}]({jira_host}/browse/{issue.key})
        """


def build_issue_request(issue: SourceIssue, *, jira_host: str, label: str) -> IssueRequest:
    return IssueRequest(
        title=build_issue_title(issue),
        body=build_issue_body(issue, jira_host),
        labels=[label],
    )
