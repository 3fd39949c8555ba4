"""
Utility functions for the Jira to GitHub migration tool.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

# Shared by log output, prompts and the progress bar so they do not overwrite each other
console: Console = Console()


def setup_logging(*, verbosity: int = 0) -> None:
    """Configure logging for the migration process.

    verbosity 0 shows warnings and errors, 1 adds info, 2 or more adds debug.
    """
    if verbosity >= 2:
        console_level = logging.DEBUG
    elif verbosity == 1:
        console_level = logging.INFO
    else:
        console_level = logging.WARNING

    handler = RichHandler(console=console, rich_tracebacks=True, show_path=False)
    handler.setLevel(console_level)

    logging.basicConfig(
        level=console_level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[handler],
        force=True,
    )
