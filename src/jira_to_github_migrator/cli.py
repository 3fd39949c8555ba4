"""
Command-line interface for the Jira to GitHub migration tool.

Every migration input is asked interactively; the command line only
controls log verbosity.
"""

from __future__ import annotations

import argparse
import logging
import sys

from .session import run
from .utils import console, setup_logging


def parse_arguments(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Interactively migrate Jira issues to labeled GitHub issues with a link back to Jira"
    )

    _ = parser.add_argument(
        "--verbose",
        "-v",
        action="count",
        default=0,
        help="Show info logs on the console (-vv for debug)",
    )

    return parser.parse_args(argv)


def main() -> None:
    """Main entry point."""
    args = parse_arguments()

    # Setup logging
    verbosity: int = getattr(args, "verbose", 0)
    setup_logging(verbosity=verbosity)
    logger = logging.getLogger(__name__)

    try:
        result = run()
    except KeyboardInterrupt:
        console.print("\nAborted")
        sys.exit(130)
    except Exception:
        logger.exception("Migration failed")
        sys.exit(1)

    if result is not None:
        console.print(
            f"Imported {result.issues_created} of {result.issues_fetched} fetched issues "
            f"in {result.pages_fetched} pages."
        )
    sys.exit(0)
