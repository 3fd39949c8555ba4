"""
Tests for CLI module.
"""

import logging
from collections.abc import Iterator
from unittest.mock import Mock, patch

import pytest
from rich.logging import RichHandler

from jira_to_github_migrator.cli import main, parse_arguments
from jira_to_github_migrator.migrator import MigrationResult
from jira_to_github_migrator.utils import setup_logging


@pytest.mark.unit
class TestParseArguments:
    def test_default_verbosity(self) -> None:
        assert parse_arguments([]).verbose == 0

    def test_verbosity_counts(self) -> None:
        assert parse_arguments(["-vv"]).verbose == 2


@pytest.mark.unit
class TestSetupLogging:
    """Test setup_logging verbosity levels."""

    def _get_console_handler(self, root_logger: logging.Logger) -> RichHandler:
        handlers = [h for h in root_logger.handlers if isinstance(h, RichHandler)]
        assert handlers, "Expected a RichHandler on the root logger"
        return handlers[0]

    @pytest.mark.parametrize(
        ("verbosity", "level"),
        [(0, logging.WARNING), (1, logging.INFO), (2, logging.DEBUG), (3, logging.DEBUG)],
    )
    def test_console_level(self, verbosity: int, level: int) -> None:
        root_logger = logging.getLogger()
        original_handlers = root_logger.handlers[:]
        original_level = root_logger.level
        root_logger.handlers.clear()

        try:
            setup_logging(verbosity=verbosity)
            assert self._get_console_handler(root_logger).level == level
        finally:
            for h in root_logger.handlers:
                h.close()
            root_logger.handlers = original_handlers
            root_logger.setLevel(original_level)


@pytest.mark.unit
class TestMain:
    @pytest.fixture(autouse=True)
    def _no_logging_setup(self) -> Iterator[None]:
        with (
            patch("jira_to_github_migrator.cli.setup_logging"),
            patch("sys.argv", ["jira-to-github-migrator"]),
        ):
            yield

    @patch("jira_to_github_migrator.cli.run")
    def test_completed_run_exits_zero(self, mock_run: Mock, capsys: pytest.CaptureFixture[str]) -> None:
        mock_run.return_value = MigrationResult(pages_fetched=2, issues_fetched=4, issues_created=4)

        with pytest.raises(SystemExit) as exc_info:
            main()

        assert exc_info.value.code == 0
        assert "Imported 4 of 4 fetched issues in 2 pages." in capsys.readouterr().out

    @patch("jira_to_github_migrator.cli.run")
    def test_declined_run_exits_zero(self, mock_run: Mock) -> None:
        mock_run.return_value = None

        with pytest.raises(SystemExit) as exc_info:
            main()

        assert exc_info.value.code == 0

    @patch("jira_to_github_migrator.cli.run")
    def test_failure_exits_one_and_logs(self, mock_run: Mock, caplog: pytest.LogCaptureFixture) -> None:
        mock_run.side_effect = RuntimeError("Github authentication fail")

        with caplog.at_level(logging.ERROR), pytest.raises(SystemExit) as exc_info:
            main()

        assert exc_info.value.code == 1
        assert "Migration failed" in caplog.text

    @patch("jira_to_github_migrator.cli.run")
    def test_interrupt_exits_130(self, mock_run: Mock) -> None:
        mock_run.side_effect = KeyboardInterrupt

        with pytest.raises(SystemExit) as exc_info:
            main()

        assert exc_info.value.code == 130
