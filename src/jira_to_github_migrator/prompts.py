"""Interactive prompts and the progress bar, built on rich."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, TypeVar

from rich.progress import BarColumn, MofNCompleteColumn, Progress, TaskID, TextColumn, TimeElapsedColumn
from rich.prompt import Confirm, Prompt

from .exceptions import MigrationError, NoChoicesError
from .utils import console

if TYPE_CHECKING:
    from collections.abc import Sequence

    from rich.console import Console

    from .models import Choice

T = TypeVar("T")

# Module-wide logger
logger: logging.Logger = logging.getLogger(__name__)


def ask_text(message: str, *, password: bool = False) -> str:
    """Ask for free text, repeating the question until the answer is non-empty."""
    while True:
        answer = Prompt.ask(message, password=password, console=console).strip()
        if answer:
            return answer
        console.print("[prompt.invalid]Please enter a value")


def select(message: str, choices: Sequence[Choice[T]]) -> T:
    """Ask the user to pick one of ``choices`` and return the chosen value."""
    if not choices:
        msg = f"No selectable choices for: {message}"
        raise NoChoicesError(msg)

    console.print(f"[prompt]{message}")
    for number, choice in enumerate(choices, start=1):
        console.print(f"  [prompt.choices]{number}[/prompt.choices]) {choice.name}", highlight=False)

    numbers = [str(number) for number in range(1, len(choices) + 1)]
    answer = Prompt.ask("Enter a number", choices=numbers, show_choices=False, console=console)
    selected = choices[int(answer) - 1]
    logger.debug(f"Selected '{selected.name}' for: {message}")
    return selected.value


def confirm(message: str, *, default: bool = False) -> bool:
    """Ask a yes/no question."""
    return Confirm.ask(message, default=default, console=console)


class ProgressBar:
    """Single progress bar with a start/increment/stop life cycle."""

    def __init__(self, description: str = "Importing issues", *, output: Console | None = None) -> None:
        self._description: str = description
        self._console: Console = output or console
        self._progress: Progress | None = None
        self._task: TaskID | None = None

    def start(self, maximum: int, initial: int = 0) -> None:
        self._progress = Progress(
            TextColumn("[progress.description]{task.description}"),
            BarColumn(),
            MofNCompleteColumn(),
            TimeElapsedColumn(),
            console=self._console,
        )
        self._task = self._progress.add_task(self._description, total=maximum, completed=initial)
        self._progress.start()

    def increment(self, amount: int = 1) -> None:
        if self._progress is None or self._task is None:
            msg = "Progress bar not started yet. Call start() first."
            raise MigrationError(msg)
        self._progress.advance(self._task, amount)

    def stop(self) -> None:
        if self._progress is not None:
            self._progress.stop()
