"""Progress bar driven by locale parse events."""

from __future__ import annotations

from typing import Any

from rich.console import Console
from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    SpinnerColumn,
    TaskID,
    TextColumn,
    TimeElapsedColumn,
)

from ..events import LocaleParseEvent


class ParseProgress:
    """Progress sink rendering a rich progress bar.

    Use as a context manager around parse_locales():

        with ParseProgress(console) as progress:
            locales = parse_locales(progress, root)
    """

    def __init__(self, console: Console, enabled: bool = True):
        self._progress = Progress(
            SpinnerColumn(),
            TextColumn("[bold]{task.description}"),
            BarColumn(bar_width=40, complete_style="cyan", finished_style="green"),
            MofNCompleteColumn(),
            TimeElapsedColumn(),
            console=console,
            transient=True,
            disable=not enabled,
        )
        self._task_id: TaskID | None = None

    def __enter__(self) -> ParseProgress:
        self._progress.start()
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self._progress.stop()

    def __call__(self, event: LocaleParseEvent, payload: Any) -> None:
        if event is LocaleParseEvent.START:
            self._task_id = self._progress.add_task("Parsing locale files", total=len(payload))
        elif event is LocaleParseEvent.PARSED and self._task_id is not None:
            self._progress.advance(self._task_id)

