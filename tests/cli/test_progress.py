"""Tests for the rich progress sink."""

import io

from rich.console import Console

from locale_lens.cli.progress import ParseProgress
from locale_lens.events import LocaleParseEvent


def _task(progress: ParseProgress):
    (task,) = progress._progress.tasks
    return task


def test_progress_tracks_events():
    console = Console(file=io.StringIO())

    with ParseProgress(console) as progress:
        progress(LocaleParseEvent.START, ["en.ts", "fr.ts"])
        progress(LocaleParseEvent.PARSED, "fr.ts")
        task = _task(progress)
        assert task.total == 2
        assert task.completed == 1


def test_parsed_before_start_is_ignored():
    console = Console(file=io.StringIO())

    with ParseProgress(console, enabled=False) as progress:
        progress(LocaleParseEvent.PARSED, "en.ts")
        assert progress._progress.tasks == []
