"""Progress notifications emitted while locales are parsed.

The aggregator reports progress through a plain callback instead of a shared
event bus. A sink receives ``(event, payload)``:

    START   payload = flattened locale file paths (emitted once, first)
    PARSED  payload = path of a file whose extraction finished
"""

from __future__ import annotations

from enum import Enum
from threading import Lock
from typing import Any, Protocol


class LocaleParseEvent(str, Enum):
    """Kinds of progress notifications."""

    START = "start"
    PARSED = "parsed"


class ProgressSink(Protocol):
    def __call__(self, event: LocaleParseEvent, payload: Any) -> None: ...


class NullSink:
    """Discards every notification."""

    def __call__(self, event: LocaleParseEvent, payload: Any) -> None:
        return None


class RecordingSink:
    """Keeps notifications in arrival order. Safe to share across threads."""

    def __init__(self) -> None:
        self.events: list[tuple[LocaleParseEvent, Any]] = []
        self._lock = Lock()

    def __call__(self, event: LocaleParseEvent, payload: Any) -> None:
        with self._lock:
            self.events.append((event, payload))

    def payloads(self, event: LocaleParseEvent) -> list[Any]:
        with self._lock:
            return [p for e, p in self.events if e is event]
