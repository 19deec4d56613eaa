"""Locale aggregation across all discovered files.

parse_locales() discovers locale files, extracts each one on a thread pool and
returns one Locale per file, in discovery order:

    sink = RecordingSink()
    locales = parse_locales(sink, root="my-app")

Progress goes to ``sink``: START once with the flattened file list, then PARSED
per file as extractions finish (completion order, not discovery order).
The first extraction error aborts the run and propagates unchanged.
"""

from __future__ import annotations

import logging
from concurrent.futures import Future, ThreadPoolExecutor, as_completed
from pathlib import Path
from typing import Optional, Union

from .config import LocaleConfig
from .events import LocaleParseEvent, NullSink, ProgressSink
from .models import Locale, LocaleKey
from .scanning.discovery import flatten, get_lang, get_locale_files
from .scanning.syntax_extractor import LocaleKeyExtractor

logger = logging.getLogger(__name__)


def parse_locales(
    sink: Optional[ProgressSink] = None,
    root: Union[str, Path] = ".",
    config: Optional[LocaleConfig] = None,
    locale_files: Optional[list[list[str]]] = None,
    extractor: Optional[LocaleKeyExtractor] = None,
) -> list[Locale]:
    """Extract the key catalogue of every locale file.

    Args:
        sink: Progress callback receiving (LocaleParseEvent, payload)
        root: Project directory searched for locale files
        config: Discovery and worker settings
        locale_files: Grouped file paths; skips discovery when given
        extractor: Extractor to use (one is created when omitted)

    Returns:
        One Locale per file in flattened discovery order. Files without an
        object-literal default export get an empty key list.

    Raises:
        ParsingError: If any locale file has syntax errors
        FileAccessError: If any locale file can't be read
    """
    sink = sink or NullSink()
    config = config or LocaleConfig()
    extractor = extractor or LocaleKeyExtractor()

    grouped = locale_files if locale_files is not None else get_locale_files(root, config)
    files = flatten(grouped)
    sink(LocaleParseEvent.START, files)
    logger.info(f"Parsing {len(files)} locale files")

    results = _extract_all(files, extractor, sink, config.max_workers)

    locales = [
        Locale(lang=get_lang(path), locale_keys=keys, file_path=path)
        for path, keys in zip(files, results)
    ]
    logger.info(f"Extracted {sum(len(loc.locale_keys) for loc in locales)} keys")
    return locales


def _extract_all(
    files: list[str], extractor: LocaleKeyExtractor, sink: ProgressSink, max_workers: int
) -> list[list[LocaleKey]]:
    """Run extraction for every file; results are indexed like ``files``."""
    results: list[list[LocaleKey]] = [[] for _ in files]
    if not files:
        return results

    executor = ThreadPoolExecutor(max_workers=max_workers)
    try:
        futures: dict[Future, int] = {
            executor.submit(extractor.extract, path): index for index, path in enumerate(files)
        }
        for future in as_completed(futures):
            index = futures[future]
            # Raises the task's exception; the finally block drops pending work
            results[index] = future.result() or []
            sink(LocaleParseEvent.PARSED, files[index])
    finally:
        executor.shutdown(wait=True, cancel_futures=True)

    return results
