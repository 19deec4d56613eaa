"""
locale-lens - Locale key catalogue extraction

Finds every translation key declared in JavaScript/TypeScript locale files
(``export default { ... }``), follows default-imported spreads across files,
and records where each key is defined so tools can jump straight to it.
"""

__version__ = "0.1.0"

from .aggregator import parse_locales
from .events import LocaleParseEvent, NullSink, ProgressSink, RecordingSink
from .models import Locale, LocaleKey, SourceLocation
from .scanning.syntax_extractor import LocaleKeyExtractor, extract_from_file

__all__ = [
    "parse_locales",  # Main entry point
    "extract_from_file",
    "LocaleKeyExtractor",
    "Locale",
    "LocaleKey",
    "SourceLocation",
    "LocaleParseEvent",
    "ProgressSink",
    "NullSink",
    "RecordingSink",
]
