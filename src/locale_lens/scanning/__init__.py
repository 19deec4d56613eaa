"""Locale file scanning: discovery, parsing and key extraction."""

from .discovery import flatten, get_lang, get_locale_files
from .resolver import CANDIDATE_SUFFIXES, probe_candidates, resolve_spread_target
from .syntax import (
    IdentifierProperty,
    OpaqueProperty,
    PropertyShape,
    SpreadProperty,
    StringKeyProperty,
    classify_property,
)
from .syntax_extractor import LocaleKeyExtractor, extract_from_file
from .treesitter_parser import TreeSitterParser, get_supported_languages, language_for_path

__all__ = [
    # Discovery
    "get_locale_files",
    "get_lang",
    "flatten",
    # Property shapes
    "PropertyShape",
    "IdentifierProperty",
    "StringKeyProperty",
    "SpreadProperty",
    "OpaqueProperty",
    "classify_property",
    # Spread resolution
    "CANDIDATE_SUFFIXES",
    "probe_candidates",
    "resolve_spread_target",
    # Parsing and extraction
    "TreeSitterParser",
    "get_supported_languages",
    "language_for_path",
    "LocaleKeyExtractor",
    "extract_from_file",
]
