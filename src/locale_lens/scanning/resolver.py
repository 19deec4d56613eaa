"""Spread target resolution.

``...shared`` inside a locale object pulls in the keys of another file when
``shared`` is the default import of a relative module:

    import shared from './shared'
    export default { greeting: 'Hi', ...shared }

The specifier is joined with the importing file's directory and probed with
each suffix in CANDIDATE_SUFFIXES, in order. The first existing file wins.
Anything that doesn't resolve contributes no keys.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING, Optional, Union

from .syntax import find_default_import_source

if TYPE_CHECKING:
    from tree_sitter import Node

logger = logging.getLogger(__name__)

# Probe order: the specifier as written, then with .js, then with .ts
CANDIDATE_SUFFIXES: tuple[str, ...] = ("", ".js", ".ts")


def candidate_paths(base: Union[str, Path]) -> list[Path]:
    """Paths probed for ``base``, in priority order."""
    return [Path(f"{base}{suffix}") for suffix in CANDIDATE_SUFFIXES]


def probe_candidates(base: Union[str, Path]) -> Optional[Path]:
    """First candidate path that exists as a file, or None."""
    for candidate in candidate_paths(base):
        if candidate.is_file():
            return candidate
    return None


def resolve_spread_target(file_path: Union[str, Path], identifier: str, root: Node) -> Optional[Path]:
    """Locate the file a spread identifier was default-imported from.

    Args:
        file_path: File containing the spread
        identifier: Spread argument name
        root: Parsed program of ``file_path``

    Returns:
        Path of the target file, or None if the identifier isn't a default
        import of an existing file
    """
    specifier = find_default_import_source(root, identifier)
    if specifier is None:
        logger.debug(f"{file_path}: no default import binds '{identifier}'")
        return None

    base = os.path.normpath(os.path.join(os.path.dirname(str(file_path)), specifier))
    target = probe_candidates(base)
    if target is None:
        logger.debug(f"{file_path}: spread '{identifier}' from '{specifier}' not found on disk")
    return target
