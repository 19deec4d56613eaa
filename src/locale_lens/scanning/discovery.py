"""Locale file discovery and language tagging.

Discovery groups files by the configured glob pattern that found them:

    src/locales/en.ts          -> lang "en"
    src/locales/pt-BR/index.ts -> lang "pt-BR"
"""

from __future__ import annotations

import fnmatch
import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Optional, TypeVar, Union

from ..config import LocaleConfig
from ..exceptions import InvalidPathError

logger = logging.getLogger(__name__)

T = TypeVar("T")

_INDEX_STEM = "index"


def get_locale_files(
    root: Union[str, Path], config: Optional[LocaleConfig] = None
) -> list[list[str]]:
    """Find locale files under ``root``.

    Args:
        root: Project directory to search
        config: Discovery settings (defaults to LocaleConfig())

    Returns:
        One sorted group of paths per pattern in ``config.locale_patterns``.
        A file matched by several patterns only appears in the first group.

    Raises:
        InvalidPathError: If root is not a directory
    """
    config = config or LocaleConfig()
    root_path = Path(root)
    if not root_path.is_dir():
        raise InvalidPathError(root_path, "not a directory")

    seen: set[Path] = set()
    groups: list[list[str]] = []

    for pattern in config.locale_patterns:
        group: list[str] = []
        for path in sorted(root_path.glob(pattern)):
            if not path.is_file() or path in seen:
                continue
            if _is_excluded(path.relative_to(root_path), config):
                continue
            seen.add(path)
            group.append(str(path))
        logger.debug(f"Pattern {pattern!r} matched {len(group)} locale files")
        groups.append(group)

    return groups


def _is_excluded(relative: Path, config: LocaleConfig) -> bool:
    if not config.allow_hidden_files and any(part.startswith(".") for part in relative.parts):
        return True
    rel = relative.as_posix()
    return any(fnmatch.fnmatch(rel, pattern) for pattern in config.exclude_patterns)


def get_lang(file_path: Union[str, Path]) -> str:
    """Language tag for a locale file: its stem, or its directory for index files."""
    path = Path(file_path)
    # Strip every suffix so "en.locale.ts" tags as "en"
    stem = path.name.split(".", 1)[0]
    if stem == _INDEX_STEM and path.parent.name:
        return path.parent.name
    return stem


def flatten(nested: Iterable[Iterable[T]]) -> list[T]:
    """Flatten one level of nesting, keeping order."""
    return [item for group in nested for item in group]
