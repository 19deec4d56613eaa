"""Locale key extraction from a single file.

A locale file default-exports an object literal, optionally behind one type
assertion:

    import shared from './shared'

    export default {
      greeting: 'Hi',
      'nav.home': 'Home',
      ...shared,
    } as LocaleMessages

Extraction yields one LocaleKey per identifier or string-literal key, in
declaration order, with the keys of spread imports inlined at the spread's
position. Files without an object-literal default export yield None.

Usage:
    extractor = LocaleKeyExtractor()
    keys = extractor.extract("src/locales/en.ts")
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Optional, Union

from ..exceptions import FileAccessError
from ..models import LocaleKey
from .resolver import resolve_spread_target
from .syntax import (
    IdentifierProperty,
    SpreadProperty,
    StringKeyProperty,
    classify_property,
    exported_expression,
    find_default_export,
    object_properties,
    unwrap_type_assertion,
)
from .treesitter_parser import TreeSitterParser

if TYPE_CHECKING:
    from tree_sitter import Node

logger = logging.getLogger(__name__)


class LocaleKeyExtractor:
    """Extracts LocaleKeys from locale files.

    Holds one TreeSitterParser; safe to share between threads.
    """

    def __init__(self, parser: Optional[TreeSitterParser] = None) -> None:
        self._parser = parser or TreeSitterParser()

    def extract(self, file_path: Union[str, Path]) -> Optional[list[LocaleKey]]:
        """Extract the keys of one locale file.

        Args:
            file_path: Locale file to read

        Returns:
            Keys in declaration order (spread keys inlined), or None if the
            file has no object-literal default export

        Raises:
            FileAccessError: If the file can't be read
            ParsingError: If the file (or a spread target) has syntax errors
        """
        path = str(file_path)
        return self._extract(path, path, frozenset())

    def _extract(
        self, path: str, origin: str, resolving: frozenset[Path]
    ) -> Optional[list[LocaleKey]]:
        source = _read_source(path)
        root = self._parser.parse_source(source, path).root_node

        export = find_default_export(root)
        if export is None:
            logger.debug(f"{path}: no default export")
            return None

        expression = exported_expression(export)
        if expression is None:
            return None
        expression = unwrap_type_assertion(expression)
        if expression.type != "object":
            logger.debug(f"{path}: default export is {expression.type}, not an object literal")
            return None

        resolving = resolving | {Path(path).resolve()}
        keys: list[LocaleKey] = []

        for node in object_properties(expression):
            shape = classify_property(node, source)

            if isinstance(shape, (IdentifierProperty, StringKeyProperty)):
                name = shape.name if isinstance(shape, IdentifierProperty) else shape.value
                if name:
                    keys.append(
                        LocaleKey(
                            key=name, location=shape.location, file_path=origin, source_path=path
                        )
                    )
            elif isinstance(shape, SpreadProperty):
                keys.extend(self._extract_spread(path, origin, shape, root, resolving))
            else:
                logger.debug(f"{path}: skipping {shape.node_type} property")

        return keys

    def _extract_spread(
        self,
        path: str,
        origin: str,
        spread: SpreadProperty,
        root: Node,
        resolving: frozenset[Path],
    ) -> list[LocaleKey]:
        if spread.identifier is None:
            return []

        target = resolve_spread_target(path, spread.identifier, root)
        if target is None:
            return []

        if target.resolve() in resolving:
            logger.warning(
                f"{path}: spread '{spread.identifier}' re-enters {target}, which is already "
                "being resolved; skipping"
            )
            return []

        return self._extract(str(target), origin, resolving) or []


def _read_source(path: str) -> bytes:
    try:
        # Decode/encode round trip rejects files that aren't UTF-8
        return Path(path).read_text(encoding="utf-8").encode("utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise FileAccessError(path, str(e))


def extract_from_file(
    file_path: Union[str, Path], parser: Optional[TreeSitterParser] = None
) -> Optional[list[LocaleKey]]:
    """Extract the keys of one locale file. See LocaleKeyExtractor.extract."""
    return LocaleKeyExtractor(parser).extract(file_path)
