"""Tree-sitter parser wrapper.

TypeScript locale files (``.ts``, ``.mts``, ``.cts``) use the TypeScript
grammar. JavaScript files (``.js``, ``.mjs``, ``.cjs``, ``.jsx``) and ``.tsx``
use the TSX grammar, so JSX values parse; plain JavaScript has no ``<T>expr``
assertions to clash with JSX tags.

tree-sitter never throws on bad input; it recovers and marks ERROR/MISSING
nodes. ``parse_source`` turns such trees into ``ParsingError`` so a malformed
locale file fails loudly instead of yielding a partial key list.

Usage:
    parser = TreeSitterParser()
    tree = parser.parse_source(source_bytes, "src/locales/en.ts")
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Union

import tree_sitter
import tree_sitter_typescript

from ..exceptions import ParsingError

if TYPE_CHECKING:
    from tree_sitter import Node, Tree

_LANGUAGE_FACTORIES = {
    "typescript": tree_sitter_typescript.language_typescript,
    "tsx": tree_sitter_typescript.language_tsx,
}

_TSX_SUFFIXES = frozenset({".tsx", ".jsx", ".js", ".mjs", ".cjs"})


def get_supported_languages() -> list[str]:
    """Get list of grammars this parser can use."""
    return list(_LANGUAGE_FACTORIES)


def language_for_path(path: Union[str, Path]) -> str:
    """Pick the grammar for a file from its suffix."""
    if Path(path).suffix.lower() in _TSX_SUFFIXES:
        return "tsx"
    return "typescript"


class TreeSitterParser:
    """Wrapper around tree-sitter for locale source files.

    Language objects are built once; a fresh ``tree_sitter.Parser`` is made
    per call, so one instance can be shared by worker threads.
    """

    def __init__(self) -> None:
        self._languages: dict[str, tree_sitter.Language] = {
            name: tree_sitter.Language(factory()) for name, factory in _LANGUAGE_FACTORIES.items()
        }

    def is_language_supported(self, language: str) -> bool:
        """Check if a language is supported."""
        return language in self._languages

    def parse(self, code: bytes, language: str) -> Tree:
        """Parse code and return the syntax tree.

        The tree may contain ERROR nodes; see ``parse_source`` for the
        checked variant.

        Raises:
            ValueError: If the language is not supported
        """
        if not self.is_language_supported(language):
            supported = ", ".join(get_supported_languages())
            raise ValueError(f"Unsupported language: {language} (expected one of {supported})")
        return tree_sitter.Parser(self._languages[language]).parse(code)

    def parse_source(self, code: bytes, path: Union[str, Path]) -> Tree:
        """Parse a locale file's source and reject trees with syntax errors.

        Args:
            code: Source as UTF-8 bytes
            path: File path, used to pick the grammar and for error messages

        Raises:
            ParsingError: If the source has syntax errors
        """
        language = language_for_path(path)
        tree = self.parse(code, language)
        if tree.root_node.has_error:
            raise ParsingError(path, language, _describe_error(tree.root_node))
        return tree


def _describe_error(root: Node) -> str:
    """Describe the first ERROR or MISSING node in the tree."""
    stack = [root]
    while stack:
        node = stack.pop()
        if node.is_error or node.is_missing:
            line, column = node.start_point
            kind = f"missing {node.type}" if node.is_missing else "unexpected syntax"
            return f"{kind} at line {line + 1}, column {column}"
        # Reverse so the leftmost child is visited first
        stack.extend(reversed([c for c in node.children if c.has_error or c.is_missing]))
    return "syntax error"
