"""Syntax models and tree helpers for locale files.

Only a fixed set of tree-sitter node kinds is inspected: the default export,
type-assertion wrappers, object literals and their properties, spread
elements, imports, identifiers and string literals. Everything else is
opaque.

Object-literal properties are classified into a closed set of shapes:
    - IdentifierProperty: ``greeting: 'Hi'`` or shorthand ``greeting``
    - StringKeyProperty:  ``'greeting.title': 'Hi'``
    - SpreadProperty:     ``...shared``
    - OpaqueProperty:     computed/numeric keys, methods, accessors
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Union

from ..models import SourceLocation

if TYPE_CHECKING:
    from tree_sitter import Node

# Wrappers that assert a type without changing the runtime value
TYPE_ASSERTION_NODES = frozenset({"as_expression", "satisfies_expression", "type_assertion"})

_SIMPLE_ESCAPES = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "b": "\b",
    "f": "\f",
    "v": "\v",
    "0": "\0",
}


@dataclass(frozen=True)
class IdentifierProperty:
    """Property keyed by a plain identifier (including shorthand)."""

    name: str
    location: SourceLocation


@dataclass(frozen=True)
class StringKeyProperty:
    """Property keyed by a string literal."""

    value: str
    location: SourceLocation


@dataclass(frozen=True)
class SpreadProperty:
    """Spread element. ``identifier`` is None unless the argument is a bare name."""

    identifier: Optional[str]


@dataclass(frozen=True)
class OpaqueProperty:
    """Any property shape that never yields a key."""

    node_type: str


PropertyShape = Union[IdentifierProperty, StringKeyProperty, SpreadProperty, OpaqueProperty]


def node_text(node: Node) -> str:
    return node.text.decode("utf-8") if node.text is not None else ""


def node_location(node: Node, source: bytes) -> SourceLocation:
    """Span of ``node`` with 1-based lines and 0-based character columns.

    tree-sitter columns count bytes; they are converted to characters so
    non-ASCII text earlier on the line doesn't shift the column.
    """
    start_row, start_col = node.start_point
    end_row, end_col = node.end_point
    return SourceLocation(
        start_line=start_row + 1,
        start_column=_char_column(source, node.start_byte, start_col),
        end_line=end_row + 1,
        end_column=_char_column(source, node.end_byte, end_col),
    )


def _char_column(source: bytes, offset: int, byte_column: int) -> int:
    line_prefix = source[offset - byte_column : offset]
    return len(line_prefix.decode("utf-8", errors="replace"))


def string_value(node: Node) -> str:
    """Decoded value of a ``string`` literal node."""
    parts: list[str] = []
    for child in node.named_children:
        if child.type == "string_fragment":
            parts.append(node_text(child))
        elif child.type == "escape_sequence":
            parts.append(_decode_escape(node_text(child)))
    return "".join(parts)


def _decode_escape(text: str) -> str:
    body = text[1:]
    if not body:
        return ""
    if body[0] in "\r\n\u2028\u2029":
        # Line continuation
        return ""
    if body[0] == "u":
        digits = body[2:-1] if body.startswith("u{") else body[1:]
        return _code_point(digits, text)
    if body[0] == "x":
        return _code_point(body[1:], text)
    return _SIMPLE_ESCAPES.get(body, body)


def _code_point(digits: str, fallback: str) -> str:
    try:
        return chr(int(digits, 16))
    except ValueError:
        return fallback


def find_default_export(root: Node) -> Optional[Node]:
    """First top-level ``export default`` statement, if any."""
    for statement in root.named_children:
        if statement.type != "export_statement":
            continue
        if any(child.type == "default" for child in statement.children):
            return statement
    return None


def exported_expression(export: Node) -> Optional[Node]:
    """Expression after ``export default``; None for function/class declarations."""
    return export.child_by_field_name("value")


def unwrap_type_assertion(node: Node) -> Node:
    """Strip one type-assertion wrapper (``x as T``, ``x satisfies T``, ``<T>x``).

    Parentheses around either side are transparent.
    """
    node = _unwrap_parens(node)
    if node.type not in TYPE_ASSERTION_NODES:
        return node
    expressions = [c for c in node.named_children if c.type not in ("type_arguments",)]
    if node.type == "type_assertion":
        inner = expressions[-1] if expressions else node
    else:
        inner = expressions[0] if expressions else node
    return _unwrap_parens(inner)


def _unwrap_parens(node: Node) -> Node:
    while node.type == "parenthesized_expression" and node.named_child_count == 1:
        node = node.named_children[0]
    return node


def object_properties(obj: Node) -> list[Node]:
    """Property nodes of an ``object`` literal, in declaration order."""
    return [c for c in obj.named_children if c.type != "comment"]


def classify_property(node: Node, source: bytes) -> PropertyShape:
    """Map a property node onto one of the known property shapes."""
    if node.type == "shorthand_property_identifier":
        return IdentifierProperty(node_text(node), node_location(node, source))

    if node.type == "pair":
        key = node.child_by_field_name("key")
        if key is None:
            return OpaqueProperty(node.type)
        if key.type == "property_identifier":
            return IdentifierProperty(node_text(key), node_location(key, source))
        if key.type == "string":
            return StringKeyProperty(string_value(key), node_location(key, source))
        return OpaqueProperty(key.type)

    if node.type == "spread_element":
        argument = node.named_children[0] if node.named_child_count else None
        if argument is not None and argument.type == "identifier":
            return SpreadProperty(node_text(argument))
        return SpreadProperty(None)

    return OpaqueProperty(node.type)


def find_default_import_source(root: Node, name: str) -> Optional[str]:
    """Module specifier of the top-level import binding ``name`` as default.

    Only string-literal sources count.
    """
    for statement in root.named_children:
        if statement.type != "import_statement":
            continue
        clause = next((c for c in statement.named_children if c.type == "import_clause"), None)
        if clause is None:
            continue
        # The default binding is a bare identifier directly under import_clause
        if not any(c.type == "identifier" and node_text(c) == name for c in clause.named_children):
            continue
        source = statement.child_by_field_name("source")
        if source is None or source.type != "string":
            return None
        return string_value(source)
    return None
