"""Tests for the tree-sitter parser wrapper."""

import pytest

from locale_lens.exceptions import ParsingError
from locale_lens.scanning.treesitter_parser import (
    TreeSitterParser,
    get_supported_languages,
    language_for_path,
)


class TestLanguageSelection:
    """Grammar selection from file suffixes."""

    def test_supported_languages(self):
        assert set(get_supported_languages()) == {"typescript", "tsx"}

    @pytest.mark.parametrize("name", ["en.ts", "en.mts", "en.cts", "en"])
    def test_typescript_grammar_for_typescript_sources(self, name):
        assert language_for_path(name) == "typescript"

    @pytest.mark.parametrize("name", ["en.tsx", "en.jsx", "EN.TSX", "en.js", "en.mjs", "en.cjs"])
    def test_tsx_grammar_for_javascript_and_jsx_sources(self, name):
        assert language_for_path(name) == "tsx"


class TestTreeSitterParser:
    """Parsing and syntax error detection."""

    def test_parse_returns_tree(self, parser):
        tree = parser.parse(b"export default { a: 'x' }\n", "typescript")
        assert tree.root_node.type == "program"

    def test_parse_unknown_language_raises(self, parser):
        with pytest.raises(ValueError, match="expected one of typescript, tsx"):
            parser.parse(b"", "cobol")

    def test_is_language_supported(self, parser):
        assert parser.is_language_supported("typescript")
        assert not parser.is_language_supported("python")

    def test_parse_source_accepts_typed_source(self, parser):
        code = b"type Messages = Record<string, string>\nexport default { a: 'x' } as Messages\n"
        tree = parser.parse_source(code, "en.ts")
        assert not tree.root_node.has_error

    def test_parse_source_accepts_plain_javascript(self, parser):
        tree = parser.parse_source(b"module.exports = { a: 'x' };\n", "en.js")
        assert not tree.root_node.has_error

    def test_parse_source_accepts_jsx_in_javascript(self, parser):
        code = b"export default {\n  a: 'x',\n  rich: <b>Hi</b>,\n}\n"
        tree = parser.parse_source(code, "en.js")
        assert not tree.root_node.has_error

    def test_parse_source_rejects_syntax_errors(self, parser):
        with pytest.raises(ParsingError) as exc_info:
            parser.parse_source(b"export default {{{ greeting 'Hi' ]\n", "broken.ts")

        err = exc_info.value
        assert err.language == "typescript"
        assert str(err.filepath) == "broken.ts"
        assert "line" in err.reason

    def test_instances_are_independent(self):
        first = TreeSitterParser()
        second = TreeSitterParser()
        assert first.parse(b"export default {}", "typescript") is not None
        assert second.parse(b"export default {}", "tsx") is not None
