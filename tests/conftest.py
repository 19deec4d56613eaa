"""Shared test fixtures for locale-lens tests."""

from pathlib import Path

import pytest

from locale_lens.scanning.syntax_extractor import LocaleKeyExtractor
from locale_lens.scanning.treesitter_parser import TreeSitterParser


@pytest.fixture(scope="session")
def parser():
    """One parser for the whole session (language objects are reusable)."""
    return TreeSitterParser()


@pytest.fixture
def extractor(parser):
    return LocaleKeyExtractor(parser)


@pytest.fixture
def write_files(tmp_path):
    """Write ``{relative_path: content}`` under tmp_path and return tmp_path."""

    def _write(files: dict[str, str]) -> Path:
        for rel, content in files.items():
            path = tmp_path / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        return tmp_path

    return _write
