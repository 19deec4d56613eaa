"""Catalogue models produced by extraction.

LocaleKey records one translation key with the span of its key token.
Locale groups the keys found in one discovered file under its language tag.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any


@dataclass(frozen=True)
class SourceLocation:
    """Span of a key token.

    Attributes:
        start_line: Starting line number (1-indexed)
        start_column: Starting column (0-indexed, in characters)
        end_line: Ending line number (1-indexed)
        end_column: Ending column (0-indexed, exclusive)
    """

    start_line: int
    start_column: int
    end_line: int
    end_column: int


@dataclass(frozen=True)
class LocaleKey:
    """A translation key discovered in a locale file.

    Attributes:
        key: Property name as written (identifier name or string value)
        location: Span of the key token inside ``source_path``
        file_path: File whose default export encloses the key
        source_path: File holding the key token. Differs from ``file_path``
            only for keys pulled in through a spread import.
    """

    key: str
    location: SourceLocation
    file_path: str
    source_path: str = ""

    def __post_init__(self) -> None:
        if not self.source_path:
            object.__setattr__(self, "source_path", self.file_path)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class Locale:
    """All keys of one locale file.

    Attributes:
        lang: Language tag derived from ``file_path``
        locale_keys: Keys in declaration order, spread keys inlined
        file_path: Discovered file this record was built from
    """

    lang: str
    locale_keys: list[LocaleKey] = field(default_factory=list)
    file_path: str = ""

    @property
    def keys(self) -> list[str]:
        return [k.key for k in self.locale_keys]

    def find(self, key: str) -> list[LocaleKey]:
        """All occurrences of ``key`` (duplicates are kept)."""
        return [k for k in self.locale_keys if k.key == key]

    def to_dict(self) -> dict[str, Any]:
        return {
            "lang": self.lang,
            "file_path": self.file_path,
            "locale_keys": [k.to_dict() for k in self.locale_keys],
        }
