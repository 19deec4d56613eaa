"""Extraction-related exceptions: file access and parsing."""

from pathlib import Path
from typing import Union

from .base import LocaleLensError

PathLike = Union[str, Path]


class AnalysisError(LocaleLensError):
    """Base class for errors raised while extracting locale keys."""

    pass


class FileAccessError(AnalysisError):
    """Raised when a locale file cannot be accessed or read."""

    def __init__(self, filepath: PathLike, reason: str):
        super().__init__(
            f"Cannot access file: {filepath}",
            details={"filepath": str(filepath), "reason": reason},
        )
        self.filepath = filepath
        self.reason = reason


class ParsingError(AnalysisError):
    """Raised when a locale file's source text is not valid syntax."""

    def __init__(self, filepath: PathLike, language: str, reason: str):
        super().__init__(
            f"Failed to parse {language} file: {filepath}",
            details={"filepath": str(filepath), "language": language, "reason": reason},
        )
        self.filepath = filepath
        self.language = language
        self.reason = reason
