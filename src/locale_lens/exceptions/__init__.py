"""Exception hierarchy for locale-lens."""

from .analysis import AnalysisError, FileAccessError, ParsingError
from .base import LocaleLensError
from .config import ConfigurationError, InvalidConfigError, InvalidPathError

__all__ = [
    "LocaleLensError",
    "AnalysisError",
    "FileAccessError",
    "ParsingError",
    "ConfigurationError",
    "InvalidPathError",
    "InvalidConfigError",
]
