"""Configuration loading and management for locale-lens.

Configuration sources are merged in priority order:
    1. Defaults (defined in LocaleConfig)
    2. Project config (./locale-lens.toml)
    3. Explicit config file (--config)
    4. Environment variables (LOCALE_LENS_* prefix)
    5. CLI overrides (passed as kwargs)

Example:
    >>> config = load_config(workers=2)
    >>> config.workers
    2
"""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Literal, Optional, get_type_hints

from .exceptions import InvalidConfigError, LocaleLensError

Verbosity = Literal["quiet", "normal", "verbose"]

PROJECT_CONFIG_NAME = "locale-lens.toml"
ENV_PREFIX = "LOCALE_LENS_"


@dataclass(frozen=True)
class LocaleConfig:
    """Configuration for locale discovery and extraction.

    Attributes:
        locale_patterns: Glob patterns (relative to the project root) that
            locate locale files. Each pattern forms one discovery group.
        exclude_patterns: fnmatch patterns for paths to skip.
        workers: Thread pool size for extraction (None = auto-detect).
        allow_hidden_files: Include files under dot-directories.
        verbosity: Logging verbosity level.
    """

    locale_patterns: list[str] = field(
        default_factory=lambda: [
            "**/locales/*.ts",
            "**/locales/*.js",
            "**/locales/*/index.ts",
            "**/locales/*/index.js",
        ]
    )
    exclude_patterns: list[str] = field(
        default_factory=lambda: [
            "node_modules/*",
            "*/node_modules/*",
            "dist/*",
            "build/*",
            ".git/*",
            "*.d.ts",
            "*.test.ts",
            "*.spec.ts",
        ]
    )
    workers: Optional[int] = None
    allow_hidden_files: bool = False
    verbosity: Verbosity = "normal"

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        for name in ("locale_patterns", "exclude_patterns"):
            patterns = getattr(self, name)
            if not isinstance(patterns, list) or not all(isinstance(p, str) for p in patterns):
                raise InvalidConfigError(name, patterns, "expected a list of glob strings")
        if not self.locale_patterns:
            raise InvalidConfigError(
                "locale_patterns", self.locale_patterns, "at least one pattern is required"
            )
        if self.workers is not None and self.workers < 1:
            raise InvalidConfigError("workers", self.workers, "must be at least 1")
        if self.verbosity not in ("quiet", "normal", "verbose"):
            raise InvalidConfigError(
                "verbosity", self.verbosity, "expected quiet, normal or verbose"
            )

    @property
    def max_workers(self) -> int:
        """Worker count with auto-detection applied (CPU count, capped at 8)."""
        if self.workers is not None:
            return self.workers
        return min(os.cpu_count() or 4, 8)


def load_config(config_file: Optional[Path] = None, **overrides: Any) -> LocaleConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags). ``None``
            values are ignored so unset CLI options don't mask lower layers.

    Returns:
        Validated LocaleConfig instance

    Raises:
        LocaleLensError: If a config file is invalid or missing
        InvalidConfigError: If a value fails validation
    """
    merged: dict[str, Any] = {}

    project_config = Path.cwd() / PROJECT_CONFIG_NAME
    if project_config.exists():
        merged.update(_load_toml_section(project_config))

    if config_file is not None:
        if not config_file.exists():
            raise LocaleLensError(f"Config file not found: {config_file}")
        merged.update(_load_toml_section(config_file))

    merged.update(_load_env_vars())

    # verbose/quiet flags map onto verbosity
    if overrides.pop("verbose", False):
        overrides["verbosity"] = "verbose"
    if overrides.pop("quiet", False):
        overrides["verbosity"] = "quiet"

    merged.update({k: v for k, v in overrides.items() if v is not None})

    try:
        return LocaleConfig(**merged)
    except TypeError as e:
        # Unknown field in config
        raise LocaleLensError(f"Invalid configuration: {e}")


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from LOCALE_LENS_* environment variables.

    Supported environment variables:
        LOCALE_LENS_WORKERS: int
        LOCALE_LENS_ALLOW_HIDDEN_FILES: bool (true/false/1/0)
        LOCALE_LENS_VERBOSITY: quiet/normal/verbose

    List fields are only configurable through TOML.
    """
    type_hints = get_type_hints(LocaleConfig)

    result: dict[str, Any] = {}

    for field_name in LocaleConfig.__dataclass_fields__:
        env_key = f"{ENV_PREFIX}{field_name.upper()}"
        env_value = os.environ.get(env_key)

        if env_value is None:
            continue

        type_hint = type_hints.get(field_name)
        if type_hint is None:
            continue

        try:
            parsed = _parse_env_value(env_value, type_hint)
        except ValueError as e:
            raise InvalidConfigError(env_key, env_value, str(e))
        if parsed is not None:
            result[field_name] = parsed

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse an environment variable string to the field's type.

    Returns None for types that can't be expressed as a single string.

    Raises:
        ValueError: If value can't be parsed to expected type
    """
    origin = getattr(type_hint, "__origin__", None)

    # Optional[X] is Union[X, None]
    args = getattr(type_hint, "__args__", ())
    if type(None) in args:
        non_none_types = [t for t in args if t is not type(None)]
        if non_none_types:
            type_hint = non_none_types[0]
            origin = getattr(type_hint, "__origin__", None)

    if origin is list or type_hint is list:
        return None

    if type_hint is bool:
        lower = value.lower()
        if lower in ("true", "1", "yes", "on"):
            return True
        elif lower in ("false", "0", "no", "off"):
            return False
        else:
            raise ValueError(f"expected true/false, got '{value}'")

    if type_hint is int:
        return int(value)

    if type_hint is str or origin is Literal:
        return value

    return None


def _load_toml_section(path: Path) -> dict[str, Any]:
    """Load a TOML file and return the locale-lens settings in it.

    Accepts either top-level keys or a ``[tool.locale-lens]`` table, so the
    same settings can live in ``pyproject.toml``.
    """
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise LocaleLensError(f"Invalid config file '{path}': {e}")

    section = data.get("tool", {}).get("locale-lens")
    if isinstance(section, dict):
        return dict(section)
    return {k: v for k, v in data.items() if k != "tool"}
