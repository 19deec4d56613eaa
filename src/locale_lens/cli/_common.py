"""Shared CLI helpers."""

from pathlib import Path
from typing import Optional

from rich.console import Console

from ..config import LocaleConfig, load_config
from ..logging_config import setup_logging

console = Console()
err_console = Console(stderr=True)


def resolve_config(
    config: Optional[Path] = None,
    workers: Optional[int] = None,
    verbose: bool = False,
    quiet: bool = False,
    log_file: Optional[Path] = None,
) -> LocaleConfig:
    """Build config from CLI options and set up logging to match."""
    settings = load_config(config_file=config, workers=workers, verbose=verbose, quiet=quiet)
    setup_logging(settings.verbosity, log_file=str(log_file) if log_file else None)
    return settings
