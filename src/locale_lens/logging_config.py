"""
Logging setup for the locale-lens CLI.

Log records go to stderr through rich so stdout carries only the catalogue
(table or JSON). Library modules log through ``logging.getLogger(__name__)``
under the ``locale_lens`` namespace and never configure handlers themselves.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from .config import Verbosity

LOGGER_NAME = "locale_lens"

_LEVELS: dict[str, int] = {
    "quiet": logging.ERROR,
    "normal": logging.WARNING,
    "verbose": logging.DEBUG,
}


def setup_logging(
    verbosity: Verbosity = "normal", log_file: Optional[str] = None
) -> logging.Logger:
    """
    Route locale-lens logging to a rich stderr handler.

    Args:
        verbosity: ``quiet`` shows errors only, ``normal`` adds warnings
            (spread cycles), ``verbose`` adds the per-property debug trail
        log_file: Optional file that receives the same records in plain text

    Returns:
        The ``locale_lens`` package logger
    """
    level = _LEVELS[verbosity]
    verbose = verbosity == "verbose"

    handlers: list[logging.Handler] = [
        RichHandler(
            console=Console(stderr=True),
            rich_tracebacks=True,
            tracebacks_show_locals=verbose,
            # File paths and keys may contain square brackets
            markup=False,
            show_path=verbose,
        )
    ]

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)-8s %(name)s: %(message)s")
        )
        handlers.append(file_handler)

    # Replaces handlers installed by an earlier call
    logging.basicConfig(
        level=level, format="%(message)s", datefmt="[%X]", handlers=handlers, force=True
    )

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    return logger
