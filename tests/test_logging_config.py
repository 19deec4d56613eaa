"""Tests for logging configuration."""

import logging

import pytest

from locale_lens.logging_config import LOGGER_NAME, setup_logging


@pytest.mark.parametrize(
    ("verbosity", "level"),
    [("quiet", logging.ERROR), ("normal", logging.WARNING), ("verbose", logging.DEBUG)],
)
def test_verbosity_sets_package_level(verbosity, level):
    logger = setup_logging(verbosity)

    assert logger.name == LOGGER_NAME
    assert logger.level == level


def test_module_loggers_share_package_level():
    setup_logging("quiet")

    module_logger = logging.getLogger("locale_lens.scanning.resolver")

    assert not module_logger.isEnabledFor(logging.WARNING)
    assert module_logger.isEnabledFor(logging.ERROR)


def test_log_file_receives_records(tmp_path):
    log_file = tmp_path / "locale-lens.log"

    setup_logging("verbose", log_file=str(log_file))
    logging.getLogger("locale_lens.aggregator").debug("extracting en.ts")
    for handler in logging.getLogger().handlers:
        handler.flush()

    line = log_file.read_text().strip()
    assert "DEBUG" in line
    assert "locale_lens.aggregator: extracting en.ts" in line
