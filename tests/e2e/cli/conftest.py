"""Fixtures for end-to-end CLI tests."""

import logging

import pytest
from click.testing import CliRunner
from rich.logging import RichHandler

SAMPLE_SPECS = "tests.e2e.cli.sample_specs:build_specs"


def _logger_levels() -> dict[str, int]:
    return {
        name: logger.level
        for name, logger in logging.Logger.manager.loggerDict.items()
        if isinstance(logger, logging.Logger)
    }


@pytest.fixture
def runner():
    """Return a Click CliRunner for invoking CLI commands in tests."""
    return CliRunner()


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo the CLI's logging configuration after each test.

    The CLI attaches a RichHandler to the root logger and sets per-logger
    levels (``-L``); both would leak into later tests.
    """
    root = logging.getLogger()
    root_level = root.level
    levels = _logger_levels()
    yield
    for handler in root.handlers[:]:
        if isinstance(handler, RichHandler):
            root.removeHandler(handler)
    root.setLevel(root_level)
    for name in _logger_levels():
        logging.getLogger(name).setLevel(levels.get(name, logging.NOTSET))
