"""Fixtures and test helpers for end-to-end CLI tests.

Provides a test-only `log-demo` Click command that emits log messages, plus
fixtures to register that command, obtain a CliRunner, and keep logger levels
set by one invocation from leaking into the next test.
"""

import logging

import click
import pytest
from click.testing import CliRunner

from tidyseq.entrypoints.cli.main import tidyseq

# pylint: disable=redefined-outer-name

TOUCHED_LOGGERS = (
    "tidyseq",
    "tidyseq.demo",
    "tidyseq.contracts",
    "some.thirdparty",
    "click_extra",
)


@click.command()
def log_demo():
    """Emit representative log messages for CLI logging tests."""
    logger = logging.getLogger("tidyseq.demo")
    logger.debug("demo debug message")
    logger.info("demo info message")
    logger.warning("demo warning message")
    logger.error("demo error message")
    logger.critical("demo critical message")
    third_party_logger = logging.getLogger("some.thirdparty")
    third_party_logger.debug("thirdparty debug message")
    third_party_logger.info("thirdparty info message")


def _remove_command_everywhere(group, name: str) -> None:
    """Remove a command from a Click group and its internal sections."""
    group.commands.pop(name, None)
    if hasattr(group, "_default_section"):
        group._default_section.commands.pop(name, None)  # pylint: disable=protected-access
    for sec in getattr(group, "_sections", []):
        getattr(sec, "commands", {}).pop(name, None)


@pytest.fixture
def registered_log_demo():
    """Register the 'log-demo' command for the duration of a test."""
    tidyseq.add_command(log_demo, name="log-demo")
    try:
        yield
    finally:
        _remove_command_everywhere(tidyseq, "log-demo")


@pytest.fixture(autouse=True)
def restore_logger_levels():
    """Undo per-logger levels the CLI sets during a test."""
    saved = {name: logging.getLogger(name).level for name in TOUCHED_LOGGERS}
    yield
    for name, level in saved.items():
        logging.getLogger(name).setLevel(level)


@pytest.fixture
def runner():
    """Return a Click CliRunner for invoking CLI commands in tests."""
    return CliRunner()
