"""End-to-end tests for the top-level `tidyseq` command.

These tests exercise verbosity flags, logger-level overrides, debug
formatting, the contract mode option and startup logging by invoking the
`log-demo` command (and real subcommands) under various flags.
"""

import re

import click
import pytest

from tidyseq import __version__
from tidyseq.config import ContractMode
from tidyseq.contracts import get_mode
from tidyseq.entrypoints.cli.main import tidyseq

# pylint: disable=unused-argument

pytestmark = [pytest.mark.e2e]


def assert_in_output(pattern: str, output: str) -> None:
    """Assert that a regex pattern is found in the output string."""
    if not re.search(pattern, output, re.MULTILINE):
        raise AssertionError(f"Pattern '{pattern}' not found in output:\n{output}")


def assert_not_in_output(pattern: str, output: str) -> None:
    """Assert that a regex pattern is NOT found in the output string."""
    if re.search(pattern, output, re.MULTILINE):
        raise AssertionError(f"Pattern '{pattern}' found in output:\n{output}")


def test_version(runner):
    """--version reports the package version."""
    result = runner.invoke(tidyseq, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_help_lists_groups(runner):
    """The top-level help lists both command groups with their summaries."""
    result = runner.invoke(tidyseq, ["--help"])
    assert result.exit_code == 0
    output = click.unstyle(result.output)
    assert_in_output(r"^\s+text\s+Text commands\.", output)
    assert_in_output(r"^\s+array\s+Array commands\.", output)


def test_default_shows_warning(registered_log_demo, runner):
    """Default invocation shows WARNING and above but not INFO."""
    result = runner.invoke(tidyseq, ["log-demo"])
    assert result.exit_code == 0
    assert_in_output("demo warning message", result.output)
    assert_not_in_output("demo info message", result.output)


def test_verbose_shows_info(registered_log_demo, runner):
    """Single -v enables INFO-level console output (but not DEBUG)."""
    result = runner.invoke(tidyseq, ["-v", "log-demo"])
    assert result.exit_code == 0
    assert_in_output("demo info message", result.output)
    assert_not_in_output("demo debug message", result.output)


def test_vv_shows_debug(registered_log_demo, runner):
    """-vv enables DEBUG-level console output."""
    result = runner.invoke(tidyseq, ["-vv", "log-demo"])
    assert result.exit_code == 0
    assert_in_output("demo debug message", result.output)


def test_quiet_suppresses_warning(registered_log_demo, runner):
    """-q suppresses WARNING while ERROR remains."""
    result = runner.invoke(tidyseq, ["-q", "log-demo"])
    assert result.exit_code == 0
    assert_in_output("demo error message", result.output)
    assert_not_in_output("demo warning message", result.output)


def test_qq_suppresses_error(registered_log_demo, runner):
    """-qq leaves only CRITICAL."""
    result = runner.invoke(tidyseq, ["-qq", "log-demo"])
    assert result.exit_code == 0
    assert_in_output("demo critical message", result.output)
    assert_not_in_output("demo error message", result.output)


@pytest.mark.parametrize(
    "env, cli_args",
    [
        ({}, ["-vv", "-L", "some.thirdparty=INFO"]),
        ({"TIDYSEQ_LOGGER_LEVELS": "some.thirdparty=INFO"}, ["-vv"]),
    ],
    ids=["cli-flag", "env-var"],
)
def test_logger_level_silences_debug(registered_log_demo, runner, env, cli_args):
    """Logger-level overrides silence third-party DEBUG while keeping INFO+."""
    result = runner.invoke(tidyseq, cli_args + ["log-demo"], env=env)
    assert result.exit_code == 0
    assert_not_in_output("thirdparty debug message", result.output)
    assert_in_output("thirdparty info message", result.output)


def test_third_party_prefix_in_console(registered_log_demo, runner):
    """Third-party records are prefixed with their top-level logger name."""
    result = runner.invoke(tidyseq, ["-v", "log-demo"])
    assert result.exit_code == 0
    assert_in_output(r"\[some\] thirdparty info message", result.output)


def test_debug_mode_shows_paths(registered_log_demo, runner):
    """--debug includes file paths and line numbers in log output."""
    result = runner.invoke(tidyseq, ["--debug", "log-demo"])
    assert result.exit_code == 0
    assert_in_output(r"conftest\.py:\d+\b", result.output)


def test_debug_mode_is_off_by_default(registered_log_demo, runner):
    """By default, file paths are not included in log output."""
    result = runner.invoke(tidyseq, ["log-demo"])
    assert result.exit_code == 0
    assert_not_in_output(r"conftest\.py:\d+\b", result.output)


def test_startup_logging(registered_log_demo, runner):
    """-v shows the one-line startup summary with the contract mode."""
    result = runner.invoke(tidyseq, ["-v", "--contracts", "warn", "log-demo"])
    assert result.exit_code == 0
    assert_in_output(rf"TIDYSEQ {re.escape(__version__)}", result.output)
    assert_in_output("contracts=warn", result.output)


def test_invalid_contract_mode_rejected(runner):
    """Unknown --contracts values are a usage error."""
    result = runner.invoke(tidyseq, ["--contracts", "loud", "text", "trim", "x"])
    assert result.exit_code == 2
    assert_in_output("loud", result.output)


def test_contract_mode_does_not_leak(runner):
    """The mode chosen for one invocation is gone once it returns."""
    result = runner.invoke(tidyseq, ["--contracts", "off", "text", "split", ""])
    assert result.exit_code == 0
    assert get_mode() is ContractMode.ENFORCE


def test_contracts_off_warns_on_stderr(runner):
    """Turning contracts off is announced on stderr, not mixed into results."""
    result = runner.invoke(tidyseq, ["--contracts", "off", "text", "reverse", "ab"])
    assert result.exit_code == 0
    assert "Contract checks are disabled" in result.stderr
    assert result.stdout == "ba\n"
