"""tidyseq CLI entry point.

Defines the top-level ``tidyseq`` command (via Click-Extra) and registers the
subcommand groups.

Currently available groups
- ``tidyseq text``: split, join, trim, upper, lower, reverse.
- ``tidyseq array``: length, reverse, copy over items given as arguments.

Notes
- Results go to stdout; logs and status messages go to stderr.
- ``--contracts`` decides what a failed precondition does for the duration of
  the invocation (see `tidyseq.contracts`).

Examples
    $ tidyseq --version
    $ tidyseq text split -d , "a,b,,c"
    $ echo "  hi there  " | tidyseq text trim
"""

import logging
from typing import TYPE_CHECKING

import click
import click_extra as clickx

from tidyseq import __version__
from tidyseq.config import CONTRACTS_ENV_VAR, ContractMode
from tidyseq.contracts import contract_mode
from tidyseq.logging import config_console_handler, log_startup

from .array import array as array_group
from .helpers import warn
from .helpers.contract_mode_parser import CONTRACTS_METAVAR, parse_contracts
from .helpers.log_level_parser import parse_log_level
from .text import text as text_group

if TYPE_CHECKING:
    from logging import Handler

logger = logging.getLogger(__name__)

CONTRACTS_OFF_WARNING = (
    "Contract checks are disabled; invalid input may give surprising results."
)


HELP = """tidyseq command-line interface.

    Split, join, trim, re-case and reverse text, and reverse or copy lists of
    items, straight from the shell.
    """


EPILOG = "\b\n" + "\n".join(
    [
        f"{click.style('See Also:', fg='blue', bold=True, underline=True)}",
        f"  Contracts: {CONTRACTS_ENV_VAR}=enforce|warn|off",
        "  Logging  : -v/-q adjust verbosity, -L NAME=LEVEL per logger",
    ]
)


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
    epilog=EPILOG,
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    help=(
        "Increase the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help=(
        "Decrease the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--debug/--no-debug",
    is_flag=True,
    help="Enable debug mode (enables extra developer diagnostics beyond -vv).",
    default=False,
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    help=(
        "Set MINIMUM LEVEL for specific LOGGERS (NAME=LEVEL). Repeatable "
        "(e.g. -L tidyseq.contracts=ERROR) or via TIDYSEQ_LOGGER_LEVELS "
        "(comma/space list)."
    ),
    default=("click_extra=WARNING",),
    envvar="TIDYSEQ_LOGGER_LEVELS",
    show_default=True,
    show_envvar=True,
)
@click.option(
    "--contracts",
    "contracts",
    metavar=CONTRACTS_METAVAR,
    callback=parse_contracts,
    help=(
        "What a failed precondition does: 'enforce' (default) aborts the "
        "command with an error, 'warn' logs a warning and carries on, "
        "'off' skips the checks."
    ),
    default=ContractMode.ENFORCE.value,
    envvar=CONTRACTS_ENV_VAR,
    show_default=True,
    show_envvar=True,
)
@clickx.pass_context
def tidyseq(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    logger_levels: dict[str, int],
    contracts: ContractMode,
) -> None:
    """tidyseq command-line interface."""

    # 0) compute effective verbosity
    base_level = logging.WARNING
    level = base_level - (10 * verbose_count) + (10 * quiet_count)
    level = max(logging.DEBUG, min(logging.CRITICAL, level))

    # 1) configure console handler
    use_color = ctx.color is not False  # None or True => allow color
    handlers: list[Handler] = [
        config_console_handler(level=level, debug_mode=debug, color=use_color)
    ]

    # 2) configure root logger
    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)

    # 3) per-logger levels
    for name, lvl in logger_levels.items():
        logging.getLogger(name).setLevel(lvl)

    # 4) contract mode lasts until the context closes
    mode = ctx.with_resource(contract_mode(contracts))
    if mode is ContractMode.OFF:
        warn(CONTRACTS_OFF_WARNING)

    log_startup(
        logger,
        app_version=__version__,
        level=level,
        handlers=handlers,
        contract_mode=mode,
        logger_levels=logger_levels,
    )

    ctx.call_on_close(logging.shutdown)


tidyseq.add_command(text_group)
tidyseq.add_command(array_group)
