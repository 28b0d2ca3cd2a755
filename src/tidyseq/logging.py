"""Logging helpers used by the tidyseq CLI.

This module configures console logging with Rich and provides a filter that
tags each record with a short bracketed source label for console output.
Library modules only ever call ``logging.getLogger(__name__)``; handlers are
attached by the CLI entry point.
"""

from __future__ import annotations

import logging
import platform
import sys
from collections.abc import Mapping
from importlib.metadata import PackageNotFoundError, version
from typing import TYPE_CHECKING

from rich.console import Console
from rich.logging import RichHandler

if TYPE_CHECKING:
    from logging import Logger

    from tidyseq.config import ContractMode

# pylint: disable=too-few-public-methods

PROJECT_PREFIX = "tidyseq"

# Project loggers whose records deserve a visible tag on the console.
PROJECT_TAGS: Mapping[str, str] = {"tidyseq.contracts": "[contract]"}

CONSOLE_FORMAT = "%(prefix)s%(message)s"
DEBUG_FORMAT = "%(asctime)s %(name)s: %(message)s"


def _owns(owner: str, name: str) -> bool:
    return name == owner or name.startswith(owner + ".")


class LoggerTagFilter(logging.Filter):
    """Set `record.prefix` to a short label naming where a record came from.

    * Third-party loggers get their top-level package, e.g. "[click_extra] ".
    * Project loggers listed in ``tags`` get their tag, e.g. "[contract] " for
      warnings about ignored contract violations. The most specific listed
      logger wins.
    * Other project loggers get no prefix.

    The filter never drops a record.
    """

    def __init__(self, tags: Mapping[str, str] | None = None) -> None:
        super().__init__()
        tags = PROJECT_TAGS if tags is None else tags
        self.tags = dict(sorted(tags.items(), key=lambda item: -len(item[0])))

    def tag_for(self, name: str) -> str:
        """Return the bare label for logger ``name`` ("" for untagged project loggers)."""
        if not _owns(PROJECT_PREFIX, name):
            return f"[{name.split('.')[0]}]"
        return next((tag for owner, tag in self.tags.items() if _owns(owner, name)), "")

    def filter(self, record: logging.LogRecord) -> bool:
        tag = self.tag_for(record.name)
        record.prefix = f"{tag} " if tag else ""
        return True


def config_console_handler(
    level: int = logging.INFO, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Configure and return a RichHandler for console output.

    The handler writes to stderr so that command results on stdout stay
    machine-readable, and always carries a `LoggerTagFilter`. Normal output
    is ``[tag] message``. Debug mode lowers the level to DEBUG and switches to
    timestamped ``logger.name: message`` lines with source file/line links.

    Args:
        level: Minimum level for console output (overridden to DEBUG in debug_mode).
        debug_mode: When True, enable debug formatting (show_path, timestamps).
        color: Enable color output when True; follows click-extra's
            ``--color/--no-color``.

    Returns:
        RichHandler: Configured handler suitable to attach to the root logger.
    """
    handler = RichHandler(
        level=logging.DEBUG if debug_mode else level,
        console=Console(color_system="auto" if color else None, stderr=True),
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )
    handler.setFormatter(
        logging.Formatter(fmt=DEBUG_FORMAT if debug_mode else CONSOLE_FORMAT)
    )
    handler.addFilter(LoggerTagFilter())
    return handler


def _distribution_version(name: str) -> str:
    try:
        return version(name)
    except PackageNotFoundError:
        return "<not installed>"


def log_startup(
    logger: Logger,
    *,
    app_version: str,
    level: int,
    handlers: list[logging.Handler],
    contract_mode: ContractMode,
    logger_levels: dict[str, int],
) -> None:
    """Log a one-line summary and detailed diagnostics at startup.

    The INFO line names the application version, the console level and the
    contract mode. DEBUG lines add Python and platform versions, the versions
    of click, click-extra and rich, the active handler types, and any
    per-logger overrides.

    Args:
        logger: Logger used to emit startup messages.
        app_version: Application version string to display.
        level: Effective console logging level (numeric).
        handlers: Active logging handlers attached to the root logger.
        contract_mode: Contract mode in effect for this invocation.
        logger_levels: Mapping of logger names to their configured numeric levels.
    """

    logger.info(
        "TIDYSEQ %s - console=%s, contracts=%s",
        app_version,
        logging.getLevelName(level),
        contract_mode.value,
    )

    logger.debug("Python: %s", sys.version.split()[0])
    logger.debug("Platform: %s %s", platform.system(), platform.release())
    for dist in ("click", "click-extra", "rich"):
        logger.debug("%s: %s", dist, _distribution_version(dist))
    logger.debug("Handlers: %s", [type(h).__name__ for h in handlers])
    if logger_levels:
        logger.debug(
            "Per-logger overrides: %s",
            {name: logging.getLevelName(lvl) for name, lvl in logger_levels.items()},
        )
    else:
        logger.debug("Per-logger overrides: <none>")
