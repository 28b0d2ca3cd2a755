"""Contract checks used by tidyseq operations.

Three checks mirror the usual design-by-contract vocabulary:

* `requires` guards what a caller passes in (preconditions).
* `ensures` guards what an operation hands back (postconditions).
* `check` guards internal invariants.

A failed check is a caller or programming error, not a recoverable
condition. What happens on failure depends on the active `ContractMode`:

* ``enforce`` raises a `ContractViolationError` subclass (the default).
* ``warn`` logs the failure and lets the operation continue.
* ``off`` skips the check.

The mode comes from the ``TIDYSEQ_CONTRACTS`` environment variable unless it
has been set explicitly with `set_mode` or the `contract_mode` context
manager. The override lives in a `ContextVar`, so threads and asyncio tasks
can switch modes without affecting each other.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar

from .config import ContractMode, get_contract_mode, parse_contract_mode
from .errors import (
    ContractViolationError,
    InvariantError,
    PostconditionError,
    PreconditionError,
)

__all__ = [
    "ContractMode",
    "check",
    "contract_mode",
    "ensures",
    "get_mode",
    "requires",
    "set_mode",
]

logger = logging.getLogger(__name__)

_mode_override: ContextVar[ContractMode | None] = ContextVar(
    "tidyseq_contract_mode", default=None
)


def get_mode() -> ContractMode:
    """Return the contract mode in effect for the current context."""
    if (mode := _mode_override.get()) is not None:
        return mode
    return get_contract_mode()


def set_mode(mode: ContractMode | str | None) -> None:
    """Set the contract mode for the current context.

    Args:
        mode: The mode to use, either as a `ContractMode` or its name.
            ``None`` drops the override so the environment decides again.

    Raises:
        InvalidContractModeError: If ``mode`` is a string naming no mode.
    """
    _mode_override.set(_coerce(mode))


@contextmanager
def contract_mode(mode: ContractMode | str) -> Iterator[ContractMode]:
    """Temporarily switch the contract mode.

    Example:
        ```py
        with contract_mode("off"):
            split("", SplitOptions(delimiter=","))  # -> []
        ```
    """
    resolved = _coerce(mode)
    token = _mode_override.set(resolved)
    try:
        yield resolved
    finally:
        _mode_override.reset(token)


def requires(condition: bool, message: str) -> None:
    """Check a precondition."""
    _check(condition, message, PreconditionError)


def ensures(condition: bool, message: str) -> None:
    """Check a postcondition."""
    _check(condition, message, PostconditionError)


def check(condition: bool, message: str) -> None:
    """Check an internal invariant."""
    _check(condition, message, InvariantError)


def _check(
    condition: bool, message: str, error_type: type[ContractViolationError]
) -> None:
    if condition:
        return
    mode = get_mode()
    if mode is ContractMode.OFF:
        return
    if mode is ContractMode.WARN:
        logger.warning("%s failed (ignored): %s", error_type.kind, message)
        return
    raise error_type(message)


def _coerce(mode: ContractMode | str | None) -> ContractMode | None:
    if mode is None or isinstance(mode, ContractMode):
        return mode
    return parse_contract_mode(mode)
