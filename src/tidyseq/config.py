"""Configuration utilities for tidyseq.

This module centralizes the environment-driven settings of the package. The
only setting today is the contract mode, which decides what happens when a
precondition, postcondition or invariant check fails.
"""

import os
from enum import StrEnum

from .errors import InvalidContractModeError

CONTRACTS_ENV_VAR = "TIDYSEQ_CONTRACTS"  # pragma: no mutate


class ContractMode(StrEnum):
    """What a failed contract check does."""

    ENFORCE = "enforce"
    """Raise the matching `ContractViolationError` subclass."""

    WARN = "warn"
    """Log a warning on the ``tidyseq.contracts`` logger and carry on."""

    OFF = "off"
    """Skip the check entirely."""


def parse_contract_mode(value: str) -> ContractMode:
    """Convert a textual mode name into a `ContractMode`.

    Args:
        value: Mode name, case-insensitive, surrounding whitespace ignored.

    Returns:
        The matching `ContractMode`.

    Raises:
        InvalidContractModeError: If ``value`` names no known mode.
    """
    try:
        return ContractMode(value.strip().lower())
    except ValueError as e:
        raise InvalidContractModeError(value) from e


def get_contract_mode() -> ContractMode:
    """Get the contract mode from the environment.

    Returns:
        The mode named by `TIDYSEQ_CONTRACTS`, or `ContractMode.ENFORCE` when
        the variable is unset or empty.

    Raises:
        InvalidContractModeError: If `TIDYSEQ_CONTRACTS` holds an unknown name.
    """
    if not (value := os.environ.get(CONTRACTS_ENV_VAR, "").strip()):
        return ContractMode.ENFORCE
    return parse_contract_mode(value)
