"""CLI helpers for tidyseq.

Utilities used by the command-line interface: NAME=LEVEL logger option
parsing, ``--contracts`` mode parsing, translation of contract violations
into Click failures, and message emitters that write to stderr with
emoji→ASCII fallbacks.
"""

from .contract_mode_parser import parse_contracts
from .failures import ContractFailure, contract_failures
from .log_level_parser import parse_log_level
from .messages import error, warn

__all__ = [
    "ContractFailure",
    "contract_failures",
    "error",
    "parse_contracts",
    "parse_log_level",
    "warn",
]
