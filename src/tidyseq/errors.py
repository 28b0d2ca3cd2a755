"""Error definitions for tidyseq."""

# ============================================================================
#                              Base error
# ============================================================================


class TidyseqError(Exception):
    """Base class for all tidyseq errors."""


# ============================================================================
#                           Contract violations
# ============================================================================


class ContractViolationError(TidyseqError):
    """Raised when a contract check fails while contracts are enforced."""

    kind = "contract"

    def __init__(self, reason: str) -> None:
        super().__init__(f"{self.kind.capitalize()} failed: {reason}")
        self.reason = reason


class PreconditionError(ContractViolationError):
    """Raised when a caller passes arguments an operation does not accept."""

    kind = "precondition"


class PostconditionError(ContractViolationError):
    """Raised when an operation's result breaks its promised shape."""

    kind = "postcondition"


class InvariantError(ContractViolationError):
    """Raised when an internal invariant does not hold."""

    kind = "invariant"


# ============================================================================
#                              Configuration
# ============================================================================


class InvalidContractModeError(TidyseqError, ValueError):
    """Raised when a contract mode name is not recognised."""

    def __init__(self, value: str) -> None:
        super().__init__(
            f"Invalid contract mode {value!r}; expected one of: enforce, warn, off."
        )
        self.value = value
