"""Translate tidyseq errors into Click failures."""

from collections.abc import Iterator
from contextlib import contextmanager

import click

from tidyseq.errors import ContractViolationError

from .messages import error


class ContractFailure(click.ClickException):
    """A contract violation reported on the command line.

    Shown as a red error line on stderr instead of Click's plain
    ``Error: ...`` prefix; exits with status 1.
    """

    def show(self, file=None) -> None:  # pylint: disable=unused-argument
        error(self.format_message())


@contextmanager
def contract_failures() -> Iterator[None]:
    """Re-raise any `ContractViolationError` as a `ContractFailure`."""
    try:
        yield
    except ContractViolationError as e:
        raise ContractFailure(str(e)) from e
