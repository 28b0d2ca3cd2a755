"""Parse the ``--contracts`` CLI option.

The option and the ``TIDYSEQ_CONTRACTS`` environment variable go through
`tidyseq.config.parse_contract_mode`, so the CLI accepts exactly what the
library accepts (case-insensitive, surrounding whitespace ignored).
"""

import click

from tidyseq.config import ContractMode, parse_contract_mode
from tidyseq.errors import InvalidContractModeError

CONTRACTS_METAVAR = "[" + "|".join(mode.value for mode in ContractMode) + "]"


def parse_contracts(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: str | ContractMode,
) -> ContractMode:
    """Click callback turning a mode name into a `ContractMode`.

    Raises:
        click.BadParameter: If ``value`` names no known mode.
    """
    if isinstance(value, ContractMode):
        return value
    try:
        return parse_contract_mode(value)
    except InvalidContractModeError as e:
        raise click.BadParameter(str(e)) from e
