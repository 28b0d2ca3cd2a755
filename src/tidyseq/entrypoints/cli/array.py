"""tidyseq array commands.

Operate on the ITEMS given as arguments, treated as one fixed-size sequence.
"""

import click
import click_extra as clickx

from tidyseq import arrays
from tidyseq.text import to_upper

from ._input import echo_items
from .helpers import contract_failures

JSON_OPTION = click.option(
    "--json", "as_json", is_flag=True, help="Print items as a JSON array."
)


@click.group(cls=clickx.ExtraGroup)
def array() -> None:
    """Array commands."""


@array.command()
@click.argument("items", nargs=-1)
def length(items: tuple[str, ...]) -> None:
    """Print how many ITEMS were given."""
    click.echo(arrays.length(items))


@array.command()
@click.argument("items", nargs=-1)
@JSON_OPTION
def reverse(items: tuple[str, ...], as_json: bool) -> None:
    """Print ITEMS in reverse order."""
    seq = list(items)
    with contract_failures():
        arrays.reverse(seq)
    echo_items(seq, as_json)


@array.command()
@click.argument("items", nargs=-1)
@click.option(
    "--upper", is_flag=True, help="Uppercase the ASCII letters of each copied item."
)
@JSON_OPTION
def copy(items: tuple[str, ...], upper: bool, as_json: bool) -> None:
    """Copy ITEMS into a new list, optionally uppercasing their ASCII letters."""
    copied = arrays.to_list(items)
    if upper:
        with contract_failures():
            arrays.transform(copied, to_upper)
    echo_items(copied, as_json)
