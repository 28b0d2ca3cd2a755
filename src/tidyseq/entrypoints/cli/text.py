"""tidyseq text commands.

Thin wrappers over `tidyseq.text`. A TEXT argument that is left out is read
from stdin (one trailing newline dropped), so the commands compose in pipes:

    $ printf 'a,b,,c' | tidyseq text split -d ,
"""

import logging

import click
import click_extra as clickx

from tidyseq.text import (
    JoinOptions,
    SplitOptions,
    join,
    reverse,
    split,
    to_lower,
    to_upper,
    trim,
)

from ._input import echo_items, read_text
from .helpers import contract_failures

logger = logging.getLogger(__name__)

TEXT_ARGUMENT = click.argument("value", metavar="[TEXT]", required=False)


@click.group(cls=clickx.ExtraGroup)
def text() -> None:
    """Text commands."""


@text.command("split")
@TEXT_ARGUMENT
@click.option(
    "--delimiter",
    "-d",
    default=" ",
    show_default="single space",
    help="Delimiter separating tokens.",
)
@click.option(
    "--charset",
    is_flag=True,
    help="Treat each character of the delimiter as a separator of its own.",
)
@click.option("--json", "as_json", is_flag=True, help="Print tokens as a JSON array.")
def split_cmd(value: str | None, delimiter: str, charset: bool, as_json: bool) -> None:
    """Split TEXT into non-empty tokens, one per line."""
    options = SplitOptions(delimiter=delimiter, charset=charset)
    with contract_failures():
        tokens = split(read_text(value), options)
    logger.debug("split produced %d token(s) with %r", len(tokens), options)
    echo_items(tokens, as_json)


@text.command("join")
@click.argument("items", nargs=-1)
@click.option(
    "--separator", "-s", default="", show_default="none", help="Text between items."
)
def join_cmd(items: tuple[str, ...], separator: str) -> None:
    """Join ITEMS with a separator between consecutive ones."""
    click.echo(join(items, JoinOptions(separator=separator)))


@text.command("trim")
@TEXT_ARGUMENT
def trim_cmd(value: str | None) -> None:
    """Strip leading and trailing spaces, tabs, newlines and carriage returns."""
    click.echo(trim(read_text(value)))


@text.command("upper")
@TEXT_ARGUMENT
def upper_cmd(value: str | None) -> None:
    """Uppercase the ASCII letters of TEXT."""
    with contract_failures():
        click.echo(to_upper(read_text(value)))


@text.command("lower")
@TEXT_ARGUMENT
def lower_cmd(value: str | None) -> None:
    """Lowercase the ASCII letters of TEXT."""
    with contract_failures():
        click.echo(to_lower(read_text(value)))


@text.command("reverse")
@TEXT_ARGUMENT
def reverse_cmd(value: str | None) -> None:
    """Print TEXT with its characters in reverse order."""
    click.echo(reverse(read_text(value)))
