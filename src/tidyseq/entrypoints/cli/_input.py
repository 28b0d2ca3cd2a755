"""Shared argument handling for the command groups."""

import json
from collections.abc import Sequence

import click


def read_text(value: str | None) -> str:
    """Return ``value``, or all of stdin minus one trailing newline when omitted."""
    if value is not None:
        return value
    return click.get_text_stream("stdin").read().removesuffix("\n")


def echo_items(items: Sequence[object], as_json: bool) -> None:
    """Print ``items`` one per line, or as a single JSON array."""
    if as_json:
        click.echo(json.dumps(list(items)))
        return
    for item in items:
        click.echo(item)
