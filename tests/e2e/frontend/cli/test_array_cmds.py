"""End-to-end tests for `tidyseq array` commands."""

import json

import pytest

from tidyseq.entrypoints.cli.main import tidyseq

pytestmark = [pytest.mark.e2e]


@pytest.mark.parametrize("items, expected", [([], "0"), (["a", "b", "c"], "3")])
def test_length(runner, items, expected):
    """length prints the number of items."""
    result = runner.invoke(tidyseq, ["array", "length", *items])
    assert result.exit_code == 0
    assert result.stdout == expected + "\n"


def test_reverse(runner):
    """reverse prints the items in reverse order, one per line."""
    result = runner.invoke(tidyseq, ["array", "reverse", "1", "2", "3"])
    assert result.exit_code == 0
    assert result.stdout.splitlines() == ["3", "2", "1"]


def test_reverse_json(runner):
    """reverse --json prints a JSON array."""
    result = runner.invoke(tidyseq, ["array", "reverse", "--json", "1", "2", "3"])
    assert result.exit_code == 0
    assert json.loads(result.stdout) == ["3", "2", "1"]


def test_copy(runner):
    """copy prints the items unchanged."""
    result = runner.invoke(tidyseq, ["array", "copy", "--json", "a", "b"])
    assert result.exit_code == 0
    assert json.loads(result.stdout) == ["a", "b"]


def test_copy_upper(runner):
    """copy --upper transforms each copied item."""
    result = runner.invoke(tidyseq, ["array", "copy", "--upper", "ab", "Cd"])
    assert result.exit_code == 0
    assert result.stdout.splitlines() == ["AB", "CD"]


def test_copy_upper_matches_text_upper(runner):
    """copy --upper uses the same ASCII-only mapping as `text upper`."""
    copied = runner.invoke(tidyseq, ["array", "copy", "--upper", "straße"])
    uppered = runner.invoke(tidyseq, ["text", "upper", "straße"])
    assert copied.exit_code == 0
    assert uppered.exit_code == 0
    assert copied.stdout == uppered.stdout == "STRAßE\n"
