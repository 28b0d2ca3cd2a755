"""Text utilities.

String helpers that never touch the caller's value: every function takes a
``str`` and returns a new one (or a list of them for `split`).

Optional settings for `split` and `join` travel in small frozen option
objects (`SplitOptions`, `JoinOptions`) so the defaults are spelled out in one
place and can be shared between calls.
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass

from .contracts import ensures, requires

__all__ = [
    "WHITESPACE",
    "JoinOptions",
    "SplitOptions",
    "join",
    "reverse",
    "split",
    "to_lower",
    "to_upper",
    "transform",
    "trim",
]

WHITESPACE = " \t\n\r"  # pragma: no mutate

_ASCII_CASE_OFFSET = ord("a") - ord("A")


@dataclass(frozen=True, slots=True)
class SplitOptions:
    """Settings for `split`.

    Attributes:
        delimiter: What separates tokens. Must be non-empty.
        charset: When False, ``delimiter`` is matched as one literal substring.
            When True, each character of ``delimiter`` is a separator of its
            own and a split point consumes exactly one character.
    """

    delimiter: str = " "
    charset: bool = False


@dataclass(frozen=True, slots=True)
class JoinOptions:
    """Settings for `join`.

    Attributes:
        separator: Inserted between consecutive items, never before the
            first or after the last.
    """

    separator: str = ""


DEFAULT_SPLIT = SplitOptions()
DEFAULT_JOIN = JoinOptions()


def transform(text: str, func: Callable[[str], str]) -> str:
    """Apply ``func`` to every character of ``text``, first to last.

    Args:
        text: The text to map.
        func: Called with each character; must return exactly one character.

    Returns:
        A new string of the same length as ``text``.
    """
    mapped = [func(char) for char in text]
    ensures(
        all(len(char) == 1 for char in mapped),
        "transform function must map each character to exactly one character",
    )
    return "".join(mapped)


def split(text: str, options: SplitOptions | None = None) -> list[str]:
    """Split ``text`` into non-empty tokens.

    The text is scanned left to right. Each split point found cuts off the
    candidate token before it; empty candidates are dropped, so leading,
    trailing and repeated delimiters never produce empty tokens. Whatever is
    left once no split point remains becomes the last token.

    Args:
        text: The text to split. Must be non-empty.
        options: Delimiter settings; defaults to splitting on a single space.

    Returns:
        The tokens in the order they appear in ``text``.

    Raises:
        PreconditionError: If ``text`` or the delimiter is empty and contracts
            are enforced.

    Example:
        ```py
        split("a,b,,c", SplitOptions(delimiter=","))          # ["a", "b", "c"]
        split("a-b_c", SplitOptions(delimiter="-_", charset=True))  # ["a", "b", "c"]
        ```
    """
    if options is None:
        options = DEFAULT_SPLIT
    delimiter = options.delimiter
    requires(len(text) > 0, "text to split must not be empty")
    requires(len(delimiter) > 0, "split delimiter must not be empty")

    step = 1 if options.charset else len(delimiter)
    tokens: list[str] = []
    pos = 0
    while pos < len(text):
        found = _find_split_point(text, delimiter, options.charset, pos)
        end = len(text) if found == -1 else found
        if end > pos:
            tokens.append(text[pos:end])
        pos = len(text) if found == -1 else found + step
    return tokens


def _find_split_point(text: str, delimiter: str, charset: bool, start: int) -> int:
    # An empty delimiter only gets here with contracts relaxed; treat it as
    # "no split point" so the scan still terminates.
    if not delimiter:
        return -1
    if not charset:
        return text.find(delimiter, start)
    for index in range(start, len(text)):
        if text[index] in delimiter:
            return index
    return -1


def join(items: Iterable[str], options: JoinOptions | None = None) -> str:
    """Concatenate ``items`` with a separator between consecutive ones.

    Lists, tuples and any other iterable of strings are accepted alike. A
    bare ``str`` is not a sequence of texts and fails the precondition; with
    contracts relaxed it is joined character by character.

    Args:
        items: The strings to combine, in order.
        options: Separator settings; defaults to no separator.

    Returns:
        The combined string, or ``""`` when ``items`` is empty.

    Raises:
        PreconditionError: If ``items`` is a single ``str`` and contracts are
            enforced.
    """
    if options is None:
        options = DEFAULT_JOIN
    requires(
        not isinstance(items, str), "join expects a sequence of texts, not a single str"
    )
    return options.separator.join(items)


def trim(text: str) -> str:
    """Remove leading and trailing `WHITESPACE` characters.

    Interior whitespace is kept. Text made only of whitespace, and the empty
    string, trim to ``""``.
    """
    return text.strip(WHITESPACE)


def to_upper(text: str) -> str:
    """Map ASCII lowercase letters to uppercase; leave every other character."""
    return transform(text, _ascii_upper)


def to_lower(text: str) -> str:
    """Map ASCII uppercase letters to lowercase; leave every other character."""
    return transform(text, _ascii_lower)


def reverse(text: str) -> str:
    """Return ``text`` with its characters in reverse order."""
    return text[::-1]


def _ascii_upper(char: str) -> str:
    if "a" <= char <= "z":
        return chr(ord(char) - _ASCII_CASE_OFFSET)
    return char


def _ascii_lower(char: str) -> str:
    if "A" <= char <= "Z":
        return chr(ord(char) + _ASCII_CASE_OFFSET)
    return char
