"""Array utilities.

Helpers over fixed-size sequences: any `MutableSequence` whose length the
caller treats as fixed (a ``list``, an ``array.array``, ...). Operations here
reorder or overwrite elements in place and never insert or delete, so the
length of the sequence is the same before and after every call.
"""

from collections.abc import Callable, MutableSequence, Sequence
from typing import Any, TypeVar

from .contracts import ensures

T = TypeVar("T")

__all__ = ["length", "reverse", "to_list", "to_sequence_copy", "transform"]


def length(seq: Sequence[Any]) -> int:
    """Return the number of elements in ``seq``.

    Args:
        seq: Any sized sequence.

    Returns:
        The element count, independent of the contents.
    """
    return len(seq)


def reverse(seq: MutableSequence[Any]) -> None:
    """Reverse the order of elements in ``seq`` in place.

    Element ``i`` is swapped with element ``n - 1 - i`` for every ``i`` below
    ``n // 2``. Empty and single-element sequences are left as they are.

    Args:
        seq: The sequence to reverse.
    """
    size = len(seq)
    for i in range(size // 2):
        j = size - i - 1
        seq[i], seq[j] = seq[j], seq[i]
    ensures(len(seq) == size, "reverse must not change the sequence length")


def transform(seq: MutableSequence[T], func: Callable[[T], T]) -> None:
    """Overwrite every element of ``seq`` with ``func(element)``.

    Elements are visited first to last, which only matters when ``func`` has
    side effects of its own.

    Args:
        seq: The sequence to update.
        func: Unary mapping whose result must be storable back into ``seq``
            (an ``array.array("i")`` only accepts ints, for instance).
    """
    size = len(seq)
    for i in range(size):
        seq[i] = func(seq[i])
    ensures(len(seq) == size, "transform must not change the sequence length")


def to_list(seq: Sequence[T]) -> list[T]:
    """Copy ``seq`` into a new, resizable list.

    The copy is shallow: it holds the same element objects in the same order.
    Growing, shrinking or reassigning items of the copy leaves ``seq`` alone.

    Args:
        seq: The sequence to copy.

    Returns:
        A new list owned by the caller.
    """
    return list(seq)


to_sequence_copy = to_list
