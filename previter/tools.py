"""

Tools for iterating with lookback.

"""
from typing import Iterable, Iterator, Optional, Tuple, TypeVar

from .prev_peekable import PrevPeekable

T = TypeVar("T")


def with_previous(iterable: Iterable[T]) -> Iterator[Tuple[Optional[T], T]]:
    """Pair each element with the one before it (None for the first)."""
    it = PrevPeekable(iterable)
    for element in it:
        yield it.peek_previous(), element


def dedupe_consecutive(iterable: Iterable[T]) -> Iterator[T]:
    """Drop elements equal to the element immediately before them."""
    it = PrevPeekable(iterable)
    for element in it:
        if it.has_previous() and element == it.peek_previous():
            continue
        yield element
