"""

An iterator that remembers the element it returned before the current one.

"""
import copy
from dataclasses import dataclass, field
from typing import Generic, Iterable, Optional, TypeVar

from .peeking_iterator import PeekingIterator

T = TypeVar("T")


@dataclass
class PrevPeekable(Generic[T]):
    """Wraps an iterable and keeps one element of lookback.

    After each element is produced, peek_previous() returns the element
    produced just before it. Exhausting the iterable leaves the lookback
    slot as it was, so the last pair stays queryable.

        >>> it = PrevPeekable([10, 20, 30])
        >>> it.advance(), it.peek_previous()
        (10, None)
        >>> it.advance(), it.peek_previous()
        (20, 10)

    Because None doubles as "absent", sources that yield None should be
    consumed with next() and has_previous().

    """

    source: Iterable[T] = field(repr=False)
    previous: Optional[T] = None
    current: Optional[T] = None
    count: int = 0
    pi: PeekingIterator[T] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.pi = PeekingIterator(self.source)

    def next(self) -> T:
        element = self.pi.next()
        self.previous = self.current
        self.current = element
        self.count += 1
        return element

    def __iter__(self) -> "PrevPeekable[T]":
        return self

    def __next__(self) -> T:
        return self.next()

    def advance(self) -> Optional[T]:
        """Return the next element, or None if the source is exhausted."""
        try:
            return self.next()
        except StopIteration:
            return None

    def peek_previous(self) -> Optional[T]:
        return self.previous

    def prev(self) -> Optional[T]:
        """Like peek_previous(), but returns a shallow copy."""
        return copy.copy(self.previous)

    def has_previous(self) -> bool:
        return self.count >= 2

    def peek(self) -> Optional[T]:
        """Return the element the next advance would produce, without consuming it."""
        return self.pi.peek()

    def has_next(self) -> bool:
        return self.pi.has_next()
