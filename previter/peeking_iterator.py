from dataclasses import dataclass, field
from typing import Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")


@dataclass
class PeekingIterator(Generic[T]):
    """Iterator over any iterable that can look one element ahead.

    At most one element is ever buffered.

    """

    source: Iterable[T]
    _it: Iterator[T] = field(init=False, repr=False)
    _peeked: Optional[T] = field(default=None, init=False, repr=False)
    _has_peeked: bool = field(default=False, init=False, repr=False)

    def __post_init__(self) -> None:
        self._it = iter(self.source)

    def next(self) -> T:
        if self._has_peeked:
            peeked = self._peeked
            self._peeked = None
            self._has_peeked = False
            return peeked  # type: ignore
        return next(self._it)

    def __iter__(self) -> "PeekingIterator[T]":
        return self

    def __next__(self) -> T:
        return self.next()

    def has_next(self) -> bool:
        if self._has_peeked:
            return True
        try:
            self._peeked = next(self._it)
        except StopIteration:
            return False
        self._has_peeked = True
        return True

    def peek_or_raise(self) -> T:
        if not self.has_next():
            raise StopIteration
        return self._peeked  # type: ignore

    def peek(self) -> Optional[T]:
        if self.has_next():
            return self._peeked
        return None
