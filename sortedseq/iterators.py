from .types import *
from .exceptions import SequenceNotSortedError


class KeyValidatingIterator(Generic[K, V]):
    """
    passes (key, value) pairs through unchanged while checking each key against
    the one before it. the check is incremental: a violation surfaces at the point
    the offending pair is pulled, after every earlier pair has been handed out.
    once a violation was raised the iterator is finished.
    """

    def __init__(self, source: Iterable[Tuple[K, V]], sort_order: SortOrder):
        self._source = iter(source)
        self._sort_order = sort_order
        self._has_last = False
        self._last_key: Optional[K] = None
        self._index = 0
        self._failed = False

    def __iter__(self) -> 'KeyValidatingIterator[K, V]':
        return self

    def __next__(self) -> Tuple[K, V]:
        if self._failed:
            raise StopIteration
        key, value = next(self._source)
        if self._has_last and self._sort_order.violates(self._last_key, key):
            self._failed = True
            raise SequenceNotSortedError(self._index, self._last_key, key, self._sort_order)
        self._has_last = True
        self._last_key = key
        self._index += 1
        return key, value


class Cursor(Generic[K, V]):
    """
    one side of the two-pointer merge: either holds a pending (key, value) pair or
    is exhausted. advance() is the only transition.
    """

    def __init__(self, source: Iterable[Tuple[K, V]]):
        self._it = iter(source)
        self.active = False
        self.key: Optional[K] = None
        self.value: Optional[V] = None
        self.advance()

    def advance(self) -> None:
        try:
            self.key, self.value = next(self._it)
        except StopIteration:
            self.active = False
            self.key = self.value = None
        else:
            self.active = True

    def __repr__(self) -> str:
        if not self.active:
            return "Cursor(exhausted)"
        return f"Cursor(key={self.key!r}, value={self.value!r})"
