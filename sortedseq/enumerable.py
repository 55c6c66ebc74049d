from __future__ import annotations

from abc import ABC, abstractmethod
from .types import *
from .iterators import KeyValidatingIterator

# --- operations ---
from .extensions.core import _CoreOperations
from .extensions.grouping import _GroupingOperations
from .extensions.zip import _ZipOperations
from .extensions.join import _JoinOperations

# --- accessors ---
from .extensions.terminal import TerminalAccessor

# --- abstract base class ---

class IKeyValueProvider(ABC, Generic[K, V]):
    """anything that can hand out a fresh key-ordered iterator of (key, value) pairs"""

    @property
    @abstractmethod
    def sort_order(self) -> SortOrder:
        pass

    @abstractmethod
    def key_value_iterator(self) -> Iterator[Tuple[K, V]]:
        """a fresh iterator over the (key, value) pairs, validated if the sequence verifies"""
        pass

# --- shared implementation ---

class _BaseSortedSequence(
    IKeyValueProvider[K, V],
    _CoreOperations[K, V],
    _GroupingOperations[K, V],
    _ZipOperations[K, V],
    _JoinOperations[K, V]
):
    def __init__(self):
        # --- initialize accessors ---
        self.to = TerminalAccessor(self)

    @abstractmethod
    def as_sorted_key_values(self) -> 'SortedKeyValueSequence[K, V]':
        pass

    @abstractmethod
    def _wrap(self, key_values: 'SortedKeyValueSequence[K, U]') -> '_BaseSortedSequence[K, U]':
        """re-wrap a derived key-value sequence as the same kind of sequence as self"""
        pass

    @abstractmethod
    def _unwrap(self, pair: Tuple[K, V]) -> Any:
        """what iteration yields for a single (key, value) pair"""
        pass

    def __iter__(self) -> Iterator[Any]:
        return map(self._unwrap, self.key_value_iterator())

    def keys(self) -> Iterator[K]:
        return (key for key, _ in self.key_value_iterator())

    def values(self) -> Iterator[V]:
        return (value for _, value in self.key_value_iterator())

# --- key-value sequence ---

class SortedKeyValueSequence(_BaseSortedSequence[K, V]):
    """
    a lazy sequence of (key, value) pairs known to be ordered by key.

    pairs_func is re-invoked on every traversal, so a sequence built over a
    re-iterable source can be walked any number of times. every traversal of a
    sequence built here checks the order as it goes and raises
    SequenceNotSortedError at the first offending key. only the combinators in
    this package may skip that check, through _assume_sorted.
    """

    def __init__(self, pairs_func: PairsFunc[K, V],
                 sort_order: Union[SortOrder, str] = SortOrder.ASCENDING):
        super().__init__()
        self._pairs_func = pairs_func
        self._sort_order = SortOrder.coerce(sort_order)
        self._verify = True

    @classmethod
    def _assume_sorted(cls, pairs_func: PairsFunc[K, V],
                       sort_order: SortOrder) -> 'SortedKeyValueSequence[K, V]':
        """a sequence whose order is already known, so traversal skips the check"""
        sequence = cls(pairs_func, sort_order)
        sequence._verify = False
        return sequence

    @property
    def sort_order(self) -> SortOrder:
        return self._sort_order

    @property
    def verifies_on_traversal(self) -> bool:
        return self._verify

    def key_value_iterator(self) -> Iterator[Tuple[K, V]]:
        source = iter(self._pairs_func())
        if not self._verify:
            return source
        return KeyValidatingIterator(source, self._sort_order)

    def as_sorted_key_values(self) -> 'SortedKeyValueSequence[K, V]':
        return self

    def _derive(self, pairs_func: PairsFunc[K, U]) -> 'SortedKeyValueSequence[K, U]':
        """wrap the output of an order-preserving transform without re-validating it"""
        return SortedKeyValueSequence._assume_sorted(pairs_func, self._sort_order)

    def _wrap(self, key_values: 'SortedKeyValueSequence[K, U]') -> 'SortedKeyValueSequence[K, U]':
        return key_values

    def _unwrap(self, pair: Tuple[K, V]) -> Tuple[K, V]:
        return pair

    def __repr__(self) -> str:
        return (f"SortedKeyValueSequence(sort_order={self._sort_order.name}, "
                f"verify={self._verify})")

# --- key-implicit sequence ---

class SortedSequence(_BaseSortedSequence[K, V]):
    """
    a lazy sequence of elements ordered by a key derived from each element.

    holds a key-value sequence of (derived key, element) pairs; every operation
    runs on that and the result is wrapped again, so iteration yields bare
    elements (or groups, or merged values) while the keys stay reachable
    through as_sorted_key_values().
    """

    def __init__(self, key_values: SortedKeyValueSequence[K, V]):
        super().__init__()
        self._inner = key_values

    @property
    def sort_order(self) -> SortOrder:
        return self._inner.sort_order

    def key_value_iterator(self) -> Iterator[Tuple[K, V]]:
        return self._inner.key_value_iterator()

    def as_sorted_key_values(self) -> SortedKeyValueSequence[K, V]:
        return self._inner

    def _wrap(self, key_values: SortedKeyValueSequence[K, U]) -> 'SortedSequence[K, U]':
        return SortedSequence(key_values)

    def _unwrap(self, pair: Tuple[K, V]) -> V:
        return pair[1]

    def __repr__(self) -> str:
        return (f"SortedSequence(sort_order={self.sort_order.name}, "
                f"verify={self._inner.verifies_on_traversal})")
