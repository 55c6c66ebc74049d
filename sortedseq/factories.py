import logging
import typing
from .types import *

if typing.TYPE_CHECKING:
    from .enumerable import SortedKeyValueSequence, SortedSequence

logger = logging.getLogger(__name__)


def _pairs_source(data: Iterable[Any]) -> PairsFunc:
    """
    a re-invocable producer over data. an iterator can only be walked once;
    anything re-iterable yields a fresh pass each time.
    """
    return lambda: data


def assert_sorted_pairs(data: Iterable[Tuple[K, V]],
                        sort_order: Union[SortOrder, str] = SortOrder.ASCENDING) -> 'SortedKeyValueSequence[K, V]':
    """create a key-value sequence from (key, value) pairs, verified as it is traversed"""
    from .enumerable import SortedKeyValueSequence
    order = SortOrder.coerce(sort_order)
    logger.debug("asserting %s order over key-value pairs", order.value)
    return SortedKeyValueSequence(_pairs_source(data), order)


def assert_sorted_by(data: Iterable[V], key_selector: KeySelector[V, K],
                     sort_order: Union[SortOrder, str] = SortOrder.ASCENDING) -> 'SortedSequence[K, V]':
    """create a sequence ordered by key_selector(element), verified as it is traversed"""
    from .enumerable import SortedKeyValueSequence, SortedSequence
    order = SortOrder.coerce(sort_order)
    logger.debug("asserting %s order over elements by key selector", order.value)
    keyed = SortedKeyValueSequence(lambda: ((key_selector(item), item) for item in data), order)
    return SortedSequence(keyed)


def assert_sorted(data: Iterable[T],
                  sort_order: Union[SortOrder, str] = SortOrder.ASCENDING) -> 'SortedSequence[T, T]':
    """create a sequence whose elements are their own keys, verified as it is traversed"""
    return assert_sorted_by(data, _identity, sort_order)


def empty(sort_order: Union[SortOrder, str] = SortOrder.ASCENDING) -> 'SortedKeyValueSequence[Any, Any]':
    """create an empty key-value sequence"""
    from .enumerable import SortedKeyValueSequence
    return SortedKeyValueSequence._assume_sorted(lambda: (), SortOrder.coerce(sort_order))


def _identity(item: T) -> T:
    return item

# --- aliases ---
S = assert_sorted
KV = assert_sorted_pairs
