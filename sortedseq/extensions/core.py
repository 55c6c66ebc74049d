from __future__ import annotations
import typing
from itertools import islice, takewhile, dropwhile
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import _BaseSortedSequence


class _CoreOperations(Generic[K, V]):
    """single-sequence transforms. none of them touch keys, so none re-validate."""

    def map_values(self: '_BaseSortedSequence[K, V]', selector: Selector[V, U]) -> '_BaseSortedSequence[K, U]':
        """transform each value, keeping its key"""
        source = self.as_sorted_key_values()
        def mapped():
            return ((key, selector(value)) for key, value in source.key_value_iterator())
        return self._wrap(source._derive(mapped))

    def filter_by_key(self: '_BaseSortedSequence[K, V]', predicate: Predicate[K]) -> '_BaseSortedSequence[K, V]':
        """keep pairs whose key satisfies the predicate"""
        source = self.as_sorted_key_values()
        def filtered():
            return (pair for pair in source.key_value_iterator() if predicate(pair[0]))
        return self._wrap(source._derive(filtered))

    def filter_by_value(self: '_BaseSortedSequence[K, V]', predicate: Predicate[V]) -> '_BaseSortedSequence[K, V]':
        """keep pairs whose value satisfies the predicate"""
        source = self.as_sorted_key_values()
        def filtered():
            return (pair for pair in source.key_value_iterator() if predicate(pair[1]))
        return self._wrap(source._derive(filtered))

    def filter(self: '_BaseSortedSequence[K, V]', predicate: Predicate[Any]) -> '_BaseSortedSequence[K, V]':
        """
        keep items satisfying the predicate. the predicate sees what iteration
        yields: a (key, value) tuple for key-value sequences, the element otherwise.
        """
        source = self.as_sorted_key_values()
        unwrap = self._unwrap
        def filtered():
            return (pair for pair in source.key_value_iterator() if predicate(unwrap(pair)))
        return self._wrap(source._derive(filtered))

    def distinct_by_key(self: '_BaseSortedSequence[K, V]') -> '_BaseSortedSequence[K, V]':
        """
        keep the first pair of every run of equal keys. only adjacent duplicates
        collapse, which on a sorted sequence is all of them.
        """
        source = self.as_sorted_key_values()
        def distinct():
            seen_any = False
            current_key = None
            for key, value in source.key_value_iterator():
                if not seen_any or key != current_key:
                    seen_any = True
                    current_key = key
                    yield key, value
        return self._wrap(source._derive(distinct))

    def take(self: '_BaseSortedSequence[K, V]', count: int) -> '_BaseSortedSequence[K, V]':
        """keep the first 'count' pairs"""
        if count < 0:
            raise ValueError("count must not be negative")
        source = self.as_sorted_key_values()
        return self._wrap(source._derive(lambda: islice(source.key_value_iterator(), count)))

    def skip(self: '_BaseSortedSequence[K, V]', count: int) -> '_BaseSortedSequence[K, V]':
        """drop the first 'count' pairs"""
        if count < 0:
            raise ValueError("count must not be negative")
        source = self.as_sorted_key_values()
        return self._wrap(source._derive(lambda: islice(source.key_value_iterator(), count, None)))

    def take_while_key(self: '_BaseSortedSequence[K, V]', predicate: Predicate[K]) -> '_BaseSortedSequence[K, V]':
        """keep pairs while their key satisfies the predicate, then stop pulling"""
        source = self.as_sorted_key_values()
        def taken():
            return takewhile(lambda pair: predicate(pair[0]), source.key_value_iterator())
        return self._wrap(source._derive(taken))

    def skip_while_key(self: '_BaseSortedSequence[K, V]', predicate: Predicate[K]) -> '_BaseSortedSequence[K, V]':
        """drop pairs while their key satisfies the predicate"""
        source = self.as_sorted_key_values()
        def skipped():
            return dropwhile(lambda pair: predicate(pair[0]), source.key_value_iterator())
        return self._wrap(source._derive(skipped))

    def between_keys(self: '_BaseSortedSequence[K, V]', lower_bound: K, upper_bound: K) -> '_BaseSortedSequence[K, V]':
        """
        keep pairs with lower_bound <= key <= upper_bound.
        uses the order to stop early: nothing is pulled past the far bound, so this
        also works on an infinite sequence. lower_bound is the smaller key for
        either sort order.
        """
        if upper_bound < lower_bound:
            raise ValueError("lower_bound must not be greater than upper_bound")
        source = self.as_sorted_key_values()
        if source.sort_order is SortOrder.ASCENDING:
            before, after = (lambda k: k < lower_bound), (lambda k: k > upper_bound)
        else:
            before, after = (lambda k: k > upper_bound), (lambda k: k < lower_bound)
        def ranged():
            for key, value in source.key_value_iterator():
                if before(key):
                    continue
                if after(key):
                    return
                yield key, value
        return self._wrap(source._derive(ranged))
