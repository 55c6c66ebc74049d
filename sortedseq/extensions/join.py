from __future__ import annotations
import typing
from itertools import product
from ..types import *
from .grouping import group_runs
from .zip import (
    merge_pairs, _pair, _require_both, _require_left, _require_right,
    _checked_operand, _checked_join_type
)

if typing.TYPE_CHECKING:
    from ..enumerable import _BaseSortedSequence, IKeyValueProvider

_ABSENT_GROUP = (None,)


def join_pairs(left: Iterable[Tuple[K, V]], right: Iterable[Tuple[K, V2]],
               sort_order: SortOrder, join_type: JoinType,
               merge: MergeFn[K, V, V2, R]) -> Iterator[Tuple[K, R]]:
    """
    merge two key-ordered pair streams run by run: both sides are grouped into
    runs of equal keys, the runs are merged with the two-pointer engine, and each
    step expands into the cartesian product of its left and right runs. left
    values vary slowest. a missing run counts as a single None.
    """
    grouped = merge_pairs(group_runs(left), group_runs(right), sort_order, join_type, _pair)
    for key, (left_group, right_group) in grouped:
        for left_value, right_value in product(left_group or _ABSENT_GROUP, right_group or _ABSENT_GROUP):
            yield key, merge(key, left_value, right_value)


class _JoinOperations(Generic[K, V]):
    """key-synchronised merges producing every same-key combination"""

    def join_by_key(self: '_BaseSortedSequence[K, V]', other: 'IKeyValueProvider[K, V2]',
                    join_type: JoinType = JoinType.FULL_OUTER,
                    merge: Optional[MergeFn[K, V, V2, R]] = None) -> '_BaseSortedSequence[K, Any]':
        """
        like merge_by_key, but a key held n times on the left and m times on the
        right yields n*m outputs instead of max(n, m).
        """
        right = _checked_operand(self, other)
        join_type = _checked_join_type(join_type)
        merge = merge if merge is not None else _pair
        left = self.as_sorted_key_values()
        sort_order = left.sort_order
        def joined():
            return join_pairs(left.key_value_iterator(), right.key_value_iterator(),
                              sort_order, join_type, merge)
        return self._wrap(left._derive(joined))

    def full_outer_join_by_key(self: '_BaseSortedSequence[K, V]', other: 'IKeyValueProvider[K, V2]',
                               merge: Optional[Callable[[K, Optional[V], Optional[V2]], R]] = None) -> '_BaseSortedSequence[K, Any]':
        return self.join_by_key(other, JoinType.FULL_OUTER, merge)

    def inner_join_by_key(self: '_BaseSortedSequence[K, V]', other: 'IKeyValueProvider[K, V2]',
                          merge: Optional[Callable[[K, V, V2], R]] = None) -> '_BaseSortedSequence[K, Any]':
        return self.join_by_key(other, JoinType.INNER, _require_both(merge or _pair))

    def left_outer_join_by_key(self: '_BaseSortedSequence[K, V]', other: 'IKeyValueProvider[K, V2]',
                               merge: Optional[Callable[[K, V, Optional[V2]], R]] = None) -> '_BaseSortedSequence[K, Any]':
        return self.join_by_key(other, JoinType.LEFT_OUTER, _require_left(merge or _pair))

    def right_outer_join_by_key(self: '_BaseSortedSequence[K, V]', other: 'IKeyValueProvider[K, V2]',
                                merge: Optional[Callable[[K, Optional[V], V2], R]] = None) -> '_BaseSortedSequence[K, Any]':
        return self.join_by_key(other, JoinType.RIGHT_OUTER, _require_right(merge or _pair))
