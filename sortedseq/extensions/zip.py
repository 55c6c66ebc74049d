from __future__ import annotations
import logging
import typing
from ..types import *
from ..exceptions import InvalidSortOrderError
from ..iterators import Cursor

if typing.TYPE_CHECKING:
    from ..enumerable import _BaseSortedSequence, IKeyValueProvider

logger = logging.getLogger(__name__)


def merge_pairs(left: Iterable[Tuple[K, V]], right: Iterable[Tuple[K, V2]],
                sort_order: SortOrder, join_type: JoinType,
                merge: MergeFn[K, V, V2, R]) -> Iterator[Tuple[K, R]]:
    """
    two-pointer merge of two key-ordered pair streams.

    every step takes the pending pair from the side whose key comes first, or
    from both sides when the keys are equal, calls merge(key, left, right) with
    None standing in for the side that did not take part, and advances only the
    side(s) that took part. steps involving one side only are dropped unless the
    join type keeps that side. at most one value per side is consumed per step.
    """
    lhs, rhs = Cursor(left), Cursor(right)
    while lhs.active or rhs.active:
        if not lhs.active:
            take_left, take_right = False, True
        elif not rhs.active:
            take_left, take_right = True, False
        elif lhs.key == rhs.key:
            take_left, take_right = True, True
        elif sort_order.precedes(lhs.key, rhs.key):
            take_left, take_right = True, False
        else:
            take_left, take_right = False, True

        if take_left and take_right:
            emit = True
        elif take_left:
            emit = join_type.keeps_left_only
        else:
            emit = join_type.keeps_right_only

        if emit:
            key = lhs.key if take_left else rhs.key
            left_value = lhs.value if take_left else None
            right_value = rhs.value if take_right else None
            yield key, merge(key, left_value, right_value)

        if take_left:
            lhs.advance()
        if take_right:
            rhs.advance()


def _pair(key, left, right):
    return left, right


def _concat(key, left, right):
    return [value for value in (left, right) if value is not None]


def _present_values(pairs: Iterable[Tuple[K, V]]) -> Iterator[Tuple[K, V]]:
    """pass pairs through, refusing a None value that a merge would mistake for an absent side"""
    for key, value in pairs:
        if value is None:
            raise ValueError(f"interleave_by_key does not support None values (key {key!r})")
        yield key, value


# the engine never hands an absent value to a guaranteed side; these guards make
# that explicit for the directional variants.

def _require_both(merge: Callable) -> Callable:
    def guarded(key, left, right):
        if left is None or right is None:
            raise AssertionError(f"unreachable: inner merge at key {key!r} is missing a side")
        return merge(key, left, right)
    return guarded


def _require_left(merge: Callable) -> Callable:
    def guarded(key, left, right):
        if left is None:
            raise AssertionError(f"unreachable: left outer merge at key {key!r} has no left value")
        return merge(key, left, right)
    return guarded


def _require_right(merge: Callable) -> Callable:
    def guarded(key, left, right):
        if right is None:
            raise AssertionError(f"unreachable: right outer merge at key {key!r} has no right value")
        return merge(key, left, right)
    return guarded


def _checked_operand(this: 'IKeyValueProvider', other: Any) -> 'IKeyValueProvider':
    """eagerly validate the second operand of a binary operation"""
    from ..enumerable import IKeyValueProvider
    if not isinstance(other, IKeyValueProvider):
        raise TypeError(f"expected a sorted sequence, got {type(other).__name__}")
    if this.sort_order is not other.sort_order:
        logger.debug("refusing to combine %s sequence with %s sequence",
                     this.sort_order.value, other.sort_order.value)
        raise InvalidSortOrderError(this.sort_order, other.sort_order)
    return other


def _checked_join_type(join_type: Any) -> JoinType:
    if not isinstance(join_type, JoinType):
        raise TypeError(f"join_type must be a JoinType, got {type(join_type).__name__}")
    return join_type


class _ZipOperations(Generic[K, V]):
    """
    key-synchronised merges pairing at most one value from each side per step.
    duplicate keys pair up positionally within their runs.
    """

    def merge_by_key(self: '_BaseSortedSequence[K, V]', other: 'IKeyValueProvider[K, V2]',
                     join_type: JoinType = JoinType.FULL_OUTER,
                     merge: Optional[MergeFn[K, V, V2, R]] = None) -> '_BaseSortedSequence[K, Any]':
        """
        the general two-sided merge. merge(key, left_or_none, right_or_none)
        builds each output value; without it the output is the (left, right) tuple.
        sort orders are compared right away, before anything is pulled.
        """
        right = _checked_operand(self, other)
        join_type = _checked_join_type(join_type)
        merge = merge if merge is not None else _pair
        left = self.as_sorted_key_values()
        sort_order = left.sort_order
        def merged():
            return merge_pairs(left.key_value_iterator(), right.key_value_iterator(),
                               sort_order, join_type, merge)
        return self._wrap(left._derive(merged))

    def zip_by_key(self: '_BaseSortedSequence[K, V]', other: 'IKeyValueProvider[K, V2]',
                   join_type: JoinType = JoinType.FULL_OUTER,
                   merge: Optional[MergeFn[K, V, V2, R]] = None) -> '_BaseSortedSequence[K, Any]':
        """same as merge_by_key"""
        return self.merge_by_key(other, join_type, merge)

    def full_outer_zip_by_key(self: '_BaseSortedSequence[K, V]', other: 'IKeyValueProvider[K, V2]',
                              merge: Optional[Callable[[K, Optional[V], Optional[V2]], R]] = None) -> '_BaseSortedSequence[K, Any]':
        """every key from either side; the missing side is None"""
        return self.merge_by_key(other, JoinType.FULL_OUTER, merge)

    def inner_zip_by_key(self: '_BaseSortedSequence[K, V]', other: 'IKeyValueProvider[K, V2]',
                         merge: Optional[Callable[[K, V, V2], R]] = None) -> '_BaseSortedSequence[K, Any]':
        """only steps where both sides have the key"""
        return self.merge_by_key(other, JoinType.INNER, _require_both(merge or _pair))

    def left_outer_zip_by_key(self: '_BaseSortedSequence[K, V]', other: 'IKeyValueProvider[K, V2]',
                              merge: Optional[Callable[[K, V, Optional[V2]], R]] = None) -> '_BaseSortedSequence[K, Any]':
        """every left value; the right side may be None"""
        return self.merge_by_key(other, JoinType.LEFT_OUTER, _require_left(merge or _pair))

    def right_outer_zip_by_key(self: '_BaseSortedSequence[K, V]', other: 'IKeyValueProvider[K, V2]',
                               merge: Optional[Callable[[K, Optional[V], V2], R]] = None) -> '_BaseSortedSequence[K, Any]':
        """every right value; the left side may be None"""
        return self.merge_by_key(other, JoinType.RIGHT_OUTER, _require_right(merge or _pair))

    def interleave_by_key(self: '_BaseSortedSequence[K, V]', other: 'IKeyValueProvider[K, V]') -> '_BaseSortedSequence[K, V]':
        """
        all pairs of both sequences in one sorted stream. where both sides hold a
        value for the same key step, the left one comes first. a None value cannot be
        told apart from an absent side, so it raises ValueError when reached.
        """
        right = _checked_operand(self, other)
        left = self.as_sorted_key_values()
        sort_order = left.sort_order
        def flattened():
            merged = merge_pairs(_present_values(left.key_value_iterator()),
                                 _present_values(right.key_value_iterator()),
                                 sort_order, JoinType.FULL_OUTER, _concat)
            return ((key, value) for key, values in merged for value in values)
        return self._wrap(left._derive(flattened))
