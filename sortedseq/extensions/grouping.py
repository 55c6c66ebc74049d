from __future__ import annotations
import typing
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import _BaseSortedSequence


def group_runs(pairs: Iterable[Tuple[K, V]]) -> Iterator[Group[K, V]]:
    """coalesce consecutive pairs with equal keys into (key, [values...])"""
    it = iter(pairs)
    try:
        current_key, first_value = next(it)
    except StopIteration:
        return
    current_group = [first_value]
    for key, value in it:
        if key == current_key:
            current_group.append(value)
        else:
            yield current_key, current_group
            current_key, current_group = key, [value]
    # flush the trailing run
    yield current_key, current_group


class _GroupingOperations(Generic[K, V]):

    def group_by_key(self: '_BaseSortedSequence[K, V]') -> '_BaseSortedSequence[K, List[V]]':
        """
        one (key, values) group per maximal run of equal keys, values in their
        original order. an empty sequence has no groups.
        """
        source = self.as_sorted_key_values()
        return self._wrap(source._derive(lambda: group_runs(source.key_value_iterator())))
