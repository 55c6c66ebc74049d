from typing import Any

from .types import SortOrder


class SortedSequenceError(Exception):
    """base class for contract violations of a sorted sequence"""

    def __init__(self, message: str):
        super().__init__(f"error while evaluating sorted sequence: {message}")


class SequenceNotSortedError(SortedSequenceError):
    """
    raised mid-traversal at the first key that breaks the declared sort order.
    every element before it has already been yielded.
    """

    def __init__(self, index: int, previous_key: Any, key: Any, sort_order: SortOrder):
        self.index = index
        self.previous_key = previous_key
        self.key = key
        self.sort_order = sort_order
        super().__init__(
            f"sequence is not sorted according to the sort order {sort_order.value}: "
            f"key {key!r} at index {index} follows {previous_key!r}"
        )


class InvalidSortOrderError(SortedSequenceError):
    """raised eagerly when two sequences with different sort orders are combined"""

    def __init__(self, left: SortOrder, right: SortOrder):
        self.left = left
        self.right = right
        super().__init__(f"invalid sort order: cannot combine {left.value} with {right.value}")
