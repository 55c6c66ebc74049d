from enum import Enum
from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')
V2 = TypeVar('V2')
R = TypeVar('R')

Predicate = Callable[[T], bool]
Selector = Callable[[T], U]
KeySelector = Callable[[T], K]

KeyValue = Tuple[K, V]
Group = Tuple[K, List[V]]
PairsFunc = Callable[[], Iterable[Tuple[K, V]]]

# merge functions receive (key, left value or None, right value or None)
MergeFn = Callable[[K, Optional[V], Optional[V2]], R]


class SortOrder(Enum):
    """direction a sequence's keys are declared to follow"""
    ASCENDING = 'ascending'
    DESCENDING = 'descending'

    def precedes(self, a: Any, b: Any) -> bool:
        """true if key a strictly comes before key b in this order"""
        return a < b if self is SortOrder.ASCENDING else a > b

    def violates(self, previous: Any, key: Any) -> bool:
        """true if key may not follow previous. equal keys never violate."""
        return previous > key if self is SortOrder.ASCENDING else previous < key

    def reverse(self) -> 'SortOrder':
        return SortOrder.DESCENDING if self is SortOrder.ASCENDING else SortOrder.ASCENDING

    @classmethod
    def coerce(cls, value: Union['SortOrder', str]) -> 'SortOrder':
        """accept the enum itself or a case-insensitive name like 'asc' or 'descending'"""
        if isinstance(value, SortOrder):
            return value
        if isinstance(value, str):
            name = value.strip().lower()
            if name in ('asc', 'ascending'):
                return cls.ASCENDING
            if name in ('desc', 'descending'):
                return cls.DESCENDING
            raise ValueError(f"unknown sort order: '{value}'")
        raise TypeError(f"sort order must be a SortOrder or str, got {type(value).__name__}")


class JoinType(Enum):
    """which unmatched keys survive a two-sided merge"""
    FULL_OUTER = 'full_outer'
    LEFT_OUTER = 'left_outer'
    RIGHT_OUTER = 'right_outer'
    INNER = 'inner'

    @property
    def keeps_left_only(self) -> bool:
        return self in (JoinType.FULL_OUTER, JoinType.LEFT_OUTER)

    @property
    def keeps_right_only(self) -> bool:
        return self in (JoinType.FULL_OUTER, JoinType.RIGHT_OUTER)
