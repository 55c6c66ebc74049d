from __future__ import annotations
import typing
import numpy as np
import pandas as pd
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import _BaseSortedSequence

_MISSING = object()


class TerminalAccessor(Generic[K, V]):
    """operations that traverse the sequence and materialise a result"""

    def __init__(self, sequence_instance: '_BaseSortedSequence[K, V]'):
        self._sequence = sequence_instance

    def list(self) -> List[Any]:
        """what iteration yields, as a list"""
        return list(self._sequence)

    def pairs(self) -> List[Tuple[K, V]]:
        """the (key, value) pairs as a list"""
        return list(self._sequence.key_value_iterator())

    def keys(self) -> List[K]:
        return list(self._sequence.keys())

    def values(self) -> List[V]:
        return list(self._sequence.values())

    def dict(self) -> Dict[K, V]:
        """convert to dictionary; the last value of a run of equal keys wins"""
        return dict(self._sequence.key_value_iterator())

    def groups_dict(self) -> Dict[K, List[V]]:
        """key -> every value with that key, in order"""
        result: Dict[K, List[V]] = {}
        for key, value in self._sequence.key_value_iterator():
            result.setdefault(key, []).append(value)
        return result

    def array(self) -> np.ndarray:
        """convert what iteration yields to a numpy array"""
        return np.array(self.list())

    def pandas(self) -> pd.Series:
        """convert to a pandas series of values indexed by key"""
        keys, values = [], []
        for key, value in self._sequence.key_value_iterator():
            keys.append(key)
            values.append(value)
        return pd.Series(values, index=pd.Index(keys, name='key'), name='value')

    def df(self) -> pd.DataFrame:
        """convert to a pandas dataframe with 'key' and 'value' columns"""
        return pd.DataFrame(self.pairs(), columns=['key', 'value'])

    def count(self, predicate: Optional[Predicate[Any]] = None) -> int:
        """count items, optionally only those satisfying the predicate"""
        if predicate is None:
            return sum(1 for _ in self._sequence)
        return sum(1 for x in self._sequence if predicate(x))

    def any(self, predicate: Optional[Predicate[Any]] = None) -> bool:
        """check if any item satisfies condition. stops at the first hit."""
        if predicate is None:
            return next(iter(self._sequence), _MISSING) is not _MISSING
        return any(predicate(x) for x in self._sequence)

    def first(self, predicate: Optional[Predicate[Any]] = None) -> Any:
        """get first item; only pulls as far as needed"""
        for item in self._sequence:
            if predicate is None or predicate(item):
                return item
        if predicate is None:
            raise ValueError("sequence contains no elements")
        raise ValueError("no element satisfies the condition")

    def first_or_default(self, predicate: Optional[Predicate[Any]] = None,
                         default: Optional[Any] = None) -> Any:
        """get first item or default"""
        try: return self.first(predicate)
        except ValueError: return default

    def last(self) -> Any:
        """get last item; traverses the whole sequence"""
        result = _MISSING
        for item in self._sequence:
            result = item
        if result is _MISSING:
            raise ValueError("sequence contains no elements")
        return result
