'''
.------..------..------..------.
|d.--. ||g.--. ||e.--. ||n.--. |
| :/\: || :/\: || (\/) || :(): |
| (__) || :\/: || :\/: || ()() |
| '--'d|| '--'g|| '--'e|| '--'n|
`------'`------'`------'`------'
'''

import numpy as np
from faker import Faker
from sortedseq import assert_sorted_pairs, SortOrder, SortedKeyValueSequence
from typing import Any, Dict, List, Optional, Tuple, Union


class Generator:
    """seeded source of key-ordered test fixtures."""

    def __init__(self, seed: Optional[int] = None):
        self._fake = Faker()
        if seed is not None:
            self._fake.seed_instance(seed)
            self._rng = np.random.default_rng(seed)
        else:
            self._rng = np.random.default_rng()

    def _resolve_faker_method(self, method_name: str, kwargs: Optional[Dict] = None) -> Any:
        kwargs = dict(kwargs or {})
        try:
            method = getattr(self._fake, method_name)
        except AttributeError:
            raise ValueError(f"faker has no provider '{method_name}'")
        return method(**kwargs)

    def keys(self, count: int, low: int = 0, high: int = 100,
             sort_order: Union[SortOrder, str] = SortOrder.ASCENDING,
             unique: bool = False) -> List[int]:
        """count integer keys in [low, high], sorted in the given order"""
        if count < 0:
            raise ValueError("count must not be negative")
        if unique:
            if count > high - low + 1:
                raise ValueError("not enough distinct keys in range")
            raw = self._rng.choice(np.arange(low, high + 1), size=count, replace=False)
        else:
            raw = self._rng.integers(low, high, size=count, endpoint=True)
        ordered = np.sort(raw)
        if SortOrder.coerce(sort_order) is SortOrder.DESCENDING:
            ordered = ordered[::-1]
        # convert numpy scalars to native python ints
        return ordered.tolist()

    def values(self, count: int, provider: str = 'word', **kwargs: Any) -> List[Any]:
        """count values from a faker provider"""
        return [self._resolve_faker_method(provider, kwargs) for _ in range(count)]

    def pairs(self, count: int, low: int = 0, high: int = 100,
              sort_order: Union[SortOrder, str] = SortOrder.ASCENDING,
              unique: bool = False, provider: str = 'word') -> List[Tuple[int, Any]]:
        """count (key, value) pairs ordered by key"""
        return list(zip(self.keys(count, low, high, sort_order, unique), self.values(count, provider)))

    def unsorted_pairs(self, count: int, low: int = 0, high: int = 100,
                       sort_order: Union[SortOrder, str] = SortOrder.ASCENDING,
                       provider: str = 'word') -> Tuple[List[Tuple[int, Any]], int]:
        """
        sorted pairs with exactly one out-of-order key planted in them.
        returns the pairs and the index of the planted key.
        """
        if count < 2:
            raise ValueError("need at least two pairs to break the order")
        order = SortOrder.coerce(sort_order)
        pairs = self.pairs(count, low, high, order, unique=False, provider=provider)
        index = int(self._rng.integers(1, count))
        previous_key = pairs[index - 1][0]
        # one step past the previous key against the declared direction
        bad_key = previous_key - 1 if order is SortOrder.ASCENDING else previous_key + 1
        pairs[index] = (bad_key, pairs[index][1])
        return pairs, index


class _PairProvider:
    def __init__(self, seed: Optional[int] = None, **options: Any):
        self._generator = Generator(seed)
        self._options = options

    def take(self, count: int) -> SortedKeyValueSequence:
        pairs = self._generator.pairs(count, **self._options)
        return assert_sorted_pairs(pairs, self._options.get('sort_order', SortOrder.ASCENDING))


def from_seed(seed: Optional[int] = None, **options: Any) -> _PairProvider:
    """a provider whose take(n) returns n generated pairs as a verified sequence"""
    return _PairProvider(seed, **options)
