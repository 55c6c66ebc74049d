r"""
'     ___  ___  _ __| |_ ___  __| |___  ___  __ _
'    / __|/ _ \| '__| __/ _ \/ _` / __|/ _ \/ _` |
'    \__ \ (_) | |  | ||  __/ (_| \__ \  __/ (_| |
'    |___/\___/|_|   \__\___|\__,_|___/\___|\__, |
'                                              |_|
"""

import logging

# expose the main classes
from .enumerable import SortedKeyValueSequence, SortedSequence, IKeyValueProvider

# expose the factory functions
from .factories import (
    assert_sorted,
    assert_sorted_by,
    assert_sorted_pairs,
    empty,
    S,
    KV
)

# expose supporting types
from .types import SortOrder, JoinType
from .exceptions import (
    SortedSequenceError,
    SequenceNotSortedError,
    InvalidSortOrderError
)

# silent unless the host application configures logging
logging.getLogger(__name__).addHandler(logging.NullHandler())

# define what `import *` does
__all__ = [
    "SortedKeyValueSequence",
    "SortedSequence",
    "IKeyValueProvider",
    "assert_sorted",
    "assert_sorted_by",
    "assert_sorted_pairs",
    "empty",
    "S",
    "KV",
    "SortOrder",
    "JoinType",
    "SortedSequenceError",
    "SequenceNotSortedError",
    "InvalidSortOrderError"
]
