"""
Sequence utilities: element access, deduplication, search, and ordering checks.

**Conceptual**: These helpers work on any ordered sequence (list or tuple) and
never mutate their input. Missing results are reported with sentinel values
(`None` for an absent element, `-1` for a failed search) rather than exceptions,
so callers can chain them without try/except.

**Equality rules**:
  - Primitives (None, bool, numbers, str, bytes, and numpy scalars) compare
    by value.
  - Everything else (dicts, objects, lists) compares by identity, so searching
    for a record finds that exact record, not a structurally equal copy.
"""

from enum import Enum
from typing import Any, Optional, Sequence, Union

import numpy as np
import pandas as pd

# Types compared by value; anything else is compared by identity
PRIMITIVE_TYPES = (type(None), bool, int, float, complex, str, bytes, np.generic)


class SortOrder(str, Enum):
    """Direction used by `is_sorted`."""

    ASCENDING = "ascending"
    DESCENDING = "descending"

    @classmethod
    def _missing_(cls, value):
        # Short aliases and case-insensitive names
        aliases = {
            "asc": cls.ASCENDING,
            "desc": cls.DESCENDING,
            "ascending": cls.ASCENDING,
            "descending": cls.DESCENDING,
        }
        if isinstance(value, str):
            return aliases.get(value.lower())
        return None


def first(seq: Sequence[Any]) -> Optional[Any]:
    """
    Return the first element of a sequence, or None if it is empty.

    Args:
        seq: Sequence to read from.

    Returns:
        seq[0], or None for an empty sequence.
    """
    return seq[0] if len(seq) > 0 else None


def last(seq: Sequence[Any]) -> Optional[Any]:
    """
    Return the last element of a sequence, or None if it is empty.

    Args:
        seq: Sequence to read from.

    Returns:
        seq[len(seq) - 1], or None for an empty sequence.
    """
    return seq[-1] if len(seq) > 0 else None


def _dedup_key(item: Any) -> tuple:
    # Tagged so a record's id() can never collide with an equal int value
    if isinstance(item, PRIMITIVE_TYPES):
        return ("value", item)
    return ("identity", id(item))


def remove_duplicated(seq: Sequence[Any]) -> list:
    """
    Remove duplicate values, keeping the first occurrence of each.

    **Functionally**:
    - Input: sequence of numbers, strings, or records.
    - Output: new list with each distinct element exactly once, in the order
      the elements first appear.
    - Primitives are distinct by value; records are distinct by identity, so
      two structurally equal dicts are both kept but the same dict twice is not.
      This is the same equality `find_index` uses.
    - Each element is mapped to a hashable key and pandas' `duplicated` mask
      selects the first occurrences. The elements themselves are returned
      untouched, so ints stay ints and records are the original objects.

    **Edge cases**:
    - Empty input returns an empty list.
    - Values that compare equal in Python (1 and 1.0) collapse to the first one seen.

    Example:
        >>> remove_duplicated(['a', 'b', 'c', 'e', 'a', 'b', 'f'])
        ['a', 'b', 'c', 'e', 'f']

    Args:
        seq: Sequence of primitive values or records.

    Returns:
        Deduplicated list in first-occurrence order.
    """
    items = list(seq)
    is_repeat = pd.Series([_dedup_key(item) for item in items], dtype=object).duplicated()
    return [item for item, repeat in zip(items, is_repeat) if not repeat]


def arr_to_string(seq: Sequence[Any]) -> str:
    """
    Join the string form of each element with commas.

    None elements render as empty strings.

    Example:
        >>> arr_to_string(['hello', 'world'])
        'hello,world'

    Args:
        seq: Sequence of values to render.

    Returns:
        Comma-separated string; empty string for an empty sequence.
    """
    return ",".join("" if item is None else str(item) for item in seq)


def _matches(item: Any, target: Any) -> bool:
    # Value equality for primitives, identity for records
    if isinstance(target, PRIMITIVE_TYPES) and isinstance(item, PRIMITIVE_TYPES):
        return bool(item == target)
    return item is target


def find_index(seq: Sequence[Any], target: Any) -> int:
    """
    Find the position of the first element matching `target`.

    **Functionally**:
    - Primitives match by value (`3 == 3`); records match only if they are
      the very same object (`is`).
    - NaN never matches anything, including itself.

    Example:
        >>> find_index([1, 2, 3, 4, 5], 3)
        2
        >>> find_index([1, 2, 3, 4, 5], 6)
        -1

    Args:
        seq: Sequence to search.
        target: Value or record to look for.

    Returns:
        Zero-based index of the first match, or -1 if there is none.
    """
    for index, item in enumerate(seq):
        if _matches(item, target):
            return index
    return -1


def is_sorted(seq: Sequence[Any], order: Union[SortOrder, str] = SortOrder.ASCENDING) -> bool:
    """
    Check whether a sequence is strictly ordered.

    **Functionally**:
    - ascending: every element is strictly greater than its predecessor.
    - descending: every element is strictly less than its predecessor.
    - Equal neighbours therefore make the sequence unsorted.
    - Sequences of length 0 or 1 are trivially sorted.

    Args:
        seq: Sequence of mutually comparable values.
        order: SortOrder, or one of "ascending"/"descending" ("asc"/"desc").

    Returns:
        True if the sequence is strictly ordered in the requested direction.

    Raises:
        ValueError: If `order` is not a recognised direction.
    """
    order = SortOrder(order)

    if order is SortOrder.ASCENDING:
        return all(current > previous for previous, current in zip(seq, seq[1:]))
    return all(current < previous for previous, current in zip(seq, seq[1:]))
