"""
Record (mapping) utilities: own-key checks, emptiness, and sorting by a field.

A record is any Mapping from string keys to values. "Own" keys are the ones
stored in the mapping itself; attributes of the mapping type such as `keys`
or `__class__` never count as properties.
"""

from typing import Any, Dict, List, Mapping

# Comparable variants accepted by sort_by_property
NUMERIC = "numeric"
STRING = "string"


class UnsupportedTypeError(TypeError):
    """
    Raised when records cannot be sorted by the requested property.

    Only all-numeric or all-string property values can be ordered. Mixed
    types, bools, nested records, and missing keys are rejected. The error
    is terminal: callers should fix the data rather than retry.
    """

    def __init__(self, key: str, type_names: List[str]):
        self.key = key
        self.type_names = type_names
        super().__init__(
            f"Unsupported property types for sorting by '{key}': "
            f"{', '.join(type_names)}. Only number and string types are supported, "
            "and all values must share one of them."
        )


def has_property(record: Mapping[str, Any], key: str) -> bool:
    """
    Check whether `key` is stored in the record itself.

    A key holding None still counts as present.

    Example:
        >>> has_property({'name': 'x', 'version': None}, 'version')
        True
        >>> has_property({'name': 'x'}, 'keys')
        False
    """
    return key in record


def is_empty_object(record: Mapping[str, Any]) -> bool:
    """Return True if the record has no keys."""
    return len(record) == 0


def _classify(value: Any) -> str:
    # bool is an int subclass but is not a sortable number here
    if isinstance(value, bool):
        return type(value).__name__
    if isinstance(value, (int, float)):
        return NUMERIC
    if isinstance(value, str):
        return STRING
    return type(value).__name__


def sort_by_property(seq: List[Dict[str, Any]], key: str) -> List[Dict[str, Any]]:
    """
    Sort a list of records in place by the value stored under `key`.

    **Functionally**:
    - All values must be numbers (compared numerically) or all must be
      strings (compared lexicographically).
    - The value types are checked before sorting, so on failure the list
      is left exactly as it was.
    - The sort is stable: records with equal values keep their relative order.
    - A list with fewer than two records involves no comparison and is
      returned unchanged.

    Example:
        >>> sort_by_property([{'age': 20}, {'age': 100}, {'age': 30}], 'age')
        [{'age': 20}, {'age': 30}, {'age': 100}]

    Args:
        seq: List of records; mutated in place.
        key: Property to sort by.

    Returns:
        The same list object, now sorted.

    Raises:
        UnsupportedTypeError: If the values are not all numeric or all strings
                              (a missing key counts as an unsupported value).
    """
    if len(seq) < 2:
        return seq

    variants = {_classify(record.get(key)) for record in seq}
    if len(variants) != 1 or variants.isdisjoint({NUMERIC, STRING}):
        raise UnsupportedTypeError(key, sorted(variants))

    seq.sort(key=lambda record: record[key])
    return seq
