"""
Numeric helpers: extremes, sorting, random integers, unit conversion, averaging,
and binary parsing.

All functions leave their input untouched and return new values. Numeric edge
cases follow two policies:
  - Sentinel NaN for "no meaningful number" (mean of nothing, unparsable binary).
  - ValueError/TypeError where the call itself is invalid (extreme of an empty
    sequence, inverted random range, negative duration).
"""

import re
from dataclasses import asdict, dataclass
from typing import Optional, Sequence, Union

import numpy as np

from src.config.settings import get_settings

Number = Union[int, float]

MINUTES_PER_HOUR = 60

# Optional surrounding whitespace, optional sign, then binary digits only
_BINARY_PATTERN = re.compile(r"\s*[+-]?[01]+\s*")


@dataclass(frozen=True)
class HoursAndMinutes:
    """A duration split into whole hours and leftover minutes."""
    hours: int
    minutes: int

    def as_dict(self) -> dict:
        return asdict(self)


def find_max(seq: Sequence[Number]) -> Number:
    """
    Return the largest value in a non-empty numeric sequence.

    Any NaN in the sequence makes the result NaN, wherever it appears.

    Raises:
        ValueError: If the sequence is empty.
    """
    if len(seq) == 0:
        raise ValueError("find_max() requires a non-empty sequence.")
    return np.max(np.asarray(seq)).item()


def find_min(seq: Sequence[Number]) -> Number:
    """
    Return the smallest value in a non-empty numeric sequence.

    Any NaN in the sequence makes the result NaN, wherever it appears.

    Raises:
        ValueError: If the sequence is empty.
    """
    if len(seq) == 0:
        raise ValueError("find_min() requires a non-empty sequence.")
    return np.min(np.asarray(seq)).item()


def sort_num_asc(seq: Sequence[Number]) -> list:
    """Return a new list sorted ascending; the input is not modified."""
    return sorted(seq)


def sort_num_desc(seq: Sequence[Number]) -> list:
    """Return a new list sorted descending; the input is not modified."""
    return sorted(seq, reverse=True)


# Shared generator, created on first use from Settings.random_seed
_default_rng: Optional[np.random.Generator] = None


def _get_default_rng() -> np.random.Generator:
    global _default_rng

    if _default_rng is None:
        _default_rng = np.random.default_rng(get_settings().random_seed)

    return _default_rng


def reset_random_state():
    """
    Drop the shared random generator (for testing).

    The next unseeded call to random_num() builds a fresh generator from the
    current settings.
    """
    global _default_rng
    _default_rng = None


def random_num(min_value: int, max_value: int, seed: Optional[int] = None) -> int:
    """
    Draw a uniformly distributed integer from the inclusive range [min_value, max_value].

    **Functionally**:
    - With `seed`, a dedicated generator is built for this call, so the same
      seed and bounds always give the same number.
    - Without `seed`, the shared generator is used. It is seeded from the
      UTILS_RANDOM_SEED setting when that is configured, which makes a whole
      run reproducible.

    Args:
        min_value: Lower bound (inclusive).
        max_value: Upper bound (inclusive).
        seed: Random seed for reproducibility (None for the shared generator).

    Returns:
        Random integer with min_value <= result <= max_value.

    Raises:
        ValueError: If min_value > max_value.
    """
    if min_value > max_value:
        raise ValueError(
            f"random_num() requires min_value <= max_value, "
            f"got min_value={min_value}, max_value={max_value}."
        )

    rng = np.random.default_rng(seed) if seed is not None else _get_default_rng()
    return int(rng.integers(min_value, max_value, endpoint=True))


def mins_to_hours_and_mins(total_minutes: int) -> HoursAndMinutes:
    """
    Split a number of minutes into whole hours and remaining minutes.

    Example:
        >>> mins_to_hours_and_mins(90)
        HoursAndMinutes(hours=1, minutes=30)

    Args:
        total_minutes: Non-negative integer number of minutes.

    Returns:
        HoursAndMinutes with hours = total // 60 and minutes = total % 60.

    Raises:
        TypeError: If total_minutes is not an integer (bools are rejected too).
        ValueError: If total_minutes is negative.
    """
    if isinstance(total_minutes, bool) or not isinstance(total_minutes, (int, np.integer)):
        raise TypeError(
            f"total_minutes must be an integer, got {type(total_minutes).__name__}."
        )
    if total_minutes < 0:
        raise ValueError(f"total_minutes must be non-negative, got {total_minutes}.")

    hours, minutes = divmod(int(total_minutes), MINUTES_PER_HOUR)
    return HoursAndMinutes(hours=hours, minutes=minutes)


def average(seq: Sequence[Number]) -> float:
    """
    Arithmetic mean of a numeric sequence.

    **Edge cases**:
    - Empty input returns NaN; guard with `len(seq)` (or check with
      math.isnan) if a real number is required.

    Args:
        seq: Sequence of numbers.

    Returns:
        Mean as a float, or NaN for an empty sequence.
    """
    if len(seq) == 0:
        return float(np.nan)
    return float(np.mean(seq))


def binary_to_decimal(value: Union[str, int]) -> Union[int, float]:
    """
    Convert a binary number, given as a string or an int, to its decimal value.

    **Functionally**:
    - Strings are parsed as base-2 digits; surrounding whitespace and one
      leading sign are allowed ("-101" -> -5).
    - Ints are read digit by digit as if they were a binary literal
      (1011 -> "1011" -> 11). Whole-number floats are read the same way
      (101.0 -> "101" -> 5).
    - The empty string returns 0.

    **Edge cases**:
    - Anything else that cannot be read as binary ("102", "0b101", "1_0",
      "   ", fractional or infinite floats, bools) returns NaN instead of raising.

    Args:
        value: Binary digits as str, or an int whose decimal digits are all 0/1.

    Returns:
        Decimal integer, or NaN for malformed input.

    Raises:
        TypeError: If value is neither a string nor a number.
    """
    if isinstance(value, bool):
        return float(np.nan)

    if isinstance(value, (int, np.integer)):
        text = str(int(value))
    elif isinstance(value, (float, np.floating)):
        if not value.is_integer():
            return float(np.nan)
        text = str(int(value))
    elif isinstance(value, str):
        if value == "":
            return 0
        text = value
    else:
        raise TypeError(
            f"binary_to_decimal() expects a str or int, got {type(value).__name__}."
        )

    if _BINARY_PATTERN.fullmatch(text) is None:
        return float(np.nan)
    return int(text, 2)
