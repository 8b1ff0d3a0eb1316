"""This module provides small utilities for validating account numbers and
formatting lists of offending values for log messages.
"""

from typing import Any, List
import numpy as np
import pandas as pd


def represents_integer(x: Any) -> bool:
    """Check if the input is an integer number and can be cast as an integer.

    Booleans and missing values (None, NaN, pd.NA) are not considered integers.

    Args:
        x (Any): The value to be checked.

    Returns:
        bool: True if x is an integer number, False otherwise.

    Examples:
        >>> represents_integer(4)
        True
        >>> represents_integer(4.0)  # Float with an integer value
        True
        >>> represents_integer("4")
        True
        >>> represents_integer("4.5")
        False
        >>> represents_integer(None)
        False
        >>> represents_integer(True)
        False
        >>> represents_integer(float("nan"))
        False
    """
    if isinstance(x, (bool, np.bool_)):
        return False
    elif isinstance(x, (int, np.integer)):
        return True
    elif isinstance(x, (float, np.floating)):
        return bool(np.isfinite(x)) and float(x).is_integer()
    else:
        try:
            return int(x) == float(x)
        except (ValueError, TypeError, OverflowError):
            return False


def as_account_number(x: Any) -> int | None:
    """Return `x` as an account number, or None if it is absent or invalid."""
    return int(x) if represents_integer(x) else None


def coerce_integers(values: pd.Series) -> pd.Series:
    """Convert a Series to nullable integers, setting non-integer values to NA."""
    valid = values.map(represents_integer).astype(bool)
    result = pd.Series(pd.NA, index=values.index, dtype="Int64")
    if valid.any():
        result[valid] = values[valid].map(int).astype("Int64")
    return result


def first_elements_as_str(x: List[Any], n: int = 5) -> str:
    """
    Return a concise, comma-separated string of the first `n` elements of the list `x`.

    If the list has more than `n` elements, append "..." at the end.
    Used to keep log messages about discarded records short.

    Args:
        x (List[Any]): The list to preview.
        n (int): The number of elements to include in the preview.

    Returns:
        str: A comma-separated preview of the first `n` elements, possibly ending in "...".
    """
    x = list(x)
    if not x:
        return ""
    result = [str(i) for i in x[:n]]
    if len(x) > n:
        result.append("...")
    return ", ".join(result)
