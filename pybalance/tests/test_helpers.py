"""Test suite for helper functions."""

import numpy as np
import pandas as pd
import pytest
from pybalance.helpers import (
    as_account_number,
    coerce_integers,
    first_elements_as_str,
    represents_integer,
)


@pytest.mark.parametrize(
    "x, expected",
    [
        (4, True),
        (4.0, True),
        ("4", True),
        (np.int64(1000), True),
        (np.float64(1000.0), True),
        ("4.5", False),
        (4.5, False),
        (None, False),
        ("abc", False),
        ([4], False),
        (True, False),
        (float("nan"), False),
        (float("inf"), False),
        (pd.NA, False),
    ],
)
def test_represents_integer(x, expected):
    assert represents_integer(x) == expected


@pytest.mark.parametrize(
    "x, expected",
    [(1000, 1000), ("2000", 2000), (3000.0, 3000), (None, None), ("*", None), (np.nan, None)],
)
def test_as_account_number(x, expected):
    assert as_account_number(x) == expected


def test_coerce_integers_sets_invalid_values_to_na():
    values = pd.Series([1000, "2000", 3.0, 4.5, None, "abc", True], dtype=object)
    result = coerce_integers(values)
    assert result.dtype == "Int64"
    assert result.isna().tolist() == [False, False, False, True, True, True, True]
    assert result.dropna().tolist() == [1000, 2000, 3]


def test_coerce_integers_empty_series():
    result = coerce_integers(pd.Series([], dtype=object))
    assert result.empty
    assert result.dtype == "Int64"


@pytest.mark.parametrize(
    "x,n,expected",
    [
        ([], 5, ""),  # Empty list
        ([1, 2, 3], 5, "1, 2, 3"),  # Less elements than n
        ([1, 2, 3, 4, 5, 6], 5, "1, 2, 3, 4, 5, ..."),  # More elements than n
        ((1000, 2000, 3000), 2, "1000, 2000, ..."),  # Tuple
        (pd.Series(["a", "b"]), 5, "a, b"),  # Series
        ([None], 2, "None"),  # Single element
    ],
)
def test_first_elements_as_str(x, n, expected):
    assert first_elements_as_str(x, n) == expected
