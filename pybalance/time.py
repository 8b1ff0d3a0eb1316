"""Helper functions for date processing in pybalance."""

import datetime
import numpy as np
import pandas as pd

from .constants import PERIOD_DTYPE


def to_timestamp(
    x: datetime.date | datetime.datetime | pd.Timestamp | str | None
) -> pd.Timestamp | None:
    """Convert a period value to a timezone-naive pandas Timestamp.

    Dates, datetimes, Timestamps, numpy datetimes and ISO formatted strings
    are accepted. Timezone-aware values are converted to UTC. Missing values
    (None, NaT, pd.NA), numbers and anything that cannot be interpreted as a
    point in time yield None, so callers can treat them as absent.

    Dates outside the nanosecond range of pandas, such as the sentinel
    9999-12-31, are kept at microsecond resolution.

    Args:
        x: The value to convert.

    Returns:
        pd.Timestamp | None: The timestamp, or None if `x` is absent or invalid.

    Examples:
        to_timestamp(datetime.date(2016, 3, 1)) -> Timestamp('2016-03-01 00:00:00')
        to_timestamp(datetime.date(9999, 12, 31)) -> Timestamp('9999-12-31 00:00:00')
        to_timestamp("2016-03-01 12:30") -> Timestamp('2016-03-01 12:30:00')
        to_timestamp("not a date") -> None
        to_timestamp(None) -> None
    """
    if x is None or isinstance(x, (bool, int, float, np.number)):
        return None
    if pd.api.types.is_scalar(x) and pd.isna(x):
        return None
    if isinstance(x, str):
        x = x.strip()
        try:
            x = datetime.datetime.fromisoformat(x)
        except ValueError:
            x = pd.to_datetime(x, errors="coerce")
            if pd.isna(x):
                return None
    elif isinstance(x, datetime.date) and not isinstance(x, datetime.datetime):
        x = datetime.datetime.combine(x, datetime.time())

    try:
        result = pd.Timestamp(x)
    except (TypeError, ValueError, OverflowError):
        return None
    if pd.isna(result):
        return None
    if result.tzinfo is not None:
        result = result.tz_convert(None)
    return result


def to_timestamps(values: pd.Series) -> pd.Series:
    """Vectorized `to_timestamp`: invalid or missing values become NaT.

    The result has microsecond resolution, see PERIOD_DTYPE.
    """
    converted = [to_timestamp(x) for x in values]
    periods = np.array(
        [
            np.datetime64("NaT") if ts is None else ts.to_datetime64()
            for ts in converted
        ],
        dtype=PERIOD_DTYPE,
    )
    return pd.Series(periods, index=values.index)
