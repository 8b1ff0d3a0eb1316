"""Resolve the account and period ranges a balance report covers.

Range endpoints left open by the user (the `*` wildcard, passed as None) are
derived from the data: the lowest and highest account number of the account
chart, and the earliest and latest valid period of the journal.
"""

import datetime
import logging
import pandas as pd

from .constants import LOGGER_NAME
from .helpers import as_account_number
from .models import Boundaries, UserInput
from .time import to_timestamp, to_timestamps

_logger = logging.getLogger(LOGGER_NAME)


def resolve_account_range(
    accounts: pd.DataFrame, start: int | None = None, end: int | None = None
) -> tuple[int, int]:
    """Resolve the closed interval of account numbers to report on.

    Args:
        accounts (pd.DataFrame): Account chart with an `account` column.
        start (int | None): First account. None or an invalid value selects
            the lowest account number in `accounts`.
        end (int | None): Last account. None or an invalid value selects
            the highest account number in `accounts`.

    Returns:
        tuple[int, int]: The effective start and end account.

    Raises:
        ValueError: If a default is needed but the account chart is empty.
    """
    start = as_account_number(start)
    end = as_account_number(end)
    if start is None or end is None:
        numbers = accounts["account"].dropna()
        if numbers.empty:
            raise ValueError("Cannot derive a default account range from an empty account chart.")
        if start is None:
            start = int(numbers.min())
        if end is None:
            end = int(numbers.max())
    return start, end


def resolve_period_range(
    journal: pd.DataFrame,
    start: datetime.date | pd.Timestamp | None = None,
    end: datetime.date | pd.Timestamp | None = None,
    now: datetime.datetime | pd.Timestamp | None = None,
) -> tuple[pd.Timestamp, pd.Timestamp]:
    """Resolve the closed interval of periods to report on.

    Only journal entries with a valid period are considered. If the journal
    holds no such entry, open endpoints fall back to the current moment.

    Args:
        journal (pd.DataFrame): Journal entries with a `period` column.
        start: First period. None or an invalid value selects the earliest
            valid period in `journal`.
        end: Last period. None or an invalid value selects the latest valid
            period in `journal`.
        now: Moment used when the journal has no valid period. Defaults to the
            wall-clock time, which is only read if needed.

    Returns:
        tuple[pd.Timestamp, pd.Timestamp]: The effective start and end period.
    """
    start = to_timestamp(start)
    end = to_timestamp(end)
    if start is None or end is None:
        periods = journal["period"]
        if not pd.api.types.is_datetime64_any_dtype(periods):
            periods = to_timestamps(periods)
        periods = periods.dropna()
        if periods.empty:
            now = pd.Timestamp.now() if now is None else pd.Timestamp(now)
            default_start = default_end = now
        else:
            default_start = periods.min()
            default_end = periods.max()
        if start is None:
            start = default_start
        if end is None:
            end = default_end
    return start, end


def resolve_boundaries(
    accounts: pd.DataFrame,
    journal: pd.DataFrame,
    user_input: UserInput,
    now: datetime.datetime | pd.Timestamp | None = None,
) -> Boundaries:
    """Resolve all four report boundaries from the user input and the data."""
    start_account, end_account = resolve_account_range(
        accounts, start=user_input.start_account, end=user_input.end_account
    )
    start_period, end_period = resolve_period_range(
        journal, start=user_input.start_period, end=user_input.end_period, now=now
    )
    _logger.debug(
        f"Effective range: accounts {start_account} to {end_account}, "
        f"periods {start_period} to {end_period}."
    )
    return Boundaries(
        start_account=start_account,
        end_account=end_account,
        start_period=start_period,
        end_period=end_period,
    )
