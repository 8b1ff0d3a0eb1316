"""Discard incoherent account chart and journal data.

Malformed records are dropped rather than raising, so that a single bad
record does not abort a whole report. Each discard is logged as a warning on
the ledger logger.
"""

import logging
from typing import Any, Iterable
import numpy as np
import pandas as pd
from consistent_df import enforce_schema

from .constants import ACCOUNT_SCHEMA, JOURNAL_SCHEMA, LOGGER_NAME
from .helpers import coerce_integers, first_elements_as_str
from .time import to_timestamps

_logger = logging.getLogger(LOGGER_NAME)


def as_frame(data: pd.DataFrame | Iterable[Any] | None, schema: pd.DataFrame) -> pd.DataFrame:
    """Return a copy of `data` as a DataFrame.

    `data` can be a DataFrame or a sequence of records pandas can convert,
    such as dicts or dataclass instances. An empty record set yields an empty
    DataFrame with the columns of `schema`. An `account_number` column is
    accepted in place of `account`.

    Raises:
        ValueError: If a mandatory column of `schema` is missing.
    """
    if data is None:
        return enforce_schema(None, schema)
    if isinstance(data, pd.DataFrame):
        df = data.copy()
    else:
        df = pd.DataFrame(list(data))
    if df.empty and len(df.columns) == 0:
        return enforce_schema(None, schema)
    if "account" not in df.columns and "account_number" in df.columns:
        df = df.rename(columns={"account_number": "account"})

    mandatory = schema.loc[schema["mandatory"], "column"]
    missing = set(mandatory) - set(df.columns)
    if missing:
        raise ValueError(f"DataFrame missing required columns: {missing}.")
    return df


def sanitize_accounts(data: pd.DataFrame | Iterable[Any] | None) -> pd.DataFrame:
    """Discard accounts without a valid account number.

    Duplicate account numbers are kept; each duplicate yields its own
    balance row.

    Args:
        data (pd.DataFrame | Iterable): Raw account chart with an `account`
            column and an optional `label` column.

    Returns:
        pd.DataFrame: Account chart with ACCOUNT_SCHEMA.
    """
    df = as_frame(data, ACCOUNT_SCHEMA)

    account = coerce_integers(df["account"])
    invalid = account.isna().to_numpy()
    if invalid.any():
        invalid_values = df.loc[invalid, "account"].tolist()
        _logger.warning(
            f"Discarding {len(invalid_values)} accounts with missing or non-integer "
            f"account numbers: {first_elements_as_str(invalid_values)}."
        )
    df["account"] = account
    df = df.loc[~invalid]

    return enforce_schema(df, ACCOUNT_SCHEMA, keep_extra_columns=True).reset_index(drop=True)


def sanitize_journal(data: pd.DataFrame | Iterable[Any] | None) -> pd.DataFrame:
    """Discard incoherent journal data.

    Journal entries are discarded if they:
    1. Lack an account or reference a non-integer account.
    2. Have a debit or credit amount that is present but not a finite number.

    Missing debit or credit amounts are read as zero. Entries with a missing
    or invalid period are kept, with `period` set to NaT; they are ignored by
    period resolution and aggregation.

    Args:
        data (pd.DataFrame | Iterable): Raw journal with `account` and `period`
            columns and optional `debit` and `credit` columns.

    Returns:
        pd.DataFrame: Journal with JOURNAL_SCHEMA.
    """
    df = as_frame(data, JOURNAL_SCHEMA)

    account = coerce_integers(df["account"])
    invalid_account = account.isna().to_numpy()
    if invalid_account.any():
        invalid_values = df.loc[invalid_account, "account"].tolist()
        _logger.warning(
            f"Discarding {len(invalid_values)} journal entries with missing or non-integer "
            f"accounts: {first_elements_as_str(invalid_values)}."
        )
    df["account"] = account
    df["period"] = to_timestamps(df["period"])

    invalid_amount = np.zeros(len(df), dtype=bool)
    for column in ["debit", "credit"]:
        if column not in df.columns:
            df[column] = 0.0
            continue
        raw = df[column]
        amount = pd.to_numeric(raw, errors="coerce").to_numpy(dtype=float, na_value=np.nan)
        not_numeric = np.isnan(amount) & raw.notna().to_numpy()
        invalid_amount |= not_numeric | np.isinf(amount)
        df[column] = np.nan_to_num(amount, nan=0.0, posinf=0.0, neginf=0.0)
    invalid_amount &= ~invalid_account
    if invalid_amount.any():
        invalid_rows = df.index[invalid_amount].tolist()
        _logger.warning(
            f"Discarding {len(invalid_rows)} journal entries with non-numeric debit or "
            f"credit amounts at rows: {first_elements_as_str(invalid_rows)}."
        )
    df = df.loc[~(invalid_account | invalid_amount)]

    undated = df["period"].isna()
    if undated.any():
        _logger.info(f"Ignoring {undated.sum()} journal entries without a valid period.")

    return enforce_schema(df, JOURNAL_SCHEMA, keep_extra_columns=True).reset_index(drop=True)
