"""Aggregate journal entries into per-account balances."""

import pandas as pd
from consistent_df import enforce_schema

from .constants import BALANCE_SCHEMA
from .models import Boundaries


def account_balances(
    accounts: pd.DataFrame, journal: pd.DataFrame, boundaries: Boundaries
) -> pd.DataFrame:
    """Calculate debit, credit and balance for each account within the boundaries.

    Returns one row for every account whose number lies within
    `[boundaries.start_account, boundaries.end_account]`, including accounts
    without activity. Debit and credit are the sums over journal entries of the
    account with a period within `[boundaries.start_period,
    boundaries.end_period]`, compared at full timestamp precision. Entries
    without a valid period never match.

    Args:
        accounts (pd.DataFrame): Sanitized account chart with ACCOUNT_SCHEMA.
        journal (pd.DataFrame): Sanitized journal with JOURNAL_SCHEMA.
        boundaries (Boundaries): Resolved account and period ranges.

    Returns:
        pd.DataFrame: Balances with BALANCE_SCHEMA, sorted by account.
    """
    in_range = (
        (accounts["account"] >= boundaries.start_account)
        & (accounts["account"] <= boundaries.end_account)
    ).fillna(False).astype(bool)
    df = pd.DataFrame({"account": accounts.loc[in_range, "account"]})
    if "label" in accounts.columns:
        df["description"] = accounts.loc[in_range, "label"].astype("string").fillna("")
    else:
        df["description"] = ""
    df = df.sort_values("account", kind="stable")

    # Pre-index matching entries by account rather than filtering per account
    period = journal["period"]
    in_period = (
        period.notna()
        & (period >= boundaries.start_period)
        & (period <= boundaries.end_period)
    )
    totals = journal.loc[in_period].groupby("account")[["debit", "credit"]].sum()
    df = df.merge(totals, how="left", left_on="account", right_index=True)

    df["debit"] = df["debit"].fillna(0.0)
    df["credit"] = df["credit"].fillna(0.0)
    df["balance"] = df["debit"] - df["credit"]
    df = df[["account", "description", "debit", "credit", "balance"]]
    return enforce_schema(df.reset_index(drop=True), BALANCE_SCHEMA)
