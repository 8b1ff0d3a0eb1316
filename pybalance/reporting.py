"""Assemble balance reports from an account chart and a journal."""

import datetime
import logging
from typing import Any, Iterable
import pandas as pd
from consistent_df import enforce_schema

from .aggregation import account_balances
from .boundaries import resolve_boundaries
from .constants import BALANCE_SCHEMA, LOGGER_NAME
from .models import Boundaries, Report, UserInput
from .sanitize import sanitize_accounts, sanitize_journal

_logger = logging.getLogger(LOGGER_NAME)


def empty_report() -> Report:
    """Return a report without rows and with zero totals."""
    return Report(rows=enforce_schema(None, BALANCE_SCHEMA), total_debit=0.0, total_credit=0.0)


def assemble_report(balances: pd.DataFrame, boundaries: Boundaries | None = None) -> Report:
    """Drop accounts without activity and compute grand totals.

    Rows where both debit and credit are exactly zero are discarded. The order
    of the remaining rows is preserved.

    Args:
        balances (pd.DataFrame): Per-account balances with BALANCE_SCHEMA.
        boundaries (Boundaries, optional): Ranges the balances were computed for.

    Returns:
        Report: Remaining rows with their debit and credit totals.
    """
    active = ((balances["debit"] != 0) | (balances["credit"] != 0)).fillna(False).astype(bool)
    rows = enforce_schema(balances.loc[active].reset_index(drop=True), BALANCE_SCHEMA)
    return Report(
        rows=rows,
        total_debit=float(rows["debit"].sum()),
        total_credit=float(rows["credit"].sum()),
        boundaries=boundaries,
    )


def compute_balance(
    accounts: pd.DataFrame | Iterable[Any],
    journal_entries: pd.DataFrame | Iterable[Any],
    user_input: UserInput,
    now: datetime.datetime | pd.Timestamp | None = None,
) -> Report:
    """Compute the balance report requested by `user_input`.

    Open range endpoints in `user_input` are derived from the data, see
    `resolve_boundaries`. Malformed accounts and journal entries are discarded
    with a logged warning. The caller's data is never modified.

    Args:
        accounts (pd.DataFrame | Iterable): Account chart with `account` and
            optional `label` columns, or a sequence of such records.
        journal_entries (pd.DataFrame | Iterable): Journal with `account`,
            `period`, `debit` and `credit` columns, or a sequence of such records.
        user_input (UserInput): Requested account range, period range and format.
        now (datetime.datetime | pd.Timestamp, optional): Moment used for open
            period endpoints when the journal holds no valid period. Defaults
            to the current time.

    Returns:
        Report: Balance rows of accounts with activity and their totals. Empty
            if no output format is requested or the account chart is empty.
    """
    if user_input.format is None:
        return empty_report()

    accounts = sanitize_accounts(accounts)
    journal = sanitize_journal(journal_entries)
    if accounts.empty:
        _logger.warning("No valid accounts in the account chart, returning an empty report.")
        return empty_report()

    boundaries = resolve_boundaries(accounts, journal, user_input, now=now)
    report = assemble_report(account_balances(accounts, journal, boundaries), boundaries)
    _logger.debug(
        f"Balance report with {len(report.rows)} accounts: total debit "
        f"{report.total_debit}, total credit {report.total_credit}."
    )
    return report
