"""Test suite for account_balances()."""

from io import StringIO
import pandas as pd
import pytest
from consistent_df import assert_frame_equal, enforce_schema
from pybalance import Boundaries, account_balances, sanitize_accounts, sanitize_journal
from pybalance.constants import BALANCE_SCHEMA
from .base_test import ACCOUNTS, JOURNAL


def balances_from_csv(csv: str) -> pd.DataFrame:
    df = pd.read_csv(StringIO(csv), skipinitialspace=True)
    df = enforce_schema(df, BALANCE_SCHEMA)
    df["description"] = df["description"].fillna("")
    return df


@pytest.fixture
def accounts():
    return sanitize_accounts(ACCOUNTS)


@pytest.fixture
def journal():
    return sanitize_journal(JOURNAL)


def test_account_balances_full_range(accounts, journal):
    boundaries = Boundaries(
        1000, 5000, pd.Timestamp("2016-01-15"), pd.Timestamp("2016-12-31")
    )
    expected = balances_from_csv("""
        account,      description,  debit, credit, balance
           1000,             Cash, 125.00,   0.00,  125.00
           1100,      Receivables,  50.00,  20.00,   30.00
           2000, Accounts Payable,   0.00,   0.00,    0.00
           3000,                 ,  10.00,   0.00,   10.00
           5000,            Sales,   0.00, 100.00, -100.00
    """)
    assert_frame_equal(expected, account_balances(accounts, journal, boundaries))


def test_account_balances_filters_account_range(accounts, journal):
    boundaries = Boundaries(
        1050, 3000, pd.Timestamp("2016-01-01"), pd.Timestamp("2016-12-31")
    )
    result = account_balances(accounts, journal, boundaries)
    assert result["account"].tolist() == [1100, 2000, 3000]


def test_account_balances_compares_full_timestamps(accounts, journal):
    # The evening entry of 2016-03-10 lies after the end boundary at midnight
    boundaries = Boundaries(
        1000, 1000, pd.Timestamp("2016-03-01"), pd.Timestamp("2016-03-10")
    )
    result = account_balances(accounts, journal, boundaries)
    assert result["debit"].tolist() == [100.0]

    boundaries = Boundaries(
        1000, 1000, pd.Timestamp("2016-03-10 18:30"), pd.Timestamp("2016-03-10 18:30")
    )
    result = account_balances(accounts, journal, boundaries)
    assert result["debit"].tolist() == [25.0]


def test_account_balances_ignores_undated_entries(accounts, journal):
    boundaries = Boundaries(
        2000, 2000, pd.Timestamp("1900-01-01"), pd.Timestamp("2100-01-01")
    )
    result = account_balances(accounts, journal, boundaries)
    assert result["debit"].tolist() == [0.0]
    assert result["credit"].tolist() == [0.0]


def test_account_balances_keeps_duplicate_accounts():
    accounts = sanitize_accounts(pd.DataFrame({
        "account": [1000, 900, 1000], "label": ["Cash", "Petty cash", "Cash (copy)"]
    }))
    journal = sanitize_journal(pd.DataFrame({
        "account": [1000], "period": ["2016-03-10"], "debit": [10.0], "credit": [2.5]
    }))
    boundaries = Boundaries(0, 9999, pd.Timestamp("2016-01-01"), pd.Timestamp("2016-12-31"))
    expected = balances_from_csv("""
        account,  description, debit, credit, balance
            900,   Petty cash,  0.00,   0.00,    0.00
           1000,         Cash, 10.00,   2.50,    7.50
           1000,  Cash (copy), 10.00,   2.50,    7.50
    """)
    assert_frame_equal(expected, account_balances(accounts, journal, boundaries))


def test_account_balances_empty_journal(accounts):
    boundaries = Boundaries(1000, 5000, pd.Timestamp("2016-01-01"), pd.Timestamp("2016-12-31"))
    result = account_balances(accounts, sanitize_journal(None), boundaries)
    assert result["account"].tolist() == [1000, 1100, 2000, 3000, 5000]
    assert (result["debit"] == 0).all()
    assert (result["credit"] == 0).all()
    assert (result["balance"] == 0).all()


def test_account_balances_empty_account_range(accounts, journal):
    boundaries = Boundaries(6000, 7000, pd.Timestamp("2016-01-01"), pd.Timestamp("2016-12-31"))
    result = account_balances(accounts, journal, boundaries)
    assert result.empty
    assert list(result.columns) == BALANCE_SCHEMA["column"].tolist()
