"""Value types exchanged with the callers of pybalance."""

import datetime
from dataclasses import dataclass, field
from enum import Enum
from typing import List, NamedTuple
import pandas as pd
from consistent_df import enforce_schema

from .constants import BALANCE_SCHEMA


class OutputFormat(str, Enum):
    """Output formats a downstream renderer can produce."""

    HTML = "HTML"
    CSV = "CSV"


@dataclass(frozen=True)
class Account:
    """An entry of the account chart.

    `account` holds the account number. Records or DataFrames keyed
    `account_number` are accepted as well.
    """

    account: int
    label: str | None = None


@dataclass(frozen=True)
class JournalEntry:
    """A single posting of the journal.

    `account` holds the number of the account posted to (`account_number`
    is accepted as an alternative key). A missing or invalid `period`
    excludes the entry from all period-based reasoning.
    """

    account: int
    period: datetime.date | datetime.datetime | None
    debit: float = 0.0
    credit: float = 0.0


@dataclass(frozen=True)
class UserInput:
    """Already parsed user request.

    Any of the range endpoints may be None, which stands for the wildcard
    `*`: the endpoint is then derived from the account chart or journal.
    A missing `format` means no output is requested.
    """

    start_account: int | None = None
    end_account: int | None = None
    start_period: datetime.date | datetime.datetime | None = None
    end_period: datetime.date | datetime.datetime | None = None
    format: OutputFormat | None = None

    def __post_init__(self):
        if self.format is None or isinstance(self.format, OutputFormat):
            return
        if not isinstance(self.format, str):
            raise ValueError(f"Invalid output format: {self.format!r}.")
        if not self.format.strip():
            object.__setattr__(self, "format", None)
            return
        try:
            value = OutputFormat(self.format.strip().upper())
        except ValueError:
            raise ValueError(f"Invalid output format: '{self.format}'.") from None
        object.__setattr__(self, "format", value)


class Boundaries(NamedTuple):
    """Closed intervals of accounts and periods a report covers."""

    start_account: int
    end_account: int
    start_period: pd.Timestamp
    end_period: pd.Timestamp


class BalanceRow(NamedTuple):
    account: int
    description: str
    debit: float
    credit: float
    balance: float


@dataclass(frozen=True, eq=False)
class Report:
    """Balance report with one row per account with activity and grand totals.

    Attributes:
        rows (pd.DataFrame): Balances with BALANCE_SCHEMA, ascending by account.
        total_debit (float): Sum of the `debit` column.
        total_credit (float): Sum of the `credit` column.
        boundaries (Boundaries | None): Resolved ranges the report covers,
            None if no ranges were resolved.
    """

    rows: pd.DataFrame = field(default_factory=lambda: enforce_schema(None, BALANCE_SCHEMA))
    total_debit: float = 0.0
    total_credit: float = 0.0
    boundaries: Boundaries | None = None

    def records(self) -> List[BalanceRow]:
        """Return the report rows as a list of BalanceRow tuples."""
        return [
            BalanceRow(
                account=int(row.account),
                description=str(row.description),
                debit=float(row.debit),
                credit=float(row.credit),
                balance=float(row.balance),
            )
            for row in self.rows.itertuples(index=False)
        ]
