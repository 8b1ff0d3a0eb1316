# flake8: noqa: F401

"""PyBalance package

**pybalance** computes filtered balance reports from an account chart and a
journal of dated transactions. Given an account range, a period range and an
output format, it sums debits and credits per account, drops accounts without
activity and reports grand totals.

Open range endpoints (the `*` wildcard, passed as None) are derived from the
data: the lowest and highest account number, and the earliest and latest
journal period. Malformed records are discarded with a warning on the
`ledger` logger instead of aborting the report.

Parsing the user's request and rendering the report as HTML or CSV are left to
the caller.
"""

from .models import (
    Account,
    BalanceRow,
    Boundaries,
    JournalEntry,
    OutputFormat,
    Report,
    UserInput,
)
from .boundaries import resolve_account_range, resolve_period_range, resolve_boundaries
from .aggregation import account_balances
from .reporting import assemble_report, compute_balance, empty_report
from .sanitize import sanitize_accounts, sanitize_journal
from .helpers import represents_integer, first_elements_as_str
from .time import to_timestamp
from . import constants
