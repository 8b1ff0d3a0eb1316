"""Constants used throughout the application."""

import pandas as pd
from io import StringIO

LOGGER_NAME = "ledger"

OUTPUT_FORMATS = ("HTML", "CSV")

# Microsecond resolution covers every calendar date from year 1 to 9999
PERIOD_DTYPE = "datetime64[us]"

ACCOUNT_SCHEMA_CSV = """
    column,             dtype,                mandatory,       id
    account,            Int64,                True,          True
    label,              string[python],       False,        False
"""
ACCOUNT_SCHEMA = pd.read_csv(StringIO(ACCOUNT_SCHEMA_CSV), skipinitialspace=True)

JOURNAL_SCHEMA_CSV = """
    column,             dtype,                mandatory,       id
    account,            Int64,                True,         False
    period,             datetime64[us],       True,         False
    debit,              Float64,              False,        False
    credit,             Float64,              False,        False
"""
JOURNAL_SCHEMA = pd.read_csv(StringIO(JOURNAL_SCHEMA_CSV), skipinitialspace=True)

BALANCE_SCHEMA_CSV = """
    column,             dtype,                mandatory,       id
    account,            Int64,                True,          True
    description,        string[python],       True,         False
    debit,              Float64,              True,         False
    credit,             Float64,              True,         False
    balance,            Float64,              True,         False
"""
BALANCE_SCHEMA = pd.read_csv(StringIO(BALANCE_SCHEMA_CSV), skipinitialspace=True)
