"""Domain models package."""

from .accounts import Account, AccountSnapshot, Category
from .finance import (
    AccountTransaction,
    AccountTransactions,
    SectionBalances,
    SectionCategory,
)
from .ledger_rows import (
    BalanceRow,
    ReportingContext,
    ReportingPeriod,
    TransactionRow,
)

__all__ = [
    "Account",
    "AccountSnapshot",
    "Category",
    "AccountTransaction",
    "AccountTransactions",
    "SectionBalances",
    "SectionCategory",
    "BalanceRow",
    "ReportingContext",
    "ReportingPeriod",
    "TransactionRow",
]
