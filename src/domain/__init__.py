"""Domain package for business rules and core models."""

from .constants import (
    ACCOUNT_CODE_BASES,
    ACCOUNT_TYPE_LABELS,
    ACCOUNT_TYPES,
    CREDIT,
    DEBIT,
    PURCHASABLE_TYPES,
)
from .errors import (
    DuplicateAccountCode,
    HangingTransactions,
    InvalidAccountType,
    InvalidCategoryType,
    InvalidExchangeRate,
    LedgerError,
    MissingAccountType,
    PeriodResolutionFailure,
)
from .models import (
    Account,
    AccountSnapshot,
    AccountTransaction,
    AccountTransactions,
    BalanceRow,
    Category,
    ReportingContext,
    ReportingPeriod,
    SectionBalances,
    SectionCategory,
    TransactionRow,
)
from .services import (
    AccountValidation,
    compose_closing_balance,
    compute_opening_balance,
    normalize_account_name,
    signed_balance_amount,
    validate_account,
)

__all__ = [
    "ACCOUNT_CODE_BASES",
    "ACCOUNT_TYPE_LABELS",
    "ACCOUNT_TYPES",
    "CREDIT",
    "DEBIT",
    "PURCHASABLE_TYPES",
    "DuplicateAccountCode",
    "HangingTransactions",
    "InvalidAccountType",
    "InvalidCategoryType",
    "InvalidExchangeRate",
    "LedgerError",
    "MissingAccountType",
    "PeriodResolutionFailure",
    "Account",
    "AccountSnapshot",
    "AccountTransaction",
    "AccountTransactions",
    "BalanceRow",
    "Category",
    "ReportingContext",
    "ReportingPeriod",
    "SectionBalances",
    "SectionCategory",
    "TransactionRow",
    "AccountValidation",
    "compose_closing_balance",
    "compute_opening_balance",
    "normalize_account_name",
    "signed_balance_amount",
    "validate_account",
]
