"""Domain services package."""

from .balances import (
    compose_closing_balance,
    compute_opening_balance,
    signed_balance_amount,
)
from .normalization import normalize_account_name
from .validation import AccountValidation, validate_account

__all__ = [
    "compose_closing_balance",
    "compute_opening_balance",
    "signed_balance_amount",
    "normalize_account_name",
    "AccountValidation",
    "validate_account",
]
