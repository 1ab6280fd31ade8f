"""Domain errors raised by balance and lifecycle operations."""

from decimal import Decimal


class LedgerError(RuntimeError):
    """Base class for ledger domain failures."""


class MissingAccountType(LedgerError):
    """Raised when an account is saved without an account type."""

    def __init__(self, account_id: int | None = None) -> None:
        self.account_id = account_id
        super().__init__(
            f"Account type is required to save account id={account_id}"
        )


class InvalidAccountType(LedgerError):
    """Raised when an account type is not part of the chart of accounts."""

    def __init__(self, account_type: str, account_id: int | None = None):
        self.account_type = account_type
        self.account_id = account_id
        super().__init__(
            f"Unknown account type {account_type!r} for account id={account_id}"
        )


class InvalidCategoryType(LedgerError):
    """Raised when a category does not match the account type."""

    def __init__(
        self,
        account_type: str,
        category_type: str,
        account_id: int | None = None,
    ) -> None:
        self.account_type = account_type
        self.category_type = category_type
        self.account_id = account_id
        super().__init__(
            f"Cannot assign {account_type} account id={account_id} "
            f"to a {category_type} category"
        )


class HangingTransactions(LedgerError):
    """Raised when deleting an account that still carries a balance."""

    def __init__(self, account_id: int | None, balance: Decimal) -> None:
        self.account_id = account_id
        self.balance = balance
        super().__init__(
            f"Account id={account_id} has a closing balance of {balance} "
            "and cannot be deleted"
        )


class PeriodResolutionFailure(LedgerError):
    """Raised when no reporting period exists for a year or date."""

    def __init__(self, year: int | None = None, message: str | None = None):
        self.year = year
        super().__init__(
            message or f"No reporting period exists for calendar year {year}"
        )


class DuplicateAccountCode(LedgerError):
    """Raised by persistence when an account code is already taken."""

    def __init__(self, account_type: str, code: int) -> None:
        self.account_type = account_type
        self.code = code
        super().__init__(
            f"Account code {code} is already used for {account_type}"
        )


class InvalidExchangeRate(LedgerError):
    """Raised when an amount cannot be translated for lack of a usable rate."""

    def __init__(
        self,
        account_id: int | None = None,
        rate: Decimal | None = None,
        rows: int = 1,
    ) -> None:
        self.account_id = account_id
        self.rate = rate
        self.rows = rows
        super().__init__(
            f"{rows} amount(s) of account id={account_id} carry an unusable "
            f"exchange rate ({rate})"
        )


__all__ = [
    "LedgerError",
    "MissingAccountType",
    "InvalidAccountType",
    "InvalidCategoryType",
    "HangingTransactions",
    "PeriodResolutionFailure",
    "DuplicateAccountCode",
    "InvalidExchangeRate",
]
