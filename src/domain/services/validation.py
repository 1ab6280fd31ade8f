"""Domain validation helpers."""

from collections.abc import Iterable
from dataclasses import dataclass

from src.domain.constants import ACCOUNT_TYPES
from src.domain.errors import (
    InvalidAccountType,
    InvalidCategoryType,
    LedgerError,
    MissingAccountType,
)
from src.domain.models import Account


@dataclass(frozen=True)
class AccountValidation:
    """Outcome of validating an account before it is written.

    Attributes:
        account_id: Identifier of the validated account, if persisted.
        error: The failure found, None when the account is valid.
    """

    account_id: int | None
    error: LedgerError | None = None

    @property
    def is_valid(self) -> bool:
        return self.error is None

    def raise_for_error(self) -> None:
        """Raise the recorded failure, if any."""
        if self.error is not None:
            raise self.error


def validate_account(
    account: Account,
    account_types: Iterable[str] = ACCOUNT_TYPES,
) -> AccountValidation:
    """Check account type and category consistency.

    Args:
        account: Account about to be saved.
        account_types: Account types accepted by the chart of accounts.

    Returns:
        AccountValidation: Result carrying the first failure found.
    """
    if not account.account_type:
        return AccountValidation(
            account_id=account.id,
            error=MissingAccountType(account.id),
        )
    if account.account_type not in tuple(account_types):
        return AccountValidation(
            account_id=account.id,
            error=InvalidAccountType(account.account_type, account.id),
        )
    category = account.category
    if category is not None and category.category_type != account.account_type:
        return AccountValidation(
            account_id=account.id,
            error=InvalidCategoryType(
                account.account_type,
                category.category_type,
                account.id,
            ),
        )
    return AccountValidation(account_id=account.id)


__all__ = ["AccountValidation", "validate_account"]
