"""Ports for reading and writing chart-of-accounts entries."""

from collections.abc import Iterable
from typing import Protocol

from src.domain.models import Account


class AccountsRepositoryPort(Protocol):
    """Port exposing access to stored accounts."""

    def fetch_by_types(
        self,
        account_types: Iterable[str],
        entity_id: int,
    ) -> list[Account]:
        """Return the entity's active accounts of the given types."""

    def count_by_type(
        self,
        account_type: str,
        entity_id: int,
        include_soft_deleted: bool = True,
    ) -> int:
        """Return how many accounts of the type the entity has had."""

    def save(self, account: Account) -> Account:
        """Insert or update the account.

        Raises:
            DuplicateAccountCode: If the code is already taken for the type.
        """

    def delete(self, account: Account) -> None:
        """Remove the account."""


class LabelLookupPort(Protocol):
    """Port resolving human-readable labels."""

    def account_type_label(self, account_type: str) -> str:
        """Return the display label of an account type."""

    def transaction_type_label(self, transaction_type: str) -> str:
        """Return the display label of a transaction type."""


class AccountCodeBasePort(Protocol):
    """Port resolving the code offset of an account type."""

    def base_offset(self, account_type: str) -> int:
        """Return the number codes of the type are counted from."""


__all__ = [
    "AccountsRepositoryPort",
    "LabelLookupPort",
    "AccountCodeBasePort",
]
