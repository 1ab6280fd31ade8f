"""Application ports for posted ledger data."""

from datetime import date
from decimal import Decimal
from typing import Protocol

from src.domain.models import Account, BalanceRow, TransactionRow


class LedgerQueryPort(Protocol):
    """Port exposing read access to ledger postings."""

    def net_contribution(
        self,
        account: Account,
        start_date: date,
        end_date: date,
    ) -> Decimal:
        """Return the signed net of postings to the account in the range."""

    def transactions_touching(
        self,
        account: Account,
        start_date: date,
        end_date: date,
    ) -> list[TransactionRow]:
        """Return distinct transactions posted to or against the account.

        The account may appear as the post account or the folio account of
        the postings. Rows are ordered by posting date.
        """

    def contribution(self, account: Account, transaction_id: int) -> Decimal:
        """Return the signed contribution of the account to a transaction."""


class BalanceStorePort(Protocol):
    """Port exposing persisted opening balances."""

    def balances_for(
        self,
        account: Account,
        period_id: int,
    ) -> list[BalanceRow]:
        """Return the opening balance rows of an account for a period."""


__all__ = ["LedgerQueryPort", "BalanceStorePort"]
