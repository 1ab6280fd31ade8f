"""Domain models for balance aggregates."""

from dataclasses import dataclass, field
from decimal import Decimal

from src.domain.models.accounts import AccountSnapshot
from src.domain.models.ledger_rows import TransactionRow


@dataclass(frozen=True)
class AccountTransaction:
    """Transaction touching an account with the account's share of it.

    Attributes:
        row: Transaction as returned by the ledger query.
        amount: Absolute contribution of the account to the transaction.
        type_label: Human-readable transaction type.
    """

    row: TransactionRow
    amount: Decimal
    type_label: str

    @property
    def transaction_id(self) -> int:
        return self.row.transaction_id

    @property
    def posting_date(self):
        return self.row.posting_date

    @property
    def formatted_date(self) -> str:
        """Return the transaction date as e.g. ``Jan 5, 2024``."""
        day = self.row.transaction_date
        return f"{day.strftime('%b')} {day.day}, {day.year}"


@dataclass
class AccountTransactions:
    """Transactions of an account with their accumulated amount."""

    total: Decimal = Decimal("0")
    transactions: list[AccountTransaction] = field(default_factory=list)

    def add(self, transaction: AccountTransaction) -> None:
        self.transactions.append(transaction)
        self.total += transaction.amount


@dataclass
class SectionCategory:
    """Accounts of one display category with their running total."""

    id: int
    accounts: list[AccountSnapshot] = field(default_factory=list)
    total: Decimal = Decimal("0")

    def add(self, snapshot: AccountSnapshot) -> None:
        self.accounts.append(snapshot)
        self.total += snapshot.closing_balance


@dataclass
class SectionBalances:
    """Category-grouped closing balances for a set of account types.

    Attributes:
        section_total: Sum of closing balances of every included account.
        section_categories: Categories keyed by display name, in the order
            they were first encountered.
    """

    section_total: Decimal = Decimal("0")
    section_categories: dict[str, SectionCategory] = field(
        default_factory=dict
    )


__all__ = [
    "AccountTransaction",
    "AccountTransactions",
    "SectionCategory",
    "SectionBalances",
]
