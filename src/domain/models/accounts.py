"""Domain models for chart-of-accounts entries."""

from dataclasses import dataclass
from decimal import Decimal

from src.domain.models.ledger_rows import ReportingContext


@dataclass(frozen=True)
class Category:
    """Grouping of accounts sharing an account type."""

    id: int
    name: str
    category_type: str


@dataclass
class Account:
    """Ledger account as loaded from, or about to be written to, storage.

    Attributes:
        id: Storage identifier, None until the account is persisted.
        code: Sequential code within the account type.
        name: Display name.
        account_type: One of the chart-of-accounts types.
        category: Optional category, must share the account type.
        currency_id: Currency the account is denominated in.
        entity_id: Owning entity.
        description: Free text description.
        original_account_type: Account type as last persisted.
    """

    name: str
    account_type: str | None
    currency_id: int | None = None
    entity_id: int | None = None
    id: int | None = None
    code: int | None = None
    category: Category | None = None
    description: str | None = None
    original_account_type: str | None = None

    @classmethod
    def create(
        cls,
        context: ReportingContext,
        name: str,
        account_type: str | None,
        currency_id: int | None = None,
        category: Category | None = None,
        description: str | None = None,
    ) -> "Account":
        """Build a new account owned by the context entity.

        The account falls back to the entity currency when no currency is
        given.
        """
        return cls(
            name=name,
            account_type=account_type,
            currency_id=(
                currency_id if currency_id is not None else context.currency_id
            ),
            entity_id=context.entity_id,
            category=category,
            description=description,
        )

    @property
    def is_persisted(self) -> bool:
        return self.id is not None

    @property
    def account_type_changed(self) -> bool:
        """Return True when a persisted account's type was modified."""
        return (
            self.is_persisted
            and self.original_account_type != self.account_type
        )

    def mark_persisted(self, account_id: int) -> None:
        """Record the storage id and the type as written."""
        self.id = account_id
        self.original_account_type = self.account_type

    def type_label(self, label_lookup) -> str:
        """Return the display label of the account type."""
        return label_lookup.account_type_label(self.account_type)

    def display_name(self, label_lookup=None, with_type: bool = False) -> str:
        """Return the account name, as ``Type: name`` with ``with_type``.

        Args:
            label_lookup: Lookup resolving account type labels, required
                with ``with_type``.
            with_type: Prefix the name with the account type label.
        """
        if not with_type:
            return self.name
        return f"{self.type_label(label_lookup)}: {self.name}"


@dataclass(frozen=True)
class AccountSnapshot:
    """Account attributes with balances computed for a reporting date."""

    id: int | None
    code: int | None
    name: str
    account_type: str
    category_id: int | None
    currency_id: int | None
    opening_balance: Decimal
    current_balance: Decimal
    closing_balance: Decimal

    @classmethod
    def from_account(
        cls,
        account: Account,
        opening_balance: Decimal,
        current_balance: Decimal,
        closing_balance: Decimal,
    ) -> "AccountSnapshot":
        return cls(
            id=account.id,
            code=account.code,
            name=account.name,
            account_type=account.account_type,
            category_id=account.category.id if account.category else None,
            currency_id=account.currency_id,
            opening_balance=opening_balance,
            current_balance=current_balance,
            closing_balance=closing_balance,
        )


__all__ = ["Account", "AccountSnapshot", "Category"]
