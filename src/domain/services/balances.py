"""Domain services for account balance arithmetic."""

from collections.abc import Iterable
from decimal import Decimal

from src.domain.constants import CREDIT, DEBIT
from src.domain.errors import InvalidExchangeRate
from src.domain.models import BalanceRow
from src.utils.decimal_utils import coerce_decimal


def signed_balance_amount(row: BalanceRow) -> Decimal:
    """Return a balance row in functional currency, signed by its type.

    Args:
        row: Persisted opening balance row.

    Returns:
        Decimal: ``amount / exchange_rate``, negated for CREDIT rows.

    Raises:
        ValueError: If the balance type is neither DEBIT nor CREDIT.
        InvalidExchangeRate: If the rate is missing or zero.
    """
    if row.exchange_rate is None or coerce_decimal(row.exchange_rate) == 0:
        raise InvalidExchangeRate(rate=row.exchange_rate)
    amount = coerce_decimal(row.amount) / coerce_decimal(row.exchange_rate)
    if row.balance_type == DEBIT:
        return amount
    if row.balance_type == CREDIT:
        return -amount
    raise ValueError(f"Unknown balance type: {row.balance_type!r}")


def compute_opening_balance(rows: Iterable[BalanceRow]) -> Decimal:
    """Sum persisted balance rows into an opening balance."""
    return sum(
        (signed_balance_amount(row) for row in rows),
        Decimal("0"),
    )


def compose_closing_balance(
    opening_balance: Decimal,
    current_balance: Decimal,
) -> Decimal:
    """Return the balance as of a date from its two components."""
    return coerce_decimal(opening_balance) + coerce_decimal(current_balance)


__all__ = [
    "signed_balance_amount",
    "compute_opening_balance",
    "compose_closing_balance",
]
