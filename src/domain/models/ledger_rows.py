"""Domain models for stored ledger facts."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal


@dataclass(frozen=True)
class BalanceRow:
    """Opening balance recorded for an account in a reporting period.

    Attributes:
        amount: Amount in the currency the balance was recorded in.
        balance_type: DEBIT ("D") or CREDIT ("C").
        exchange_rate: Rate of the recording currency at recording time.
        reporting_period_id: Period the balance opens.
    """

    amount: Decimal
    balance_type: str
    exchange_rate: Decimal
    reporting_period_id: int


@dataclass(frozen=True)
class ReportingPeriod:
    """Calendar-year-bounded accounting window."""

    id: int
    calendar_year: int
    start_date: date


@dataclass(frozen=True)
class ReportingContext:
    """Entity context the balance operations run for.

    Attributes:
        entity_id: Entity owning the accounts.
        currency_id: Functional currency of the entity.
        current_period: Period used when no year is requested.
    """

    entity_id: int
    currency_id: int | None
    current_period: ReportingPeriod | None = None


@dataclass(frozen=True)
class TransactionRow:
    """Transaction posted against an account within a date range."""

    transaction_id: int
    transaction_no: str | None
    transaction_type: str
    transaction_date: date
    posting_date: date


__all__ = [
    "BalanceRow",
    "ReportingPeriod",
    "ReportingContext",
    "TransactionRow",
]
