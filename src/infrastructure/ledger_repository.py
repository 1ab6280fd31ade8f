"""SQLAlchemy-backed repository for ledger postings and balances."""

from datetime import date, datetime
from decimal import Decimal

from sqlalchemy import text

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.ledger_repository import (
    BalanceStorePort,
    LedgerQueryPort,
)
from src.domain.errors import InvalidExchangeRate
from src.domain.models import Account, BalanceRow, TransactionRow
from src.utils.decimal_utils import coerce_decimal


class SqlAlchemyLedgerRepository(LedgerQueryPort, BalanceStorePort):
    """Repository reading ledger postings and opening balances.

    Each ledger row belongs to its post account; the folio account names
    the other side of the double entry.
    """

    def __init__(
        self,
        db_port: DatabaseEnginePort,
        table_prefix: str = "ifrs_",
    ) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the ledger engine.
            table_prefix: Prefix of the ledger table names.
        """
        self._db_port = db_port
        self._prefix = table_prefix

    def net_contribution(
        self,
        account: Account,
        start_date: date,
        end_date: date,
    ) -> Decimal:
        query = text(
            f"""
            SELECT COALESCE(SUM(
                CASE WHEN l.entry_type = 'D' THEN l.amount ELSE -l.amount END
                / NULLIF(l.rate, 0)
            ), 0) AS balance,
                   COUNT(CASE WHEN l.rate IS NULL OR l.rate = 0 THEN 1 END)
                       AS invalid_rates
            FROM {self._prefix}ledgers l
            WHERE l.post_account = :account_id
              AND l.posting_date >= :start_date
              AND l.posting_date <= :end_date
              AND l.deleted_at IS NULL
            """
        )
        params = {
            "account_id": account.id,
            "start_date": start_date,
            "end_date": end_date,
        }
        engine = self._db_port.get_ledger_engine()
        with engine.connect() as conn:
            result = conn.execute(query, params).first()
        if result is None:
            return Decimal("0")
        self._check_rates(account, result.invalid_rates)
        return coerce_decimal(result.balance)

    def transactions_touching(
        self,
        account: Account,
        start_date: date,
        end_date: date,
    ) -> list[TransactionRow]:
        query = text(
            f"""
            SELECT DISTINCT t.id AS transaction_id,
                   t.transaction_no AS transaction_no,
                   t.transaction_type AS transaction_type,
                   t.transaction_date AS transaction_date,
                   l.posting_date AS posting_date
            FROM {self._prefix}transactions t
            JOIN {self._prefix}ledgers l ON l.transaction_id = t.id
            WHERE (l.post_account = :account_id
                   OR l.folio_account = :account_id)
              AND l.posting_date >= :start_date
              AND l.posting_date <= :end_date
              AND l.deleted_at IS NULL
              AND t.deleted_at IS NULL
            ORDER BY l.posting_date, t.id
            """
        )
        params = {
            "account_id": account.id,
            "start_date": start_date,
            "end_date": end_date,
        }
        engine = self._db_port.get_ledger_engine()
        with engine.connect() as conn:
            rows = conn.execute(query, params).all()
        seen: set[int] = set()
        transactions = []
        for row in rows:
            if row.transaction_id in seen:
                continue
            seen.add(row.transaction_id)
            transactions.append(
                TransactionRow(
                    transaction_id=row.transaction_id,
                    transaction_no=row.transaction_no,
                    transaction_type=row.transaction_type,
                    transaction_date=self._as_date(row.transaction_date),
                    posting_date=self._as_date(row.posting_date),
                )
            )
        return transactions

    def contribution(self, account: Account, transaction_id: int) -> Decimal:
        query = text(
            f"""
            SELECT COALESCE(SUM(
                CASE WHEN l.entry_type = 'D' THEN l.amount ELSE -l.amount END
                / NULLIF(l.rate, 0)
            ), 0) AS contribution,
                   COUNT(CASE WHEN l.rate IS NULL OR l.rate = 0 THEN 1 END)
                       AS invalid_rates
            FROM {self._prefix}ledgers l
            WHERE l.post_account = :account_id
              AND l.transaction_id = :transaction_id
              AND l.deleted_at IS NULL
            """
        )
        params = {"account_id": account.id, "transaction_id": transaction_id}
        engine = self._db_port.get_ledger_engine()
        with engine.connect() as conn:
            result = conn.execute(query, params).first()
        if result is None:
            return Decimal("0")
        self._check_rates(account, result.invalid_rates)
        return coerce_decimal(result.contribution)

    def balances_for(
        self,
        account: Account,
        period_id: int,
    ) -> list[BalanceRow]:
        query = text(
            f"""
            SELECT b.amount AS amount,
                   b.balance_type AS balance_type,
                   r.rate AS exchange_rate,
                   b.reporting_period_id AS reporting_period_id
            FROM {self._prefix}balances b
            JOIN {self._prefix}exchange_rates r ON r.id = b.exchange_rate_id
            WHERE b.account_id = :account_id
              AND b.reporting_period_id = :period_id
              AND b.deleted_at IS NULL
            ORDER BY b.id
            """
        )
        params = {"account_id": account.id, "period_id": period_id}
        engine = self._db_port.get_ledger_engine()
        with engine.connect() as conn:
            rows = conn.execute(query, params).all()
        return [
            BalanceRow(
                amount=coerce_decimal(row.amount),
                balance_type=row.balance_type,
                exchange_rate=coerce_decimal(row.exchange_rate),
                reporting_period_id=row.reporting_period_id,
            )
            for row in rows
        ]

    @staticmethod
    def _check_rates(account: Account, invalid_rates) -> None:
        if invalid_rates:
            raise InvalidExchangeRate(account.id, rows=int(invalid_rates))

    @staticmethod
    def _as_date(value) -> date:
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, str):
            return date.fromisoformat(value[:10])
        return value


__all__ = ["SqlAlchemyLedgerRepository"]
