"""SQLAlchemy-backed repository for chart-of-accounts entries."""

from collections.abc import Iterable

from sqlalchemy import bindparam, text
from sqlalchemy.exc import IntegrityError

from src.application.ports.accounts_repository import AccountsRepositoryPort
from src.application.ports.database import DatabaseEnginePort
from src.domain.errors import DuplicateAccountCode
from src.domain.models import Account, Category


class SqlAlchemyAccountsRepository(AccountsRepositoryPort):
    """Repository backed by SQLAlchemy for ledger accounts.

    Deleting an account sets ``deleted_at``; deleted accounts stay visible
    to :meth:`count_by_type` so their codes are never reused.
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

    def fetch_by_types(
        self,
        account_types: Iterable[str],
        entity_id: int,
    ) -> list[Account]:
        """Return active accounts of the given types ordered by code."""
        types = list(account_types)
        if not types:
            return []
        query = text(
            f"""
            SELECT a.id, a.code, a.name, a.account_type, a.currency_id,
                   a.entity_id, a.description,
                   c.id AS category_id,
                   c.name AS category_name,
                   c.category_type AS category_type
            FROM {self._prefix}accounts a
            LEFT JOIN {self._prefix}categories c ON c.id = a.category_id
            WHERE a.entity_id = :entity_id
              AND a.account_type IN :account_types
              AND a.deleted_at IS NULL
            ORDER BY a.account_type, a.code, a.id
            """
        ).bindparams(bindparam("account_types", expanding=True))
        params = {"entity_id": entity_id, "account_types": types}
        engine = self._db_port.get_ledger_engine()
        with engine.connect() as conn:
            rows = conn.execute(query, params).all()
        return [self._to_account(row) for row in rows]

    def count_by_type(
        self,
        account_type: str,
        entity_id: int,
        include_soft_deleted: bool = True,
    ) -> int:
        sql = f"""
            SELECT COUNT(*) AS total
            FROM {self._prefix}accounts
            WHERE entity_id = :entity_id
              AND account_type = :account_type
            """
        if not include_soft_deleted:
            sql += " AND deleted_at IS NULL"
        params = {"entity_id": entity_id, "account_type": account_type}
        engine = self._db_port.get_ledger_engine()
        with engine.connect() as conn:
            result = conn.execute(text(sql), params).first()
        return int(result.total) if result else 0

    def save(self, account: Account) -> Account:
        params = {
            "id": account.id,
            "entity_id": account.entity_id,
            "category_id": account.category.id if account.category else None,
            "currency_id": account.currency_id,
            "code": account.code,
            "name": account.name,
            "description": account.description,
            "account_type": account.account_type,
        }
        if account.is_persisted:
            query = text(
                f"""
                UPDATE {self._prefix}accounts
                SET category_id = :category_id,
                    currency_id = :currency_id,
                    code = :code,
                    name = :name,
                    description = :description,
                    account_type = :account_type
                WHERE id = :id
                RETURNING id
                """
            )
        else:
            query = text(
                f"""
                INSERT INTO {self._prefix}accounts
                    (entity_id, category_id, currency_id, code, name,
                     description, account_type)
                VALUES
                    (:entity_id, :category_id, :currency_id, :code, :name,
                     :description, :account_type)
                RETURNING id
                """
            )
        engine = self._db_port.get_ledger_engine()
        try:
            with engine.begin() as conn:
                account_id = conn.execute(query, params).scalar_one()
        except IntegrityError as exc:
            if self._code_taken(account):
                raise DuplicateAccountCode(
                    account.account_type,
                    account.code,
                ) from exc
            raise
        account.mark_persisted(account_id)
        return account

    def delete(self, account: Account) -> None:
        query = text(
            f"""
            UPDATE {self._prefix}accounts
            SET deleted_at = CURRENT_TIMESTAMP
            WHERE id = :id
            """
        )
        engine = self._db_port.get_ledger_engine()
        with engine.begin() as conn:
            conn.execute(query, {"id": account.id})

    def _code_taken(self, account: Account) -> bool:
        """Return True when another row holds the account's type and code."""
        if account.code is None:
            return False
        sql = f"""
            SELECT 1
            FROM {self._prefix}accounts
            WHERE entity_id = :entity_id
              AND account_type = :account_type
              AND code = :code
        """
        params = {
            "entity_id": account.entity_id,
            "account_type": account.account_type,
            "code": account.code,
        }
        if account.is_persisted:
            sql += " AND id <> :id"
            params["id"] = account.id
        engine = self._db_port.get_ledger_engine()
        with engine.connect() as conn:
            return conn.execute(text(sql), params).first() is not None

    @staticmethod
    def _to_account(row) -> Account:
        category = None
        if row.category_id is not None:
            category = Category(
                id=row.category_id,
                name=row.category_name,
                category_type=row.category_type,
            )
        return Account(
            id=row.id,
            code=row.code,
            name=row.name,
            account_type=row.account_type,
            currency_id=row.currency_id,
            entity_id=row.entity_id,
            description=row.description,
            category=category,
            original_account_type=row.account_type,
        )


__all__ = ["SqlAlchemyAccountsRepository"]
