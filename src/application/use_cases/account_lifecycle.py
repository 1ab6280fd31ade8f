"""Use case guarding account creation, updates and deletion."""

from collections.abc import Iterable

from src.application.ports.accounts_repository import (
    AccountCodeBasePort,
    AccountsRepositoryPort,
)
from src.application.use_cases.account_balances import AccountBalanceService
from src.domain.constants import ACCOUNT_TYPES
from src.domain.errors import DuplicateAccountCode, HangingTransactions
from src.domain.models import Account, ReportingContext
from src.domain.services.normalization import normalize_account_name
from src.domain.services.validation import AccountValidation, validate_account
from src.infrastructure.logging.logger import get_app_logger, get_audit_logger


class AccountLifecycleGuard:
    """Enforce account invariants around persistence calls."""

    def __init__(
        self,
        accounts_repository: AccountsRepositoryPort,
        code_base: AccountCodeBasePort,
        balance_service: AccountBalanceService,
        code_assignment_retries: int = 3,
        account_types: Iterable[str] = ACCOUNT_TYPES,
        logger=None,
        audit_logger=None,
    ) -> None:
        """Initialize the guard.

        Args:
            accounts_repository: Port writing and counting accounts.
            code_base: Port resolving code offsets per account type.
            balance_service: Service computing closing balances.
            code_assignment_retries: Save attempts made when a computed code
                collides with a stored one.
            account_types: Account types accepted by the chart of accounts.
            logger: Optional logger compatible with logging.Logger-like API.
            audit_logger: Optional logger for lifecycle events.
        """
        self._accounts_repository = accounts_repository
        self._code_base = code_base
        self._balance_service = balance_service
        self._retries = max(code_assignment_retries, 1)
        self._account_types = tuple(account_types)
        self._logger = logger or get_app_logger()
        self._audit_logger = audit_logger or get_audit_logger()

    def validate(self, account: Account) -> AccountValidation:
        """Return the validation result of an account about to be saved."""
        return validate_account(account, self._account_types)

    def assign_code(self, account: Account) -> int:
        """Assign the next code of the account type to the account.

        The sequence counts soft-deleted accounts so codes are never
        reused.
        """
        count = self._accounts_repository.count_by_type(
            account.account_type,
            account.entity_id,
            include_soft_deleted=True,
        )
        account.code = self._code_base.base_offset(account.account_type) + count + 1
        return account.code

    def save(self, account: Account) -> Account:
        """Validate, number and persist an account.

        The account keeps its name and code when the save fails.

        Args:
            account: New or modified account.

        Returns:
            Account: The persisted account.

        Raises:
            MissingAccountType: If the account has no type.
            InvalidAccountType: If the type is not a chart-of-accounts type.
            InvalidCategoryType: If the category type differs from the
                account type.
            DuplicateAccountCode: If the code still collides after all
                retries, or an explicitly set code is taken.
        """
        validation = self.validate(account)
        if not validation.is_valid:
            self._logger.warning(
                f"Rejected save of account id={account.id}: {validation.error}"
            )
            validation.raise_for_error()

        numbered = account.code is None or account.account_type_changed
        name, code = account.name, account.code
        account.name = normalize_account_name(account.name)

        attempt = 1
        while True:
            try:
                if numbered:
                    self.assign_code(account)
                saved = self._accounts_repository.save(account)
            except DuplicateAccountCode:
                if not numbered or attempt >= self._retries:
                    account.name, account.code = name, code
                    raise
                self._logger.warning(
                    f"Account code {account.code} taken for "
                    f"{account.account_type}, retrying ({attempt}/"
                    f"{self._retries})"
                )
                attempt += 1
                continue
            except Exception:
                account.name, account.code = name, code
                raise
            self._audit_logger.info(
                f"Saved account id={saved.id} code={saved.code} "
                f"type={saved.account_type} name={saved.name!r}"
            )
            return saved

    def delete(self, account: Account, context: ReportingContext) -> None:
        """Delete an account whose balance as of today is zero.

        Raises:
            HangingTransactions: If the closing balance is non-zero.
        """
        balance = self._balance_service.closing_balance(account, context)
        if balance != 0:
            self._logger.warning(
                f"Refused delete of account id={account.id}: "
                f"closing balance {balance}"
            )
            raise HangingTransactions(account.id, balance)
        self._accounts_repository.delete(account)
        self._audit_logger.info(
            f"Deleted account id={account.id} code={account.code} "
            f"type={account.account_type}"
        )


__all__ = ["AccountLifecycleGuard"]
