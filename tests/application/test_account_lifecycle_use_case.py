"""Tests for the AccountLifecycleGuard."""

from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from src.application.use_cases.account_lifecycle import AccountLifecycleGuard
from src.domain.errors import (
    DuplicateAccountCode,
    HangingTransactions,
    InvalidAccountType,
    InvalidCategoryType,
    MissingAccountType,
)
from src.domain.models import Account, Category, ReportingContext
from src.infrastructure.labels import StaticAccountCodeBase

CONTEXT = ReportingContext(entity_id=1, currency_id=3)


class FakeAccountsRepository:
    """In-memory accounts store with a unique (type, code) constraint."""

    def __init__(self) -> None:
        self.accounts: dict[int, Account] = {}
        self.deleted: set[int] = set()
        self.saved: list[Account] = []
        self._next_id = 1

    def fetch_by_types(self, account_types, entity_id):
        return [
            account
            for account_id, account in self.accounts.items()
            if account.account_type in account_types
            and account_id not in self.deleted
        ]

    def count_by_type(self, account_type, entity_id, include_soft_deleted=True):
        return sum(
            1
            for account_id, account in self.accounts.items()
            if account.account_type == account_type
            and (include_soft_deleted or account_id not in self.deleted)
        )

    def save(self, account: Account) -> Account:
        for account_id, stored in self.accounts.items():
            if (
                account_id != account.id
                and stored.account_type == account.account_type
                and stored.code == account.code
            ):
                raise DuplicateAccountCode(account.account_type, account.code)
        if account.id is None:
            account.mark_persisted(self._next_id)
            self._next_id += 1
        else:
            account.mark_persisted(account.id)
        self.accounts[account.id] = Account(**vars(account))
        self.saved.append(account)
        return account

    def delete(self, account: Account) -> None:
        self.deleted.add(account.id)


def _guard(
    repository=None,
    closing_balance: Decimal = Decimal("0"),
    retries: int = 3,
) -> AccountLifecycleGuard:
    balance_service = MagicMock()
    balance_service.closing_balance.return_value = closing_balance
    return AccountLifecycleGuard(
        accounts_repository=repository or FakeAccountsRepository(),
        code_base=StaticAccountCodeBase(),
        balance_service=balance_service,
        code_assignment_retries=retries,
        logger=MagicMock(),
        audit_logger=MagicMock(),
    )


def test_create_defaults_currency_to_context() -> None:
    """New accounts take the entity currency unless one is given."""
    account = Account.create(CONTEXT, "cash", "BANK")
    other = Account.create(CONTEXT, "usd cash", "BANK", currency_id=8)

    assert account.currency_id == 3
    assert account.entity_id == 1
    assert other.currency_id == 8


def test_save_assigns_sequential_codes_per_type() -> None:
    """Sequential creations of one type get consecutive codes."""
    guard = _guard()

    first = guard.save(Account.create(CONTEXT, "Bank one", "BANK"))
    second = guard.save(Account.create(CONTEXT, "Bank two", "BANK"))
    revenue = guard.save(Account.create(CONTEXT, "Sales", "OPERATING_REVENUE"))

    assert first.code == 501
    assert second.code == first.code + 1
    assert revenue.code == 4001


def test_save_counts_soft_deleted_accounts() -> None:
    """Codes of deleted accounts are not handed out again."""
    repository = FakeAccountsRepository()
    guard = _guard(repository)
    first = guard.save(Account.create(CONTEXT, "Bank one", "BANK"))
    guard.delete(first, CONTEXT)

    second = guard.save(Account.create(CONTEXT, "Bank two", "BANK"))

    assert second.code == 502


def test_save_keeps_code_of_unchanged_account() -> None:
    """Updating a numbered account without a type change keeps its code."""
    guard = _guard()
    account = guard.save(Account.create(CONTEXT, "Bank", "BANK"))
    account.description = "Main account"

    saved = guard.save(account)

    assert saved.code == 501


def test_save_renumbers_on_account_type_change() -> None:
    """Changing the account type assigns a code in the new sequence."""
    guard = _guard()
    account = guard.save(Account.create(CONTEXT, "Stock", "CURRENT_ASSET"))
    account.account_type = "INVENTORY"

    saved = guard.save(account)

    assert saved.code == 401
    assert not saved.account_type_changed


def test_save_capitalizes_first_letter_of_name() -> None:
    """Only the first letter of the name is upper-cased."""
    guard = _guard()

    saved = guard.save(Account.create(CONTEXT, "petty cash ABC", "BANK"))

    assert saved.name == "Petty cash ABC"


def test_save_without_account_type_fails() -> None:
    """An account without type is rejected before any write."""
    repository = FakeAccountsRepository()
    guard = _guard(repository)

    with pytest.raises(MissingAccountType):
        guard.save(Account.create(CONTEXT, "Nameless", None))
    assert repository.saved == []


def test_save_with_unknown_account_type_fails() -> None:
    """Types outside the chart of accounts are rejected."""
    with pytest.raises(InvalidAccountType) as excinfo:
        _guard().save(Account.create(CONTEXT, "Odd", "ODD_TYPE"))
    assert excinfo.value.account_type == "ODD_TYPE"


def test_save_with_mismatched_category_fails() -> None:
    """The category type must match the account type."""
    category = Category(id=2, name="Receivables", category_type="RECEIVABLE")

    with pytest.raises(InvalidCategoryType) as excinfo:
        _guard().save(
            Account.create(CONTEXT, "Bank", "BANK", category=category)
        )

    assert excinfo.value.account_type == "BANK"
    assert excinfo.value.category_type == "RECEIVABLE"


def test_type_change_against_category_performs_no_write() -> None:
    """A type change conflicting with the category leaves storage as is."""
    repository = FakeAccountsRepository()
    guard = _guard(repository)
    category = Category(id=2, name="Receivables", category_type="RECEIVABLE")
    account = guard.save(
        Account.create(CONTEXT, "Debtors", "RECEIVABLE", category=category)
    )
    saves_before = len(repository.saved)
    account.account_type = "BANK"

    with pytest.raises(InvalidCategoryType):
        guard.save(account)

    assert len(repository.saved) == saves_before
    assert repository.accounts[account.id].account_type == "RECEIVABLE"
    assert account.code == 801


def test_validate_returns_typed_result() -> None:
    """Validation reports failures without raising."""
    guard = _guard()

    valid = guard.validate(Account.create(CONTEXT, "Bank", "BANK"))
    invalid = guard.validate(Account.create(CONTEXT, "Bank", None))

    assert valid.is_valid
    assert not invalid.is_valid
    assert isinstance(invalid.error, MissingAccountType)


def test_save_retries_when_code_is_taken() -> None:
    """A code collision recomputes the code and retries the save."""
    repository = FakeAccountsRepository()
    guard = _guard(repository)
    original_save = repository.save
    attempts = []

    def _racing_save(account):
        attempts.append(account.code)
        if len(attempts) == 1:
            # another writer stores the same code first
            repository.accounts[99] = Account(
                id=99, code=account.code, name="Other", account_type="BANK"
            )
            raise DuplicateAccountCode(account.account_type, account.code)
        return original_save(account)

    repository.save = _racing_save

    saved = guard.save(Account.create(CONTEXT, "Bank", "BANK"))

    assert attempts == [501, 502]
    assert saved.code == 502


def test_save_gives_up_after_retries() -> None:
    """Persistent collisions propagate once retries are exhausted."""
    repository = MagicMock()
    repository.count_by_type.return_value = 0
    repository.save.side_effect = DuplicateAccountCode("BANK", 501)
    guard = _guard(repository, retries=2)

    account = Account.create(CONTEXT, "petty cash", "BANK")

    with pytest.raises(DuplicateAccountCode):
        guard.save(account)
    assert repository.save.call_count == 2
    assert account.code is None
    assert account.name == "petty cash"


def test_save_does_not_retry_explicit_codes() -> None:
    """A caller-provided code that collides fails immediately."""
    repository = MagicMock()
    repository.save.side_effect = DuplicateAccountCode("BANK", 510)
    guard = _guard(repository)
    account = Account.create(CONTEXT, "Bank", "BANK")
    account.code = 510

    with pytest.raises(DuplicateAccountCode):
        guard.save(account)
    assert repository.save.call_count == 1
    repository.count_by_type.assert_not_called()


def test_delete_with_non_zero_balance_fails() -> None:
    """Any outstanding balance blocks deletion."""
    repository = FakeAccountsRepository()
    guard = _guard(repository, closing_balance=Decimal("0.0001"))
    account = guard.save(Account.create(CONTEXT, "Bank", "BANK"))

    with pytest.raises(HangingTransactions) as excinfo:
        guard.delete(account, CONTEXT)

    assert excinfo.value.balance == Decimal("0.0001")
    assert excinfo.value.account_id == account.id
    assert repository.deleted == set()


def test_delete_with_zero_balance_succeeds() -> None:
    """A zero closing balance lets the account be deleted."""
    repository = FakeAccountsRepository()
    guard = _guard(repository)
    account = guard.save(Account.create(CONTEXT, "Bank", "BANK"))

    guard.delete(account, CONTEXT)

    assert repository.deleted == {account.id}
    guard._balance_service.closing_balance.assert_called_once_with(
        account,
        CONTEXT,
    )


def test_failed_renumbering_keeps_previous_code() -> None:
    """A type change that cannot be stored leaves the old code in place."""
    repository = FakeAccountsRepository()
    guard = _guard(repository)
    account = guard.save(Account.create(CONTEXT, "Stock", "CURRENT_ASSET"))
    account.account_type = "INVENTORY"
    repository.save = MagicMock(side_effect=OSError("connection lost"))

    with pytest.raises(OSError):
        guard.save(account)

    assert account.code == 601
    assert repository.save.call_count == 1
