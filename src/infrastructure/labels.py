"""Static label and code tables injected as lookup ports."""

from collections.abc import Mapping

from src.application.ports.accounts_repository import (
    AccountCodeBasePort,
    LabelLookupPort,
)
from src.domain.constants import (
    ACCOUNT_CODE_BASES,
    ACCOUNT_TYPE_LABELS,
    TRANSACTION_TYPE_LABELS,
)
from src.domain.errors import InvalidAccountType


class StaticLabelLookup(LabelLookupPort):
    """Label lookup over tables built once at startup."""

    def __init__(
        self,
        account_type_labels: Mapping[str, str] | None = None,
        transaction_type_labels: Mapping[str, str] | None = None,
    ) -> None:
        self._account_type_labels = dict(
            account_type_labels or ACCOUNT_TYPE_LABELS
        )
        self._transaction_type_labels = dict(
            transaction_type_labels or TRANSACTION_TYPE_LABELS
        )

    def account_type_label(self, account_type: str) -> str:
        try:
            return self._account_type_labels[account_type]
        except KeyError as exc:
            raise InvalidAccountType(account_type) from exc

    def transaction_type_label(self, transaction_type: str) -> str:
        return self._transaction_type_labels.get(
            transaction_type,
            transaction_type,
        )


class StaticAccountCodeBase(AccountCodeBasePort):
    """Account code offsets per account type."""

    def __init__(self, code_bases: Mapping[str, int] | None = None) -> None:
        self._code_bases = dict(code_bases or ACCOUNT_CODE_BASES)

    def base_offset(self, account_type: str) -> int:
        try:
            return self._code_bases[account_type]
        except KeyError as exc:
            raise InvalidAccountType(account_type) from exc


__all__ = ["StaticLabelLookup", "StaticAccountCodeBase"]
