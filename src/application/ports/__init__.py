"""Application ports package."""

from .accounts_repository import (
    AccountCodeBasePort,
    AccountsRepositoryPort,
    LabelLookupPort,
)
from .database import DatabaseEnginePort
from .ledger_repository import BalanceStorePort, LedgerQueryPort
from .period_resolver import PeriodResolverPort

__all__ = [
    "AccountCodeBasePort",
    "AccountsRepositoryPort",
    "LabelLookupPort",
    "DatabaseEnginePort",
    "BalanceStorePort",
    "LedgerQueryPort",
    "PeriodResolverPort",
]
