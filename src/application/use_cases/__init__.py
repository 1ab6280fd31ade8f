"""Application use cases package."""

from .account_balances import AccountBalanceService
from .account_lifecycle import AccountLifecycleGuard
from .section_balances import ChartAggregator

__all__ = [
    "AccountBalanceService",
    "AccountLifecycleGuard",
    "ChartAggregator",
]
