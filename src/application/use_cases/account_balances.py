"""Use case computing balances and transaction history of an account."""

from collections.abc import Callable
from datetime import date
from decimal import Decimal

from src.application.ports.accounts_repository import LabelLookupPort
from src.application.ports.ledger_repository import (
    BalanceStorePort,
    LedgerQueryPort,
)
from src.application.ports.period_resolver import PeriodResolverPort
from src.domain.errors import PeriodResolutionFailure
from src.domain.models import (
    Account,
    AccountSnapshot,
    AccountTransaction,
    AccountTransactions,
    ReportingContext,
)
from src.domain.services.balances import (
    compose_closing_balance,
    compute_opening_balance,
)
from src.infrastructure.logging.logger import get_app_logger
from src.utils.decimal_utils import coerce_decimal


class AccountBalanceService:
    """Compute opening, current and closing balances of an account.

    A balance as of a date is always the opening balance of the period
    year plus the ledger movement from the period start to that date.
    """

    def __init__(
        self,
        ledger_query: LedgerQueryPort,
        balance_store: BalanceStorePort,
        period_resolver: PeriodResolverPort,
        label_lookup: LabelLookupPort,
        logger=None,
        today: Callable[[], date] | None = None,
    ) -> None:
        """Initialize the service.

        Args:
            ledger_query: Port returning posted ledger contributions.
            balance_store: Port returning persisted opening balances.
            period_resolver: Port mapping dates to reporting periods.
            label_lookup: Port resolving transaction type labels.
            logger: Optional logger compatible with logging.Logger-like API.
            today: Optional clock returning the current date.
        """
        self._ledger_query = ledger_query
        self._balance_store = balance_store
        self._period_resolver = period_resolver
        self._label_lookup = label_lookup
        self._logger = logger or get_app_logger()
        self._today = today or date.today

    def opening_balance(
        self,
        account: Account,
        context: ReportingContext,
        year: int | None = None,
    ) -> Decimal:
        """Return the account's opening balance for a reporting period.

        Args:
            account: Account to compute the balance for.
            context: Reporting context providing the current period.
            year: Optional calendar year; the current period is used when
                omitted.

        Returns:
            Decimal: Signed sum of the period's balance rows in functional
            currency.

        Raises:
            PeriodResolutionFailure: If the period cannot be resolved.
        """
        if year is not None:
            period = self._period_resolver.period_for_year(year)
        elif context.current_period is not None:
            period = context.current_period
        else:
            raise PeriodResolutionFailure(
                message=(
                    f"No current reporting period for entity "
                    f"{context.entity_id}"
                )
            )
        rows = self._balance_store.balances_for(account, period.id)
        return compute_opening_balance(rows)

    def current_balance(
        self,
        account: Account,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> Decimal:
        """Return the account's ledger movement within a date range.

        Args:
            account: Account to compute the balance for.
            start_date: Optional lower bound, defaults to the start of the
                period enclosing ``end_date``.
            end_date: Optional upper bound, defaults to today.

        Returns:
            Decimal: Net signed contribution of the account's postings.
        """
        start_date, end_date = self._resolve_range(start_date, end_date)
        return coerce_decimal(
            self._ledger_query.net_contribution(account, start_date, end_date)
        )

    def closing_balance(
        self,
        account: Account,
        context: ReportingContext,
        end_date: date | None = None,
    ) -> Decimal:
        """Return the account's balance as of a date (default today)."""
        end_date = end_date or self._today()
        start_date = self._period_resolver.period_start(end_date)
        _, _, closing = self.balances_as_of(
            account,
            context,
            start_date,
            end_date,
        )
        return closing

    def balances_as_of(
        self,
        account: Account,
        context: ReportingContext,
        start_date: date,
        end_date: date,
    ) -> tuple[Decimal, Decimal, Decimal]:
        """Return opening, current and closing balances for a range.

        The opening balance belongs to the period year of ``end_date``.
        """
        year = self._period_resolver.year_of(end_date)
        opening = self.opening_balance(account, context, year)
        current = self.current_balance(account, start_date, end_date)
        return opening, current, compose_closing_balance(opening, current)

    def snapshot(
        self,
        account: Account,
        context: ReportingContext,
        end_date: date | None = None,
    ) -> AccountSnapshot:
        """Return the account attributes with its balances attached."""
        end_date = end_date or self._today()
        start_date = self._period_resolver.period_start(end_date)
        opening, current, closing = self.balances_as_of(
            account,
            context,
            start_date,
            end_date,
        )
        return AccountSnapshot.from_account(account, opening, current, closing)

    def get_transactions(
        self,
        account: Account,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> AccountTransactions:
        """Return transactions touching the account within a date range.

        Each transaction carries the absolute contribution of the account
        to it; the total accumulates those amounts.

        Args:
            account: Account posted to as main or line item account.
            start_date: Optional lower bound on posting dates.
            end_date: Optional upper bound on posting dates.

        Returns:
            AccountTransactions: Transactions ordered by posting date.
        """
        start_date, end_date = self._resolve_range(start_date, end_date)
        rows = self._ledger_query.transactions_touching(
            account,
            start_date,
            end_date,
        )
        result = AccountTransactions()
        for row in sorted(rows, key=lambda item: item.posting_date):
            amount = abs(
                coerce_decimal(
                    self._ledger_query.contribution(
                        account,
                        row.transaction_id,
                    )
                )
            )
            result.add(
                AccountTransaction(
                    row=row,
                    amount=amount,
                    type_label=self._label_lookup.transaction_type_label(
                        row.transaction_type
                    ),
                )
            )
        self._logger.debug(
            f"Account {account.id}: {len(result.transactions)} transactions "
            f"between {start_date} and {end_date}, total={result.total}"
        )
        return result

    def _resolve_range(
        self,
        start_date: date | None,
        end_date: date | None,
    ) -> tuple[date, date]:
        end_date = end_date or self._today()
        if start_date is None:
            start_date = self._period_resolver.period_start(end_date)
        return start_date, end_date


__all__ = ["AccountBalanceService"]
