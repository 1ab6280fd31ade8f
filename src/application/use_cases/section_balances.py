"""Use case aggregating account balances into chart sections."""

from collections.abc import Callable, Iterable
from datetime import date
from decimal import Decimal

from src.application.ports.accounts_repository import (
    AccountsRepositoryPort,
    LabelLookupPort,
)
from src.application.ports.period_resolver import PeriodResolverPort
from src.application.use_cases.account_balances import AccountBalanceService
from src.domain.models import (
    Account,
    AccountSnapshot,
    ReportingContext,
    SectionBalances,
    SectionCategory,
)
from src.infrastructure.logging.logger import get_app_logger


class ChartAggregator:
    """Group closing balances of account types by category."""

    def __init__(
        self,
        accounts_repository: AccountsRepositoryPort,
        balance_service: AccountBalanceService,
        period_resolver: PeriodResolverPort,
        label_lookup: LabelLookupPort,
        logger=None,
        today: Callable[[], date] | None = None,
    ) -> None:
        """Initialize the aggregator.

        Args:
            accounts_repository: Port listing accounts by type.
            balance_service: Service computing per-account balances.
            period_resolver: Port mapping dates to reporting periods.
            label_lookup: Port resolving account type labels.
            logger: Optional logger compatible with logging.Logger-like API.
            today: Optional clock returning the current date.
        """
        self._accounts_repository = accounts_repository
        self._balance_service = balance_service
        self._period_resolver = period_resolver
        self._label_lookup = label_lookup
        self._logger = logger or get_app_logger()
        self._today = today or date.today

    def section_balances(
        self,
        account_types: Iterable[str],
        context: ReportingContext,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> SectionBalances:
        """Return closing balances of the account types grouped by category.

        Accounts whose closing balance is zero are left out. Accounts
        without a category are grouped under their account type label with
        category id 0.

        Args:
            account_types: Account types making up the section.
            context: Reporting context of the entity.
            start_date: Optional lower bound of the ledger movement,
                defaults to the start of the period enclosing ``end_date``.
            end_date: Optional reporting date, defaults to today.

        Returns:
            SectionBalances: Category groups and the section total.
        """
        end_date = end_date or self._today()
        if start_date is None:
            start_date = self._period_resolver.period_start(end_date)
        types = tuple(account_types)

        balances = SectionBalances()
        accounts = self._accounts_repository.fetch_by_types(
            types,
            context.entity_id,
        )
        for account in accounts:
            opening, current, closing = self._balance_service.balances_as_of(
                account,
                context,
                start_date,
                end_date,
            )
            if closing == 0:
                continue
            name, category_id = self._category_key(account)
            if name not in balances.section_categories:
                balances.section_categories[name] = SectionCategory(
                    id=category_id
                )
            balances.section_categories[name].add(
                AccountSnapshot.from_account(account, opening, current, closing)
            )
            balances.section_total += closing

        self._logger.info(
            f"Section balances for {len(types)} account types as of "
            f"{end_date}: {len(balances.section_categories)} categories, "
            f"total={balances.section_total}"
        )
        return balances

    def movement(
        self,
        account_types: Iterable[str],
        context: ReportingContext,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> Decimal:
        """Return the sign-inverted change of a section between two dates.

        Args:
            account_types: Account types making up the section.
            context: Reporting context of the entity.
            start_date: Optional first date, defaults to the start of the
                period enclosing ``end_date``.
            end_date: Optional last date, defaults to today.

        Returns:
            Decimal: ``-(closing total at end - closing total at start)``.
        """
        end_date = end_date or self._today()
        if start_date is None:
            start_date = self._period_resolver.period_start(end_date)
        types = tuple(account_types)

        opening_total = self.section_balances(
            types,
            context,
            self._period_resolver.period_start(start_date),
            start_date,
        ).section_total
        closing_total = self.section_balances(
            types,
            context,
            self._period_resolver.period_start(end_date),
            end_date,
        ).section_total
        return (closing_total - opening_total) * -1

    def account_type_labels(self, account_types: Iterable[str]) -> list[str]:
        """Return the display labels of the account types, in order."""
        return [
            self._label_lookup.account_type_label(account_type)
            for account_type in account_types
        ]

    def _category_key(self, account: Account) -> tuple[str, int]:
        if account.category is None:
            return self._label_lookup.account_type_label(account.account_type), 0
        return account.category.name, account.category.id


__all__ = ["ChartAggregator"]
