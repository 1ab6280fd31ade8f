"""Composition root for wiring infrastructure adapters."""

from src.application.ports.database import DatabaseEnginePort
from src.application.use_cases.account_balances import AccountBalanceService
from src.application.use_cases.account_lifecycle import AccountLifecycleGuard
from src.application.use_cases.section_balances import ChartAggregator
from src.domain.models import ReportingContext
from src.infrastructure.accounts_repository import SqlAlchemyAccountsRepository
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.labels import StaticAccountCodeBase, StaticLabelLookup
from src.infrastructure.ledger_repository import SqlAlchemyLedgerRepository
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.period_resolver import SqlAlchemyPeriodResolver
from src.infrastructure.settings import LedgerSettings

_LABEL_LOOKUP = StaticLabelLookup()
_CODE_BASE = StaticAccountCodeBase()


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_balance_service(
    context: ReportingContext,
    db_port: DatabaseEnginePort | None = None,
    settings: LedgerSettings | None = None,
) -> AccountBalanceService:
    """Return the account balance service for the context entity."""
    resolved_db = db_port or build_database_adapter()
    resolved_settings = settings or LedgerSettings.from_env()
    ledger = SqlAlchemyLedgerRepository(
        resolved_db,
        table_prefix=resolved_settings.table_prefix,
    )
    return AccountBalanceService(
        ledger_query=ledger,
        balance_store=ledger,
        period_resolver=_build_period_resolver(
            context,
            resolved_db,
            resolved_settings,
        ),
        label_lookup=_LABEL_LOOKUP,
        logger=get_app_logger(),
    )


def build_chart_aggregator(
    context: ReportingContext,
    db_port: DatabaseEnginePort | None = None,
    settings: LedgerSettings | None = None,
) -> ChartAggregator:
    """Return the chart aggregator for the context entity."""
    resolved_db = db_port or build_database_adapter()
    resolved_settings = settings or LedgerSettings.from_env()
    return ChartAggregator(
        accounts_repository=SqlAlchemyAccountsRepository(
            resolved_db,
            table_prefix=resolved_settings.table_prefix,
        ),
        balance_service=build_balance_service(
            context,
            resolved_db,
            resolved_settings,
        ),
        period_resolver=_build_period_resolver(
            context,
            resolved_db,
            resolved_settings,
        ),
        label_lookup=_LABEL_LOOKUP,
        logger=get_app_logger(),
    )


def build_lifecycle_guard(
    context: ReportingContext,
    db_port: DatabaseEnginePort | None = None,
    settings: LedgerSettings | None = None,
) -> AccountLifecycleGuard:
    """Return the account lifecycle guard for the context entity."""
    resolved_db = db_port or build_database_adapter()
    resolved_settings = settings or LedgerSettings.from_env()
    return AccountLifecycleGuard(
        accounts_repository=SqlAlchemyAccountsRepository(
            resolved_db,
            table_prefix=resolved_settings.table_prefix,
        ),
        code_base=_CODE_BASE,
        balance_service=build_balance_service(
            context,
            resolved_db,
            resolved_settings,
        ),
        code_assignment_retries=resolved_settings.code_assignment_retries,
        logger=get_app_logger(),
    )


def _build_period_resolver(
    context: ReportingContext,
    db_port: DatabaseEnginePort,
    settings: LedgerSettings,
) -> SqlAlchemyPeriodResolver:
    return SqlAlchemyPeriodResolver(
        db_port,
        entity_id=context.entity_id,
        year_start=settings.year_start,
        table_prefix=settings.table_prefix,
    )


__all__ = [
    "build_database_adapter",
    "build_balance_service",
    "build_chart_aggregator",
    "build_lifecycle_guard",
]
