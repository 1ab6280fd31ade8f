"""SQLAlchemy-backed resolver of reporting periods."""

from datetime import date

from sqlalchemy import text

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.period_resolver import PeriodResolverPort
from src.domain.errors import PeriodResolutionFailure
from src.domain.models import ReportingPeriod


class SqlAlchemyPeriodResolver(PeriodResolverPort):
    """Resolve an entity's reporting periods.

    Periods run for twelve months from the first day of ``year_start``;
    a period is named after the calendar year it starts in.
    """

    def __init__(
        self,
        db_port: DatabaseEnginePort,
        entity_id: int,
        year_start: int = 1,
        table_prefix: str = "ifrs_",
    ) -> None:
        """Initialize the resolver.

        Args:
            db_port: Port providing access to the ledger engine.
            entity_id: Entity the periods belong to.
            year_start: Month the reporting period starts in.
            table_prefix: Prefix of the ledger table names.
        """
        self._db_port = db_port
        self._entity_id = entity_id
        self._year_start = year_start
        self._prefix = table_prefix

    def year_of(self, day: date) -> int:
        if day.month < self._year_start:
            return day.year - 1
        return day.year

    def period_start(self, day: date) -> date:
        return date(self.year_of(day), self._year_start, 1)

    def period_for_year(self, year: int) -> ReportingPeriod:
        query = text(
            f"""
            SELECT id, calendar_year
            FROM {self._prefix}reporting_periods
            WHERE entity_id = :entity_id
              AND calendar_year = :year
              AND deleted_at IS NULL
            LIMIT 1
            """
        )
        params = {"entity_id": self._entity_id, "year": year}
        engine = self._db_port.get_ledger_engine()
        with engine.connect() as conn:
            result = conn.execute(query, params).first()
        if not result:
            raise PeriodResolutionFailure(year)
        return ReportingPeriod(
            id=result.id,
            calendar_year=result.calendar_year,
            start_date=date(result.calendar_year, self._year_start, 1),
        )


__all__ = ["SqlAlchemyPeriodResolver"]
