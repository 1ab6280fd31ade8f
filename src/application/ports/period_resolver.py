"""Application port for reporting period resolution."""

from datetime import date
from typing import Protocol

from src.domain.models import ReportingPeriod


class PeriodResolverPort(Protocol):
    """Port mapping dates to reporting periods."""

    def period_start(self, day: date) -> date:
        """Return the start date of the period enclosing the day."""

    def year_of(self, day: date) -> int:
        """Return the calendar year of the period enclosing the day."""

    def period_for_year(self, year: int) -> ReportingPeriod:
        """Return the period of a calendar year.

        Raises:
            PeriodResolutionFailure: If no period exists for the year.
        """


__all__ = ["PeriodResolverPort"]
