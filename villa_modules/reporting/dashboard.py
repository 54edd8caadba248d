"""
Dashboard Summaries (``villa_modules.reporting.dashboard``).

Responsibility
--------------
Coarse income / expense series for the dashboard: today's single point or
one point per day of the current month, and the monthly income versus
petty-cash chart.  Computed independently of the detailed daily report.

Architecture position
---------------------
**Modules layer**.  Reads the repositories once per call over the whole
span and buckets rows by calendar day (or month) at the configured
offset.  "Today" comes from the injected clock.

Invariants enforced
-------------------
* Sources: income is every non-removed payment (no positive-amount
  filter); labour is attendance wages across all companies; petty cash is
  non-removed outward movements; general is non-removed expenses.
  Inventory is not used.
* Every figure of a coarse point is rounded to cents, half toward
  +infinity.  Chart figures are unrounded.

Failure modes
-------------
* Unknown ``range`` -> ``InvalidParameterError`` before any query.
* ``CollaboratorQueryError`` from a repository propagates.
"""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Callable, Iterable
from datetime import date
from decimal import Decimal
from typing import TypeVar

from sqlalchemy.orm import Session

from villa_kernel.domain.clock import Clock, SystemClock
from villa_kernel.domain.records import PettyCashType
from villa_kernel.domain.time_window import (
    TimeWindowResolver,
    add_months,
    last_day_of_month,
)
from villa_kernel.domain.values import ZERO
from villa_kernel.exceptions import InvalidParameterError
from villa_kernel.logging_config import get_logger
from villa_modules.reporting.aggregators import SourceRepositories
from villa_modules.reporting.config import ReportingConfig
from villa_modules.reporting.models import ChartPoint, DashboardPoint, SummaryRange
from villa_modules.reporting.statements import build_dashboard_point, render_to_dict

logger = get_logger("modules.reporting.dashboard")

TODAY_LABEL = "Today"

RecordT = TypeVar("RecordT")


def _bucket_sums(
    records: Iterable[RecordT],
    key: Callable[[RecordT], object],
    amount: Callable[[RecordT], Decimal | None],
) -> dict[object, Decimal]:
    totals: dict[object, Decimal] = defaultdict(lambda: ZERO)
    for record in records:
        value = amount(record)
        if value is not None:
            totals[key(record)] += value
    return totals


class DashboardService:
    """
    Dashboard series service.

    Contract
    --------
    * ``monthly_summary`` returns ordered ``DashboardPoint`` values.
    * ``chart_data`` returns ordered ``ChartPoint`` values, oldest first.
    * Read-only.
    """

    def __init__(
        self,
        session: Session | None = None,
        *,
        repositories: SourceRepositories | None = None,
        config: ReportingConfig | None = None,
        clock: Clock | None = None,
    ):
        if repositories is None:
            if session is None:
                raise ValueError("DashboardService requires a session or repositories")
            repositories = SourceRepositories.from_session(session)
        self._repositories = repositories
        self._config = config or ReportingConfig.with_defaults()
        self._clock = clock or SystemClock()
        self._resolver = TimeWindowResolver(self._config.utc_offset)

    def _today(self) -> date:
        return self._resolver.calendar_day(self._clock.now())

    def _day_key(self, record) -> date:
        return self._resolver.calendar_day(record.date)

    def _month_key(self, record) -> tuple[int, int]:
        day = self._resolver.calendar_day(record.date)
        return day.year, day.month

    # =========================================================================
    # Coarse summary
    # =========================================================================

    def monthly_summary(self, range: str = SummaryRange.MONTH.value) -> list[DashboardPoint]:
        """
        Income and expense points for today or for the current month.

        Args:
            range: "today" for a single point named "Today"; "month" for
                one point per day of the current month, named by day of
                month.

        Raises:
            InvalidParameterError: for any other range.
        """
        try:
            summary_range = SummaryRange(range)
        except ValueError as exc:
            raise InvalidParameterError(
                "range", range, "expected 'today' or 'month'"
            ) from exc

        today = self._today()
        if summary_range is SummaryRange.TODAY:
            days = [today]
        else:
            days = self._resolver.day_sequence(
                today.replace(day=1), last_day_of_month(today)
            )
        window = self._resolver.span_window(days[0], days[-1])
        repos = self._repositories

        income = _bucket_sums(
            repos.payments.find_in_window(window.start, window.end, positive_only=False),
            self._day_key,
            lambda p: p.amount,
        )
        labour = _bucket_sums(
            repos.attendance.find_in_window(window.start, window.end, company_id=None),
            self._day_key,
            lambda a: a.wage,
        )
        petty_cash = _bucket_sums(
            repos.petty_cash.find_in_window(
                window.start, window.end, movement_type=PettyCashType.OUTWARD
            ),
            self._day_key,
            lambda m: m.amount,
        )
        general = _bucket_sums(
            repos.expenses.find_in_window(window.start, window.end),
            self._day_key,
            lambda e: e.amount,
        )

        points = [
            build_dashboard_point(
                name=TODAY_LABEL if summary_range is SummaryRange.TODAY else str(day.day),
                day=day,
                income=income.get(day, ZERO),
                labour=labour.get(day, ZERO),
                petty_cash=petty_cash.get(day, ZERO),
                general=general.get(day, ZERO),
            )
            for day in days
        ]

        logger.info(
            "monthly_summary_generated",
            extra={"range": summary_range.value, "point_count": len(points)},
        )
        return points

    # =========================================================================
    # Chart
    # =========================================================================

    def chart_data(self, months: int | None = None) -> list[ChartPoint]:
        """
        Income and petty-cash expense for the last ``months`` calendar
        months, current month included, oldest first.

        Raises:
            InvalidParameterError: if ``months`` is less than 1.
        """
        months = self._config.chart_months if months is None else months
        if months < 1:
            raise InvalidParameterError("months", months, "must be at least 1")

        today = self._today()
        firsts = [add_months(today, offset) for offset in range(-(months - 1), 1)]
        window = self._resolver.span_window(firsts[0], last_day_of_month(today))
        repos = self._repositories

        income = _bucket_sums(
            repos.payments.find_in_window(window.start, window.end, positive_only=False),
            self._month_key,
            lambda p: p.amount,
        )
        expense = _bucket_sums(
            repos.petty_cash.find_in_window(
                window.start, window.end, movement_type=PettyCashType.OUTWARD
            ),
            self._month_key,
            lambda m: m.amount,
        )

        points = [
            ChartPoint(
                name=first.strftime(self._config.chart_label_format),
                income=income.get((first.year, first.month), ZERO),
                expense=expense.get((first.year, first.month), ZERO),
            )
            for first in firsts
        ]
        logger.info("chart_data_generated", extra={"months": months})
        return points

    @staticmethod
    def to_dict(points: list) -> list:
        return render_to_dict(points)
