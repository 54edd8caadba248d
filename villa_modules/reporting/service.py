"""
Reconciliation Reporting Service (``villa_modules.reporting.service``).

Responsibility
--------------
Produces the detailed daily cash-flow report, the multi-day range report
and the inventory-inclusive daily summary.  Resolves the day window, runs
the source aggregators and hands their summaries to the pure functions in
``statements.py``.  Read-only.

Architecture position
---------------------
**Modules layer** -- thin glue between the typed repositories and the
pure transformations.  Constructor: ``session`` (or explicit
``repositories``) + ``config`` + ``clock``.

Invariants enforced
-------------------
* Read-only -- nothing is written to any store.
* All monetary amounts use ``Decimal`` -- NEVER ``float``; the detailed
  report and the daily summary are unrounded.
* Range days are produced sequentially, in day order.

Failure modes
-------------
* Missing company id -> ``MissingParameterError`` before any query.
* Store query failure -> ``CollaboratorQueryError`` propagates from a
  single-day call.
* Any failure while producing one day of a range -> ``RangeReportError``
  chained to the cause; no partial list is returned.
"""

from __future__ import annotations

from datetime import date, datetime
from uuid import UUID

from sqlalchemy.orm import Session

from villa_kernel.domain.clock import Clock, SystemClock
from villa_kernel.domain.time_window import TimeWindowResolver
from villa_kernel.exceptions import MissingParameterError, RangeReportError
from villa_kernel.logging_config import LogContext, get_logger
from villa_modules.reporting.aggregators import (
    CollectionsAggregator,
    ExpenseAggregator,
    InventoryMovementAggregator,
    LabourCostAggregator,
    PettyCashAggregator,
    SourceRepositories,
)
from villa_modules.reporting.config import ReportingConfig
from villa_modules.reporting.models import DailyReport, DailySummary
from villa_modules.reporting.statements import (
    assemble_daily_report,
    build_daily_summary,
    render_to_dict,
)

logger = get_logger("modules.reporting.service")

DayInput = date | datetime | str


def _require_company(company_id: UUID | None) -> None:
    if not company_id:
        raise MissingParameterError("company_id")


class ReportingService:
    """
    Daily reconciliation service.

    Contract
    --------
    * Every public method returns a typed DTO (``DailyReport``,
      ``list[DailyReport]``, ``DailySummary``); ``to_dict`` renders any of
      them for JSON.
    * All methods are **read-only**.

    Guarantees
    ----------
    * The same stored data and the same day always produce an equal
      report.
    * Day boundaries come from the configured offset, never from the host
      timezone.
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
                raise ValueError("ReportingService requires a session or repositories")
            repositories = SourceRepositories.from_session(session)
        self._config = config or ReportingConfig.with_defaults()
        self._clock = clock or SystemClock()
        self._resolver = TimeWindowResolver(self._config.utc_offset)

        self._labour = LabourCostAggregator(repositories.attendance)
        self._inventory = InventoryMovementAggregator(repositories.inventory)
        self._collections = CollectionsAggregator(repositories.payments)
        self._expenses = ExpenseAggregator(repositories.expenses)
        self._petty_cash = PettyCashAggregator(repositories.petty_cash)
        self._petty_cash_with_removed = PettyCashAggregator(
            repositories.petty_cash, include_removed=True
        )

        logger.info(
            "reporting_service_initialized",
            extra={"utc_offset": self._config.utc_offset},
        )

    @property
    def resolver(self) -> TimeWindowResolver:
        return self._resolver

    # =========================================================================
    # Public API
    # =========================================================================

    def daily_report(self, company_id: UUID, day: DayInput) -> DailyReport:
        """
        Reconciled cash flow of one calendar day.

        Items: one per non-removed expense, one per non-removed outward
        petty-cash movement, one consolidated wage line when wages were
        paid, one per positive non-removed collection.
        """
        _require_company(company_id)
        window = self._resolver.day_window(day)
        label = self._resolver.format_label(day, self._config.detail_label_format)

        with LogContext.bind(company_id=company_id, report_date=label):
            expenses = self._expenses.aggregate(company_id, window.start, window.end)
            petty_cash = self._petty_cash.aggregate(company_id, window.start, window.end)
            labour = self._labour.aggregate(company_id, window.start, window.end)
            collections = self._collections.aggregate(company_id, window.start, window.end)

            report = assemble_daily_report(label, expenses, petty_cash, labour, collections)

            logger.info(
                "daily_report_generated",
                extra={
                    "item_count": len(report.items),
                    "net_balance": str(report.net_balance),
                },
            )
        return report

    def range_report(
        self,
        company_id: UUID,
        start: DayInput,
        end: DayInput,
    ) -> list[DailyReport]:
        """
        One daily report per calendar day from ``start`` to ``end``.

        Returns an empty list when ``end`` precedes ``start``.

        Raises:
            RangeReportError: if any day fails; chained to the cause.
        """
        _require_company(company_id)
        days = self._resolver.day_sequence(start, end)
        start_label = self._resolver.calendar_day(start).isoformat()
        end_label = self._resolver.calendar_day(end).isoformat()

        logger.info(
            "range_report_started",
            extra={
                "company_id": company_id,
                "start_date": start_label,
                "end_date": end_label,
                "day_count": len(days),
            },
        )

        reports: list[DailyReport] = []
        for day in days:
            try:
                reports.append(self.daily_report(company_id, day))
            except Exception as exc:
                logger.error(
                    "range_report_day_failed",
                    extra={
                        "company_id": company_id,
                        "failed_date": day.isoformat(),
                    },
                    exc_info=True,
                )
                raise RangeReportError(day.isoformat(), start_label, end_label) from exc

        logger.info(
            "range_report_completed",
            extra={"company_id": company_id, "report_count": len(reports)},
        )
        return reports

    def daily_report_data(
        self,
        company_id: UUID,
        day: DayInput,
        end: DayInput | None = None,
    ) -> DailyReport | list[DailyReport]:
        """Single-day report without ``end``; range report with it."""
        if end is None:
            return self.daily_report(company_id, day)
        return self.range_report(company_id, day, end)

    def daily_summary(
        self,
        company_id: UUID,
        day: DayInput | None = None,
    ) -> DailySummary:
        """
        Per-store totals of one calendar day (today when ``day`` is None).

        Unlike the detailed report this counts inventory movements and
        does not exclude removed petty-cash movements.
        """
        _require_company(company_id)
        if day is None:
            day = self._clock.now()
        window = self._resolver.day_window(day)
        label = self._resolver.format_label(day, self._config.summary_label_format)

        with LogContext.bind(company_id=company_id, report_date=label):
            labour = self._labour.aggregate(company_id, window.start, window.end)
            inventory = self._inventory.aggregate(company_id, window.start, window.end)
            collections = self._collections.aggregate(company_id, window.start, window.end)
            petty_cash = self._petty_cash_with_removed.aggregate(
                company_id, window.start, window.end
            )
            expenses = self._expenses.aggregate(company_id, window.start, window.end)

            summary = build_daily_summary(
                label, labour, inventory, petty_cash, expenses, collections
            )
            logger.info(
                "daily_summary_generated",
                extra={"total_daily_expense": str(summary.total_daily_expense)},
            )
        return summary

    # =========================================================================
    # Rendering
    # =========================================================================

    @staticmethod
    def to_dict(report: object) -> dict | list:
        """Render any report DTO (or list of them) to JSON-ready data."""
        return render_to_dict(report)
