"""
Source Aggregators (``villa_modules.reporting.aggregators``).

Responsibility
--------------
One aggregator per transactional store.  Each takes ``(scope_id, start,
end)``, reads its store through an injected repository and reduces the
rows to a summary DTO.  Aggregators are independent of each other and
hold no state between calls.

Architecture position
---------------------
**Modules layer**.  Repositories are injected (``SourceRepositories``);
``from_session`` wires the SQLAlchemy selectors for production use.

Invariants enforced
-------------------
* Window bounds are inclusive on both ends.
* Only the attendance store is scoped by company.  The expense,
  petty-cash, payment and inventory stores are global window filters, so
  ``scope_id`` is accepted but not applied to them.
* A missing wage, advance or penalty counts as zero.

Failure modes
-------------
* ``CollaboratorQueryError`` from a repository propagates unchanged; no
  aggregator substitutes a partial or empty result.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from uuid import UUID

from sqlalchemy.orm import Session

from villa_kernel.domain.records import MovementType, PettyCashType, RecipientType
from villa_kernel.domain.repositories import (
    AttendanceRepository,
    ExpenseRepository,
    InventoryMovementRepository,
    PaymentRepository,
    PettyCashRepository,
)
from villa_kernel.domain.values import ZERO
from villa_kernel.logging_config import get_logger
from villa_kernel.selectors import (
    AttendanceSelector,
    ExpenseSelector,
    InventoryMovementSelector,
    PaymentSelector,
    PettyCashSelector,
)
from villa_modules.reporting.models import (
    CollectionsSummary,
    ExpenseSummary,
    InventoryMovementSummary,
    LabourCostSummary,
    PettyCashSummary,
    ResolvedExpense,
)
from villa_modules.reporting.statements import resolve_payee

logger = get_logger("modules.reporting.aggregators")


@dataclass(frozen=True)
class SourceRepositories:
    """The five transactional stores a reconciliation reads from."""

    attendance: AttendanceRepository
    inventory: InventoryMovementRepository
    expenses: ExpenseRepository
    petty_cash: PettyCashRepository
    payments: PaymentRepository

    @classmethod
    def from_session(cls, session: Session) -> SourceRepositories:
        """Selector-backed repositories sharing one caller-owned session."""
        return cls(
            attendance=AttendanceSelector(session),
            inventory=InventoryMovementSelector(session),
            expenses=ExpenseSelector(session),
            petty_cash=PettyCashSelector(session),
            payments=PaymentSelector(session),
        )


def _amount(value: Decimal | None) -> Decimal:
    return value if value is not None else ZERO


class LabourCostAggregator:
    """Sums wages, advance deductions and penalties from attendance."""

    def __init__(self, repository: AttendanceRepository):
        self._repository = repository

    def aggregate(
        self,
        scope_id: UUID | None,
        start: datetime,
        end: datetime,
    ) -> LabourCostSummary:
        """
        Attendance totals for the company in the window.

        A ``scope_id`` of None aggregates every company.
        """
        records = self._repository.find_in_window(start, end, company_id=scope_id)
        summary = LabourCostSummary(
            total_wage=sum((_amount(r.wage) for r in records), ZERO),
            total_advances=sum((_amount(r.advance_deduction) for r in records), ZERO),
            total_penalties=sum((_amount(r.penalty) for r in records), ZERO),
            count=len(records),
        )
        logger.debug(
            "labour_cost_aggregated",
            extra={"scope_id": scope_id, "count": summary.count},
        )
        return summary


class InventoryMovementAggregator:
    """Counts inward and outward movements; adjustments are not counted."""

    def __init__(self, repository: InventoryMovementRepository):
        self._repository = repository

    def aggregate(
        self,
        scope_id: UUID | None,
        start: datetime,
        end: datetime,
    ) -> InventoryMovementSummary:
        movements = tuple(self._repository.find_in_window(start, end))
        return InventoryMovementSummary(
            inward=sum(1 for m in movements if m.type == MovementType.INWARD.value),
            outward=sum(1 for m in movements if m.type == MovementType.OUTWARD.value),
            movements=movements,
        )


class CollectionsAggregator:
    """
    Sums non-removed customer payments.

    With ``positive_only`` (the default) zero and negative amounts are
    left out, as the detailed report and the daily summary require.
    """

    def __init__(self, repository: PaymentRepository, positive_only: bool = True):
        self._repository = repository
        self._positive_only = positive_only

    def aggregate(
        self,
        scope_id: UUID | None,
        start: datetime,
        end: datetime,
    ) -> CollectionsSummary:
        payments = tuple(
            self._repository.find_in_window(start, end, positive_only=self._positive_only)
        )
        return CollectionsSummary(
            total=sum((p.amount for p in payments), ZERO),
            count=len(payments),
            payments=payments,
        )


class PettyCashAggregator:
    """
    Sums outward petty-cash movements.

    The detailed report excludes removed movements; the daily summary
    historically counts them, hence ``include_removed``.
    """

    def __init__(self, repository: PettyCashRepository, include_removed: bool = False):
        self._repository = repository
        self._include_removed = include_removed

    def aggregate(
        self,
        scope_id: UUID | None,
        start: datetime,
        end: datetime,
    ) -> PettyCashSummary:
        movements = tuple(
            self._repository.find_in_window(
                start,
                end,
                movement_type=PettyCashType.OUTWARD,
                include_removed=self._include_removed,
            )
        )
        return PettyCashSummary(
            total_expense=sum((m.amount for m in movements), ZERO),
            count=len(movements),
            movements=movements,
        )


class ExpenseAggregator:
    """Sums non-removed expenses and partitions them by recipient type."""

    def __init__(self, repository: ExpenseRepository):
        self._repository = repository

    def aggregate(
        self,
        scope_id: UUID | None,
        start: datetime,
        end: datetime,
    ) -> ExpenseSummary:
        expenses = self._repository.find_in_window(start, end)
        by_type = {t.value: ZERO for t in RecipientType}
        for expense in expenses:
            if expense.recipient_type in by_type:
                by_type[expense.recipient_type] += expense.amount

        return ExpenseSummary(
            total=sum((e.amount for e in expenses), ZERO),
            supplier=by_type[RecipientType.SUPPLIER.value],
            labour=by_type[RecipientType.LABOUR.value],
            other=by_type[RecipientType.OTHER.value],
            count=len(expenses),
            expenses=tuple(ResolvedExpense(e, resolve_payee(e)) for e in expenses),
        )
