"""
Reconciliation Report Models (``villa_modules.reporting.models``).

Responsibility
--------------
Frozen dataclass value objects for the reconciliation outputs: per-store
aggregate summaries, the detailed daily report and its items, the
inventory-inclusive daily summary, and the dashboard points.

Architecture position
---------------------
**Modules layer** -- pure data definitions with ZERO I/O.  Built by the
aggregators and the pure functions in ``statements.py``; returned to
callers by ``ReportingService`` and ``DashboardService``.

Invariants enforced
-------------------
* All models are ``frozen=True`` (immutable after construction).
* All monetary fields use ``Decimal`` -- NEVER ``float``.
* Field names are the snake_case form of the JSON keys produced by
  ``statements.render_to_dict``.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from villa_kernel.domain.records import (
    ExpenseRecord,
    InventoryMovementRecord,
    PaymentRecord,
    PettyCashRecord,
)

ZERO = Decimal("0")


# =========================================================================
# Enums
# =========================================================================


class ItemType(str, Enum):
    """Direction of a reconciliation item."""

    INCOME = "income"
    EXPENSE = "expense"


class SummaryRange(str, Enum):
    """Granularity of the coarse dashboard summary."""

    TODAY = "today"
    MONTH = "month"


# =========================================================================
# Aggregator outputs
# =========================================================================


@dataclass(frozen=True)
class LabourCostSummary:
    """Attendance totals for one company over one window."""

    total_wage: Decimal = ZERO
    total_advances: Decimal = ZERO
    total_penalties: Decimal = ZERO
    count: int = 0


@dataclass(frozen=True)
class InventoryMovementSummary:
    inward: int = 0
    outward: int = 0
    movements: tuple[InventoryMovementRecord, ...] = ()


@dataclass(frozen=True)
class CollectionsSummary:
    total: Decimal = ZERO
    count: int = 0
    payments: tuple[PaymentRecord, ...] = ()


@dataclass(frozen=True)
class PettyCashSummary:
    """Outward petty-cash movements over one window."""

    total_expense: Decimal = ZERO
    count: int = 0
    movements: tuple[PettyCashRecord, ...] = ()


@dataclass(frozen=True)
class ResolvedExpense:
    """An expense paired with the payee shown for it."""

    expense: ExpenseRecord
    payee: str


@dataclass(frozen=True)
class ExpenseSummary:
    """
    Non-removed expenses partitioned by recipient type.

    ``supplier + labour + other`` equals ``total`` only when every expense
    carries one of the three known recipient types.
    """

    total: Decimal = ZERO
    supplier: Decimal = ZERO
    labour: Decimal = ZERO
    other: Decimal = ZERO
    count: int = 0
    expenses: tuple[ResolvedExpense, ...] = ()


# =========================================================================
# Detailed daily report
# =========================================================================


@dataclass(frozen=True)
class ReconciliationItem:
    """One line of the daily cash-flow report."""

    type: ItemType
    category: str
    payee: str
    description: str
    amount: Decimal


@dataclass(frozen=True)
class DailyReport:
    """
    Reconciled cash flow of one calendar day.

    ``total_expense`` and ``total_income`` are exact sums of the items of
    each type; ``net_balance = total_income - total_expense``.
    """

    date: str
    items: tuple[ReconciliationItem, ...]
    total_expense: Decimal
    total_income: Decimal
    net_balance: Decimal


# =========================================================================
# Daily summary (inventory-inclusive)
# =========================================================================


@dataclass(frozen=True)
class SummaryLabour:
    net_wage: Decimal
    advances: Decimal
    penalties: Decimal
    count: int


@dataclass(frozen=True)
class SummaryInventory:
    inward: int
    outward: int


@dataclass(frozen=True)
class SummaryPettyCash:
    expense: Decimal
    count: int


@dataclass(frozen=True)
class SummaryExpenses:
    amount: Decimal
    supplier: Decimal
    labour_contract: Decimal
    other: Decimal
    count: int


@dataclass(frozen=True)
class DailySummary:
    """Per-store totals of one calendar day, unrounded."""

    date: str
    labour: SummaryLabour
    inventory: SummaryInventory
    petty_cash: SummaryPettyCash
    expenses: SummaryExpenses
    customer_collections: Decimal
    total_daily_expense: Decimal


# =========================================================================
# Dashboard
# =========================================================================


@dataclass(frozen=True)
class DashboardBreakdown:
    labour: Decimal
    petty_cash: Decimal
    general: Decimal


@dataclass(frozen=True)
class DashboardPoint:
    """
    One point of the coarse summary.

    ``name`` is "Today" or the day of month; ``month`` is the ISO date of
    the day the point covers.  Figures are rounded to cents.
    """

    name: str
    month: str
    income: Decimal
    expense: Decimal
    breakdown: DashboardBreakdown


@dataclass(frozen=True)
class ChartPoint:
    """Income and petty-cash expense of one calendar month."""

    name: str
    income: Decimal
    expense: Decimal
