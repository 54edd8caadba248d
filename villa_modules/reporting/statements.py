"""
Pure Reconciliation Transformations (``villa_modules.reporting.statements``).

Responsibility
--------------
Turns aggregator summaries into report DTOs: payee resolution, the item
builders of the detailed daily report, report assembly with totals, the
daily summary, dashboard point rounding, and JSON rendering.

Architecture position
---------------------
**Modules layer** -- pure functions, ZERO I/O.  ``ReportingService`` and
``DashboardService`` load data through the aggregators and delegate every
transformation here.

Invariants enforced
-------------------
* Report totals are sums of the emitted items, computed after assembly;
  no rounding in the detailed report.
* Item order is fixed: expenses, outward petty cash, the wage line,
  collections.
* Dashboard figures are rounded to cents with half-toward-+infinity
  rounding, and ``expense`` is rounded from the unrounded component sum.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable
from datetime import date
from decimal import Decimal
from enum import Enum
from uuid import UUID

from villa_kernel.domain.records import (
    ExpenseRecord,
    PaymentRecord,
    PettyCashRecord,
    RecipientType,
)
from villa_kernel.domain.values import ZERO, round_cents
from villa_kernel.logging_config import get_logger
from villa_modules.reporting.models import (
    CollectionsSummary,
    DailyReport,
    DailySummary,
    DashboardBreakdown,
    DashboardPoint,
    ExpenseSummary,
    InventoryMovementSummary,
    ItemType,
    LabourCostSummary,
    PettyCashSummary,
    ReconciliationItem,
    SummaryExpenses,
    SummaryInventory,
    SummaryLabour,
    SummaryPettyCash,
)

logger = get_logger("modules.reporting.statements")

PETTY_CASH_CATEGORY = "Petty Cash"
PETTY_CASH_PAYEE = "Cash"
WAGES_CATEGORY = "Wages"
WAGES_DESCRIPTION = "Daily Labour Wages Cons."
COLLECTION_CATEGORY = "Collection"
UNKNOWN_CLIENT = "Unknown Client"
NO_DESCRIPTION = "-"


# =========================================================================
# Payee resolution and item builders
# =========================================================================


def resolve_payee(expense: ExpenseRecord) -> str:
    """
    Display payee of an expense.

    Supplier and Labour expenses show the linked party's name when the
    link is present; Other shows the free-text recipient or "Other";
    anything else is "N/A".
    """
    if expense.recipient_type == RecipientType.SUPPLIER.value and expense.supplier_name:
        return expense.supplier_name
    if expense.recipient_type == RecipientType.LABOUR.value and expense.labour_name:
        return expense.labour_name
    if expense.recipient_type == RecipientType.OTHER.value:
        return expense.other_recipient or RecipientType.OTHER.value
    return "N/A"


def expense_item(expense: ExpenseRecord, payee: str) -> ReconciliationItem:
    return ReconciliationItem(
        type=ItemType.EXPENSE,
        category=expense.recipient_type,
        payee=payee,
        description=expense.description or expense.reference or NO_DESCRIPTION,
        amount=expense.amount,
    )


def petty_cash_item(movement: PettyCashRecord) -> ReconciliationItem:
    return ReconciliationItem(
        type=ItemType.EXPENSE,
        category=PETTY_CASH_CATEGORY,
        payee=PETTY_CASH_PAYEE,
        description=movement.description or NO_DESCRIPTION,
        amount=movement.amount,
    )


def wage_item(labour: LabourCostSummary) -> ReconciliationItem | None:
    """The single consolidated wage line, or None when no wage was paid."""
    if labour.total_wage <= ZERO:
        return None
    return ReconciliationItem(
        type=ItemType.EXPENSE,
        category=WAGES_CATEGORY,
        payee=f"{labour.count} Workers",
        description=WAGES_DESCRIPTION,
        amount=labour.total_wage,
    )


def collection_item(payment: PaymentRecord) -> ReconciliationItem:
    description = f"Villa: {payment.villa_name}" if payment.villa_name else NO_DESCRIPTION
    if payment.description:
        description += f" | {payment.description}"
    return ReconciliationItem(
        type=ItemType.INCOME,
        category=COLLECTION_CATEGORY,
        payee=payment.client_name or UNKNOWN_CLIENT,
        description=description,
        amount=payment.amount,
    )


# =========================================================================
# Report assembly
# =========================================================================


def sum_items(items: Iterable[ReconciliationItem], item_type: ItemType) -> Decimal:
    return sum((item.amount for item in items if item.type == item_type), ZERO)


def assemble_daily_report(
    label: str,
    expenses: ExpenseSummary,
    petty_cash: PettyCashSummary,
    labour: LabourCostSummary,
    collections: CollectionsSummary,
) -> DailyReport:
    """
    Build the detailed daily report from the four aggregator summaries.

    Args:
        label: Date label of the report (already formatted).
        expenses: Non-removed expenses with resolved payees.
        petty_cash: Non-removed outward petty-cash movements.
        labour: Company attendance totals.
        collections: Non-removed, positive payments.
    """
    items: list[ReconciliationItem] = [
        expense_item(resolved.expense, resolved.payee) for resolved in expenses.expenses
    ]
    items.extend(petty_cash_item(movement) for movement in petty_cash.movements)
    wages = wage_item(labour)
    if wages is not None:
        items.append(wages)
    items.extend(collection_item(payment) for payment in collections.payments)

    total_expense = sum_items(items, ItemType.EXPENSE)
    total_income = sum_items(items, ItemType.INCOME)

    logger.debug(
        "daily_report_assembled",
        extra={
            "label": label,
            "item_count": len(items),
            "total_expense": str(total_expense),
            "total_income": str(total_income),
        },
    )

    return DailyReport(
        date=label,
        items=tuple(items),
        total_expense=total_expense,
        total_income=total_income,
        net_balance=total_income - total_expense,
    )


def build_daily_summary(
    label: str,
    labour: LabourCostSummary,
    inventory: InventoryMovementSummary,
    petty_cash: PettyCashSummary,
    expenses: ExpenseSummary,
    collections: CollectionsSummary,
) -> DailySummary:
    return DailySummary(
        date=label,
        labour=SummaryLabour(
            net_wage=labour.total_wage,
            advances=labour.total_advances,
            penalties=labour.total_penalties,
            count=labour.count,
        ),
        inventory=SummaryInventory(inward=inventory.inward, outward=inventory.outward),
        petty_cash=SummaryPettyCash(
            expense=petty_cash.total_expense,
            count=petty_cash.count,
        ),
        expenses=SummaryExpenses(
            amount=expenses.total,
            supplier=expenses.supplier,
            labour_contract=expenses.labour,
            other=expenses.other,
            count=expenses.count,
        ),
        customer_collections=collections.total,
        total_daily_expense=labour.total_wage + petty_cash.total_expense + expenses.total,
    )


def build_dashboard_point(
    name: str,
    day: date,
    income: Decimal,
    labour: Decimal,
    petty_cash: Decimal,
    general: Decimal,
) -> DashboardPoint:
    """One rounded dashboard point; ``expense`` is rounded from the raw sum."""
    return DashboardPoint(
        name=name,
        month=day.isoformat(),
        income=round_cents(income),
        expense=round_cents(labour + petty_cash + general),
        breakdown=DashboardBreakdown(
            labour=round_cents(labour),
            petty_cash=round_cents(petty_cash),
            general=round_cents(general),
        ),
    )


# =========================================================================
# Rendering
# =========================================================================


def _json_number(value: Decimal) -> int | float:
    """Storage scale is dropped: ``Decimal("10.000000000")`` renders as ``10``."""
    if value == value.to_integral_value():
        return int(value)
    return float(value)


def camel_case(name: str) -> str:
    """``total_expense`` -> ``totalExpense``."""
    head, *rest = name.split("_")
    return head + "".join(part[:1].upper() + part[1:] for part in rest)


def render_to_dict(obj: object) -> dict | list | str | int | float | bool | None:
    """
    Convert any report dataclass to a plain dict for JSON serialization.

    Handles:
    - Decimal -> JSON number (int when integral, else float)
    - UUID -> str
    - date / datetime -> ISO format string
    - Enum -> .value
    - Nested frozen dataclasses -> nested dicts with camelCase keys
    - Tuples -> lists
    - None preserved
    """
    if obj is None:
        return None
    if isinstance(obj, Enum):
        return obj.value
    if isinstance(obj, Decimal):
        return _json_number(obj)
    if isinstance(obj, UUID):
        return str(obj)
    if isinstance(obj, date):
        return obj.isoformat()
    if isinstance(obj, (list, tuple)):
        return [render_to_dict(item) for item in obj]
    if isinstance(obj, dict):
        return {str(k): render_to_dict(v) for k, v in obj.items()}
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return {
            camel_case(f.name): render_to_dict(getattr(obj, f.name))
            for f in dataclasses.fields(obj)
        }
    if isinstance(obj, (str, int, float, bool)):
        return obj
    return str(obj)
