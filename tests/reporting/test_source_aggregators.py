"""
Tests for the source aggregators.

Covers:
- Labour cost sums with missing values as zero, company scoping
- Inventory inward/outward counts (adjustments ignored)
- Collections positive-only switch
- Petty cash removed switch
- Expense partition by recipient type
"""

from datetime import datetime, timezone
from decimal import Decimal
from uuid import uuid4

from tests.reporting.fakes import (
    FakeAttendance,
    FakeExpenses,
    FakeInventory,
    FakePayments,
    FakePettyCash,
)
from villa_kernel.domain.records import (
    AttendanceRecord,
    ExpenseRecord,
    InventoryMovementRecord,
    PaymentRecord,
    PettyCashRecord,
)
from villa_kernel.domain.time_window import TimeWindowResolver
from villa_modules.reporting.aggregators import (
    CollectionsAggregator,
    ExpenseAggregator,
    InventoryMovementAggregator,
    LabourCostAggregator,
    PettyCashAggregator,
)

COMPANY = uuid4()
WINDOW = TimeWindowResolver().day_window("2024-03-15")
WHEN = datetime(2024, 3, 15, 6, 30, tzinfo=timezone.utc)


def _attendance(wage, advance=None, penalty=None, company_id=COMPANY):
    return AttendanceRecord(
        id=uuid4(),
        company_id=company_id,
        date=WHEN,
        wage=None if wage is None else Decimal(wage),
        advance_deduction=None if advance is None else Decimal(advance),
        penalty=None if penalty is None else Decimal(penalty),
    )


class TestLabourCostAggregator:
    def test_sums_and_count(self):
        repo = FakeAttendance(
            [
                _attendance("500", "100", "20"),
                _attendance("300"),
                _attendance(None, "50"),
                _attendance("999", company_id=uuid4()),
            ]
        )

        summary = LabourCostAggregator(repo).aggregate(COMPANY, WINDOW.start, WINDOW.end)

        assert summary.total_wage == Decimal("800")
        assert summary.total_advances == Decimal("150")
        assert summary.total_penalties == Decimal("20")
        assert summary.count == 3

    def test_no_records_is_all_zero(self):
        summary = LabourCostAggregator(FakeAttendance()).aggregate(
            COMPANY, WINDOW.start, WINDOW.end
        )

        assert summary.total_wage == Decimal("0")
        assert summary.count == 0

    def test_none_scope_covers_every_company(self):
        repo = FakeAttendance([_attendance("500"), _attendance("300", company_id=uuid4())])

        summary = LabourCostAggregator(repo).aggregate(None, WINDOW.start, WINDOW.end)

        assert summary.total_wage == Decimal("800")


class TestInventoryMovementAggregator:
    def test_counts_by_direction(self):
        def movement(kind):
            return InventoryMovementRecord(
                id=uuid4(), date=WHEN, type=kind, material_name="Sand", quantity=Decimal("1")
            )

        repo = FakeInventory(
            [movement("inward"), movement("inward"), movement("outward"), movement("adjustment")]
        )

        summary = InventoryMovementAggregator(repo).aggregate(COMPANY, WINDOW.start, WINDOW.end)

        assert (summary.inward, summary.outward) == (2, 1)


class TestCollectionsAggregator:
    def test_positive_only_by_default(self):
        repo = FakePayments(
            [
                PaymentRecord(id=uuid4(), date=WHEN, amount=Decimal("1000")),
                PaymentRecord(id=uuid4(), date=WHEN, amount=Decimal("-200")),
            ]
        )

        positive = CollectionsAggregator(repo).aggregate(COMPANY, WINDOW.start, WINDOW.end)
        everything = CollectionsAggregator(repo, positive_only=False).aggregate(
            COMPANY, WINDOW.start, WINDOW.end
        )

        assert (positive.total, positive.count) == (Decimal("1000"), 1)
        assert (everything.total, everything.count) == (Decimal("800"), 2)


class TestPettyCashAggregator:
    def test_outward_only_and_removed_switch(self):
        repo = FakePettyCash(
            [
                PettyCashRecord(id=uuid4(), date=WHEN, type="outward", amount=Decimal("40")),
                PettyCashRecord(
                    id=uuid4(), date=WHEN, type="outward", amount=Decimal("60"), removed=True
                ),
                PettyCashRecord(id=uuid4(), date=WHEN, type="inward", amount=Decimal("500")),
            ]
        )

        detail = PettyCashAggregator(repo).aggregate(COMPANY, WINDOW.start, WINDOW.end)
        summary = PettyCashAggregator(repo, include_removed=True).aggregate(
            COMPANY, WINDOW.start, WINDOW.end
        )

        assert (detail.total_expense, detail.count) == (Decimal("40"), 1)
        assert (summary.total_expense, summary.count) == (Decimal("100"), 2)


class TestExpenseAggregator:
    def test_partition_and_payees(self):
        def expense(kind, amount, **kwargs):
            return ExpenseRecord(
                id=uuid4(),
                company_id=COMPANY,
                date=WHEN,
                recipient_type=kind,
                amount=Decimal(amount),
                **kwargs,
            )

        repo = FakeExpenses(
            [
                expense("Supplier", "1000", supplier_name="Acme"),
                expense("Labour", "300", labour_name="Ravi"),
                expense("Other", "50"),
                expense("Other", "25", other_recipient="Plumber"),
            ]
        )

        summary = ExpenseAggregator(repo).aggregate(COMPANY, WINDOW.start, WINDOW.end)

        assert summary.total == Decimal("1375")
        assert summary.supplier == Decimal("1000")
        assert summary.labour == Decimal("300")
        assert summary.other == Decimal("75")
        assert summary.count == 4
        assert [e.payee for e in summary.expenses] == ["Acme", "Ravi", "Other", "Plumber"]
