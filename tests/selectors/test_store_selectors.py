"""
Tests for the read-store selectors.

Covers:
- Inclusive window filtering in UTC whatever offset the bounds carry
- Removed-row and company scoping rules per store
- Display-name resolution
- Translation of database failures into CollaboratorQueryError
"""

from datetime import timedelta
from decimal import Decimal

import pytest
from sqlalchemy.exc import OperationalError

from tests.conftest import OTHER_COMPANY_ID, TEST_COMPANY_ID, ist
from villa_kernel.domain.records import PettyCashType
from villa_kernel.domain.time_window import TimeWindowResolver
from villa_kernel.exceptions import CollaboratorQueryError
from villa_kernel.selectors import (
    AttendanceSelector,
    ExpenseSelector,
    InventoryMovementSelector,
    LabourContractSelector,
    PaymentSelector,
    PettyCashSelector,
    VillaSelector,
)

WINDOW = TimeWindowResolver().day_window("2024-03-15")


class TestAttendanceSelector:
    def test_window_is_inclusive_and_exclusive_of_next_midnight(self, session, factory):
        factory.attendance(WINDOW.start)
        factory.attendance(WINDOW.end)
        factory.attendance(WINDOW.end + timedelta(microseconds=1))
        factory.attendance(WINDOW.start - timedelta(microseconds=1))

        rows = AttendanceSelector(session).find_in_window(WINDOW.start, WINDOW.end)

        assert len(rows) == 2

    def test_company_scope(self, session, factory):
        factory.attendance(ist(2024, 3, 15), company_id=TEST_COMPANY_ID)
        factory.attendance(ist(2024, 3, 15), company_id=OTHER_COMPANY_ID)
        selector = AttendanceSelector(session)

        assert len(selector.find_in_window(WINDOW.start, WINDOW.end, TEST_COMPANY_ID)) == 1
        assert len(selector.find_in_window(WINDOW.start, WINDOW.end)) == 2

    def test_returned_dates_are_utc_aware(self, session, factory):
        factory.attendance(ist(2024, 3, 15, 9, 0))

        (row,) = AttendanceSelector(session).find_in_window(WINDOW.start, WINDOW.end)

        assert row.date.utcoffset() == timedelta(0)
        assert row.date == ist(2024, 3, 15, 9, 0)


class TestExpenseSelector:
    def test_excludes_removed_and_resolves_names(self, session, factory):
        supplier = factory.supplier("Acme Cement")
        factory.expense(ist(2024, 3, 15), Decimal("1200"), "Supplier", supplier=supplier)
        factory.expense(ist(2024, 3, 15), Decimal("99"), removed=True)

        rows = ExpenseSelector(session).find_in_window(WINDOW.start, WINDOW.end)

        assert len(rows) == 1
        assert rows[0].supplier_name == "Acme Cement"
        assert rows[0].amount == Decimal("1200")

    def test_not_company_scoped(self, session, factory):
        factory.expense(ist(2024, 3, 15), Decimal("10"), company_id=OTHER_COMPANY_ID)

        assert len(ExpenseSelector(session).find_in_window(WINDOW.start, WINDOW.end)) == 1


class TestPettyCashSelector:
    def test_type_and_removed_filters(self, session, factory):
        factory.petty_cash(ist(2024, 3, 15), Decimal("50"))
        factory.petty_cash(ist(2024, 3, 15), Decimal("70"), removed=True)
        factory.petty_cash(ist(2024, 3, 15), Decimal("500"), type="inward")
        selector = PettyCashSelector(session)

        outward = selector.find_in_window(
            WINDOW.start, WINDOW.end, movement_type=PettyCashType.OUTWARD
        )
        with_removed = selector.find_in_window(
            WINDOW.start, WINDOW.end, movement_type=PettyCashType.OUTWARD, include_removed=True
        )

        assert [r.amount for r in outward] == [Decimal("50")]
        assert sorted(r.amount for r in with_removed) == [Decimal("50"), Decimal("70")]


class TestPaymentSelector:
    def test_positive_only(self, session, factory):
        factory.payment(ist(2024, 3, 15), Decimal("1000"))
        factory.payment(ist(2024, 3, 15), Decimal("0"))
        factory.payment(ist(2024, 3, 15), Decimal("-5"))
        factory.payment(ist(2024, 3, 15), Decimal("300"), removed=True)
        selector = PaymentSelector(session)

        assert len(selector.find_in_window(WINDOW.start, WINDOW.end)) == 1
        assert len(selector.find_in_window(WINDOW.start, WINDOW.end, positive_only=False)) == 3

    def test_resolves_client_and_villa_names(self, session, factory):
        villa = factory.villa("V-07", name="Lake View")
        client = factory.client("Meera Nair")
        factory.payment(ist(2024, 3, 15), Decimal("1000"), client=client, villa=villa)

        (row,) = PaymentSelector(session).find_in_window(WINDOW.start, WINDOW.end)

        assert row.client_name == "Meera Nair"
        assert row.villa_name == "Lake View"

    def test_unnamed_villa_has_no_display_name(self, session, factory):
        villa = factory.villa("V-07")
        factory.payment(ist(2024, 3, 15), Decimal("1000"), villa=villa)

        (row,) = PaymentSelector(session).find_in_window(WINDOW.start, WINDOW.end)

        assert row.villa_name is None


class TestInventoryMovementSelector:
    def test_window_only(self, session, factory):
        factory.inventory(ist(2024, 3, 15), "inward")
        factory.inventory(ist(2024, 3, 16), "outward")

        rows = InventoryMovementSelector(session).find_in_window(WINDOW.start, WINDOW.end)

        assert [r.type for r in rows] == ["inward"]
        assert rows[0].material_name == "Cement"


class TestLabourContractSelector:
    def test_active_contracts_with_ordered_milestones(self, session, factory):
        villa = factory.villa()
        factory.contract(villa, [(True, ist(2024, 3, 1)), (False, None)])
        factory.contract(villa, [(True, None)], removed=True)
        factory.contract(villa, [(True, None)], company_id=OTHER_COMPANY_ID)

        contracts = LabourContractSelector(session).find_active(TEST_COMPANY_ID, villa.id)

        assert len(contracts) == 1
        assert [m.name for m in contracts[0].milestones] == ["Stage 1", "Stage 2"]
        assert contracts[0].milestones[0].is_completed is True


class TestVillaSelector:
    def test_active_villas_in_number_order(self, session, factory):
        project = factory.project("Palm Grove")
        factory.villa("V-02", project=project)
        factory.villa("V-01", name="Corner Villa", project=project)
        factory.villa("V-03", removed=True)
        factory.villa("V-04", company_id=OTHER_COMPANY_ID)

        villas = VillaSelector(session).find_active(TEST_COMPANY_ID)

        assert [v.villa_number for v in villas] == ["V-01", "V-02"]
        assert villas[0].name == "Corner Villa"
        assert villas[0].project_name == "Palm Grove"


class TestQueryFailure:
    def test_database_error_becomes_collaborator_error(self, session, captured_logs, monkeypatch):
        def _boom(*args, **kwargs):
            raise OperationalError("SELECT", {}, Exception("connection lost"))

        monkeypatch.setattr(session, "scalars", _boom)

        with pytest.raises(CollaboratorQueryError) as exc_info:
            ExpenseSelector(session).find_in_window(WINDOW.start, WINDOW.end)

        assert exc_info.value.store == "expense"
        assert exc_info.value.code == "COLLABORATOR_QUERY_FAILED"
        assert isinstance(exc_info.value.__cause__, OperationalError)
        assert any(r["message"] == "collaborator_query_failed" for r in captured_logs())
