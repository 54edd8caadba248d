"""
Tests for the dashboard summaries.

Covers:
- "today" single point and "month" daily points
- Source rules (no positive filter, no company filter, removed rows)
- Cent rounding
- Invalid range
- Six-month chart
"""

from datetime import datetime, timezone
from decimal import Decimal
from uuid import uuid4

import pytest

from tests.conftest import OTHER_COMPANY_ID, ist
from tests.reporting.fakes import FakePayments, fake_repositories
from villa_kernel.domain.clock import DeterministicClock
from villa_kernel.domain.records import PaymentRecord
from villa_kernel.exceptions import InvalidParameterError
from villa_modules.reporting.dashboard import DashboardService


@pytest.fixture
def service(session, clock):
    return DashboardService(session, clock=clock)


class TestMonthlySummary:
    def test_today_is_single_point(self, service, factory):
        factory.payment(ist(2024, 3, 15, 10), Decimal("1000"))
        factory.payment(ist(2024, 3, 14, 10), Decimal("999"))
        factory.attendance(ist(2024, 3, 15, 9), wage=Decimal("500"))
        factory.petty_cash(ist(2024, 3, 15, 11), Decimal("40"))
        factory.expense(ist(2024, 3, 15, 12), Decimal("200"))

        (point,) = service.monthly_summary("today")

        assert point.name == "Today"
        assert point.month == "2024-03-15"
        assert point.income == Decimal("1000")
        assert point.breakdown.labour == Decimal("500")
        assert point.breakdown.petty_cash == Decimal("40")
        assert point.breakdown.general == Decimal("200")
        assert point.expense == Decimal("740")

    def test_month_has_one_point_per_day(self, service, factory):
        factory.expense(ist(2024, 3, 1, 8), Decimal("10"))
        factory.expense(ist(2024, 3, 31, 23, 59), Decimal("20"))
        factory.expense(ist(2024, 4, 1, 0, 0), Decimal("999"))

        points = service.monthly_summary("month")

        assert len(points) == 31
        assert [p.name for p in points[:3]] == ["1", "2", "3"]
        assert points[0].month == "2024-03-01"
        assert points[0].expense == Decimal("10")
        assert points[-1].expense == Decimal("20")
        assert sum(p.expense for p in points) == Decimal("30")

    def test_default_range_is_month(self, service):
        assert len(service.monthly_summary()) == 31

    def test_source_rules(self, service, factory):
        factory.payment(ist(2024, 3, 15), Decimal("-50"))
        factory.payment(ist(2024, 3, 15), Decimal("500"), removed=True)
        factory.attendance(ist(2024, 3, 15), wage=Decimal("300"), company_id=OTHER_COMPANY_ID)
        factory.petty_cash(ist(2024, 3, 15), Decimal("70"), removed=True)
        factory.petty_cash(ist(2024, 3, 15), Decimal("700"), type="inward")
        factory.expense(ist(2024, 3, 15), Decimal("90"), removed=True)
        factory.inventory(ist(2024, 3, 15), "outward")

        (point,) = service.monthly_summary("today")

        assert point.income == Decimal("-50")
        assert point.breakdown.labour == Decimal("300")
        assert point.breakdown.petty_cash == Decimal("0")
        assert point.breakdown.general == Decimal("0")

    def test_figures_rounded_to_cents(self, clock):
        when = datetime(2024, 3, 15, 6, 0, tzinfo=timezone.utc)
        payments = FakePayments(
            [
                PaymentRecord(id=uuid4(), date=when, amount=Decimal("10.005")),
                PaymentRecord(id=uuid4(), date=when, amount=Decimal("0.0001")),
            ]
        )
        service = DashboardService(
            repositories=fake_repositories(payments=payments), clock=clock
        )

        (point,) = service.monthly_summary("today")

        assert point.income == Decimal("10.01")

    def test_invalid_range(self, service):
        with pytest.raises(InvalidParameterError) as exc_info:
            service.monthly_summary("year")

        assert exc_info.value.parameter == "range"
        assert exc_info.value.code == "INVALID_PARAMETER"

    def test_today_follows_configured_offset(self, session, factory):
        """21:00 UTC on the 14th is already the 15th in India."""
        clock = DeterministicClock(datetime(2024, 3, 14, 21, 0, tzinfo=timezone.utc))
        service = DashboardService(session, clock=clock)

        (point,) = service.monthly_summary("today")

        assert point.month == "2024-03-15"

    def test_to_dict(self, service):
        data = service.to_dict(service.monthly_summary("today"))

        assert set(data[0]) == {"name", "month", "income", "expense", "breakdown"}
        assert set(data[0]["breakdown"]) == {"labour", "pettyCash", "general"}


class TestChartData:
    def test_six_months_oldest_first(self, service, factory):
        factory.payment(ist(2023, 10, 5), Decimal("100"))
        factory.payment(ist(2023, 9, 30), Decimal("999"))
        factory.payment(ist(2024, 3, 15), Decimal("250"))
        factory.petty_cash(ist(2024, 1, 1, 0, 0), Decimal("40"))
        factory.petty_cash(ist(2024, 1, 20), Decimal("60"), removed=True)

        points = service.chart_data()

        assert [p.name for p in points] == ["Oct", "Nov", "Dec", "Jan", "Feb", "Mar"]
        assert points[0].income == Decimal("100")
        assert points[-1].income == Decimal("250")
        assert points[3].expense == Decimal("40")
        assert sum(p.income for p in points) == Decimal("350")

    def test_custom_month_count(self, service):
        assert [p.name for p in service.chart_data(2)] == ["Feb", "Mar"]

    def test_rejects_non_positive_months(self, service):
        with pytest.raises(InvalidParameterError):
            service.chart_data(0)
