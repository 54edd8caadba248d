"""
Pytest fixtures for the villa reconciliation test suite.

Provides:
- In-memory SQLite sessions with every table created
- A deterministic clock
- Seeding helpers for the transactional stores
- Captured structured logs

SQLite stands in for PostgreSQL here; timestamps go through the
UTC-normalizing column type so window comparisons behave the same.
"""

import json
import logging
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from io import StringIO
from typing import Generator
from uuid import UUID

import pytest
from sqlalchemy.orm import Session

from villa_kernel.db.engine import (
    create_tables,
    drop_tables,
    get_session,
    init_engine_from_url,
    reset_engine,
)
from villa_kernel.domain.clock import DeterministicClock
from villa_kernel.logging_config import (
    LogContext,
    StructuredFormatter,
    configure_logging,
    reset_logging,
)
from villa_kernel.models import (
    AttendanceModel,
    ClientModel,
    ExpenseModel,
    InventoryMovementModel,
    LabourContractModel,
    LabourModel,
    MaterialModel,
    MilestoneModel,
    PaymentModel,
    PettyCashTransactionModel,
    ProjectModel,
    SupplierModel,
    VillaModel,
)

TEST_COMPANY_ID = UUID("00000000-0000-4000-a000-000000000001")
OTHER_COMPANY_ID = UUID("00000000-0000-4000-a000-000000000002")

IST = timezone(timedelta(hours=5, minutes=30))


def ist(year: int, month: int, day: int, hour: int = 12, minute: int = 0) -> datetime:
    """An instant given as India Standard Time wall-clock."""
    return datetime(year, month, day, hour, minute, tzinfo=IST)


# =============================================================================
# Logging fixtures
# =============================================================================


@pytest.fixture(autouse=True, scope="session")
def _configure_test_logging():
    """Configure structured logging for the test suite."""
    reset_logging()
    configure_logging(level=logging.DEBUG)
    yield
    reset_logging()


@pytest.fixture(autouse=True)
def _clear_log_context():
    """Clear LogContext between tests to prevent cross-test contamination."""
    LogContext.clear()
    yield
    LogContext.clear()


@pytest.fixture
def captured_logs():
    """
    Capture villa_kernel logs as parsed JSON dicts.

    Usage::

        def test_something(captured_logs, reporting_service):
            reporting_service.daily_report(...)
            logs = captured_logs()
            assert any(r["message"] == "daily_report_generated" for r in logs)
    """
    stream = StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(StructuredFormatter())
    root = logging.getLogger("villa_kernel")
    previous_level = root.level
    root.setLevel(logging.DEBUG)
    root.addHandler(handler)

    def _get_records() -> list[dict]:
        lines = stream.getvalue().strip().split("\n")
        return [json.loads(line) for line in lines if line]

    yield _get_records

    root.removeHandler(handler)
    root.setLevel(previous_level)


# =============================================================================
# Database
# =============================================================================


@pytest.fixture
def session() -> Generator[Session, None, None]:
    """A session over a fresh in-memory database."""
    init_engine_from_url("sqlite://")
    create_tables()
    sess = get_session()
    yield sess
    try:
        sess.close()
        drop_tables()
    finally:
        reset_engine()


@pytest.fixture
def clock() -> DeterministicClock:
    """Fixed at 2024-03-15 12:00 IST."""
    return DeterministicClock(ist(2024, 3, 15).astimezone(timezone.utc))


# =============================================================================
# Seeding
# =============================================================================


class VillaDataFactory:
    """Adds rows to the stores; every helper flushes and returns the model."""

    def __init__(self, session: Session):
        self.session = session

    def _add(self, model):
        self.session.add(model)
        self.session.flush()
        return model

    def supplier(self, name: str = "Acme Cement", company_id: UUID = TEST_COMPANY_ID):
        return self._add(SupplierModel(company_id=company_id, name=name))

    def labour(self, name: str = "Ravi Kumar", company_id: UUID = TEST_COMPANY_ID):
        return self._add(LabourModel(company_id=company_id, name=name))

    def client(self, name: str = "Meera Nair", company_id: UUID = TEST_COMPANY_ID):
        return self._add(ClientModel(company_id=company_id, name=name))

    def project(self, name: str = "Palm Grove", company_id: UUID = TEST_COMPANY_ID):
        return self._add(ProjectModel(company_id=company_id, name=name))

    def villa(
        self,
        villa_number: str = "V-01",
        name: str | None = None,
        project: ProjectModel | None = None,
        company_id: UUID = TEST_COMPANY_ID,
        removed: bool = False,
    ):
        return self._add(
            VillaModel(
                company_id=company_id,
                villa_number=villa_number,
                name=name,
                project_id=project.id if project else None,
                removed=removed,
            )
        )

    def attendance(
        self,
        when: datetime,
        wage: Decimal | None = Decimal("500"),
        advance_deduction: Decimal | None = Decimal("0"),
        penalty: Decimal | None = Decimal("0"),
        company_id: UUID = TEST_COMPANY_ID,
    ):
        return self._add(
            AttendanceModel(
                company_id=company_id,
                date=when,
                wage=wage,
                advance_deduction=advance_deduction,
                penalty=penalty,
            )
        )

    def expense(
        self,
        when: datetime,
        amount: Decimal,
        recipient_type: str = "Other",
        supplier: SupplierModel | None = None,
        labour: LabourModel | None = None,
        other_recipient: str | None = None,
        description: str | None = None,
        reference: str | None = None,
        removed: bool = False,
        company_id: UUID = TEST_COMPANY_ID,
    ):
        return self._add(
            ExpenseModel(
                company_id=company_id,
                date=when,
                recipient_type=recipient_type,
                supplier_id=supplier.id if supplier else None,
                labour_id=labour.id if labour else None,
                other_recipient=other_recipient,
                amount=amount,
                description=description,
                reference=reference,
                removed=removed,
            )
        )

    def petty_cash(
        self,
        when: datetime,
        amount: Decimal,
        type: str = "outward",
        description: str | None = None,
        removed: bool = False,
    ):
        return self._add(
            PettyCashTransactionModel(
                date=when,
                type=type,
                amount=amount,
                description=description,
                removed=removed,
            )
        )

    def payment(
        self,
        when: datetime,
        amount: Decimal,
        client: ClientModel | None = None,
        villa: VillaModel | None = None,
        description: str | None = None,
        removed: bool = False,
    ):
        return self._add(
            PaymentModel(
                date=when,
                amount=amount,
                client_id=client.id if client else None,
                villa_id=villa.id if villa else None,
                description=description,
                removed=removed,
            )
        )

    def inventory(self, when: datetime, type: str = "inward", quantity: Decimal = Decimal("10")):
        material = self._add(MaterialModel(name="Cement", unit="bag"))
        return self._add(
            InventoryMovementModel(
                material_id=material.id,
                date=when,
                type=type,
                quantity=quantity,
            )
        )

    def contract(
        self,
        villa: VillaModel,
        milestones: list[tuple[bool, datetime | None]],
        company_id: UUID = TEST_COMPANY_ID,
        removed: bool = False,
    ):
        """A labour contract; ``milestones`` is a list of (completed, completed_at)."""
        contract = self._add(
            LabourContractModel(
                company_id=company_id,
                villa_id=villa.id,
                removed=removed,
            )
        )
        for position, (done, completed_at) in enumerate(milestones):
            self._add(
                MilestoneModel(
                    contract_id=contract.id,
                    position=position,
                    name=f"Stage {position + 1}",
                    percentage=Decimal("25"),
                    amount=Decimal("10000"),
                    is_completed=done,
                    completion_date=completed_at,
                )
            )
        self.session.expire(contract)
        return contract


@pytest.fixture
def factory(session) -> VillaDataFactory:
    return VillaDataFactory(session)
