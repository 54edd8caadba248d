"""
Typed repository interfaces, one per read store.

Aggregators and services receive these by constructor injection; the
SQLAlchemy selectors in ``villa_kernel.selectors`` are the production
implementations.  Every method is a pure read over the caller's session.

Window bounds are inclusive on both ends: an implementation must select
``start <= date <= end``.  A store that cannot execute its query raises
``CollaboratorQueryError``; it never returns a partial result.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime
from typing import Protocol
from uuid import UUID

from villa_kernel.domain.records import (
    AttendanceRecord,
    ExpenseRecord,
    InventoryMovementRecord,
    LabourContractRecord,
    PaymentRecord,
    PettyCashRecord,
    PettyCashType,
    VillaRecord,
)


class AttendanceRepository(Protocol):
    def find_in_window(
        self,
        start: datetime,
        end: datetime,
        company_id: UUID | None = None,
    ) -> Sequence[AttendanceRecord]:
        """Attendance in the window; all companies when company_id is None."""
        ...


class InventoryMovementRepository(Protocol):
    def find_in_window(
        self,
        start: datetime,
        end: datetime,
    ) -> Sequence[InventoryMovementRecord]:
        """Every inventory movement in the window."""
        ...


class ExpenseRepository(Protocol):
    def find_in_window(
        self,
        start: datetime,
        end: datetime,
    ) -> Sequence[ExpenseRecord]:
        """Non-removed expenses in the window, payee names resolved."""
        ...


class PettyCashRepository(Protocol):
    def find_in_window(
        self,
        start: datetime,
        end: datetime,
        movement_type: PettyCashType | None = None,
        include_removed: bool = False,
    ) -> Sequence[PettyCashRecord]:
        """Petty-cash movements in the window, optionally of one type."""
        ...


class PaymentRepository(Protocol):
    def find_in_window(
        self,
        start: datetime,
        end: datetime,
        positive_only: bool = True,
    ) -> Sequence[PaymentRecord]:
        """Non-removed payments in the window, client and villa names resolved."""
        ...


class LabourContractRepository(Protocol):
    def find_active(
        self,
        company_id: UUID,
        villa_id: UUID,
    ) -> Sequence[LabourContractRecord]:
        """Non-removed contracts for the villa, milestones in contract order."""
        ...


class VillaRepository(Protocol):
    def find_active(self, company_id: UUID) -> Sequence[VillaRecord]:
        """Non-removed villas of the company ordered by villa number."""
        ...
