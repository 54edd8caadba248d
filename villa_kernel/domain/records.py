"""
Read-side records.

Frozen dataclasses handed from the repositories to the aggregators and
engines.  They carry exactly what the reconciliation and progress paths need,
with related display names already resolved, so nothing above the selectors
touches an ORM instance.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum
from uuid import UUID


class RecipientType(str, Enum):
    """Who an expense was paid to."""

    SUPPLIER = "Supplier"
    LABOUR = "Labour"
    OTHER = "Other"


class MovementType(str, Enum):
    """Inventory movement direction."""

    INWARD = "inward"
    OUTWARD = "outward"
    ADJUSTMENT = "adjustment"


class PettyCashType(str, Enum):
    """Petty-cash movement direction."""

    INWARD = "inward"
    OUTWARD = "outward"


@dataclass(frozen=True)
class AttendanceRecord:
    id: UUID
    company_id: UUID
    date: datetime
    wage: Decimal | None
    advance_deduction: Decimal | None
    penalty: Decimal | None


@dataclass(frozen=True)
class InventoryMovementRecord:
    id: UUID
    date: datetime
    type: str
    material_name: str | None
    quantity: Decimal


@dataclass(frozen=True)
class ExpenseRecord:
    id: UUID
    company_id: UUID
    date: datetime
    recipient_type: str
    amount: Decimal
    supplier_name: str | None = None
    labour_name: str | None = None
    other_recipient: str | None = None
    description: str | None = None
    reference: str | None = None


@dataclass(frozen=True)
class PettyCashRecord:
    id: UUID
    date: datetime
    type: str
    amount: Decimal
    description: str | None = None
    removed: bool = False


@dataclass(frozen=True)
class PaymentRecord:
    id: UUID
    date: datetime
    amount: Decimal
    client_name: str | None = None
    villa_name: str | None = None
    description: str | None = None


@dataclass(frozen=True)
class MilestoneRecord:
    name: str
    percentage: Decimal
    amount: Decimal
    is_completed: bool
    completion_date: datetime | None = None


@dataclass(frozen=True)
class LabourContractRecord:
    id: UUID
    company_id: UUID
    villa_id: UUID
    milestones: tuple[MilestoneRecord, ...]
    labour_name: str | None = None


@dataclass(frozen=True)
class VillaRecord:
    id: UUID
    company_id: UUID
    villa_number: str
    name: str | None = None
    project_id: UUID | None = None
    project_name: str | None = None
