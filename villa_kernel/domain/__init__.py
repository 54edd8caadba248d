"""
Pure domain layer.

Records, repository interfaces, time windows, rounding and the clock
abstraction.  Nothing here touches the ORM or the database.
"""

from villa_kernel.domain.clock import Clock, DeterministicClock, SystemClock
from villa_kernel.domain.records import (
    AttendanceRecord,
    ExpenseRecord,
    InventoryMovementRecord,
    LabourContractRecord,
    MilestoneRecord,
    MovementType,
    PaymentRecord,
    PettyCashRecord,
    PettyCashType,
    RecipientType,
    VillaRecord,
)
from villa_kernel.domain.time_window import DayWindow, TimeWindowResolver, parse_utc_offset
from villa_kernel.domain.values import round_cents, round_half_up, rounded_percentage

__all__ = [
    "AttendanceRecord",
    "Clock",
    "DayWindow",
    "DeterministicClock",
    "ExpenseRecord",
    "InventoryMovementRecord",
    "LabourContractRecord",
    "MilestoneRecord",
    "MovementType",
    "PaymentRecord",
    "PettyCashRecord",
    "PettyCashType",
    "RecipientType",
    "SystemClock",
    "TimeWindowResolver",
    "VillaRecord",
    "parse_utc_offset",
    "round_cents",
    "round_half_up",
    "rounded_percentage",
]
