"""Selectors for the villa kernel (read side)."""

from villa_kernel.selectors.attendance_selector import AttendanceSelector
from villa_kernel.selectors.expense_selector import ExpenseSelector
from villa_kernel.selectors.inventory_selector import InventoryMovementSelector
from villa_kernel.selectors.labour_contract_selector import LabourContractSelector
from villa_kernel.selectors.payment_selector import PaymentSelector
from villa_kernel.selectors.petty_cash_selector import PettyCashSelector
from villa_kernel.selectors.villa_selector import VillaSelector

__all__ = [
    "AttendanceSelector",
    "ExpenseSelector",
    "InventoryMovementSelector",
    "LabourContractSelector",
    "PaymentSelector",
    "PettyCashSelector",
    "VillaSelector",
]
