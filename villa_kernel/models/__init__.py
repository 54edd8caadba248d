"""ORM models for the read stores consumed by the reconciliation core."""

from villa_kernel.models.attendance import AttendanceModel
from villa_kernel.models.expense import ExpenseModel
from villa_kernel.models.inventory import InventoryMovementModel, MaterialModel
from villa_kernel.models.labour_contract import LabourContractModel, MilestoneModel
from villa_kernel.models.party import ClientModel, LabourModel, SupplierModel
from villa_kernel.models.payment import PaymentModel
from villa_kernel.models.petty_cash import PettyCashTransactionModel
from villa_kernel.models.project import ProjectModel, VillaModel

__all__ = [
    "AttendanceModel",
    "ClientModel",
    "ExpenseModel",
    "InventoryMovementModel",
    "LabourContractModel",
    "LabourModel",
    "MaterialModel",
    "MilestoneModel",
    "PaymentModel",
    "PettyCashTransactionModel",
    "ProjectModel",
    "SupplierModel",
    "VillaModel",
]
