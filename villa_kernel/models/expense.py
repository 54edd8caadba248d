"""
Expense register.

Each expense is paid to a supplier, a labourer or another recipient, as
declared by ``recipient_type``.  The supplier / labour relationships are
eagerly joined so that selectors can resolve payee names without extra
round trips.
"""

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from sqlalchemy import Boolean, ForeignKey, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from villa_kernel.db.base import TrackedBase
from villa_kernel.domain.records import RecipientType
from villa_kernel.models.party import LabourModel, SupplierModel


class ExpenseModel(TrackedBase):
    """A recorded expense payment."""

    __tablename__ = "expenses"

    __table_args__ = (
        Index("idx_expense_date", "date"),
        Index("idx_expense_company", "company_id"),
    )

    company_id: Mapped[UUID] = mapped_column(nullable=False)
    number: Mapped[int | None] = mapped_column(nullable=True)
    date: Mapped[datetime] = mapped_column(nullable=False)
    recipient_type: Mapped[str] = mapped_column(
        String(20), nullable=False, default=RecipientType.OTHER.value
    )
    supplier_id: Mapped[UUID | None] = mapped_column(
        ForeignKey("suppliers.id"), nullable=True
    )
    labour_id: Mapped[UUID | None] = mapped_column(
        ForeignKey("labours.id"), nullable=True
    )
    villa_id: Mapped[UUID | None] = mapped_column(
        ForeignKey("villas.id"), nullable=True
    )
    other_recipient: Mapped[str | None] = mapped_column(String(255), nullable=True)
    amount: Mapped[Decimal] = mapped_column(nullable=False)
    payment_mode: Mapped[str] = mapped_column(String(30), nullable=False, default="Cash")
    reference: Mapped[str | None] = mapped_column(String(100), nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    removed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    supplier: Mapped["SupplierModel | None"] = relationship(
        "SupplierModel",
        lazy="joined",
    )
    labour: Mapped["LabourModel | None"] = relationship(
        "LabourModel",
        lazy="joined",
    )

    def __repr__(self) -> str:
        return f"<ExpenseModel {self.recipient_type} {self.amount}>"
