"""
Petty-cash movements.

``inward`` tops up the cash box; ``outward`` is a cash disbursement and is
the only type counted as an expense.
"""

from datetime import datetime
from decimal import Decimal

from sqlalchemy import Boolean, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from villa_kernel.db.base import TrackedBase
from villa_kernel.domain.records import PettyCashType


class PettyCashTransactionModel(TrackedBase):
    """A petty-cash movement."""

    __tablename__ = "petty_cash_transactions"

    __table_args__ = (Index("idx_petty_cash_date_type", "date", "type"),)

    date: Mapped[datetime] = mapped_column(nullable=False)
    type: Mapped[str] = mapped_column(
        String(20), nullable=False, default=PettyCashType.OUTWARD.value
    )
    amount: Mapped[Decimal] = mapped_column(nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    removed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    def __repr__(self) -> str:
        return f"<PettyCashTransactionModel {self.type} {self.amount}>"
