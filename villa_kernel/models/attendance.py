"""
Daily attendance records.

One row per worker per day.  ``wage`` is the net wage earned for the day;
``advance_deduction`` and ``penalty`` are recorded alongside it.  There is
no removal flag.
"""

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from sqlalchemy import ForeignKey, Index
from sqlalchemy.orm import Mapped, mapped_column

from villa_kernel.db.base import TrackedBase


class AttendanceModel(TrackedBase):
    """A worker's attendance for one day."""

    __tablename__ = "attendance"

    __table_args__ = (
        Index("idx_attendance_company_date", "company_id", "date"),
    )

    company_id: Mapped[UUID] = mapped_column(nullable=False)
    labour_id: Mapped[UUID | None] = mapped_column(
        ForeignKey("labours.id"), nullable=True
    )
    date: Mapped[datetime] = mapped_column(nullable=False)
    wage: Mapped[Decimal | None] = mapped_column(nullable=True, default=Decimal("0"))
    advance_deduction: Mapped[Decimal | None] = mapped_column(
        nullable=True, default=Decimal("0")
    )
    penalty: Mapped[Decimal | None] = mapped_column(nullable=True, default=Decimal("0"))

    def __repr__(self) -> str:
        return f"<AttendanceModel {self.date:%Y-%m-%d} wage={self.wage}>"
