"""Attendance store reads."""

from collections.abc import Sequence
from datetime import datetime
from uuid import UUID

from sqlalchemy import select

from villa_kernel.domain.records import AttendanceRecord
from villa_kernel.models.attendance import AttendanceModel
from villa_kernel.selectors.base import BaseSelector


class AttendanceSelector(BaseSelector[AttendanceModel]):
    """Implements ``AttendanceRepository`` over the attendance table."""

    store_name = "attendance"

    def find_in_window(
        self,
        start: datetime,
        end: datetime,
        company_id: UUID | None = None,
    ) -> Sequence[AttendanceRecord]:
        stmt = select(AttendanceModel).where(
            AttendanceModel.date >= start,
            AttendanceModel.date <= end,
        )
        if company_id is not None:
            stmt = stmt.where(AttendanceModel.company_id == company_id)
        stmt = stmt.order_by(AttendanceModel.date, AttendanceModel.id)

        rows = self._run(
            "find_in_window", lambda: self.session.scalars(stmt).all()
        )
        return [
            AttendanceRecord(
                id=row.id,
                company_id=row.company_id,
                date=row.date,
                wage=row.wage,
                advance_deduction=row.advance_deduction,
                penalty=row.penalty,
            )
            for row in rows
        ]
