"""Expense store reads."""

from collections.abc import Sequence
from datetime import datetime

from sqlalchemy import select

from villa_kernel.domain.records import ExpenseRecord
from villa_kernel.models.expense import ExpenseModel
from villa_kernel.selectors.base import BaseSelector


class ExpenseSelector(BaseSelector[ExpenseModel]):
    """Implements ``ExpenseRepository``; supplier and labour names are joined in."""

    store_name = "expense"

    def find_in_window(
        self,
        start: datetime,
        end: datetime,
    ) -> Sequence[ExpenseRecord]:
        stmt = (
            select(ExpenseModel)
            .where(
                ExpenseModel.date >= start,
                ExpenseModel.date <= end,
                ExpenseModel.removed.is_(False),
            )
            .order_by(ExpenseModel.date, ExpenseModel.id)
        )
        rows = self._run(
            "find_in_window", lambda: self.session.scalars(stmt).unique().all()
        )
        return [
            ExpenseRecord(
                id=row.id,
                company_id=row.company_id,
                date=row.date,
                recipient_type=row.recipient_type,
                amount=row.amount,
                supplier_name=row.supplier.name if row.supplier else None,
                labour_name=row.labour.name if row.labour else None,
                other_recipient=row.other_recipient,
                description=row.description,
                reference=row.reference,
            )
            for row in rows
        ]
