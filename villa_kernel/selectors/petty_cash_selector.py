"""Petty-cash store reads."""

from collections.abc import Sequence
from datetime import datetime

from sqlalchemy import select

from villa_kernel.domain.records import PettyCashRecord, PettyCashType
from villa_kernel.models.petty_cash import PettyCashTransactionModel
from villa_kernel.selectors.base import BaseSelector


class PettyCashSelector(BaseSelector[PettyCashTransactionModel]):
    """Implements ``PettyCashRepository``."""

    store_name = "petty_cash"

    def find_in_window(
        self,
        start: datetime,
        end: datetime,
        movement_type: PettyCashType | None = None,
        include_removed: bool = False,
    ) -> Sequence[PettyCashRecord]:
        model = PettyCashTransactionModel
        stmt = select(model).where(model.date >= start, model.date <= end)
        if movement_type is not None:
            stmt = stmt.where(model.type == PettyCashType(movement_type).value)
        if not include_removed:
            stmt = stmt.where(model.removed.is_(False))
        stmt = stmt.order_by(model.date, model.id)

        rows = self._run(
            "find_in_window", lambda: self.session.scalars(stmt).all()
        )
        return [
            PettyCashRecord(
                id=row.id,
                date=row.date,
                type=row.type,
                amount=row.amount,
                description=row.description,
                removed=row.removed,
            )
            for row in rows
        ]
