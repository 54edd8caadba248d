"""Payment (collection) store reads."""

from collections.abc import Sequence
from datetime import datetime

from sqlalchemy import select

from villa_kernel.domain.records import PaymentRecord
from villa_kernel.models.payment import PaymentModel
from villa_kernel.selectors.base import BaseSelector


class PaymentSelector(BaseSelector[PaymentModel]):
    """Implements ``PaymentRepository``; client and villa names are joined in."""

    store_name = "payment"

    def find_in_window(
        self,
        start: datetime,
        end: datetime,
        positive_only: bool = True,
    ) -> Sequence[PaymentRecord]:
        stmt = select(PaymentModel).where(
            PaymentModel.date >= start,
            PaymentModel.date <= end,
            PaymentModel.removed.is_(False),
        )
        if positive_only:
            stmt = stmt.where(PaymentModel.amount > 0)
        stmt = stmt.order_by(PaymentModel.date, PaymentModel.id)

        rows = self._run(
            "find_in_window", lambda: self.session.scalars(stmt).unique().all()
        )
        return [
            PaymentRecord(
                id=row.id,
                date=row.date,
                amount=row.amount,
                client_name=row.client.name if row.client else None,
                villa_name=row.villa.name if row.villa else None,
                description=row.description,
            )
            for row in rows
        ]
