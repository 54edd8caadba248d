"""Inventory movement store reads."""

from collections.abc import Sequence
from datetime import datetime

from sqlalchemy import select

from villa_kernel.domain.records import InventoryMovementRecord
from villa_kernel.models.inventory import InventoryMovementModel
from villa_kernel.selectors.base import BaseSelector


class InventoryMovementSelector(BaseSelector[InventoryMovementModel]):
    """
    Implements ``InventoryMovementRepository``.

    The filter is the window only: no company scope and no removal flag,
    matching how movement counts have always been reported.
    """

    store_name = "inventory_movement"

    def find_in_window(
        self,
        start: datetime,
        end: datetime,
    ) -> Sequence[InventoryMovementRecord]:
        stmt = (
            select(InventoryMovementModel)
            .where(
                InventoryMovementModel.date >= start,
                InventoryMovementModel.date <= end,
            )
            .order_by(InventoryMovementModel.date, InventoryMovementModel.id)
        )
        rows = self._run(
            "find_in_window", lambda: self.session.scalars(stmt).unique().all()
        )
        return [
            InventoryMovementRecord(
                id=row.id,
                date=row.date,
                type=row.type,
                material_name=row.material.name if row.material else None,
                quantity=row.quantity,
            )
            for row in rows
        ]
