"""
Materials and inventory movements.

Only the movement ``type`` and the number of movements feed the
reconciliation summaries; quantities are carried for completeness.
"""

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from sqlalchemy import Boolean, ForeignKey, Index, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from villa_kernel.db.base import TrackedBase
from villa_kernel.domain.records import MovementType


class MaterialModel(TrackedBase):
    """A stocked construction material."""

    __tablename__ = "materials"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    unit: Mapped[str | None] = mapped_column(String(20), nullable=True)

    def __repr__(self) -> str:
        return f"<MaterialModel {self.name}>"


class InventoryMovementModel(TrackedBase):
    """A stock movement (inward, outward or adjustment)."""

    __tablename__ = "inventory_movements"

    __table_args__ = (Index("idx_inventory_movement_date", "date"),)

    material_id: Mapped[UUID | None] = mapped_column(
        ForeignKey("materials.id"), nullable=True
    )
    date: Mapped[datetime] = mapped_column(nullable=False)
    type: Mapped[str] = mapped_column(
        String(20), nullable=False, default=MovementType.INWARD.value
    )
    quantity: Mapped[Decimal] = mapped_column(default=Decimal("0"))
    removed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    material: Mapped["MaterialModel | None"] = relationship(
        "MaterialModel",
        lazy="joined",
    )

    def __repr__(self) -> str:
        return f"<InventoryMovementModel {self.type} {self.quantity}>"
