"""
Customer payment collections.

Client and villa relationships are eagerly joined for display names.
Reversals and refunds are recorded as non-positive amounts.
"""

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from sqlalchemy import Boolean, ForeignKey, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from villa_kernel.db.base import TrackedBase
from villa_kernel.models.party import ClientModel
from villa_kernel.models.project import VillaModel


class PaymentModel(TrackedBase):
    """A payment received from a client."""

    __tablename__ = "payments"

    __table_args__ = (Index("idx_payment_date", "date"),)

    date: Mapped[datetime] = mapped_column(nullable=False)
    amount: Mapped[Decimal] = mapped_column(nullable=False)
    client_id: Mapped[UUID | None] = mapped_column(
        ForeignKey("clients.id"), nullable=True
    )
    villa_id: Mapped[UUID | None] = mapped_column(
        ForeignKey("villas.id"), nullable=True
    )
    payment_mode: Mapped[str] = mapped_column(String(30), nullable=False, default="Cash")
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    removed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    client: Mapped["ClientModel | None"] = relationship(
        "ClientModel",
        lazy="joined",
    )
    villa: Mapped["VillaModel | None"] = relationship(
        "VillaModel",
        lazy="joined",
    )

    def __repr__(self) -> str:
        return f"<PaymentModel {self.amount}>"
