"""
Labour contracts and their milestones.

A contract ties a labourer to a villa; its milestones are percentage-weighted
units of work, each independently marked complete with its own completion
date.  Milestones are ordered by ``position`` within their contract.

Guarantees:
    - ``completion_date`` is set only when ``is_completed`` is true
      (enforced by the writers; readers do not rely on it).
"""

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from sqlalchemy import Boolean, ForeignKey, Index, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from villa_kernel.db.base import TrackedBase


class LabourContractModel(TrackedBase):
    """A labour contract for work on one villa."""

    __tablename__ = "labour_contracts"

    __table_args__ = (
        Index("idx_labour_contract_company_villa", "company_id", "villa_id"),
    )

    company_id: Mapped[UUID] = mapped_column(nullable=False)
    labour_id: Mapped[UUID | None] = mapped_column(
        ForeignKey("labours.id"), nullable=True
    )
    villa_id: Mapped[UUID] = mapped_column(ForeignKey("villas.id"), nullable=False)
    rate_per_sqft: Mapped[Decimal] = mapped_column(default=Decimal("0"))
    total_sqft: Mapped[Decimal] = mapped_column(default=Decimal("0"))
    total_amount: Mapped[Decimal] = mapped_column(default=Decimal("0"))
    removed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    milestones: Mapped[list["MilestoneModel"]] = relationship(
        "MilestoneModel",
        back_populates="contract",
        cascade="all, delete-orphan",
        lazy="selectin",
        order_by="MilestoneModel.position",
    )

    def __repr__(self) -> str:
        return f"<LabourContractModel villa={self.villa_id} milestones={len(self.milestones)}>"


class MilestoneModel(TrackedBase):
    """A milestone within a labour contract."""

    __tablename__ = "labour_contract_milestones"

    __table_args__ = (Index("idx_milestone_contract", "contract_id"),)

    contract_id: Mapped[UUID] = mapped_column(
        ForeignKey("labour_contracts.id"), nullable=False
    )
    position: Mapped[int] = mapped_column(nullable=False, default=0)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    percentage: Mapped[Decimal] = mapped_column(nullable=False)
    amount: Mapped[Decimal] = mapped_column(nullable=False)
    is_completed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    completion_date: Mapped[datetime | None] = mapped_column(nullable=True)

    contract: Mapped["LabourContractModel"] = relationship(
        "LabourContractModel",
        back_populates="milestones",
    )

    def __repr__(self) -> str:
        state = "done" if self.is_completed else "open"
        return f"<MilestoneModel {self.name} [{state}]>"
