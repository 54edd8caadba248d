"""
Counterparty models: clients, suppliers and labourers.

The reconciliation core only reads their display names, to resolve the payee
of an expense or the payer of a collection.
"""

from uuid import UUID

from sqlalchemy import Boolean, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from villa_kernel.db.base import TrackedBase


class ClientModel(TrackedBase):
    """A customer who books villas and pays collections."""

    __tablename__ = "clients"

    __table_args__ = (Index("idx_client_company", "company_id"),)

    company_id: Mapped[UUID] = mapped_column(nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    phone: Mapped[str | None] = mapped_column(String(50), nullable=True)
    removed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    def __repr__(self) -> str:
        return f"<ClientModel {self.name}>"


class SupplierModel(TrackedBase):
    """A material supplier paid through the expense register."""

    __tablename__ = "suppliers"

    __table_args__ = (Index("idx_supplier_company", "company_id"),)

    company_id: Mapped[UUID] = mapped_column(nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    removed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    def __repr__(self) -> str:
        return f"<SupplierModel {self.name}>"


class LabourModel(TrackedBase):
    """A worker or labour contractor."""

    __tablename__ = "labours"

    __table_args__ = (Index("idx_labour_company", "company_id"),)

    company_id: Mapped[UUID] = mapped_column(nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    skill: Mapped[str | None] = mapped_column(String(100), nullable=True)
    removed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    def __repr__(self) -> str:
        return f"<LabourModel {self.name}>"
