"""
Project and villa models.

Guarantees:
    - A villa belongs to one company and optionally to one project.
    - Soft deletion is expressed by ``removed``; readers filter on it.
"""

from uuid import UUID

from sqlalchemy import Boolean, ForeignKey, Index, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from villa_kernel.db.base import TrackedBase


class ProjectModel(TrackedBase):
    """A real-estate project grouping villas."""

    __tablename__ = "projects"

    __table_args__ = (Index("idx_project_company", "company_id"),)

    company_id: Mapped[UUID] = mapped_column(nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    removed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    def __repr__(self) -> str:
        return f"<ProjectModel {self.name}>"


class VillaModel(TrackedBase):
    """A villa (unit) under construction."""

    __tablename__ = "villas"

    __table_args__ = (
        Index("idx_villa_company", "company_id"),
        Index("idx_villa_project", "project_id"),
    )

    company_id: Mapped[UUID] = mapped_column(nullable=False)
    project_id: Mapped[UUID | None] = mapped_column(
        ForeignKey("projects.id"), nullable=True
    )
    name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    villa_number: Mapped[str] = mapped_column(String(50), nullable=False)
    removed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    project: Mapped["ProjectModel | None"] = relationship(
        "ProjectModel",
        lazy="joined",
    )

    def __repr__(self) -> str:
        return f"<VillaModel {self.villa_number}>"
