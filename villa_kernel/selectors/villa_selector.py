"""Villa store reads."""

from collections.abc import Sequence
from uuid import UUID

from sqlalchemy import select

from villa_kernel.domain.records import VillaRecord
from villa_kernel.models.project import VillaModel
from villa_kernel.selectors.base import BaseSelector


class VillaSelector(BaseSelector[VillaModel]):
    """Implements ``VillaRepository``."""

    store_name = "villa"

    def find_active(self, company_id: UUID) -> Sequence[VillaRecord]:
        stmt = (
            select(VillaModel)
            .where(
                VillaModel.company_id == company_id,
                VillaModel.removed.is_(False),
            )
            .order_by(VillaModel.villa_number, VillaModel.id)
        )
        rows = self._run(
            "find_active", lambda: self.session.scalars(stmt).unique().all()
        )
        return [
            VillaRecord(
                id=row.id,
                company_id=row.company_id,
                villa_number=row.villa_number,
                name=row.name,
                project_id=row.project_id,
                project_name=row.project.name if row.project else None,
            )
            for row in rows
        ]
