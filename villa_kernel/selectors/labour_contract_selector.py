"""Labour contract store reads (with milestones)."""

from collections.abc import Sequence
from uuid import UUID

from sqlalchemy import select

from villa_kernel.domain.records import LabourContractRecord, MilestoneRecord
from villa_kernel.models.labour_contract import LabourContractModel
from villa_kernel.models.party import LabourModel
from villa_kernel.selectors.base import BaseSelector


class LabourContractSelector(BaseSelector[LabourContractModel]):
    """
    Implements ``LabourContractRepository``.

    Milestones are loaded with the contract (selectin) and keep their
    position order.
    """

    store_name = "labour_contract"

    def find_active(
        self,
        company_id: UUID,
        villa_id: UUID,
    ) -> Sequence[LabourContractRecord]:
        stmt = (
            select(LabourContractModel, LabourModel.name)
            .outerjoin(LabourModel, LabourModel.id == LabourContractModel.labour_id)
            .where(
                LabourContractModel.company_id == company_id,
                LabourContractModel.villa_id == villa_id,
                LabourContractModel.removed.is_(False),
            )
            .order_by(LabourContractModel.created_at, LabourContractModel.id)
        )
        rows = self._run("find_active", lambda: self.session.execute(stmt).all())
        return [
            LabourContractRecord(
                id=contract.id,
                company_id=contract.company_id,
                villa_id=contract.villa_id,
                labour_name=labour_name,
                milestones=tuple(
                    MilestoneRecord(
                        name=m.name,
                        percentage=m.percentage,
                        amount=m.amount,
                        is_completed=m.is_completed,
                        completion_date=m.completion_date,
                    )
                    for m in contract.milestones
                ),
            )
            for contract, labour_name in rows
        ]
