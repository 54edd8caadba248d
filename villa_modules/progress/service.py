"""
Villa Progress Service (``villa_modules.progress.service``).

Responsibility
--------------
Loads a villa's non-removed labour contracts and hands them to the pure
``villa_engines.progress`` deriver; lists the derived progress of every
villa of a company.  Nothing is stored: the stage is recomputed on every
call.

Architecture position
---------------------
**Modules layer** -- glue between ``LabourContractRepository`` /
``VillaRepository`` and the progress engine.  Independent of the
reconciliation path.

Failure modes
-------------
* Missing company id -> ``MissingParameterError`` before any query.
* ``CollaboratorQueryError`` from a repository propagates.
"""

from __future__ import annotations

from uuid import UUID

from sqlalchemy.orm import Session

from villa_engines.progress import VillaProgress, derive_villa_progress
from villa_kernel.domain.repositories import LabourContractRepository, VillaRepository
from villa_kernel.exceptions import MissingParameterError
from villa_kernel.logging_config import LogContext, get_logger
from villa_kernel.selectors import LabourContractSelector, VillaSelector
from villa_modules.progress.config import ProgressConfig
from villa_modules.progress.models import VillaProgressRow
from villa_modules.reporting.statements import render_to_dict

logger = get_logger("modules.progress.service")


class ProgressService:
    """
    Construction progress service.

    Contract
    --------
    * ``derive_progress`` returns a ``VillaProgress`` for one villa.
    * ``progress_summary`` returns one ``VillaProgressRow`` per non-removed
      villa of the company, ordered by villa number.
    * Read-only.
    """

    def __init__(
        self,
        session: Session | None = None,
        *,
        contracts: LabourContractRepository | None = None,
        villas: VillaRepository | None = None,
        config: ProgressConfig | None = None,
    ):
        if (contracts is None or villas is None) and session is None:
            raise ValueError("ProgressService requires a session or both repositories")
        self._contracts = contracts or LabourContractSelector(session)
        self._villas = villas or VillaSelector(session)
        self._config = config or ProgressConfig.with_defaults()

    def derive_progress(self, company_id: UUID, villa_id: UUID) -> VillaProgress:
        """Stage and completion percentage of one villa."""
        if not company_id:
            raise MissingParameterError("company_id")
        if not villa_id:
            raise MissingParameterError("villa_id")

        contracts = self._contracts.find_active(company_id, villa_id)
        progress = derive_villa_progress(
            villa_id, contracts, bands=self._config.stage_bands
        )
        logger.debug(
            "villa_progress_derived",
            extra={
                "villa_id": villa_id,
                "stage": progress.stage,
                "percentage": progress.percentage,
            },
        )
        return progress

    def progress_summary(self, company_id: UUID | None) -> list[VillaProgressRow]:
        """
        Progress of every non-removed villa of the company.

        Raises:
            MissingParameterError: if ``company_id`` is empty.
        """
        if not company_id:
            raise MissingParameterError("company_id")

        with LogContext.bind(company_id=company_id):
            rows = []
            for villa in self._villas.find_active(company_id):
                progress = self.derive_progress(company_id, villa.id)
                rows.append(
                    VillaProgressRow(
                        villa_id=villa.id,
                        name=villa.name,
                        villa_number=villa.villa_number,
                        project=villa.project_name,
                        stage=progress.stage,
                        percentage=progress.percentage,
                        last_updated=progress.last_updated,
                        total_contracts=progress.total_contracts,
                        completed_milestones=progress.completed_milestones,
                        total_milestones=progress.total_milestones,
                    )
                )
            logger.info("progress_summary_generated", extra={"villa_count": len(rows)})
        return rows

    @staticmethod
    def to_dict(result: object) -> dict | list:
        return render_to_dict(result)
