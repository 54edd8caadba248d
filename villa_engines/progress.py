"""
Module: villa_engines.progress
Responsibility:
    Reduce a villa's labour contracts and their milestones to a completion
    percentage, and classify that percentage into a construction stage.

Architecture position:
    Engines -- pure calculation layer, zero I/O.  Callers load the contracts
    (``LabourContractRepository``) and pass them in.

Invariants enforced:
    - A villa with no contracts is always 0% / "Not Started".
    - ``completed_milestones <= total_milestones``; percentage in [0, 100].
    - Stage is a deterministic function of the percentage, re-derived on
      every call; nothing is persisted.

Failure modes:
    - ValueError from ``classify_stage`` for a percentage outside [0, 100].

Usage:
    from villa_engines.progress import derive_villa_progress

    progress = derive_villa_progress(villa_id=villa.id, contracts=contracts)
    progress.stage       # "structure"
    progress.percentage  # 25
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from villa_engines.tracer import traced_engine
from villa_kernel.domain.records import LabourContractRecord
from villa_kernel.domain.values import rounded_percentage
from villa_kernel.logging_config import get_logger

logger = get_logger("engines.progress")

NOT_STARTED = "Not Started"


@dataclass(frozen=True)
class StageBand:
    """
    A contiguous, inclusive range of whole percentages sharing one stage label.

    Guarantees:
        - 0 <= min_percentage <= max_percentage <= 100.
    """

    label: str
    min_percentage: int
    max_percentage: int

    def __post_init__(self) -> None:
        if self.min_percentage < 0 or self.max_percentage > 100:
            raise ValueError("stage band must lie within [0, 100]")
        if self.max_percentage < self.min_percentage:
            raise ValueError("max_percentage cannot be less than min_percentage")

    def contains(self, percentage: int) -> bool:
        return self.min_percentage <= percentage <= self.max_percentage


def check_band_coverage(bands: Sequence[StageBand]) -> None:
    """Raise ValueError unless ``bands`` together cover every percentage 0..100."""
    covered: set[int] = set()
    for band in bands:
        covered.update(range(band.min_percentage, band.max_percentage + 1))
    if covered != set(range(101)):
        raise ValueError("stage bands must cover every percentage from 0 to 100")


# Evaluated in order.  75-99 and 100 share "finishing": a finished villa is
# not distinguished from one in finishing works.
STANDARD_STAGE_BANDS: tuple[StageBand, ...] = (
    StageBand(NOT_STARTED, 0, 0),
    StageBand("foundation", 1, 24),
    StageBand("structure", 25, 49),
    StageBand("plastering", 50, 74),
    StageBand("finishing", 75, 99),
    StageBand("finishing", 100, 100),
)


@dataclass(frozen=True)
class MilestoneTally:
    """Milestone counts flattened across every contract of a villa."""

    total_milestones: int
    completed_milestones: int
    last_completed_at: datetime | None


@dataclass(frozen=True)
class VillaProgress:
    """Derived construction progress of one villa."""

    villa_id: UUID
    stage: str
    percentage: int
    completed_milestones: int
    total_milestones: int
    last_updated: datetime | None
    total_contracts: int


def classify_stage(
    percentage: int,
    bands: Sequence[StageBand] = STANDARD_STAGE_BANDS,
) -> str:
    """Stage label for a whole percentage."""
    for band in bands:
        if band.contains(percentage):
            return band.label
    raise ValueError(f"No stage band contains percentage {percentage}")


def tally_milestones(contracts: Sequence[LabourContractRecord]) -> MilestoneTally:
    """Count milestones across contracts and find the latest completion."""
    total = 0
    completed = 0
    last_completed_at: datetime | None = None
    for contract in contracts:
        total += len(contract.milestones)
        for milestone in contract.milestones:
            if not milestone.is_completed:
                continue
            completed += 1
            when = milestone.completion_date
            if when is not None and (last_completed_at is None or when > last_completed_at):
                last_completed_at = when
    return MilestoneTally(
        total_milestones=total,
        completed_milestones=completed,
        last_completed_at=last_completed_at,
    )


@traced_engine("progress", "1.0", fingerprint_fields=("villa_id",))
def derive_villa_progress(
    villa_id: UUID,
    contracts: Sequence[LabourContractRecord],
    bands: Sequence[StageBand] = STANDARD_STAGE_BANDS,
) -> VillaProgress:
    """
    Derive a villa's stage and completion percentage from its contracts.

    Args:
        villa_id: The villa the contracts belong to.
        contracts: Non-removed labour contracts of the villa.
        bands: Stage classification bands, evaluated in order.
    """
    if not contracts:
        return VillaProgress(
            villa_id=villa_id,
            stage=NOT_STARTED,
            percentage=0,
            completed_milestones=0,
            total_milestones=0,
            last_updated=None,
            total_contracts=0,
        )

    tally = tally_milestones(contracts)
    percentage = rounded_percentage(tally.completed_milestones, tally.total_milestones)

    return VillaProgress(
        villa_id=villa_id,
        stage=classify_stage(percentage, bands),
        percentage=percentage,
        completed_milestones=tally.completed_milestones,
        total_milestones=tally.total_milestones,
        last_updated=tally.last_completed_at,
        total_contracts=len(contracts),
    )
