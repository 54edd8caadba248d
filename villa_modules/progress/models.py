"""
Villa Progress Models (``villa_modules.progress.models``).

Frozen rows of the company-wide progress listing.  Field names are the
snake_case form of the JSON keys rendered by ``ProgressService.to_dict``.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class VillaProgressRow:
    """One villa of the progress listing."""

    villa_id: UUID
    name: str | None
    villa_number: str
    project: str | None
    stage: str
    percentage: int
    last_updated: datetime | None
    total_contracts: int
    completed_milestones: int
    total_milestones: int
