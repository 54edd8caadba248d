"""
Module: villa_engines
Responsibility:
    Package entrypoint re-exporting the pure calculation engines.

Architecture position:
    Engines -- pure calculation layer, zero I/O.  May import villa_kernel
    domain records and logging only; MUST NOT import villa_modules.

Invariants enforced:
    - Engines never read the clock or the database; inputs are passed in.
    - Identical inputs always produce identical outputs.
"""

from villa_engines.progress import (
    NOT_STARTED,
    STANDARD_STAGE_BANDS,
    MilestoneTally,
    StageBand,
    VillaProgress,
    check_band_coverage,
    classify_stage,
    derive_villa_progress,
    tally_milestones,
)
from villa_engines.tracer import compute_input_fingerprint, traced_engine

__all__ = [
    "NOT_STARTED",
    "STANDARD_STAGE_BANDS",
    "MilestoneTally",
    "StageBand",
    "VillaProgress",
    "check_band_coverage",
    "classify_stage",
    "compute_input_fingerprint",
    "derive_villa_progress",
    "tally_milestones",
    "traced_engine",
]
