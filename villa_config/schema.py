"""
Villa reporting configuration schema.

Frozen dataclasses the YAML loader parses into.  ``VillaConfig`` is the
runtime artifact handed to services; module configs (``ReportingConfig``,
``ProgressConfig``) are derived from it.
"""

from __future__ import annotations

from dataclasses import dataclass, field

# ---------------------------------------------------------------------------
# Sections
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class TimezoneSettings:
    """Fixed offset at which calendar days are cut."""

    utc_offset: str = "+05:30"


@dataclass(frozen=True)
class DatabaseSettings:
    url: str = "sqlite://"
    echo: bool = False


@dataclass(frozen=True)
class ReportingSettings:
    """strftime patterns for report date labels."""

    detail_label_format: str = "%d/%m/%Y"
    summary_label_format: str = "%d %b %Y"


@dataclass(frozen=True)
class DashboardSettings:
    chart_months: int = 6


@dataclass(frozen=True)
class ProgressSettings:
    """Stage bands as ``(label, min, max)`` triples; empty means the standard bands."""

    stage_bands: tuple[tuple[str, int, int], ...] = ()


# ---------------------------------------------------------------------------
# Root
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class VillaConfig:
    """Complete configuration for one deployment."""

    name: str = "default"
    timezone: TimezoneSettings = field(default_factory=TimezoneSettings)
    database: DatabaseSettings = field(default_factory=DatabaseSettings)
    reporting: ReportingSettings = field(default_factory=ReportingSettings)
    dashboard: DashboardSettings = field(default_factory=DashboardSettings)
    progress: ProgressSettings = field(default_factory=ProgressSettings)
