"""
Reporting Configuration Schema.

Offset and label formatting for the reconciliation reports and the
dashboard summaries.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Self

from villa_kernel.domain.time_window import (
    DEFAULT_UTC_OFFSET,
    DETAIL_LABEL_FORMAT,
    SUMMARY_LABEL_FORMAT,
    parse_utc_offset,
)
from villa_kernel.logging_config import get_logger

if TYPE_CHECKING:
    from villa_config.schema import VillaConfig

logger = get_logger("modules.reporting.config")


@dataclass
class ReportingConfig:
    """
    Configuration schema for the reporting module.

    Controls the day-cut offset, report labels and dashboard span.
    """

    # Fixed offset at which calendar days start and end
    utc_offset: str = DEFAULT_UTC_OFFSET

    # Label on the detailed daily report ("DD/MM/YYYY")
    detail_label_format: str = DETAIL_LABEL_FORMAT

    # Label on the daily summary ("DD MMM YYYY")
    summary_label_format: str = SUMMARY_LABEL_FORMAT

    # Label on chart points ("MMM")
    chart_label_format: str = "%b"

    # Months covered by the income/expense chart, current month included
    chart_months: int = 6

    def __post_init__(self):
        parse_utc_offset(self.utc_offset)
        if self.chart_months < 1:
            raise ValueError("chart_months must be at least 1")

    @classmethod
    def with_defaults(cls) -> Self:
        """Create config with standard defaults."""
        logger.info("reporting_config_created_with_defaults")
        return cls()

    @classmethod
    def from_dict(cls, data: dict) -> Self:
        """Create config from dictionary."""
        logger.info(
            "reporting_config_loading_from_dict",
            extra={"keys": sorted(data.keys())},
        )
        return cls(**data)

    @classmethod
    def from_villa_config(cls, config: VillaConfig) -> Self:
        """Derive from the deployment configuration."""
        return cls(
            utc_offset=config.timezone.utc_offset,
            detail_label_format=config.reporting.detail_label_format,
            summary_label_format=config.reporting.summary_label_format,
            chart_months=config.dashboard.chart_months,
        )
