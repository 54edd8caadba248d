"""
Progress Configuration Schema.

Stage classification bands for villa construction progress.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Self

from villa_engines.progress import STANDARD_STAGE_BANDS, StageBand, check_band_coverage
from villa_kernel.logging_config import get_logger

if TYPE_CHECKING:
    from villa_config.schema import VillaConfig

logger = get_logger("modules.progress.config")


@dataclass
class ProgressConfig:
    """
    Configuration schema for the progress module.

    Bands are evaluated in order and must together cover 0 through 100.
    """

    stage_bands: tuple[StageBand, ...] = STANDARD_STAGE_BANDS

    def __post_init__(self):
        check_band_coverage(self.stage_bands)

    @classmethod
    def with_defaults(cls) -> Self:
        """Create config with standard defaults."""
        logger.info("progress_config_created_with_defaults")
        return cls()

    @classmethod
    def from_dict(cls, data: dict) -> Self:
        """Create config from dictionary; bands as ``[label, min, max]`` lists."""
        if "stage_bands" in data:
            data = {
                **data,
                "stage_bands": tuple(
                    band if isinstance(band, StageBand) else StageBand(*band)
                    for band in data["stage_bands"]
                ),
            }
        logger.info(
            "progress_config_loading_from_dict",
            extra={"keys": sorted(data.keys())},
        )
        return cls(**data)

    @classmethod
    def from_villa_config(cls, config: VillaConfig) -> Self:
        """Bands from the ``progress`` section; the standard bands when it sets none."""
        if not config.progress.stage_bands:
            return cls.with_defaults()
        return cls.from_dict({"stage_bands": config.progress.stage_bands})
