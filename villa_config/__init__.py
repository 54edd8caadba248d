"""
villa_config -- single public entrypoint for runtime configuration.

Responsibility:
    ``get_active_config()`` is the only way services obtain configuration.
    It loads a YAML configuration set (``villa_config/sets/default.yaml``
    unless a path is given) into a frozen ``VillaConfig``.

Architecture position:
    Configuration sits above ``villa_kernel`` and below ``villa_modules``.
    The kernel never imports from ``villa_config``.

Failure modes:
    - ``ConfigLoadError`` -- file missing, malformed, or carrying an
      unusable value (for example an invalid UTC offset).
"""

from __future__ import annotations

from pathlib import Path

from villa_config.loader import load_config_file, parse_config
from villa_config.schema import (
    DashboardSettings,
    DatabaseSettings,
    ProgressSettings,
    ReportingSettings,
    TimezoneSettings,
    VillaConfig,
)
from villa_kernel.logging_config import get_logger

_logger = get_logger("config")

_DEFAULT_CONFIG_PATH = Path(__file__).parent / "sets" / "default.yaml"


def get_active_config(path: Path | str | None = None) -> VillaConfig:
    """
    Load the active configuration.

    Args:
        path: Override path to a configuration file.  Defaults to
            villa_config/sets/default.yaml.

    Raises:
        ConfigLoadError: If the file cannot be loaded or validated.
    """
    source = Path(path) if path is not None else _DEFAULT_CONFIG_PATH
    config = load_config_file(source)
    _logger.info(
        "villa_config_loaded",
        extra={
            "config_name": config.name,
            "source": str(source),
            "utc_offset": config.timezone.utc_offset,
        },
    )
    return config


__all__ = [
    "DashboardSettings",
    "DatabaseSettings",
    "ProgressSettings",
    "ReportingSettings",
    "TimezoneSettings",
    "VillaConfig",
    "get_active_config",
    "parse_config",
]
