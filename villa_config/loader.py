"""
Configuration Loader (``villa_config.loader``).

Responsibility
--------------
Reads a YAML configuration file and parses it into the frozen
``villa_config.schema`` dataclasses.  Runtime callers go through
``villa_config.get_active_config()`` rather than calling this directly.

Invariants enforced
-------------------
* Every failure (missing file, malformed YAML, wrong structure, unusable
  offset) raises ``ConfigLoadError`` naming the source; nothing falls back
  to defaults silently once a file has been named.
* Sections absent from the file take their schema defaults.
"""

from __future__ import annotations

from dataclasses import fields
from pathlib import Path
from typing import Any

import yaml

from villa_config.schema import (
    DashboardSettings,
    DatabaseSettings,
    ProgressSettings,
    ReportingSettings,
    TimezoneSettings,
    VillaConfig,
)
from villa_engines.progress import StageBand, check_band_coverage
from villa_kernel.domain.time_window import parse_utc_offset
from villa_kernel.exceptions import ConfigLoadError


def load_yaml_file(path: Path) -> dict[str, Any]:
    """
    Load a single YAML file and return its contents as a dict.

    Raises:
        ConfigLoadError: if the file is missing, unreadable, not valid
            YAML, or does not hold a mapping at the top level.
    """
    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except OSError as exc:
        raise ConfigLoadError(str(path), f"cannot read file: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigLoadError(str(path), f"malformed YAML: {exc}") from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigLoadError(str(path), "top level must be a mapping")
    return data


def _parse_section(source: str, name: str, cls: type, data: Any) -> Any:
    if data is None:
        return cls()
    if not isinstance(data, dict):
        raise ConfigLoadError(source, f"section {name!r} must be a mapping")
    known = {f.name for f in fields(cls)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigLoadError(source, f"unknown keys in {name!r}: {unknown}")
    return cls(**data)


def _parse_progress(source: str, data: Any) -> ProgressSettings:
    progress = _parse_section(source, "progress", ProgressSettings, data)
    raw = progress.stage_bands or ()
    if not isinstance(raw, (list, tuple)):
        raise ConfigLoadError(source, "progress.stage_bands must be a list")

    bands = []
    for entry in raw:
        if (
            not isinstance(entry, (list, tuple))
            or len(entry) != 3
            or not isinstance(entry[0], str)
            or not all(isinstance(bound, int) for bound in entry[1:])
        ):
            raise ConfigLoadError(
                source, f"stage band {entry!r} must be [label, min, max]"
            )
        bands.append((entry[0], entry[1], entry[2]))

    if bands:
        try:
            check_band_coverage([StageBand(*band) for band in bands])
        except ValueError as exc:
            raise ConfigLoadError(source, str(exc)) from exc
    return ProgressSettings(stage_bands=tuple(bands))


def parse_config(data: dict[str, Any], source: str = "<dict>") -> VillaConfig:
    """Parse a loaded mapping into a ``VillaConfig``."""
    tz = _parse_section(source, "timezone", TimezoneSettings, data.get("timezone"))
    try:
        parse_utc_offset(str(tz.utc_offset))
    except ValueError as exc:
        raise ConfigLoadError(source, str(exc)) from exc

    dashboard = _parse_section(
        source, "dashboard", DashboardSettings, data.get("dashboard")
    )
    if not isinstance(dashboard.chart_months, int) or dashboard.chart_months < 1:
        raise ConfigLoadError(source, "dashboard.chart_months must be a positive integer")

    return VillaConfig(
        name=str(data.get("name", "default")),
        timezone=TimezoneSettings(utc_offset=str(tz.utc_offset)),
        database=_parse_section(source, "database", DatabaseSettings, data.get("database")),
        reporting=_parse_section(
            source, "reporting", ReportingSettings, data.get("reporting")
        ),
        dashboard=dashboard,
        progress=_parse_progress(source, data.get("progress")),
    )


def load_config_file(path: Path) -> VillaConfig:
    """Load and parse one configuration file."""
    return parse_config(load_yaml_file(path), source=str(path))
