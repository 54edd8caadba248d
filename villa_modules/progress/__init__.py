"""Villa construction progress derived from labour-contract milestones."""

from villa_modules.progress.config import ProgressConfig
from villa_modules.progress.models import VillaProgressRow
from villa_modules.progress.service import ProgressService

__all__ = ["ProgressConfig", "ProgressService", "VillaProgressRow"]
