"""
Reconciliation reporting.

Daily cash-flow reconciliation across the attendance, inventory, expense,
petty-cash and payment stores, the multi-day range report, the daily
summary and the dashboard series.
"""

from villa_modules.reporting.aggregators import (
    CollectionsAggregator,
    ExpenseAggregator,
    InventoryMovementAggregator,
    LabourCostAggregator,
    PettyCashAggregator,
    SourceRepositories,
)
from villa_modules.reporting.config import ReportingConfig
from villa_modules.reporting.dashboard import DashboardService
from villa_modules.reporting.models import (
    ChartPoint,
    DailyReport,
    DailySummary,
    DashboardBreakdown,
    DashboardPoint,
    ItemType,
    ReconciliationItem,
    SummaryRange,
)
from villa_modules.reporting.service import ReportingService

__all__ = [
    "ChartPoint",
    "CollectionsAggregator",
    "DailyReport",
    "DailySummary",
    "DashboardBreakdown",
    "DashboardPoint",
    "DashboardService",
    "ExpenseAggregator",
    "InventoryMovementAggregator",
    "ItemType",
    "LabourCostAggregator",
    "PettyCashAggregator",
    "ReconciliationItem",
    "ReportingConfig",
    "ReportingService",
    "SourceRepositories",
    "SummaryRange",
]
