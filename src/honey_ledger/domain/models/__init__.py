"""Domain models package."""

from .ledger import (
    AccountBalance,
    CategorySpend,
    DailyTotal,
    GoalProgress,
    LedgerTotals,
    RecentActivityItem,
)
from .records import (
    Account,
    Category,
    CategoryGoal,
    Expense,
    Income,
    Transfer,
    parse_record_date,
)
from .settings import DASHBOARD_SECTIONS, DashboardVisibility
from .windows import (
    PRESET_PERIODS,
    CustomWindow,
    DateRange,
    MonthWindow,
    PresetWindow,
    TimeWindow,
)

__all__ = [
    "Account",
    "Category",
    "CategoryGoal",
    "Expense",
    "Income",
    "Transfer",
    "parse_record_date",
    "AccountBalance",
    "CategorySpend",
    "DailyTotal",
    "GoalProgress",
    "LedgerTotals",
    "RecentActivityItem",
    "DASHBOARD_SECTIONS",
    "DashboardVisibility",
    "PRESET_PERIODS",
    "CustomWindow",
    "DateRange",
    "MonthWindow",
    "PresetWindow",
    "TimeWindow",
]
