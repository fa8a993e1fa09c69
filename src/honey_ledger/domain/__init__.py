"""Domain package for ledger rules and core models."""

from .constants import ACCOUNT_TYPES, DEFAULT_ACCOUNTS, DEFAULT_CATEGORIES
from .models import (
    Account,
    AccountBalance,
    Category,
    CategoryGoal,
    CategorySpend,
    CustomWindow,
    DashboardVisibility,
    DateRange,
    Expense,
    GoalProgress,
    Income,
    LedgerTotals,
    MonthWindow,
    PresetWindow,
    Transfer,
)
from .policies import (
    account_deletion_rejection_reason,
    transfer_rejection_reason,
)
from .services import (
    account_current_balance,
    filter_by_window,
    goal_progress,
    recent_activity,
    spend_by_category,
    total_amount,
)

__all__ = [
    "ACCOUNT_TYPES",
    "DEFAULT_ACCOUNTS",
    "DEFAULT_CATEGORIES",
    "Account",
    "AccountBalance",
    "Category",
    "CategoryGoal",
    "CategorySpend",
    "CustomWindow",
    "DashboardVisibility",
    "DateRange",
    "Expense",
    "GoalProgress",
    "Income",
    "LedgerTotals",
    "MonthWindow",
    "PresetWindow",
    "Transfer",
    "account_deletion_rejection_reason",
    "transfer_rejection_reason",
    "account_current_balance",
    "filter_by_window",
    "goal_progress",
    "recent_activity",
    "spend_by_category",
    "total_amount",
]
