"""Domain services package."""

from .ledger import (
    account_current_balance,
    category_spend_items,
    compute_account_balances,
    compute_totals,
    daily_totals,
    goal_progress,
    goal_status,
    recent_activity,
    spend_by_category,
    total_amount,
)
from .resolution import (
    find_account,
    find_category,
    resolve_account_name,
    resolve_category_color,
    resolve_category_label,
)
from .windows import (
    filter_by_window,
    month_range,
    resolve_window,
    subtract_months,
)

__all__ = [
    "account_current_balance",
    "category_spend_items",
    "compute_account_balances",
    "compute_totals",
    "daily_totals",
    "goal_progress",
    "goal_status",
    "recent_activity",
    "spend_by_category",
    "total_amount",
    "find_account",
    "find_category",
    "resolve_account_name",
    "resolve_category_color",
    "resolve_category_label",
    "filter_by_window",
    "month_range",
    "resolve_window",
    "subtract_months",
]
