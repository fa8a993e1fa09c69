"""Domain models for derived ledger figures."""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class LedgerTotals:
    """Expense and income totals for a set of records.

    Attributes:
        total_expense: Sum of expense amounts.
        total_income: Sum of income amounts.
    """

    total_expense: float
    total_income: float

    @property
    def net_balance(self) -> float:
        """Return total_income minus total_expense."""
        return self.total_income - self.total_expense


@dataclass(frozen=True)
class CategorySpend:
    """Spend aggregated for one category, with its display label."""

    category_id: str
    label: str
    color: str
    amount: float


@dataclass(frozen=True)
class AccountBalance:
    """Stored and current balance of an account."""

    account_id: str
    name: str
    account_type: str
    color: str
    stored_balance: float
    current_balance: float


@dataclass(frozen=True)
class GoalProgress:
    """Progress of a category goal within its month.

    Attributes:
        spent: Amount spent in the goal category.
        progress_pct: Spend as a percentage of the monthly target.
        projected_spend: Daily average extrapolated to month end.
        projected_pct: Projected spend as a percentage of the target.
        remaining: Target minus spend, floored at zero.
        status: ``good``, ``warning`` or ``exceeded``.
    """

    goal_id: str
    category_id: str
    monthly_target: float
    color: str
    spent: float
    progress_pct: float
    projected_spend: float
    projected_pct: float
    remaining: float
    status: str


@dataclass(frozen=True)
class RecentActivityItem:
    """Expense line prepared for an activity feed."""

    expense_id: str
    description: str
    amount: float
    date: date
    category_label: str
    account_name: str


@dataclass(frozen=True)
class DailyTotal:
    """Expense and income sums for one day."""

    day: date
    expense: float
    income: float


__all__ = [
    "LedgerTotals",
    "CategorySpend",
    "AccountBalance",
    "GoalProgress",
    "RecentActivityItem",
    "DailyTotal",
]
