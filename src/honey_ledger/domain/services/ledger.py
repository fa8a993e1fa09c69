"""Domain services for ledger aggregates.

All functions are pure: they read record snapshots and return derived
figures without touching storage. Account balances always use the full
history; windowed views filter records before calling these helpers.
"""

from calendar import monthrange
from collections.abc import Iterable, Mapping, Sequence
from datetime import date

from honey_ledger.domain.constants import (
    GOAL_EXCEEDED_PCT,
    GOAL_WARNING_PCT,
)
from honey_ledger.domain.models import (
    Account,
    AccountBalance,
    Category,
    CategoryGoal,
    CategorySpend,
    DailyTotal,
    Expense,
    GoalProgress,
    Income,
    LedgerTotals,
    Transfer,
)
from honey_ledger.domain.services.resolution import (
    resolve_category_color,
    resolve_category_label,
)


def total_amount(records: Iterable) -> float:
    """Return the sum of ``amount`` over the records, 0.0 when empty."""
    return sum((record.amount for record in records), start=0.0)


def compute_totals(
    expenses: Iterable[Expense],
    income: Iterable[Income],
) -> LedgerTotals:
    return LedgerTotals(
        total_expense=total_amount(expenses),
        total_income=total_amount(income),
    )


def spend_by_category(expenses: Iterable[Expense]) -> dict[str, float]:
    """Group expenses by category and sum their amounts.

    Categories without expenses are absent from the mapping. Keys keep the
    order in which categories first appear.
    """
    totals: dict[str, float] = {}
    for expense in expenses:
        totals[expense.category_id] = (
            totals.get(expense.category_id, 0.0) + expense.amount
        )
    return totals


def category_spend_items(
    spend: Mapping[str, float],
    categories: Sequence[Category],
) -> list[CategorySpend]:
    """Attach display labels and colours to a category spend mapping."""
    return [
        CategorySpend(
            category_id=category_id,
            label=resolve_category_label(category_id, categories),
            color=resolve_category_color(category_id, categories),
            amount=amount,
        )
        for category_id, amount in spend.items()
    ]


def account_current_balance(
    account: Account,
    expenses: Iterable[Expense],
    income: Iterable[Income],
    transfers: Iterable[Transfer],
) -> float:
    """Compute the current balance of an account from its full history.

    Args:
        account: Account holding the stored base balance.
        expenses: Every expense, unfiltered.
        income: Every income record, unfiltered.
        transfers: Every transfer, unfiltered.

    Returns:
        float: Stored balance plus income and incoming transfers, minus
        expenses and outgoing transfers.
    """
    balance = account.balance
    balance += total_amount(
        item for item in income if item.account_id == account.id
    )
    balance -= total_amount(
        item for item in expenses if item.account_id == account.id
    )
    for transfer in transfers:
        if transfer.to_account_id == account.id:
            balance += transfer.amount
        if transfer.from_account_id == account.id:
            balance -= transfer.amount
    return balance


def compute_account_balances(
    accounts: Sequence[Account],
    expenses: Sequence[Expense],
    income: Sequence[Income],
    transfers: Sequence[Transfer],
) -> list[AccountBalance]:
    return [
        AccountBalance(
            account_id=account.id,
            name=account.name,
            account_type=account.account_type,
            color=account.color,
            stored_balance=account.balance,
            current_balance=account_current_balance(
                account,
                expenses,
                income,
                transfers,
            ),
        )
        for account in accounts
    ]


def goal_status(progress_pct: float) -> str:
    if progress_pct > GOAL_EXCEEDED_PCT:
        return "exceeded"
    if progress_pct > GOAL_WARNING_PCT:
        return "warning"
    return "good"


def goal_progress(
    goal: CategoryGoal,
    spend: Mapping[str, float],
    now: date,
) -> GoalProgress:
    """Compute progress and month-end projection for a goal.

    Args:
        goal: Goal holding the category and its monthly target.
        spend: Category spend mapping, usually for the current month.
        now: Date whose month drives the projection; days elapsed is its
            day of month.

    Returns:
        GoalProgress: Spend, percentages, projection and status.
    """
    spent = spend.get(goal.category_id, 0.0)
    target = goal.monthly_target
    days_in_month = monthrange(now.year, now.month)[1]
    projected_spend = spent / now.day * days_in_month
    if target > 0:
        progress_pct = 100 * spent / target
        projected_pct = 100 * projected_spend / target
    else:
        progress_pct = 0.0
        projected_pct = 0.0
    return GoalProgress(
        goal_id=goal.id,
        category_id=goal.category_id,
        monthly_target=target,
        color=goal.color,
        spent=spent,
        progress_pct=progress_pct,
        projected_spend=projected_spend,
        projected_pct=projected_pct,
        remaining=max(0.0, target - spent),
        status=goal_status(progress_pct),
    )


def recent_activity(expenses: Iterable[Expense], limit: int) -> list[Expense]:
    """Return the latest expenses, newest date first.

    The sort is stable, so expenses sharing a date keep their collection
    order.
    """
    if limit <= 0:
        return []
    ordered = sorted(expenses, key=lambda item: item.date, reverse=True)
    return ordered[:limit]


def daily_totals(
    expenses: Iterable[Expense],
    income: Iterable[Income],
) -> list[DailyTotal]:
    """Sum expenses and income per day, ascending by day."""
    expense_by_day: dict[date, float] = {}
    income_by_day: dict[date, float] = {}
    for expense in expenses:
        expense_by_day[expense.date] = (
            expense_by_day.get(expense.date, 0.0) + expense.amount
        )
    for item in income:
        income_by_day[item.date] = income_by_day.get(item.date, 0.0) + item.amount
    days = sorted(set(expense_by_day) | set(income_by_day))
    return [
        DailyTotal(
            day=day,
            expense=expense_by_day.get(day, 0.0),
            income=income_by_day.get(day, 0.0),
        )
        for day in days
    ]


__all__ = [
    "total_amount",
    "compute_totals",
    "spend_by_category",
    "category_spend_items",
    "account_current_balance",
    "compute_account_balances",
    "goal_status",
    "goal_progress",
    "recent_activity",
    "daily_totals",
]
