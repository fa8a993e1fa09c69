"""Use case to assemble the dashboard overview."""

from dataclasses import dataclass
from datetime import date

from honey_ledger.application.ports.record_store import RecordStorePort
from honey_ledger.application.use_cases.ledger_snapshot import (
    load_ledger_snapshot,
    load_visibility,
)
from honey_ledger.domain.models import (
    AccountBalance,
    CategorySpend,
    DashboardVisibility,
    GoalProgress,
    LedgerTotals,
    MonthWindow,
    RecentActivityItem,
)
from honey_ledger.domain.services import (
    category_spend_items,
    compute_account_balances,
    compute_totals,
    filter_by_window,
    goal_progress,
    recent_activity,
    resolve_account_name,
    resolve_category_label,
    spend_by_category,
)
from honey_ledger.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class DashboardOverview:
    """Figures shown on the dashboard.

    Attributes:
        totals: All-time expense and income totals.
        category_spend: All-time spend per category.
        account_balances: Current balance of every account.
        total_balance: Sum of current account balances.
        goals: Goal progress for the current month.
        recent_activity: Latest expenses.
        visibility: Which sections the user wants to see.
    """

    totals: LedgerTotals
    category_spend: list[CategorySpend]
    account_balances: list[AccountBalance]
    total_balance: float
    goals: list[GoalProgress]
    recent_activity: list[RecentActivityItem]
    visibility: DashboardVisibility


class GetDashboardOverviewUseCase:
    """Compute the dashboard figures from the record store."""

    def __init__(self, record_store: RecordStorePort, logger=None) -> None:
        """Initialize the use case.

        Args:
            record_store: Port providing the record collections.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._record_store = record_store
        self._logger = logger or get_app_logger()

    def execute(self, now: date, recent_limit: int = 5) -> DashboardOverview:
        """Return the dashboard overview.

        Args:
            now: Current date, drives the goal month and projection.
            recent_limit: Maximum number of recent expenses.

        Returns:
            DashboardOverview: Figures for UI rendering.
        """
        snapshot = load_ledger_snapshot(self._record_store, self._logger)
        visibility = load_visibility(self._record_store, self._logger)

        totals = compute_totals(snapshot.expenses, snapshot.income)
        category_spend = category_spend_items(
            spend_by_category(snapshot.expenses),
            snapshot.categories,
        )
        balances = compute_account_balances(
            snapshot.accounts,
            snapshot.expenses,
            snapshot.income,
            snapshot.transfers,
        )
        month_expenses = filter_by_window(
            snapshot.expenses,
            MonthWindow(year=now.year, month=now.month),
            now,
        )
        month_spend = spend_by_category(month_expenses)
        goals = [
            goal_progress(goal, month_spend, now) for goal in snapshot.goals
        ]
        activity = [
            RecentActivityItem(
                expense_id=expense.id,
                description=expense.description,
                amount=expense.amount,
                date=expense.date,
                category_label=resolve_category_label(
                    expense.category_id,
                    snapshot.categories,
                ),
                account_name=resolve_account_name(
                    expense.account_id,
                    snapshot.accounts,
                ),
            )
            for expense in recent_activity(snapshot.expenses, recent_limit)
        ]
        self._logger.info(
            f"Dashboard computed: expenses={len(snapshot.expenses)}, "
            f"income={len(snapshot.income)}, accounts={len(balances)}"
        )
        return DashboardOverview(
            totals=totals,
            category_spend=category_spend,
            account_balances=balances,
            total_balance=sum(
                (item.current_balance for item in balances),
                start=0.0,
            ),
            goals=goals,
            recent_activity=activity,
            visibility=visibility,
        )


__all__ = ["GetDashboardOverviewUseCase", "DashboardOverview"]
