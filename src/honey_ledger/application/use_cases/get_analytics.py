"""Use case to compute windowed analytics."""

from dataclasses import dataclass
from datetime import date

from honey_ledger.application.ports.record_store import RecordStorePort
from honey_ledger.application.use_cases.ledger_snapshot import (
    load_ledger_snapshot,
)
from honey_ledger.domain.models import (
    CategorySpend,
    DailyTotal,
    DateRange,
    GoalProgress,
    LedgerTotals,
    MonthWindow,
    TimeWindow,
)
from honey_ledger.domain.services import (
    category_spend_items,
    compute_totals,
    daily_totals,
    filter_by_window,
    goal_progress,
    resolve_window,
    spend_by_category,
)
from honey_ledger.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class AnalyticsView:
    """Windowed analytics for UI rendering."""

    date_range: DateRange | None
    totals: LedgerTotals
    category_spend: list[CategorySpend]
    goals: list[GoalProgress]
    trend: list[DailyTotal]


def projection_date(window: TimeWindow, now: date) -> date:
    """Return the date goal projections are computed against.

    Rolling and custom windows project against ``now``. A month window that
    has already ended projects against its last day.
    """
    if isinstance(window, MonthWindow):
        date_range = resolve_window(window, now)
        if date_range is not None and date_range.end < now:
            return date_range.end
    return now


class GetAnalyticsUseCase:
    """Filter records by a time window and aggregate them."""

    def __init__(self, record_store: RecordStorePort, logger=None) -> None:
        """Initialize the use case.

        Args:
            record_store: Port providing the record collections.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._record_store = record_store
        self._logger = logger or get_app_logger()

    def execute(self, window: TimeWindow, now: date) -> AnalyticsView:
        """Return analytics for the window.

        Args:
            window: Preset, month or custom window.
            now: Current date.

        Returns:
            AnalyticsView: Totals, category spend, goals and trend.
        """
        snapshot = load_ledger_snapshot(self._record_store, self._logger)
        date_range = resolve_window(window, now)
        if date_range is None:
            self._logger.warning(
                f"Window {window} admits no records"
            )

        expenses = filter_by_window(snapshot.expenses, window, now)
        income = filter_by_window(snapshot.income, window, now)
        spend = spend_by_category(expenses)
        as_of = projection_date(window, now)

        view = AnalyticsView(
            date_range=date_range,
            totals=compute_totals(expenses, income),
            category_spend=category_spend_items(spend, snapshot.categories),
            goals=[goal_progress(goal, spend, as_of) for goal in snapshot.goals],
            trend=daily_totals(expenses, income),
        )
        self._logger.info(
            f"Analytics computed for {window}: expenses={len(expenses)}, "
            f"income={len(income)}, net={view.totals.net_balance:.2f}"
        )
        return view


__all__ = ["GetAnalyticsUseCase", "AnalyticsView", "projection_date"]
