"""CLI adapter printing totals, balances and goal progress.

The window is read from the environment:

* ``LEDGER_PERIOD``: ``week``, ``month``, ``3months``, ``year`` or ``YYYY-MM``;
* ``LEDGER_START_DATE`` / ``LEDGER_END_DATE``: custom range in YYYY-MM-DD,
  used when ``LEDGER_PERIOD`` is unset.
"""

from datetime import date
import os

from honey_ledger.application.use_cases.get_accounts_overview import (
    GetAccountsOverviewUseCase,
)
from honey_ledger.application.use_cases.get_analytics import (
    GetAnalyticsUseCase,
)
from honey_ledger.domain.models import (
    PRESET_PERIODS,
    CustomWindow,
    MonthWindow,
    PresetWindow,
    TimeWindow,
)
from honey_ledger.infrastructure.container import build_record_store
from honey_ledger.infrastructure.logging.logger import get_app_logger
from honey_ledger.infrastructure.settings import LedgerSettings


def _parse_date(value: str | None, logger) -> date | None:
    """Parse an ISO date string into a date.

    Args:
        value: Date string in YYYY-MM-DD format.
        logger: Logger used for warnings.

    Returns:
        date | None: Parsed date or None when invalid.
    """
    if not value:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        logger.warning(
            f"Invalid date '{value}'. Expected format YYYY-MM-DD."
        )
        return None


def _parse_window(logger) -> TimeWindow:
    """Build the window from environment variables."""
    period = os.getenv("LEDGER_PERIOD", "").strip()
    if period in PRESET_PERIODS:
        return PresetWindow(period=period)
    if period:
        try:
            year, month = (int(part) for part in period.split("-"))
            return MonthWindow(year=year, month=month)
        except ValueError:
            logger.warning(
                f"Invalid LEDGER_PERIOD '{period}'. Expected one of "
                f"{', '.join(PRESET_PERIODS)} or YYYY-MM."
            )
            return PresetWindow(period="month")
    start_date = _parse_date(os.getenv("LEDGER_START_DATE"), logger)
    end_date = _parse_date(os.getenv("LEDGER_END_DATE"), logger)
    if start_date or end_date:
        return CustomWindow(start=start_date, end=end_date)
    return PresetWindow(period="month")


def main() -> None:
    """Print the ledger summary for the configured window."""
    logger = get_app_logger()
    settings = LedgerSettings.from_env()
    record_store = build_record_store()
    window = _parse_window(logger)
    today = date.today()
    symbol = settings.currency_symbol

    analytics = GetAnalyticsUseCase(record_store, logger=logger).execute(
        window,
        today,
    )
    accounts = GetAccountsOverviewUseCase(record_store, logger=logger).execute()

    if analytics.date_range is None:
        print(f"Ledger summary ({window}): empty window")
    else:
        print(
            "Ledger summary "
            f"({analytics.date_range.start} to {analytics.date_range.end})"
        )
    print(
        f"Income: {analytics.totals.total_income:.2f} {symbol}, "
        f"expenses: {analytics.totals.total_expense:.2f} {symbol}, "
        f"net: {analytics.totals.net_balance:.2f} {symbol}"
    )
    for item in analytics.category_spend:
        print(f"  {item.label}: {item.amount:.2f} {symbol}")
    print(f"Accounts (total {accounts.total_balance:.2f} {symbol}):")
    for balance in accounts.balances:
        print(f"  {balance.name}: {balance.current_balance:.2f} {symbol}")
    for goal in analytics.goals:
        print(
            f"Goal {goal.category_id}: {goal.spent:.2f}/"
            f"{goal.monthly_target:.2f} ({goal.progress_pct:.0f}%, "
            f"{goal.status})"
        )


if __name__ == "__main__":  # pragma: no cover
    main()
