"""Tests for the dashboard, analytics and accounts read use cases."""

from datetime import date

import pytest

from honey_ledger.application.use_cases.get_accounts_overview import (
    GetAccountsOverviewUseCase,
)
from honey_ledger.application.use_cases.get_analytics import (
    GetAnalyticsUseCase,
    projection_date,
)
from honey_ledger.application.use_cases.get_dashboard_overview import (
    GetDashboardOverviewUseCase,
)
from honey_ledger.domain.models import (
    CustomWindow,
    DateRange,
    MonthWindow,
    PresetWindow,
)

NOW = date(2024, 4, 15)


def _expense(expense_id, amount, category, day, account="main"):
    return {
        "id": expense_id,
        "amount": amount,
        "categoryId": category,
        "description": f"expense {expense_id}",
        "date": day,
        "accountId": account,
    }


@pytest.fixture
def seeded_store(record_store):
    record_store.payloads.update(
        {
            "accounts": [
                {"id": "main", "name": "Main Account", "balance": 0},
                {"id": "sav", "name": "Savings", "balance": 500, "type": "savings"},
            ],
            "expenses": [
                _expense("e1", 60, "food", "2024-04-02"),
                _expense("e2", 30, "food", "2024-04-10"),
                _expense("e3", 20, "ghost", "2024-03-20"),
                _expense("e4", 10, "transport", "2024-04-10", "sav"),
            ],
            "income": [
                {
                    "id": "i1",
                    "amount": 1000,
                    "description": "Salary",
                    "date": "2024-04-01",
                    "accountId": "main",
                }
            ],
            "transfers": [
                {
                    "id": "t2",
                    "amount": 50,
                    "fromAccountId": "main",
                    "toAccountId": "sav",
                    "description": "Newest",
                    "date": "2024-04-12",
                },
                {
                    "id": "t1",
                    "amount": 25,
                    "fromAccountId": "sav",
                    "toAccountId": "gone",
                    "description": "Oldest",
                    "date": "2024-04-03",
                },
            ],
            "goals": [
                {"id": "g1", "categoryId": "food", "monthlyTarget": 100},
            ],
        }
    )
    return record_store


def test_dashboard_overview_aggregates_all_time(seeded_store, logger) -> None:
    """Totals and balances use every record; goals use the current month."""
    overview = GetDashboardOverviewUseCase(seeded_store, logger=logger).execute(
        NOW, recent_limit=3
    )

    assert overview.totals.total_expense == 120
    assert overview.totals.total_income == 1000
    assert overview.totals.net_balance == 880
    assert {item.label: item.amount for item in overview.category_spend} == {
        "🍕 Food": 90,
        "ghost": 20,
        "🚗 Transport": 10,
    }
    assert [item.current_balance for item in overview.account_balances] == [
        840.0,
        515.0,
    ]
    assert overview.total_balance == 1355.0

    [goal] = overview.goals
    assert goal.spent == 90
    assert goal.progress_pct == pytest.approx(90.0)
    assert goal.status == "warning"

    assert [item.expense_id for item in overview.recent_activity] == [
        "e2",
        "e4",
        "e1",
    ]
    assert overview.recent_activity[1].account_name == "Savings"
    assert overview.visibility.is_visible("spending_chart")


def test_dashboard_overview_on_empty_store(record_store, logger) -> None:
    overview = GetDashboardOverviewUseCase(record_store, logger=logger).execute(
        NOW
    )

    assert overview.totals.total_expense == 0
    assert overview.category_spend == []
    assert [item.account_id for item in overview.account_balances] == ["main"]
    assert overview.goals == []
    assert overview.recent_activity == []


def test_analytics_by_month_window(seeded_store, logger) -> None:
    view = GetAnalyticsUseCase(seeded_store, logger=logger).execute(
        MonthWindow(2024, 3), NOW
    )

    assert view.date_range == DateRange(date(2024, 3, 1), date(2024, 3, 31))
    assert view.totals.total_expense == 20
    assert view.totals.total_income == 0
    assert [item.category_id for item in view.category_spend] == ["ghost"]
    assert view.goals[0].spent == 0
    assert [(item.day, item.expense) for item in view.trend] == [
        (date(2024, 3, 20), 20)
    ]


def test_analytics_with_incomplete_custom_range(seeded_store, logger) -> None:
    view = GetAnalyticsUseCase(seeded_store, logger=logger).execute(
        CustomWindow(start=date(2024, 4, 1)), NOW
    )

    assert view.date_range is None
    assert view.totals.total_expense == 0
    assert view.category_spend == []
    logger.warning.assert_called_once()


def test_analytics_rolling_month(seeded_store, logger) -> None:
    view = GetAnalyticsUseCase(seeded_store, logger=logger).execute(
        PresetWindow("month"), NOW
    )

    assert view.totals.total_expense == 120
    assert view.totals.net_balance == 880


def test_projection_date_for_past_month() -> None:
    assert projection_date(MonthWindow(2024, 2), NOW) == date(2024, 2, 29)
    assert projection_date(MonthWindow(2024, 4), NOW) == NOW
    assert projection_date(PresetWindow("year"), NOW) == NOW


def test_accounts_overview_lists_newest_transfers(seeded_store, logger) -> None:
    overview = GetAccountsOverviewUseCase(seeded_store, logger=logger).execute(
        transfer_limit=1
    )

    assert [line.transfer_id for line in overview.recent_transfers] == ["t2"]
    assert overview.recent_transfers[0].from_name == "Main Account"
    assert overview.recent_transfers[0].to_name == "Savings"

    full = GetAccountsOverviewUseCase(seeded_store, logger=logger).execute()
    assert full.recent_transfers[1].to_name == "gone"
