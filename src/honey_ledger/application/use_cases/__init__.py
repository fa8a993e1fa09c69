"""Application use cases package."""

from .dashboard_settings import DashboardSettingsUseCase
from .get_accounts_overview import (
    AccountsOverview,
    GetAccountsOverviewUseCase,
    TransferLine,
)
from .get_analytics import AnalyticsView, GetAnalyticsUseCase
from .get_dashboard_overview import (
    DashboardOverview,
    GetDashboardOverviewUseCase,
)
from .ledger_snapshot import LedgerSnapshot, load_ledger_snapshot
from .manage_accounts import ManageAccountsUseCase
from .manage_categories import ManageCategoriesUseCase
from .manage_goals import ManageGoalsUseCase
from .mutation_result import MutationResult
from .record_transactions import RecordTransactionsUseCase
from .transfer_funds import TransferFundsUseCase

__all__ = [
    "AccountsOverview",
    "AnalyticsView",
    "DashboardOverview",
    "DashboardSettingsUseCase",
    "GetAccountsOverviewUseCase",
    "GetAnalyticsUseCase",
    "GetDashboardOverviewUseCase",
    "LedgerSnapshot",
    "ManageAccountsUseCase",
    "ManageCategoriesUseCase",
    "ManageGoalsUseCase",
    "MutationResult",
    "RecordTransactionsUseCase",
    "TransferFundsUseCase",
    "TransferLine",
    "load_ledger_snapshot",
]
