"""Streamlit entry point for the ledger."""

from collections.abc import Sequence
from datetime import date

import streamlit as st

from honey_ledger.adapters.interface.streamlit.spending_charts import (
    build_donut_chart,
    build_trend_figure,
    format_currency,
    goal_rows,
    prepare_donut_data,
)
from honey_ledger.application.ports.record_store import RecordStorePort
from honey_ledger.application.use_cases.dashboard_settings import (
    DashboardSettingsUseCase,
)
from honey_ledger.application.use_cases.get_accounts_overview import (
    GetAccountsOverviewUseCase,
)
from honey_ledger.application.use_cases.get_analytics import (
    GetAnalyticsUseCase,
)
from honey_ledger.application.use_cases.get_dashboard_overview import (
    GetDashboardOverviewUseCase,
)
from honey_ledger.application.use_cases.ledger_snapshot import (
    load_ledger_snapshot,
)
from honey_ledger.application.use_cases.manage_accounts import (
    ManageAccountsUseCase,
)
from honey_ledger.application.use_cases.manage_categories import (
    ManageCategoriesUseCase,
)
from honey_ledger.application.use_cases.manage_goals import ManageGoalsUseCase
from honey_ledger.application.use_cases.mutation_result import MutationResult
from honey_ledger.application.use_cases.record_transactions import (
    RecordTransactionsUseCase,
)
from honey_ledger.application.use_cases.transfer_funds import (
    TransferFundsUseCase,
)
from honey_ledger.domain.constants import ACCOUNT_TYPES
from honey_ledger.domain.models import (
    DASHBOARD_SECTIONS,
    CategorySpend,
    CustomWindow,
    MonthWindow,
    PresetWindow,
    TimeWindow,
)
from honey_ledger.domain.services import (
    resolve_account_name,
    resolve_category_label,
)
from honey_ledger.infrastructure.container import build_record_store
from honey_ledger.infrastructure.logging.logger import (
    get_app_logger,
    get_usage_logger,
)
from honey_ledger.infrastructure.settings import LedgerSettings

PAGES = ["Dashboard", "Add Expense", "Add Income", "Accounts", "Analytics",
         "Settings"]
PRESET_LABELS = {
    "week": "Past Week",
    "month": "Past Month",
    "3months": "Past 3 Months",
    "year": "Past Year",
}
SECTION_LABELS = {
    "recent_transactions": "Recent transactions",
    "spending_chart": "Spending chart",
    "budget_overview": "Budget overview",
    "account_balances": "Account balances",
    "goal_progress": "Goal progress",
}


@st.cache_resource(show_spinner=False)
def _load_record_store() -> RecordStorePort:
    """Shared record store for the Streamlit server."""
    return build_record_store()


@st.cache_resource(show_spinner=False)
def _load_settings() -> LedgerSettings:
    return LedgerSettings.from_env()


def _month_options(today: date, count: int = 12) -> list[tuple[int, int]]:
    """Return (year, month) pairs for the current and previous months."""
    options = []
    year, month = today.year, today.month
    for _ in range(count):
        options.append((year, month))
        month -= 1
        if month == 0:
            year, month = year - 1, 12
    return options


def _month_label(option: tuple[int, int]) -> str:
    return date(option[0], option[1], 1).strftime("%B %Y")


def _build_window(
    filter_type: str,
    preset: str,
    month: tuple[int, int],
    custom_range: Sequence[date],
) -> TimeWindow:
    """Turn the sidebar selection into a time window."""
    if filter_type == "By Month":
        return MonthWindow(year=month[0], month=month[1])
    if filter_type == "Custom Range":
        start = custom_range[0] if len(custom_range) > 0 else None
        end = custom_range[1] if len(custom_range) > 1 else None
        return CustomWindow(start=start, end=end)
    return PresetWindow(period=preset)


def _show_result(result: MutationResult) -> None:
    if result.accepted:
        st.success(result.message)
    else:
        st.error(result.message)


def _render_category_chart(
    items: Sequence[CategorySpend],
    symbol: str,
) -> None:
    st.subheader("Spending Breakdown")
    if not items:
        st.info("No expenses recorded for this period.")
        return
    data, _ = prepare_donut_data(items, symbol=symbol)
    st.altair_chart(build_donut_chart(data), width="stretch")


def _render_goals(goals, labels: dict[str, str], symbol: str) -> None:
    st.subheader("Category Goals Progress")
    if not goals:
        st.caption("No goals set. Add one in Settings.")
        return
    for row in goal_rows(goals, labels, symbol):
        st.progress(
            row["progress"],
            text=(
                f"{row['category']}: {row['spent']} / {row['target']} "
                f"({row['progress_label']}, {row['status']}) "
                f"projected {row['projected']} ({row['projected_label']})"
            ),
        )


def _render_dashboard(
    record_store: RecordStorePort,
    settings: LedgerSettings,
    today: date,
) -> None:
    use_case = GetDashboardOverviewUseCase(record_store)
    overview = use_case.execute(now=today, recent_limit=settings.recent_limit)
    symbol = settings.currency_symbol
    visibility = overview.visibility

    income_col, expense_col, balance_col = st.columns(3)
    income_col.metric(
        "Total Income",
        format_currency(overview.totals.total_income, symbol),
    )
    expense_col.metric(
        "Total Expenses",
        format_currency(overview.totals.total_expense, symbol),
    )
    balance_col.metric(
        "Balance",
        format_currency(overview.totals.net_balance, symbol),
    )

    if visibility.is_visible("account_balances"):
        st.subheader("Accounts")
        st.dataframe(
            [
                {
                    "Account": item.name,
                    "Type": item.account_type.capitalize(),
                    "Balance": format_currency(item.current_balance, symbol),
                }
                for item in overview.account_balances
            ],
            width="stretch",
            hide_index=True,
        )
        st.caption(
            f"Total balance: {format_currency(overview.total_balance, symbol)}"
        )
    if visibility.is_visible("spending_chart"):
        _render_category_chart(overview.category_spend, symbol)
    if visibility.is_visible("goal_progress") or visibility.is_visible(
        "budget_overview"
    ):
        labels = {
            item.category_id: item.label for item in overview.category_spend
        }
        _render_goals(overview.goals, labels, symbol)
    if visibility.is_visible("recent_transactions"):
        st.subheader("Recent Activity")
        if not overview.recent_activity:
            st.info(
                "No expenses yet. Add your first expense to start managing "
                "your finances!"
            )
        for item in overview.recent_activity:
            line_col, delete_col = st.columns([5, 1])
            line_col.write(
                f"**{item.description}** · {item.category_label} · "
                f"{item.account_name} · {item.date.isoformat()} · "
                f"-{format_currency(item.amount, symbol)}"
            )
            if delete_col.button("Delete", key=f"expense-{item.expense_id}"):
                _show_result(
                    RecordTransactionsUseCase(record_store).delete_expense(
                        item.expense_id
                    )
                )


def _render_expense_form(record_store: RecordStorePort, today: date) -> None:
    snapshot = load_ledger_snapshot(record_store, get_app_logger())
    st.subheader("Add Expense")
    with st.form("expense_form", clear_on_submit=True):
        amount = st.number_input("Amount", min_value=0.0, step=0.01)
        category_id = st.selectbox(
            "Category",
            options=[cat.id for cat in snapshot.categories],
            format_func=lambda cat_id: resolve_category_label(
                cat_id,
                snapshot.categories,
            ),
        )
        account_id = st.selectbox(
            "Account",
            options=[acc.id for acc in snapshot.accounts],
            format_func=lambda acc_id: next(
                acc.name for acc in snapshot.accounts if acc.id == acc_id
            ),
        )
        description = st.text_input("Description")
        spent_on = st.date_input("Date", value=today)
        recurring = st.checkbox("Recurring")
        submitted = st.form_submit_button("Save Expense")
    if submitted:
        result = RecordTransactionsUseCase(record_store).add_expense(
            amount=amount,
            category_id=category_id or "",
            description=description,
            on=spent_on,
            account_id=account_id or "",
            recurring=recurring,
        )
        _show_result(result)


def _render_income_form(
    record_store: RecordStorePort,
    settings: LedgerSettings,
    today: date,
) -> None:
    snapshot = load_ledger_snapshot(record_store, get_app_logger())
    st.subheader("Add Income")
    with st.form("income_form", clear_on_submit=True):
        amount = st.number_input("Amount", min_value=0.0, step=0.01)
        account_id = st.selectbox(
            "Account",
            options=[acc.id for acc in snapshot.accounts],
            format_func=lambda acc_id: next(
                acc.name for acc in snapshot.accounts if acc.id == acc_id
            ),
        )
        description = st.text_input("Description")
        received_on = st.date_input("Date", value=today)
        recurring = st.checkbox("Recurring")
        submitted = st.form_submit_button("Save Income")
    if submitted:
        result = RecordTransactionsUseCase(record_store).add_income(
            amount=amount,
            description=description,
            on=received_on,
            account_id=account_id or "",
            recurring=recurring,
        )
        _show_result(result)

    if snapshot.income:
        st.subheader("Recent Income")
    for item in snapshot.income[: settings.recent_limit]:
        line_col, delete_col = st.columns([5, 1])
        line_col.write(
            f"**{item.description}** · "
            f"{resolve_account_name(item.account_id, snapshot.accounts)} · "
            f"{item.date.isoformat()} · "
            f"+{format_currency(item.amount, settings.currency_symbol)}"
        )
        if delete_col.button("Delete", key=f"income-{item.id}"):
            _show_result(
                RecordTransactionsUseCase(record_store).delete_income(item.id)
            )


def _render_accounts(
    record_store: RecordStorePort,
    settings: LedgerSettings,
    today: date,
) -> None:
    symbol = settings.currency_symbol
    overview = GetAccountsOverviewUseCase(record_store).execute()
    st.metric("Total Balance", format_currency(overview.total_balance, symbol))

    for item in overview.balances:
        name_col, balance_col, delete_col = st.columns([3, 2, 1])
        name_col.write(f"**{item.name}** ({item.account_type.capitalize()})")
        balance_col.write(format_currency(item.current_balance, symbol))
        if delete_col.button("Delete", key=f"delete-{item.account_id}"):
            _show_result(
                ManageAccountsUseCase(record_store).delete_account(
                    item.account_id
                )
            )

    names = {item.account_id: item.name for item in overview.balances}
    with st.expander("Transfer"):
        with st.form("transfer_form", clear_on_submit=True):
            from_id = st.selectbox(
                "From", options=list(names), format_func=names.get
            )
            to_id = st.selectbox("To", options=list(names), format_func=names.get)
            amount = st.number_input("Amount", min_value=0.0, step=0.01)
            description = st.text_input("Description")
            submitted = st.form_submit_button("Transfer Funds")
        if submitted:
            _show_result(
                TransferFundsUseCase(record_store).execute(
                    from_account_id=from_id or "",
                    to_account_id=to_id or "",
                    amount=amount,
                    on=today,
                    description=description,
                )
            )

    with st.expander("Add Account"):
        with st.form("account_form", clear_on_submit=True):
            name = st.text_input("Name")
            balance = st.number_input("Initial Balance", step=0.01)
            account_type = st.selectbox("Type", options=list(ACCOUNT_TYPES))
            color = st.color_picker("Color", value="#f4a261")
            submitted = st.form_submit_button("Add Account")
        if submitted:
            _show_result(
                ManageAccountsUseCase(record_store).add_account(
                    name=name,
                    balance=balance,
                    account_type=account_type,
                    color=color,
                )
            )

    if overview.recent_transfers:
        st.subheader("Recent Transfers")
        for line in overview.recent_transfers:
            st.write(
                f"**{line.description}** · From {line.from_name} → "
                f"{line.to_name} · {line.date.isoformat()} · "
                f"{format_currency(line.amount, symbol)}"
            )


def _render_analytics(
    record_store: RecordStorePort,
    settings: LedgerSettings,
    today: date,
) -> None:
    symbol = settings.currency_symbol
    filter_type = st.sidebar.radio(
        "Time Period",
        ["Quick Select", "By Month", "Custom Range"],
    )
    preset = "month"
    month = (today.year, today.month)
    custom_range: Sequence[date] = ()
    if filter_type == "Quick Select":
        preset = st.sidebar.selectbox(
            "Period",
            options=list(PRESET_LABELS),
            index=1,
            format_func=PRESET_LABELS.get,
        )
    elif filter_type == "By Month":
        month = st.sidebar.selectbox(
            "Month",
            options=_month_options(today),
            format_func=_month_label,
        )
    else:
        custom_range = st.sidebar.date_input("Range", value=())

    window = _build_window(filter_type, preset, month, custom_range)
    view = GetAnalyticsUseCase(record_store).execute(window, today)
    if view.date_range is None:
        st.warning("Select a start and end date to see analytics.")

    income_col, expense_col, net_col = st.columns(3)
    income_col.metric(
        "Income",
        format_currency(view.totals.total_income, symbol),
    )
    expense_col.metric(
        "Expenses",
        format_currency(view.totals.total_expense, symbol),
    )
    net_col.metric("Net", format_currency(view.totals.net_balance, symbol))

    snapshot = load_ledger_snapshot(record_store, get_app_logger())
    labels = {
        goal.category_id: resolve_category_label(
            goal.category_id,
            snapshot.categories,
        )
        for goal in view.goals
    }
    _render_goals(view.goals, labels, symbol)
    _render_category_chart(view.category_spend, symbol)
    if view.trend:
        st.subheader("Trend")
        st.plotly_chart(
            build_trend_figure(view.trend, symbol),
            width="stretch",
        )


def _render_settings(record_store: RecordStorePort) -> None:
    snapshot = load_ledger_snapshot(record_store, get_app_logger())
    settings_use_case = DashboardSettingsUseCase(record_store)
    visibility = settings_use_case.get()

    st.subheader("Dashboard")
    for section in DASHBOARD_SECTIONS:
        visible = st.checkbox(
            SECTION_LABELS[section],
            value=visibility.is_visible(section),
            key=f"section-{section}",
        )
        if visible != visibility.is_visible(section):
            settings_use_case.set_section(section, visible)

    st.subheader("Categories")
    categories = ManageCategoriesUseCase(record_store)
    goals_by_category = {goal.category_id: goal for goal in snapshot.goals}
    for category in snapshot.categories:
        label_col, goal_col, delete_col = st.columns([3, 2, 1])
        label_col.write(f"{category.emoji} {category.name}")
        goal = goals_by_category.get(category.id)
        goal_col.write(
            f"Goal: {goal.monthly_target:.2f}" if goal else "No goal"
        )
        if delete_col.button("Delete", key=f"category-{category.id}"):
            _show_result(categories.delete_category(category.id))

    with st.form("category_form", clear_on_submit=True):
        name = st.text_input("Category name")
        emoji = st.text_input("Emoji", value="📦", max_chars=2)
        color = st.color_picker("Color", value="#f4a261")
        submitted = st.form_submit_button("Add Category")
    if submitted:
        _show_result(categories.add_category(name, emoji=emoji, color=color))

    st.subheader("Category Goals")
    goals = ManageGoalsUseCase(record_store)
    with st.form("goal_form", clear_on_submit=True):
        category_id = st.selectbox(
            "Category",
            options=[cat.id for cat in snapshot.categories],
            format_func=lambda cat_id: resolve_category_label(
                cat_id,
                snapshot.categories,
            ),
        )
        target = st.number_input("Monthly Target", min_value=0.0, step=1.0)
        remove = st.checkbox("Remove goal")
        submitted = st.form_submit_button("Save Goal")
    if submitted and category_id:
        if remove:
            _show_result(goals.remove_goal(category_id))
        else:
            _show_result(goals.set_goal(category_id, target))


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Honey Ledger", layout="wide")
    st.title("Honey Ledger")

    page = st.sidebar.selectbox("Page", PAGES)
    get_usage_logger().info(f"page_view page={page}")

    record_store = _load_record_store()
    settings = _load_settings()
    today = date.today()

    if page == "Dashboard":
        _render_dashboard(record_store, settings, today)
    elif page == "Add Expense":
        _render_expense_form(record_store, today)
    elif page == "Add Income":
        _render_income_form(record_store, settings, today)
    elif page == "Accounts":
        _render_accounts(record_store, settings, today)
    elif page == "Analytics":
        _render_analytics(record_store, settings, today)
    else:
        _render_settings(record_store)


if __name__ == "__main__":  # pragma: no cover
    main()
