"""Tests for the Streamlit app module."""

from datetime import date
from unittest.mock import MagicMock

import pytest

from honey_ledger.adapters.interface.streamlit import app
from honey_ledger.domain.models import CustomWindow, MonthWindow, PresetWindow
from honey_ledger.infrastructure.settings import LedgerSettings

TODAY = date(2024, 4, 15)
SETTINGS = LedgerSettings(db_url="sqlite://", currency_symbol="$")


def _fake_streamlit(pressed: tuple[str, ...] = ()) -> MagicMock:
    """Fake streamlit module; column buttons whose key is in pressed click."""
    fake_st = MagicMock()
    fake_st.created_columns = []

    def _columns(spec):
        count = spec if isinstance(spec, int) else len(spec)
        columns = [MagicMock() for _ in range(count)]
        for column in columns:
            column.button.side_effect = lambda label, key=None: key in pressed
        fake_st.created_columns.extend(columns)
        return columns

    fake_st.columns.side_effect = _columns
    return fake_st


def _written_lines(fake_st) -> list[str]:
    return [
        call.args[0]
        for column in fake_st.created_columns
        for call in column.write.call_args_list
    ]


def test_month_options_walk_back_across_years():
    options = app._month_options(date(2024, 2, 10), count=4)

    assert options == [(2024, 2), (2024, 1), (2023, 12), (2023, 11)]
    assert app._month_label((2023, 12)) == "December 2023"


@pytest.mark.parametrize(
    ("filter_type", "custom_range", "expected"),
    [
        ("Quick Select", (), PresetWindow("year")),
        ("By Month", (), MonthWindow(2024, 3)),
        (
            "Custom Range",
            (date(2024, 1, 1), date(2024, 1, 31)),
            CustomWindow(date(2024, 1, 1), date(2024, 1, 31)),
        ),
        ("Custom Range", (date(2024, 1, 1),), CustomWindow(date(2024, 1, 1))),
    ],
)
def test_build_window(filter_type, custom_range, expected):
    window = app._build_window(filter_type, "year", (2024, 3), custom_range)

    assert window == expected


def test_main_dispatches_selected_page(monkeypatch):
    """main should log the page view and render the chosen page."""
    fake_st = _fake_streamlit()
    fake_st.sidebar.selectbox.return_value = "Accounts"
    usage_logger = MagicMock()
    rendered = []

    monkeypatch.setattr(app, "st", fake_st)
    monkeypatch.setattr(app, "get_usage_logger", lambda: usage_logger)
    monkeypatch.setattr(app, "_load_record_store", lambda: "store")
    monkeypatch.setattr(app, "_load_settings", lambda: SETTINGS)
    monkeypatch.setattr(
        app,
        "_render_accounts",
        lambda store, settings, today: rendered.append((store, settings)),
    )

    app.main()

    fake_st.set_page_config.assert_called_once()
    fake_st.title.assert_called_once_with("Honey Ledger")
    usage_logger.info.assert_called_once_with("page_view page=Accounts")
    assert rendered == [("store", SETTINGS)]


def test_dashboard_renders_sections(monkeypatch, record_store):
    fake_st = _fake_streamlit()
    record_store.payloads["expenses"] = [
        {
            "id": "e1",
            "amount": 25,
            "categoryId": "food",
            "description": "Lunch",
            "date": "2024-04-10",
            "accountId": "main",
        }
    ]
    record_store.payloads["goals"] = [
        {"id": "g1", "categoryId": "food", "monthlyTarget": 100}
    ]
    monkeypatch.setattr(app, "st", fake_st)

    app._render_dashboard(record_store, SETTINGS, TODAY)

    fake_st.altair_chart.assert_called_once()
    fake_st.progress.assert_called_once()
    assert fake_st.progress.call_args.args[0] == pytest.approx(0.25)
    rows = fake_st.dataframe.call_args.args[0]
    assert rows == [
        {"Account": "Main Account", "Type": "Checking", "Balance": "$-25.00"}
    ]
    [line] = _written_lines(fake_st)
    assert "**Lunch**" in line and "🍕 Food" in line


def test_dashboard_hides_disabled_sections(monkeypatch, record_store):
    fake_st = _fake_streamlit()
    record_store.payloads["dashboard-settings"] = {
        "showSpendingChart": False,
        "showAccountBalances": False,
    }
    monkeypatch.setattr(app, "st", fake_st)

    app._render_dashboard(record_store, SETTINGS, TODAY)

    fake_st.altair_chart.assert_not_called()
    fake_st.dataframe.assert_not_called()
    fake_st.info.assert_called_once()


def test_expense_form_submission_records_expense(monkeypatch, record_store):
    """A submitted expense form should store the expense and confirm it."""
    fake_st = _fake_streamlit()
    fake_st.number_input.return_value = 25.0
    fake_st.selectbox.side_effect = ["food", "main"]
    fake_st.text_input.return_value = "Lunch"
    fake_st.date_input.return_value = TODAY
    fake_st.checkbox.return_value = False
    fake_st.form_submit_button.return_value = True
    monkeypatch.setattr(app, "st", fake_st)

    app._render_expense_form(record_store, TODAY)

    fake_st.success.assert_called_once_with("Expense of 25.00 added successfully!")
    assert record_store.payloads["expenses"][0]["categoryId"] == "food"


def test_rejected_transfer_shows_error(monkeypatch, record_store):
    fake_st = _fake_streamlit()
    fake_st.button.return_value = False
    fake_st.selectbox.side_effect = ["main", "main", "checking"]
    fake_st.number_input.return_value = 10.0
    fake_st.text_input.return_value = ""
    fake_st.form_submit_button.side_effect = [True, False]
    monkeypatch.setattr(app, "st", fake_st)

    app._render_accounts(record_store, SETTINGS, TODAY)

    fake_st.error.assert_called_once_with("Cannot transfer to the same account")
    assert "transfers" not in record_store.payloads


def test_analytics_page_renders_month(monkeypatch, record_store):
    fake_st = _fake_streamlit()
    fake_st.sidebar.radio.return_value = "By Month"
    fake_st.sidebar.selectbox.return_value = (2024, 4)
    record_store.payloads["income"] = [
        {
            "id": "i1",
            "amount": 100,
            "description": "Salary",
            "date": "2024-04-01",
            "accountId": "main",
        }
    ]
    monkeypatch.setattr(app, "st", fake_st)

    app._render_analytics(record_store, SETTINGS, TODAY)

    fake_st.warning.assert_not_called()
    fake_st.plotly_chart.assert_called_once()
    fake_st.info.assert_called_once_with("No expenses recorded for this period.")


def test_dashboard_delete_button_removes_expense(monkeypatch, record_store):
    fake_st = _fake_streamlit(pressed=("expense-e1",))
    record_store.payloads["expenses"] = [
        {
            "id": "e1",
            "amount": 25,
            "categoryId": "food",
            "description": "Lunch",
            "date": "2024-04-10",
            "accountId": "main",
        }
    ]
    monkeypatch.setattr(app, "st", fake_st)

    app._render_dashboard(record_store, SETTINGS, TODAY)

    fake_st.success.assert_called_once_with("Deleted successfully!")
    assert record_store.payloads["expenses"] == []


def test_income_page_lists_and_deletes_income(monkeypatch, record_store):
    fake_st = _fake_streamlit(pressed=("income-i2",))
    fake_st.form_submit_button.return_value = False
    record_store.payloads["income"] = [
        {
            "id": "i2",
            "amount": 40,
            "description": "Refund",
            "date": "2024-04-12",
            "accountId": "main",
        },
        {
            "id": "i1",
            "amount": 100,
            "description": "Salary",
            "date": "2024-04-01",
            "accountId": "gone",
        },
    ]
    monkeypatch.setattr(app, "st", fake_st)

    app._render_income_form(record_store, SETTINGS, TODAY)

    fake_st.subheader.assert_any_call("Recent Income")
    refund, salary = _written_lines(fake_st)
    assert "**Refund**" in refund and "Main Account" in refund
    assert "$40.00" in refund
    assert "gone" in salary
    fake_st.success.assert_called_once_with("Deleted successfully!")
    assert [item["id"] for item in record_store.payloads["income"]] == ["i1"]
