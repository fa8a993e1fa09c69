"""Chart presentation logic for the Streamlit UI.

Data preparation is pure and testable; ``build_*`` helpers turn the prepared
data into Altair or Plotly objects. No IO happens here.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

import altair as alt

from honey_ledger.domain.models import CategorySpend, DailyTotal, GoalProgress

if TYPE_CHECKING:  # pragma: no cover
    import plotly.graph_objects as go


OTHER_LABEL = "Other"
OTHER_COLOR = "#6c8ead"
STATUS_LABELS = {
    "exceeded": "Over Budget",
    "warning": "Near Limit",
    "good": "On Track",
}


def format_currency(value: float, symbol: str = "€") -> str:
    """Format an amount for display."""
    return f"{symbol}{value:,.2f}"


def prepare_donut_data(
    items: Sequence[CategorySpend],
    symbol: str = "€",
    max_categories: int = 6,
) -> tuple[list[dict[str, str | float]], float]:
    """Prepare donut chart data with a Top-N + Other grouping.

    Args:
        items: Spend per category.
        symbol: Currency symbol for labels.
        max_categories: Categories kept before grouping into Other.

    Returns:
        Tuple with Altair-ready chart rows and the total amount.
    """
    sorted_items = sorted(items, key=lambda item: item.amount, reverse=True)
    top_items = sorted_items[:max_categories]
    other_items = sorted_items[max_categories:]
    other_amount = sum((item.amount for item in other_items), start=0.0)
    rows = [(item.label, item.color, item.amount) for item in top_items]
    if other_items and other_amount != 0:
        rows.append((OTHER_LABEL, OTHER_COLOR, other_amount))
    total_amount = sum((item.amount for item in sorted_items), start=0.0)

    data: list[dict[str, str | float]] = []
    for label, color, amount in rows:
        share = amount / total_amount * 100 if total_amount else 0.0
        data.append(
            {
                "category": label,
                "color": color,
                "amount": amount,
                "amount_label": format_currency(amount, symbol),
                "share_label": f"{share:.1f}%",
            }
        )
    return data, total_amount


def build_donut_chart(
    data: list[dict[str, str | float]],
    chart_size: int = 300,
) -> alt.LayerChart:
    """Build an Altair donut chart from prepared rows."""
    hover = alt.selection_point(
        name="hover",
        fields=["category"],
        on="mouseover",
        clear="mouseout",
        empty=False,
    )
    base = alt.Chart(alt.Data(values=data)).mark_arc(
        innerRadius=chart_size * 0.3,
        cornerRadius=6,
        padAngle=0.02,
    ).encode(
        theta=alt.Theta("amount:Q"),
        color=alt.Color(
            "category:N",
            scale=alt.Scale(
                domain=[row["category"] for row in data],
                range=[row["color"] for row in data],
            ),
            legend=alt.Legend(orient="bottom", title=None, columns=2),
        ),
        opacity=alt.condition(hover, alt.value(1.0), alt.value(0.6)),
        order=alt.Order("amount:Q", sort="descending"),
        tooltip=[
            alt.Tooltip("category:N"),
            alt.Tooltip("amount_label:N"),
            alt.Tooltip("share_label:N"),
        ],
    )
    hover_text = alt.Chart(alt.Data(values=data)).transform_filter(
        hover
    ).mark_text(
        align="center",
        baseline="middle",
        fontSize=16,
        fontWeight="bold",
    ).encode(
        text="amount_label:N"
    )
    return alt.layer(base, hover_text).add_params(hover).properties(
        width=chart_size,
        height=chart_size,
    )


def prepare_trend_series(
    totals: Sequence[DailyTotal],
) -> dict[str, list]:
    """Split daily totals into plotting series."""
    return {
        "days": [item.day.isoformat() for item in totals],
        "expense": [item.expense for item in totals],
        "income": [item.income for item in totals],
    }


def build_trend_figure(
    totals: Sequence[DailyTotal],
    symbol: str = "€",
) -> "go.Figure":
    """Build a Plotly line figure of daily income and expenses."""
    import plotly.graph_objects as go

    series = prepare_trend_series(totals)
    figure = go.Figure()
    figure.add_trace(
        go.Scatter(
            x=series["days"],
            y=series["income"],
            mode="lines+markers",
            name="Income",
            line={"color": "#2e7d32"},
        )
    )
    figure.add_trace(
        go.Scatter(
            x=series["days"],
            y=series["expense"],
            mode="lines+markers",
            name="Expenses",
            line={"color": "#e76f51"},
        )
    )
    figure.update_layout(
        margin={"l": 10, "r": 10, "t": 10, "b": 10},
        yaxis_title=symbol,
        legend={"orientation": "h"},
        height=320,
    )
    return figure


def goal_rows(
    goals: Sequence[GoalProgress],
    labels: dict[str, str],
    symbol: str = "€",
) -> list[dict[str, str | float]]:
    """Prepare goal progress rows for a table or progress bars.

    Args:
        goals: Goal progress items.
        labels: Display label per category id.
        symbol: Currency symbol.
    """
    return [
        {
            "category": labels.get(goal.category_id, goal.category_id),
            "spent": format_currency(goal.spent, symbol),
            "target": format_currency(goal.monthly_target, symbol),
            "progress": min(goal.progress_pct, 100.0) / 100,
            "progress_label": f"{goal.progress_pct:.0f}%",
            "projected": format_currency(goal.projected_spend, symbol),
            "projected_label": f"{goal.projected_pct:.0f}%",
            "remaining": format_currency(goal.remaining, symbol),
            "status": STATUS_LABELS.get(goal.status, goal.status),
        }
        for goal in goals
    ]


__all__ = [
    "format_currency",
    "prepare_donut_data",
    "build_donut_chart",
    "prepare_trend_series",
    "build_trend_figure",
    "goal_rows",
    "STATUS_LABELS",
]
