"""Net worth chart presentation logic for the Streamlit UI.

This module contains pure, testable transformations from the use case
outputs (``ChartDataPoint`` series, ``Milestone`` lists) to Altair-ready
rows and charts, plus the display formatting used by the metric cards.
The UI is responsible for loading data; no IO happens here.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import date
from decimal import Decimal

import altair as alt

from src.domain.models import ChartDataPoint, Milestone

PERIOD_OPTIONS = ("3M", "6M", "1Y", "YTD", "All Time")

SERIES_COLORS = {
    "Net Worth": "#1b9aaa",
    "Assets": "#2e7d32",
    "Liabilities": "#e76f51",
}

CURRENCY_SYMBOLS = {
    "GBP": "£",
    "EUR": "€",
    "USD": "$",
}


def _shift_months(value: date, months: int) -> date:
    """Move a date back by whole months, clamping the day to month end."""
    month_index = value.year * 12 + (value.month - 1) - months
    year, month = divmod(month_index, 12)
    month += 1
    day = value.day
    while True:
        try:
            return date(year, month, day)
        except ValueError:
            day -= 1


def get_period_start(period: str, today: date, history_start: date) -> date:
    """Return the first date shown for the selected period.

    Args:
        period: One of ``PERIOD_OPTIONS``.
        today: Reference date.
        history_start: Start used for ``All Time``.

    Returns:
        date: Inclusive lower bound of the chart range.
    """
    if period == "3M":
        return _shift_months(today, 3)
    if period == "6M":
        return _shift_months(today, 6)
    if period == "1Y":
        return _shift_months(today, 12)
    if period == "YTD":
        return date(today.year, 1, 1)
    return history_start


def build_chart_rows(
    series: Sequence[ChartDataPoint],
) -> list[dict[str, str | float]]:
    """Flatten the series into long-format rows, one per line and date."""
    rows: list[dict[str, str | float]] = []
    for point in series:
        for name, amount in (
            ("Net Worth", point.net_worth),
            ("Assets", point.assets),
            ("Liabilities", point.liabilities),
        ):
            rows.append(
                {
                    "date": point.date.isoformat(),
                    "series": name,
                    "amount": float(amount),
                }
            )
    return rows


def build_milestone_rows(
    milestones: Sequence[Milestone],
) -> list[dict[str, str]]:
    """Return rule annotations for milestones."""
    return [
        {"date": milestone.date.isoformat(), "label": milestone.label}
        for milestone in milestones
    ]


def build_net_worth_chart(
    rows: list[dict[str, str | float]],
    milestone_rows: list[dict[str, str]] | None = None,
    height: int = 380,
) -> alt.TopLevelMixin:
    """Build a layered line chart with optional milestone rules.

    Args:
        rows: Rows produced by ``build_chart_rows``.
        milestone_rows: Rows produced by ``build_milestone_rows``.
        height: Chart height in pixels.

    Returns:
        Altair chart ready for ``st.altair_chart``.
    """
    lines = alt.Chart(alt.Data(values=rows)).mark_line(
        point=True,
        interpolate="step-after",
    ).encode(
        x=alt.X("date:T", title=None),
        y=alt.Y("amount:Q", title=None),
        color=alt.Color(
            "series:N",
            scale=alt.Scale(
                domain=list(SERIES_COLORS),
                range=list(SERIES_COLORS.values()),
            ),
            legend=alt.Legend(orient="bottom", title=None),
        ),
        tooltip=[
            alt.Tooltip("date:T"),
            alt.Tooltip("series:N"),
            alt.Tooltip("amount:Q", format=",.2f"),
        ],
    )
    layers = [lines]
    if milestone_rows:
        milestones = alt.Chart(alt.Data(values=milestone_rows))
        layers.append(
            milestones.mark_rule(strokeDash=[4, 4], color="#f6c453").encode(
                x="date:T",
                tooltip=[alt.Tooltip("label:N"), alt.Tooltip("date:T")],
            )
        )
        layers.append(
            milestones.mark_text(
                align="left",
                dx=4,
                dy=-150,
                color="#f6c453",
            ).encode(x="date:T", text="label:N")
        )
    return alt.layer(*layers).properties(height=height)


def format_currency(value: Decimal, currency_code: str) -> str:
    """Format currency values for display."""
    symbol = CURRENCY_SYMBOLS.get(currency_code)
    if symbol is None:
        return f"{value:,.2f} {currency_code}"
    sign = "-" if value < 0 else ""
    return f"{sign}{symbol}{abs(value):,.2f}"


def format_delta(value: Decimal, currency_code: str) -> str:
    """Format a signed change for display."""
    sign = "+" if value >= 0 else ""
    return f"{sign}{format_currency(value, currency_code)}"


def format_delta_with_percent(
    value: Decimal,
    percent: Decimal,
    currency_code: str,
) -> str:
    """Format a signed change followed by its percentage."""
    sign = "+" if percent >= 0 else ""
    return f"{format_delta(value, currency_code)} ({sign}{percent}%)"


__all__ = [
    "PERIOD_OPTIONS",
    "get_period_start",
    "build_chart_rows",
    "build_milestone_rows",
    "build_net_worth_chart",
    "format_currency",
    "format_delta",
    "format_delta_with_percent",
]
