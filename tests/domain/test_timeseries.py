"""Tests for the net worth series reconstruction."""

from datetime import date
from decimal import Decimal

from src.domain.models import AccountHistory, BalancePoint, ChartDataPoint
from src.domain.services.timeseries import (
    collect_observation_dates,
    reconstruct_net_worth_series,
)


def _history(
    account_id: str,
    category: str,
    *entries: tuple[date, str],
) -> AccountHistory:
    return AccountHistory(
        account_id=account_id,
        category=category,
        entries=[
            BalancePoint(date=entry_date, balance=Decimal(balance))
            for entry_date, balance in entries
        ],
    )


def _example_histories() -> list[AccountHistory]:
    return [
        _history(
            "a",
            "asset",
            (date(2024, 1, 1), "1000"),
            (date(2024, 3, 1), "1200"),
        ),
        _history("b", "liability", (date(2024, 2, 1), "-500")),
    ]


def test_reconstruct_carries_balances_forward() -> None:
    """Each date should use the latest balance on or before it."""
    series = reconstruct_net_worth_series(
        _example_histories(),
        date(2024, 1, 1),
        date(2024, 3, 1),
    )

    assert series == [
        ChartDataPoint(
            date=date(2024, 1, 1),
            assets=Decimal("1000"),
            liabilities=Decimal("0"),
            net_worth=Decimal("1000"),
        ),
        ChartDataPoint(
            date=date(2024, 2, 1),
            assets=Decimal("1000"),
            liabilities=Decimal("500"),
            net_worth=Decimal("500"),
        ),
        ChartDataPoint(
            date=date(2024, 3, 1),
            assets=Decimal("1200"),
            liabilities=Decimal("500"),
            net_worth=Decimal("700"),
        ),
    ]


def test_reconstruct_uses_history_before_range_start() -> None:
    """Balances recorded before from_date still carry into the range."""
    series = reconstruct_net_worth_series(
        _example_histories(),
        date(2024, 2, 15),
        date(2024, 12, 31),
    )

    assert [point.date for point in series] == [date(2024, 3, 1)]
    assert series[0].assets == Decimal("1200")
    assert series[0].liabilities == Decimal("500")


def test_reconstruct_returns_empty_without_dates_in_range() -> None:
    """No observation inside the range yields no points."""
    assert reconstruct_net_worth_series(
        _example_histories(),
        date(2025, 1, 1),
        date(2025, 6, 30),
    ) == []
    assert reconstruct_net_worth_series([], date(2024, 1, 1), date(2024, 12, 31)) == []


def test_reconstruct_emits_sorted_unique_dates() -> None:
    """Shared dates across accounts should appear once, ascending."""
    histories = [
        _history(
            "a",
            "asset",
            (date(2024, 1, 1), "10"),
            (date(2024, 5, 1), "30"),
        ),
        _history(
            "b",
            "asset",
            (date(2024, 1, 1), "5"),
            (date(2024, 3, 1), "7"),
        ),
    ]

    series = reconstruct_net_worth_series(
        histories,
        date(2024, 1, 1),
        date(2024, 12, 31),
    )

    assert [point.date for point in series] == [
        date(2024, 1, 1),
        date(2024, 3, 1),
        date(2024, 5, 1),
    ]
    assert [point.assets for point in series] == [
        Decimal("15"),
        Decimal("17"),
        Decimal("37"),
    ]


def test_liabilities_are_reported_as_magnitudes() -> None:
    """Liability balances count by absolute value whatever their sign."""
    histories = [
        _history("m", "liability", (date(2024, 1, 1), "-200000")),
        _history("c", "liability", (date(2024, 1, 1), "350")),
        _history("s", "asset", (date(2024, 1, 1), "-50")),
    ]

    [point] = reconstruct_net_worth_series(
        histories,
        date(2024, 1, 1),
        date(2024, 1, 1),
    )

    assert point.liabilities == Decimal("200350")
    assert point.assets == Decimal("-50")
    assert point.net_worth == point.assets - point.liabilities


def test_reconstruct_is_repeatable() -> None:
    """Calling twice with the same inputs gives the same output."""
    histories = _example_histories()
    first = reconstruct_net_worth_series(
        histories,
        date(2024, 1, 1),
        date(2024, 3, 1),
    )
    second = reconstruct_net_worth_series(
        histories,
        date(2024, 1, 1),
        date(2024, 3, 1),
    )

    assert first == second


def test_collect_observation_dates_filters_inclusive_range() -> None:
    """Both bounds are inclusive."""
    dates = collect_observation_dates(
        _example_histories(),
        date(2024, 2, 1),
        date(2024, 3, 1),
    )

    assert dates == [date(2024, 2, 1), date(2024, 3, 1)]
