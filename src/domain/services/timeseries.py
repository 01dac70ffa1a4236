"""Reconstruction of the aggregate net worth series.

Balances are sparse: each account records a value only on the dates the
user entered one. For every distinct observation date inside the query
range, each account contributes its latest balance on or before that date
(last observation carried forward). Accounts with no observation yet on a
date are absent from that point rather than counted as zero.
"""

from collections.abc import Sequence
from datetime import date
from decimal import Decimal

from src.domain.constants import ASSET_CATEGORY
from src.domain.models import AccountHistory, ChartDataPoint


def collect_observation_dates(
    histories: Sequence[AccountHistory],
    from_date: date,
    to_date: date,
) -> list[date]:
    """Return the distinct observation dates inside the inclusive range.

    Args:
        histories: Account histories to scan.
        from_date: Inclusive lower bound.
        to_date: Inclusive upper bound.

    Returns:
        list[date]: Sorted unique dates.
    """
    dates = {
        entry.date
        for history in histories
        for entry in history.entries
        if from_date <= entry.date <= to_date
    }
    return sorted(dates)


def reconstruct_net_worth_series(
    histories: Sequence[AccountHistory],
    from_date: date,
    to_date: date,
) -> list[ChartDataPoint]:
    """Build one aggregate data point per observation date.

    Each history must be sorted ascending by date and cover the account's
    full past, since carry-forward may reach before ``from_date``.

    Args:
        histories: Histories of the active accounts.
        from_date: Inclusive lower bound of emitted dates.
        to_date: Inclusive upper bound of emitted dates.

    Returns:
        list[ChartDataPoint]: Points ascending by date, empty when no
        account recorded a balance in the range.
    """
    dates = collect_observation_dates(histories, from_date, to_date)
    if not dates:
        return []

    # One forward-only cursor per account; both loops advance by date.
    cursors = [0] * len(histories)
    series: list[ChartDataPoint] = []
    for point_date in dates:
        assets = Decimal("0")
        liabilities = Decimal("0")
        for index, history in enumerate(histories):
            entries = history.entries
            cursor = cursors[index]
            while cursor < len(entries) and entries[cursor].date <= point_date:
                cursor += 1
            cursors[index] = cursor
            if cursor == 0:
                continue
            balance = entries[cursor - 1].balance
            if history.category == ASSET_CATEGORY:
                assets += balance
            else:
                liabilities += abs(balance)
        series.append(
            ChartDataPoint(
                date=point_date,
                assets=assets,
                liabilities=liabilities,
                net_worth=assets - liabilities,
            )
        )
    return series


__all__ = ["collect_observation_dates", "reconstruct_net_worth_series"]
