"""Summary statistics over the reconstructed net worth series."""

from collections.abc import Sequence
from datetime import date
from decimal import Decimal

from src.domain.models import ChartDataPoint, NetWorthStats
from src.utils.decimal_utils import round_half_ceiling


def one_year_before(today: date) -> date:
    """Return the same calendar day one year earlier.

    February 29 rolls over to March 1 of the previous year.
    """
    try:
        return today.replace(year=today.year - 1)
    except ValueError:
        return date(today.year - 1, 3, 1)


def find_reference_point(
    series: Sequence[ChartDataPoint],
    since: date,
) -> ChartDataPoint:
    """Return the first point on or after ``since``.

    Falls back to the first point of the series when none qualifies, so a
    history that starts after ``since`` is measured from its beginning.
    """
    for point in series:
        if point.date >= since:
            return point
    return series[0]


def change_percent(change: Decimal, baseline: Decimal) -> Decimal:
    """Return ``change`` relative to ``|baseline|`` in percent.

    A zero baseline yields 0. The result is rounded to one decimal place.
    """
    if baseline == 0:
        return Decimal("0")
    return round_half_ceiling(change / abs(baseline) * Decimal("100"), 1)


def find_all_time_high(
    series: Sequence[ChartDataPoint],
) -> tuple[Decimal, date]:
    """Return the maximum net worth and the date it was first reached."""
    high = series[0]
    for point in series:
        if point.net_worth > high.net_worth:
            high = point
    return high.net_worth, high.date


def average_change(series: Sequence[ChartDataPoint]) -> Decimal:
    """Return the mean point-to-point net worth change, rounded to units.

    Deltas are not weighted by the time elapsed between points.
    """
    if len(series) < 2:
        return Decimal("0")
    total = sum(
        (
            current.net_worth - previous.net_worth
            for previous, current in zip(series, series[1:])
        ),
        Decimal("0"),
    )
    return round_half_ceiling(total / (len(series) - 1))


def compute_net_worth_stats(
    series: Sequence[ChartDataPoint],
    today: date,
) -> NetWorthStats:
    """Compute YTD, one-year, all-time-high and average change figures.

    Args:
        series: Full historical series ascending by date.
        today: Reference date for the YTD and one-year windows.

    Returns:
        NetWorthStats: Zeroed statistics dated ``today`` for an empty
        series, computed statistics otherwise.
    """
    if not series:
        zero = Decimal("0")
        return NetWorthStats(
            ytd_change=zero,
            ytd_change_percent=zero,
            monthly_avg_change=zero,
            all_time_high=zero,
            all_time_high_date=today,
            one_year_return=zero,
            one_year_return_percent=zero,
        )

    current = series[-1].net_worth

    ytd_point = find_reference_point(series, date(today.year, 1, 1))
    ytd_change = current - ytd_point.net_worth

    year_point = find_reference_point(series, one_year_before(today))
    one_year_return = current - year_point.net_worth

    all_time_high, all_time_high_date = find_all_time_high(series)

    return NetWorthStats(
        ytd_change=ytd_change,
        ytd_change_percent=change_percent(ytd_change, ytd_point.net_worth),
        monthly_avg_change=average_change(series),
        all_time_high=all_time_high,
        all_time_high_date=all_time_high_date,
        one_year_return=one_year_return,
        one_year_return_percent=change_percent(
            one_year_return,
            year_point.net_worth,
        ),
    )


__all__ = [
    "one_year_before",
    "find_reference_point",
    "change_percent",
    "find_all_time_high",
    "average_change",
    "compute_net_worth_stats",
]
