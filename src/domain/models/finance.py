"""Domain models for net worth aggregates."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal


@dataclass(frozen=True)
class ChartDataPoint:
    """Aggregated totals on one observation date.

    Attributes:
        date: Observation date.
        assets: Sum of carried-forward asset balances.
        liabilities: Sum of absolute carried-forward liability balances.
        net_worth: Assets minus liabilities.
    """

    date: date
    assets: Decimal
    liabilities: Decimal
    net_worth: Decimal


@dataclass(frozen=True)
class NetWorthStats:
    """Summary statistics derived from the full net worth series."""

    ytd_change: Decimal
    ytd_change_percent: Decimal
    monthly_avg_change: Decimal
    all_time_high: Decimal
    all_time_high_date: date
    one_year_return: Decimal
    one_year_return_percent: Decimal


__all__ = ["ChartDataPoint", "NetWorthStats"]
