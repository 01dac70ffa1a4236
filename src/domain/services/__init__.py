"""Domain services package."""

from .normalization import normalize_currency, normalize_label
from .statistics import compute_net_worth_stats, one_year_before
from .timeseries import (
    collect_observation_dates,
    reconstruct_net_worth_series,
)
from .validation import (
    parse_calendar_date,
    validate_balance_sign,
    validate_date_range,
    validate_history_order,
)

__all__ = [
    "collect_observation_dates",
    "compute_net_worth_stats",
    "normalize_currency",
    "normalize_label",
    "one_year_before",
    "parse_calendar_date",
    "reconstruct_net_worth_series",
    "validate_balance_sign",
    "validate_date_range",
    "validate_history_order",
]
