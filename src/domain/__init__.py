"""Domain package for business rules and core models."""

from .constants import (
    ACCOUNT_TYPES,
    ASSET_ACCOUNT_TYPES,
    DEFAULT_CURRENCY,
    LIABILITY_ACCOUNT_TYPES,
)
from .models import (
    Account,
    AccountHistory,
    AccountWithBalance,
    BalanceEntry,
    BalancePoint,
    ChartDataPoint,
    Milestone,
    NetWorthStats,
)
from .policies import category_for_type
from .services import (
    compute_net_worth_stats,
    reconstruct_net_worth_series,
)

__all__ = [
    "ACCOUNT_TYPES",
    "ASSET_ACCOUNT_TYPES",
    "DEFAULT_CURRENCY",
    "LIABILITY_ACCOUNT_TYPES",
    "Account",
    "AccountHistory",
    "AccountWithBalance",
    "BalanceEntry",
    "BalancePoint",
    "ChartDataPoint",
    "Milestone",
    "NetWorthStats",
    "category_for_type",
    "compute_net_worth_stats",
    "reconstruct_net_worth_series",
]
