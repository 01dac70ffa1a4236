"""Domain models package."""

from .accounts import Account, AccountWithBalance
from .balances import AccountHistory, BalanceEntry, BalancePoint
from .finance import ChartDataPoint, NetWorthStats
from .milestones import Milestone

__all__ = [
    "Account",
    "AccountWithBalance",
    "AccountHistory",
    "BalanceEntry",
    "BalancePoint",
    "ChartDataPoint",
    "NetWorthStats",
    "Milestone",
]
