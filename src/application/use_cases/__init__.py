"""Application use cases package."""

from .get_accounts import GetAccountsUseCase
from .get_chart_data import GetChartDataUseCase
from .get_net_worth_stats import GetNetWorthStatsUseCase
from .manage_accounts import (
    AccountChanges,
    CreateAccountUseCase,
    DeleteAccountUseCase,
    UpdateAccountUseCase,
)
from .milestones import (
    AddMilestoneUseCase,
    DeleteMilestoneUseCase,
    GetMilestonesUseCase,
)
from .record_balance import (
    DeleteBalanceUseCase,
    GetBalanceHistoryUseCase,
    RecordBalanceUseCase,
)

__all__ = [
    "AccountChanges",
    "AddMilestoneUseCase",
    "CreateAccountUseCase",
    "DeleteAccountUseCase",
    "DeleteBalanceUseCase",
    "DeleteMilestoneUseCase",
    "GetAccountsUseCase",
    "GetBalanceHistoryUseCase",
    "GetChartDataUseCase",
    "GetMilestonesUseCase",
    "GetNetWorthStatsUseCase",
    "RecordBalanceUseCase",
    "UpdateAccountUseCase",
]
