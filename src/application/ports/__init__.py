"""Application ports package."""

from .accounts_repository import AccountsRepositoryPort
from .balances_repository import BalancesRepositoryPort
from .database import DatabaseEnginePort
from .milestones_repository import MilestonesRepositoryPort

__all__ = [
    "AccountsRepositoryPort",
    "BalancesRepositoryPort",
    "DatabaseEnginePort",
    "MilestonesRepositoryPort",
]
