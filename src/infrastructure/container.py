"""Composition root for wiring infrastructure adapters."""

from src.application.ports.accounts_repository import AccountsRepositoryPort
from src.application.ports.balances_repository import BalancesRepositoryPort
from src.application.ports.database import DatabaseEnginePort
from src.application.ports.milestones_repository import (
    MilestonesRepositoryPort,
)
from src.infrastructure.accounts_repository import (
    SqlAlchemyAccountsRepository,
)
from src.infrastructure.balances_repository import (
    SqlAlchemyBalancesRepository,
)
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.milestones_repository import (
    SqlAlchemyMilestonesRepository,
)
from src.infrastructure.settings import AppSettings


def build_settings() -> AppSettings:
    """Return settings sourced from the environment."""
    return AppSettings.from_env()


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_accounts_repository(
    db_port: DatabaseEnginePort | None = None,
) -> AccountsRepositoryPort:
    """Return the account directory repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyAccountsRepository(resolved_db)


def build_balances_repository(
    db_port: DatabaseEnginePort | None = None,
) -> BalancesRepositoryPort:
    """Return the balance store repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyBalancesRepository(resolved_db)


def build_milestones_repository(
    db_port: DatabaseEnginePort | None = None,
) -> MilestonesRepositoryPort:
    """Return the milestones repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyMilestonesRepository(resolved_db)


__all__ = [
    "build_settings",
    "build_database_adapter",
    "build_accounts_repository",
    "build_balances_repository",
    "build_milestones_repository",
]
