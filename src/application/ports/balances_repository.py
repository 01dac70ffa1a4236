"""Port for the balance store."""

from datetime import date
from typing import Protocol

from src.domain.models import AccountHistory, BalanceEntry


class BalancesRepositoryPort(Protocol):
    """Port exposing dated balance snapshots per account."""

    def set_balance(self, entry: BalanceEntry) -> BalanceEntry:
        """Insert or replace the balance for (account_id, date)."""

    def list_balances(
        self,
        account_id: str,
        from_date: date | None = None,
        to_date: date | None = None,
    ) -> list[BalanceEntry]:
        """Return balance entries for one account, newest first."""

    def delete_balance(self, entry_id: str) -> None:
        """Delete one balance entry."""

    def fetch_active_histories(self) -> list[AccountHistory]:
        """Return the ascending balance history of every active account."""


__all__ = ["BalancesRepositoryPort"]
