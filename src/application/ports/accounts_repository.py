"""Port for the account directory."""

from typing import Protocol

from src.domain.models import Account, AccountWithBalance


class AccountsRepositoryPort(Protocol):
    """Port exposing read and write access to tracked accounts."""

    def list_active_accounts(self) -> list[Account]:
        """Return active accounts ordered by category, type and name."""

    def get_account(self, account_id: str) -> Account | None:
        """Return one account by id, or None when it does not exist."""

    def insert_account(self, account: Account) -> None:
        """Persist a new account."""

    def update_account(
        self,
        account_id: str,
        changes: dict[str, object],
        updated_at: str,
    ) -> None:
        """Apply mutable field changes to an account."""

    def delete_account(self, account_id: str) -> None:
        """Delete an account together with its balance entries."""

    def list_accounts_with_balances(self) -> list[AccountWithBalance]:
        """Return active accounts joined with their latest balance."""


__all__ = ["AccountsRepositoryPort"]
