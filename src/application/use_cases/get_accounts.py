"""Use case to read accounts with their latest balance."""

from src.application.ports.accounts_repository import AccountsRepositoryPort
from src.domain.models import AccountWithBalance


class GetAccountsUseCase:
    """Fetch active accounts and their most recent balances."""

    def __init__(self, accounts_repository: AccountsRepositoryPort) -> None:
        """Initialize the use case with its required dependencies."""
        self._accounts_repository = accounts_repository

    def execute(self) -> list[AccountWithBalance]:
        """Return every active account with its latest balance."""
        return self._accounts_repository.list_accounts_with_balances()


__all__ = ["GetAccountsUseCase", "AccountWithBalance"]
