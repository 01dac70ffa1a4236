"""Use cases for creating, updating and deleting accounts."""

from dataclasses import dataclass

from src.application.ports.accounts_repository import AccountsRepositoryPort
from src.domain.errors import AccountNotFoundError
from src.domain.models import Account
from src.domain.policies import category_for_type
from src.domain.services import normalize_currency, normalize_label
from src.infrastructure.logging.logger import get_app_logger
from src.utils.utils import new_id, utc_timestamp


@dataclass(frozen=True)
class AccountChanges:
    """Optional updates for the mutable account fields.

    Account type is intentionally absent: the category derives from it.
    """

    name: str | None = None
    institution: str | None = None
    description: str | None = None
    currency: str | None = None
    is_active: bool | None = None


class CreateAccountUseCase:
    """Register a new asset or liability account."""

    def __init__(
        self,
        accounts_repository: AccountsRepositoryPort,
        logger=None,
    ) -> None:
        self._accounts_repository = accounts_repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        name: str,
        account_type: str,
        institution: str | None = None,
        description: str | None = None,
        currency: str | None = None,
    ) -> Account:
        """Create and persist an account.

        Args:
            name: Display name.
            account_type: One of the supported account types.
            institution: Optional institution label.
            description: Optional description.
            currency: Optional currency code, GBP when omitted.

        Returns:
            Account: The stored account.

        Raises:
            ValueError: If the name is blank or the type is unknown.
        """
        cleaned_name = normalize_label(name)
        if cleaned_name is None:
            raise ValueError("Account name must not be blank")
        category = category_for_type(account_type)
        timestamp = utc_timestamp()
        account = Account(
            id=new_id(),
            name=cleaned_name,
            account_type=account_type,
            institution=normalize_label(institution),
            description=normalize_label(description),
            currency=normalize_currency(currency),
            is_active=True,
            created_at=timestamp,
            updated_at=timestamp,
        )
        self._accounts_repository.insert_account(account)
        self._logger.info(
            f"Account created: id={account.id}, type={account_type}, "
            f"category={category}"
        )
        return account


class UpdateAccountUseCase:
    """Apply changes to the mutable fields of an account."""

    def __init__(
        self,
        accounts_repository: AccountsRepositoryPort,
        logger=None,
    ) -> None:
        self._accounts_repository = accounts_repository
        self._logger = logger or get_app_logger()

    def execute(self, account_id: str, changes: AccountChanges) -> Account:
        """Update an account and return its stored state.

        Raises:
            AccountNotFoundError: If the account does not exist.
            ValueError: If a new name is blank.
        """
        existing = self._accounts_repository.get_account(account_id)
        if existing is None:
            raise AccountNotFoundError(account_id)

        updates = self._build_updates(changes)
        if not updates:
            return existing

        self._accounts_repository.update_account(
            account_id,
            updates,
            utc_timestamp(),
        )
        self._logger.info(
            f"Account updated: id={account_id}, fields={sorted(updates)}"
        )
        updated = self._accounts_repository.get_account(account_id)
        if updated is None:
            raise AccountNotFoundError(account_id)
        return updated

    @staticmethod
    def _build_updates(changes: AccountChanges) -> dict[str, object]:
        updates: dict[str, object] = {}
        if changes.name is not None:
            name = normalize_label(changes.name)
            if name is None:
                raise ValueError("Account name must not be blank")
            updates["name"] = name
        if changes.institution is not None:
            updates["institution"] = normalize_label(changes.institution)
        if changes.description is not None:
            updates["description"] = normalize_label(changes.description)
        if changes.currency is not None:
            updates["currency"] = normalize_currency(changes.currency)
        if changes.is_active is not None:
            updates["is_active"] = changes.is_active
        return updates


class DeleteAccountUseCase:
    """Remove an account and all of its balance entries."""

    def __init__(
        self,
        accounts_repository: AccountsRepositoryPort,
        logger=None,
    ) -> None:
        self._accounts_repository = accounts_repository
        self._logger = logger or get_app_logger()

    def execute(self, account_id: str) -> None:
        self._accounts_repository.delete_account(account_id)
        self._logger.info(f"Account deleted: id={account_id}")


__all__ = [
    "AccountChanges",
    "CreateAccountUseCase",
    "UpdateAccountUseCase",
    "DeleteAccountUseCase",
]
