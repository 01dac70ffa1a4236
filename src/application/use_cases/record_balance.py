"""Use cases for recording and browsing balance snapshots."""

from datetime import date
from decimal import Decimal

from src.application.ports.accounts_repository import AccountsRepositoryPort
from src.application.ports.balances_repository import BalancesRepositoryPort
from src.domain.errors import AccountNotFoundError
from src.domain.models import BalanceEntry
from src.domain.services import (
    normalize_label,
    parse_calendar_date,
    validate_date_range,
)
from src.infrastructure.logging.logger import get_app_logger
from src.utils.decimal_utils import coerce_decimal
from src.utils.utils import new_id, utc_timestamp


class RecordBalanceUseCase:
    """Store the balance of an account on a date, replacing any prior value."""

    def __init__(
        self,
        accounts_repository: AccountsRepositoryPort,
        balances_repository: BalancesRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            accounts_repository: Port used to check the account exists.
            balances_repository: Port storing the balance entries.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._accounts_repository = accounts_repository
        self._balances_repository = balances_repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        account_id: str,
        entry_date: date | str,
        balance: Decimal | float | int | str,
        notes: str | None = None,
    ) -> BalanceEntry:
        """Upsert the balance for (account_id, entry_date).

        Returns:
            BalanceEntry: The stored entry.

        Raises:
            AccountNotFoundError: If the account does not exist.
            InvalidDateRangeError: If the date is malformed.
        """
        if self._accounts_repository.get_account(account_id) is None:
            raise AccountNotFoundError(account_id)
        entry = BalanceEntry(
            id=new_id(),
            account_id=account_id,
            date=parse_calendar_date(entry_date),
            balance=coerce_decimal(balance),
            notes=normalize_label(notes),
            created_at=utc_timestamp(),
        )
        stored = self._balances_repository.set_balance(entry)
        self._logger.info(
            f"Balance recorded: account={account_id}, "
            f"date={stored.date.isoformat()}, balance={stored.balance}"
        )
        return stored


class GetBalanceHistoryUseCase:
    """List the balance entries of one account, newest first."""

    def __init__(self, balances_repository: BalancesRepositoryPort) -> None:
        self._balances_repository = balances_repository

    def execute(
        self,
        account_id: str,
        from_date: date | str | None = None,
        to_date: date | str | None = None,
    ) -> list[BalanceEntry]:
        start = (
            parse_calendar_date(from_date, "from_date") if from_date else None
        )
        end = parse_calendar_date(to_date, "to_date") if to_date else None
        if start and end:
            validate_date_range(start, end)
        return self._balances_repository.list_balances(account_id, start, end)


class DeleteBalanceUseCase:
    """Remove a single balance entry."""

    def __init__(
        self,
        balances_repository: BalancesRepositoryPort,
        logger=None,
    ) -> None:
        self._balances_repository = balances_repository
        self._logger = logger or get_app_logger()

    def execute(self, entry_id: str) -> None:
        self._balances_repository.delete_balance(entry_id)
        self._logger.info(f"Balance deleted: id={entry_id}")


__all__ = [
    "RecordBalanceUseCase",
    "GetBalanceHistoryUseCase",
    "DeleteBalanceUseCase",
]
