"""Domain validation helpers."""

from collections.abc import Iterable
from datetime import date
from logging import Logger

from src.domain.constants import ASSET_CATEGORY
from src.domain.errors import InvalidDateRangeError, UnsortedHistoryError
from src.domain.models import AccountHistory


def parse_calendar_date(value: date | str, field_name: str = "date") -> date:
    """Return a date from a ``date`` or a ``YYYY-MM-DD`` string.

    Raises:
        InvalidDateRangeError: If the string is not an ISO calendar date.
    """
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(value.strip())
    except (AttributeError, ValueError):
        raise InvalidDateRangeError(
            f"Invalid {field_name} '{value}'. Expected format YYYY-MM-DD."
        ) from None


def validate_date_range(from_date: date, to_date: date) -> None:
    """Reject ranges whose start falls after their end."""
    if from_date > to_date:
        raise InvalidDateRangeError(
            f"from_date {from_date.isoformat()} is after "
            f"to_date {to_date.isoformat()}"
        )


def validate_history_order(histories: Iterable[AccountHistory]) -> None:
    """Ensure each history is strictly ascending by date.

    Raises:
        UnsortedHistoryError: On out-of-order or duplicate dates.
    """
    for history in histories:
        for previous, current in zip(history.entries, history.entries[1:]):
            if current.date <= previous.date:
                raise UnsortedHistoryError(
                    f"History for account {history.account_id} is not "
                    f"strictly ascending at {current.date.isoformat()}"
                )


def validate_balance_sign(
    history: AccountHistory,
    logger: Logger,
) -> None:
    """Warn when an asset account carries a negative balance.

    Args:
        history: Account history to inspect.
        logger: Logger used for warnings.
    """
    if history.category != ASSET_CATEGORY:
        return
    for entry in history.entries:
        if entry.balance < 0:
            logger.warning(
                f"Asset balance is negative for account={history.account_id} "
                f"on {entry.date.isoformat()}: {entry.balance}"
            )


__all__ = [
    "parse_calendar_date",
    "validate_date_range",
    "validate_history_order",
    "validate_balance_sign",
]
