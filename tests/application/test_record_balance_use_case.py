"""Tests for the balance recording use cases."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from src.application.use_cases.record_balance import (
    DeleteBalanceUseCase,
    GetBalanceHistoryUseCase,
    RecordBalanceUseCase,
)
from src.domain.errors import AccountNotFoundError, InvalidDateRangeError
from src.domain.models import Account


def test_record_balance_builds_entry_and_upserts() -> None:
    accounts = MagicMock()
    accounts.get_account.return_value = Account(
        id="a",
        name="Mortgage",
        account_type="mortgage",
    )
    balances = MagicMock()
    balances.set_balance.side_effect = lambda entry: entry
    use_case = RecordBalanceUseCase(accounts, balances, logger=MagicMock())

    stored = use_case.execute("a", "2024-02-01", "-250000.50", notes="  ")

    assert stored.account_id == "a"
    assert stored.date == date(2024, 2, 1)
    assert stored.balance == Decimal("-250000.50")
    assert stored.notes is None
    balances.set_balance.assert_called_once()


def test_record_balance_requires_existing_account() -> None:
    accounts = MagicMock()
    accounts.get_account.return_value = None
    balances = MagicMock()
    use_case = RecordBalanceUseCase(accounts, balances, logger=MagicMock())

    with pytest.raises(AccountNotFoundError):
        use_case.execute("missing", date(2024, 1, 1), 10)
    balances.set_balance.assert_not_called()


def test_balance_history_parses_optional_bounds() -> None:
    balances = MagicMock()
    balances.list_balances.return_value = []
    use_case = GetBalanceHistoryUseCase(balances)

    use_case.execute("a", "2024-01-01", None)

    balances.list_balances.assert_called_once_with(
        "a",
        date(2024, 1, 1),
        None,
    )
    with pytest.raises(InvalidDateRangeError):
        use_case.execute("a", "2024-02-01", "2024-01-01")


def test_delete_balance_delegates() -> None:
    balances = MagicMock()

    DeleteBalanceUseCase(balances, logger=MagicMock()).execute("entry")

    balances.delete_balance.assert_called_once_with("entry")
