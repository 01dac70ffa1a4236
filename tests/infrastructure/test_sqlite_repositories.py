"""Integration tests for the SQLAlchemy repositories on SQLite."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from src.application.use_cases.get_chart_data import GetChartDataUseCase
from src.domain.errors import StorageConstraintError
from src.domain.models import Account, BalanceEntry, Milestone
from src.infrastructure.accounts_repository import (
    SqlAlchemyAccountsRepository,
)
from src.infrastructure.balances_repository import (
    SqlAlchemyBalancesRepository,
)
from src.infrastructure.db import (
    SqlAlchemyDatabaseEngineAdapter,
    _create_engine,
)
from src.infrastructure.milestones_repository import (
    SqlAlchemyMilestonesRepository,
)
from src.infrastructure.schema import MIGRATIONS, apply_migrations


@pytest.fixture()
def db_port(tmp_path):
    engine = _create_engine(f"sqlite:///{tmp_path / 'tracker.db'}")
    adapter = SqlAlchemyDatabaseEngineAdapter(engine)
    apply_migrations(adapter, logger=MagicMock())
    yield adapter
    engine.dispose()


def _account(account_id: str, account_type: str, name: str) -> Account:
    return Account(
        id=account_id,
        name=name,
        account_type=account_type,
        created_at="2024-01-01T00:00:00+00:00",
        updated_at="2024-01-01T00:00:00+00:00",
    )


def _entry(
    entry_id: str,
    account_id: str,
    entry_date: date,
    balance: str,
    notes: str | None = None,
) -> BalanceEntry:
    return BalanceEntry(
        id=entry_id,
        account_id=account_id,
        date=entry_date,
        balance=Decimal(balance),
        notes=notes,
        created_at="2024-01-01T00:00:00+00:00",
    )


def test_apply_migrations_is_idempotent(db_port) -> None:
    """A second run should find nothing left to apply."""
    assert apply_migrations(db_port, logger=MagicMock()) == []
    with db_port.get_engine().connect() as conn:
        versions = conn.exec_driver_sql(
            "SELECT version FROM schema_migrations ORDER BY version"
        ).scalars().all()
    assert versions == [migration.version for migration in MIGRATIONS]


def test_accounts_round_trip_with_derived_category(db_port) -> None:
    accounts = SqlAlchemyAccountsRepository(db_port)
    accounts.insert_account(_account("m", "mortgage", "Home Loan"))
    accounts.insert_account(_account("s", "savings", "Easy Saver"))

    listed = accounts.list_active_accounts()

    assert [account.id for account in listed] == ["s", "m"]
    with db_port.get_engine().connect() as conn:
        stored = conn.exec_driver_sql(
            "SELECT category FROM accounts WHERE id = 'm'"
        ).scalar()
    assert stored == "liability"


def test_update_account_changes_only_mutable_fields(db_port) -> None:
    accounts = SqlAlchemyAccountsRepository(db_port)
    accounts.insert_account(_account("s", "savings", "Easy Saver"))

    accounts.update_account(
        "s",
        {"name": "Rainy Day", "is_active": False},
        "2024-02-01T00:00:00+00:00",
    )

    updated = accounts.get_account("s")
    assert updated.name == "Rainy Day"
    assert updated.is_active is False
    assert updated.updated_at == "2024-02-01T00:00:00+00:00"
    assert accounts.list_active_accounts() == []
    with pytest.raises(ValueError):
        accounts.update_account("s", {"account_type": "loan"}, "now")


def test_set_balance_overwrites_same_day(db_port) -> None:
    """A second write for (account, date) replaces the first in place."""
    SqlAlchemyAccountsRepository(db_port).insert_account(
        _account("s", "savings", "Easy Saver")
    )
    balances = SqlAlchemyBalancesRepository(db_port)

    first = balances.set_balance(_entry("e1", "s", date(2024, 1, 1), "100"))
    second = balances.set_balance(
        _entry("e2", "s", date(2024, 1, 1), "150.25", notes="bonus")
    )

    assert first.id == "e1"
    assert second.id == "e1"
    assert second.balance == Decimal("150.25")
    assert second.notes == "bonus"
    assert len(balances.list_balances("s")) == 1


def test_list_balances_filters_and_orders_newest_first(db_port) -> None:
    SqlAlchemyAccountsRepository(db_port).insert_account(
        _account("s", "savings", "Easy Saver")
    )
    balances = SqlAlchemyBalancesRepository(db_port)
    for index, month in enumerate((1, 2, 3), start=1):
        balances.set_balance(
            _entry(f"e{index}", "s", date(2024, month, 1), str(month * 10))
        )

    result = balances.list_balances(
        "s",
        from_date=date(2024, 2, 1),
        to_date=date(2024, 3, 1),
    )

    assert [entry.date for entry in result] == [
        date(2024, 3, 1),
        date(2024, 2, 1),
    ]
    balances.delete_balance("e3")
    assert [entry.id for entry in balances.list_balances("s")] == [
        "e2",
        "e1",
    ]


def test_balance_for_unknown_account_violates_constraint(db_port) -> None:
    balances = SqlAlchemyBalancesRepository(db_port)

    with pytest.raises(StorageConstraintError):
        balances.set_balance(_entry("e1", "ghost", date(2024, 1, 1), "1"))


def test_histories_and_chart_data_skip_inactive_accounts(db_port) -> None:
    """The bulk read feeds the reconstruction with active accounts only."""
    accounts = SqlAlchemyAccountsRepository(db_port)
    balances = SqlAlchemyBalancesRepository(db_port)
    accounts.insert_account(_account("a", "investment", "Broker"))
    accounts.insert_account(_account("b", "credit_card", "Card"))
    accounts.insert_account(_account("c", "property", "Old Flat"))
    balances.set_balance(_entry("a2", "a", date(2024, 3, 1), "1200"))
    balances.set_balance(_entry("a1", "a", date(2024, 1, 1), "1000"))
    balances.set_balance(_entry("b1", "b", date(2024, 2, 1), "-500"))
    balances.set_balance(_entry("c1", "c", date(2024, 1, 15), "90000"))
    accounts.update_account("c", {"is_active": False}, "now")

    histories = balances.fetch_active_histories()
    series = GetChartDataUseCase(balances, logger=MagicMock()).execute(
        "2024-01-01",
        "2024-03-01",
    )

    assert {history.account_id for history in histories} == {"a", "b"}
    broker = next(h for h in histories if h.account_id == "a")
    assert [entry.date for entry in broker.entries] == [
        date(2024, 1, 1),
        date(2024, 3, 1),
    ]
    assert [
        (point.date, point.assets, point.liabilities, point.net_worth)
        for point in series
    ] == [
        (date(2024, 1, 1), Decimal("1000"), Decimal("0"), Decimal("1000")),
        (date(2024, 2, 1), Decimal("1000"), Decimal("500"), Decimal("500")),
        (date(2024, 3, 1), Decimal("1200"), Decimal("500"), Decimal("700")),
    ]


def test_accounts_with_balances_use_latest_entry(db_port) -> None:
    accounts = SqlAlchemyAccountsRepository(db_port)
    balances = SqlAlchemyBalancesRepository(db_port)
    accounts.insert_account(_account("a", "pension", "Pension"))
    accounts.insert_account(_account("b", "loan", "Car Loan"))
    balances.set_balance(_entry("a1", "a", date(2024, 1, 1), "500"))
    balances.set_balance(_entry("a2", "a", date(2024, 4, 1), "650"))

    rows = {row.account.id: row for row in accounts.list_accounts_with_balances()}

    assert rows["a"].current_balance == Decimal("650")
    assert rows["a"].balance_date == date(2024, 4, 1)
    assert rows["b"].current_balance == Decimal("0")
    assert rows["b"].balance_date is None


def test_delete_account_removes_balances_and_detaches_milestones(
    db_port,
) -> None:
    accounts = SqlAlchemyAccountsRepository(db_port)
    balances = SqlAlchemyBalancesRepository(db_port)
    milestones = SqlAlchemyMilestonesRepository(db_port)
    accounts.insert_account(_account("a", "savings", "Saver"))
    balances.set_balance(_entry("a1", "a", date(2024, 1, 1), "10"))
    milestones.insert_milestone(
        Milestone(
            id="m1",
            date=date(2024, 1, 1),
            label="Opened saver",
            account_id="a",
        )
    )

    accounts.delete_account("a")

    assert accounts.get_account("a") is None
    assert balances.list_balances("a") == []
    [milestone] = milestones.list_milestones()
    assert milestone.account_id is None


def test_milestones_filter_by_range(db_port) -> None:
    milestones = SqlAlchemyMilestonesRepository(db_port)
    for index, month in enumerate((1, 6, 12), start=1):
        milestones.insert_milestone(
            Milestone(
                id=f"m{index}",
                date=date(2024, month, 1),
                label=f"Milestone {index}",
            )
        )

    result = milestones.list_milestones(date(2024, 2, 1), date(2024, 12, 1))
    milestones.delete_milestone("m3")

    assert [milestone.id for milestone in result] == ["m2", "m3"]
    assert [m.id for m in milestones.list_milestones()] == ["m1", "m2"]
