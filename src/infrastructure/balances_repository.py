"""SQLAlchemy-backed repository for balance snapshots."""

from datetime import date

from sqlalchemy import text

from src.application.ports.balances_repository import BalancesRepositoryPort
from src.application.ports.database import DatabaseEnginePort
from src.domain.models import AccountHistory, BalanceEntry, BalancePoint
from src.infrastructure.db import translate_storage_errors
from src.utils.decimal_utils import coerce_decimal

UPSERT_BALANCE_SQL = text(
    """
    INSERT INTO balance_entries (
        id, account_id, date, balance, notes, created_at
    )
    VALUES (:id, :account_id, :date, :balance, :notes, :created_at)
    ON CONFLICT(account_id, date) DO UPDATE SET
        balance = excluded.balance,
        notes = excluded.notes
    """
)

SELECT_BALANCE_BY_KEY_SQL = text(
    """
    SELECT id, account_id, date, balance, notes, created_at
    FROM balance_entries
    WHERE account_id = :account_id AND date = :date
    """
)

DELETE_BALANCE_SQL = text("DELETE FROM balance_entries WHERE id = :entry_id")

SELECT_ACTIVE_HISTORIES_SQL = text(
    """
    SELECT be.account_id AS account_id,
           be.date AS date,
           be.balance AS balance,
           a.category AS category
    FROM balance_entries be
    JOIN accounts a ON be.account_id = a.id
    WHERE a.is_active = 1
    ORDER BY a.category, a.account_type, a.name, be.account_id, be.date
    """
)


class SqlAlchemyBalancesRepository(BalancesRepositoryPort):
    """Repository backed by SQLAlchemy for the balance store."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the tracker engine.
        """
        self._db_port = db_port

    def set_balance(self, entry: BalanceEntry) -> BalanceEntry:
        """Insert the entry or overwrite the one stored for the same day.

        Returns:
            BalanceEntry: The stored row, which keeps its original id when
            an existing entry was replaced.
        """
        key = {
            "account_id": entry.account_id,
            "date": entry.date.isoformat(),
        }
        engine = self._db_port.get_engine()
        with translate_storage_errors("record balance"):
            with engine.begin() as conn:
                conn.execute(
                    UPSERT_BALANCE_SQL,
                    {
                        **key,
                        "id": entry.id,
                        "balance": float(entry.balance),
                        "notes": entry.notes,
                        "created_at": entry.created_at,
                    },
                )
                row = conn.execute(SELECT_BALANCE_BY_KEY_SQL, key).first()
        return self._to_entry(row)

    def list_balances(
        self,
        account_id: str,
        from_date: date | None = None,
        to_date: date | None = None,
    ) -> list[BalanceEntry]:
        query = self._build_list_query(from_date, to_date)
        params: dict[str, str] = {"account_id": account_id}
        if from_date:
            params["from_date"] = from_date.isoformat()
        if to_date:
            params["to_date"] = to_date.isoformat()
        engine = self._db_port.get_engine()
        with translate_storage_errors("list balances"):
            with engine.connect() as conn:
                rows = conn.execute(query, params).all()
        return [self._to_entry(row) for row in rows]

    def delete_balance(self, entry_id: str) -> None:
        engine = self._db_port.get_engine()
        with translate_storage_errors("delete balance"):
            with engine.begin() as conn:
                conn.execute(DELETE_BALANCE_SQL, {"entry_id": entry_id})

    def fetch_active_histories(self) -> list[AccountHistory]:
        engine = self._db_port.get_engine()
        with translate_storage_errors("read balance histories"):
            with engine.connect() as conn:
                rows = conn.execute(SELECT_ACTIVE_HISTORIES_SQL).all()

        histories: dict[str, AccountHistory] = {}
        for row in rows:
            history = histories.get(row.account_id)
            if history is None:
                history = AccountHistory(
                    account_id=row.account_id,
                    category=row.category,
                )
                histories[row.account_id] = history
            history.entries.append(
                BalancePoint(
                    date=date.fromisoformat(row.date),
                    balance=coerce_decimal(row.balance),
                )
            )
        return list(histories.values())

    @staticmethod
    def _build_list_query(
        from_date: date | None,
        to_date: date | None,
    ):
        base_sql = """
        SELECT id, account_id, date, balance, notes, created_at
        FROM balance_entries
        WHERE account_id = :account_id
        """
        if from_date:
            base_sql += " AND date >= :from_date"
        if to_date:
            base_sql += " AND date <= :to_date"
        base_sql += " ORDER BY date DESC"
        return text(base_sql)

    @staticmethod
    def _to_entry(row) -> BalanceEntry:
        return BalanceEntry(
            id=row.id,
            account_id=row.account_id,
            date=date.fromisoformat(row.date),
            balance=coerce_decimal(row.balance),
            notes=row.notes,
            created_at=row.created_at,
        )


__all__ = ["SqlAlchemyBalancesRepository"]
