"""SQLAlchemy-backed repository for tracked accounts."""

from datetime import date

from sqlalchemy import text

from src.application.ports.accounts_repository import AccountsRepositoryPort
from src.application.ports.database import DatabaseEnginePort
from src.domain.models import Account, AccountWithBalance
from src.infrastructure.db import translate_storage_errors
from src.utils.decimal_utils import coerce_decimal

ACCOUNT_COLUMNS = """
    a.id, a.name, a.account_type, a.institution, a.description,
    a.currency, a.is_active, a.created_at, a.updated_at
"""

SELECT_ACTIVE_ACCOUNTS_SQL = text(
    f"""
    SELECT {ACCOUNT_COLUMNS}
    FROM accounts a
    WHERE a.is_active = 1
    ORDER BY a.category, a.account_type, a.name
    """
)

SELECT_ACCOUNT_SQL = text(
    f"""
    SELECT {ACCOUNT_COLUMNS}
    FROM accounts a
    WHERE a.id = :account_id
    """
)

SELECT_ACCOUNTS_WITH_BALANCES_SQL = text(
    f"""
    SELECT {ACCOUNT_COLUMNS},
           b.balance AS current_balance,
           b.date AS balance_date
    FROM accounts a
    LEFT JOIN balance_entries b
      ON b.account_id = a.id
     AND b.date = (
         SELECT MAX(latest.date)
         FROM balance_entries latest
         WHERE latest.account_id = a.id
     )
    WHERE a.is_active = 1
    ORDER BY a.category, a.account_type, a.name
    """
)

INSERT_ACCOUNT_SQL = text(
    """
    INSERT INTO accounts (
        id, name, account_type, category, institution, description,
        currency, is_active, created_at, updated_at
    )
    VALUES (
        :id, :name, :account_type, :category, :institution, :description,
        :currency, :is_active, :created_at, :updated_at
    )
    """
)

DELETE_ACCOUNT_BALANCES_SQL = text(
    "DELETE FROM balance_entries WHERE account_id = :account_id"
)

DELETE_ACCOUNT_SQL = text("DELETE FROM accounts WHERE id = :account_id")

UPDATABLE_COLUMNS = (
    "name",
    "institution",
    "description",
    "currency",
    "is_active",
)


class SqlAlchemyAccountsRepository(AccountsRepositoryPort):
    """Repository backed by SQLAlchemy for the account directory."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the tracker engine.
        """
        self._db_port = db_port

    def list_active_accounts(self) -> list[Account]:
        engine = self._db_port.get_engine()
        with translate_storage_errors("list accounts"):
            with engine.connect() as conn:
                rows = conn.execute(SELECT_ACTIVE_ACCOUNTS_SQL).all()
        return [self._to_account(row) for row in rows]

    def get_account(self, account_id: str) -> Account | None:
        engine = self._db_port.get_engine()
        with translate_storage_errors("read account"):
            with engine.connect() as conn:
                row = conn.execute(
                    SELECT_ACCOUNT_SQL,
                    {"account_id": account_id},
                ).first()
        return self._to_account(row) if row else None

    def insert_account(self, account: Account) -> None:
        payload = {
            "id": account.id,
            "name": account.name,
            "account_type": account.account_type,
            "category": account.category,
            "institution": account.institution,
            "description": account.description,
            "currency": account.currency,
            "is_active": int(account.is_active),
            "created_at": account.created_at,
            "updated_at": account.updated_at,
        }
        engine = self._db_port.get_engine()
        with translate_storage_errors("create account"):
            with engine.begin() as conn:
                conn.execute(INSERT_ACCOUNT_SQL, payload)

    def update_account(
        self,
        account_id: str,
        changes: dict[str, object],
        updated_at: str,
    ) -> None:
        unknown = set(changes) - set(UPDATABLE_COLUMNS)
        if unknown:
            raise ValueError(
                f"Cannot update account fields: {sorted(unknown)}"
            )
        if not changes:
            return
        params: dict[str, object] = {
            "account_id": account_id,
            "updated_at": updated_at,
        }
        assignments = []
        for column in UPDATABLE_COLUMNS:
            if column not in changes:
                continue
            value = changes[column]
            params[column] = int(bool(value)) if column == "is_active" else value
            assignments.append(f"{column} = :{column}")
        assignments.append("updated_at = :updated_at")
        query = text(
            f"UPDATE accounts SET {', '.join(assignments)} "
            "WHERE id = :account_id"
        )
        engine = self._db_port.get_engine()
        with translate_storage_errors("update account"):
            with engine.begin() as conn:
                conn.execute(query, params)

    def delete_account(self, account_id: str) -> None:
        params = {"account_id": account_id}
        engine = self._db_port.get_engine()
        with translate_storage_errors("delete account"):
            with engine.begin() as conn:
                conn.execute(DELETE_ACCOUNT_BALANCES_SQL, params)
                conn.execute(DELETE_ACCOUNT_SQL, params)

    def list_accounts_with_balances(self) -> list[AccountWithBalance]:
        engine = self._db_port.get_engine()
        with translate_storage_errors("list account balances"):
            with engine.connect() as conn:
                rows = conn.execute(SELECT_ACCOUNTS_WITH_BALANCES_SQL).all()
        return [
            AccountWithBalance(
                account=self._to_account(row),
                current_balance=coerce_decimal(row.current_balance),
                balance_date=(
                    date.fromisoformat(row.balance_date)
                    if row.balance_date
                    else None
                ),
            )
            for row in rows
        ]

    @staticmethod
    def _to_account(row) -> Account:
        return Account(
            id=row.id,
            name=row.name,
            account_type=row.account_type,
            institution=row.institution,
            description=row.description,
            currency=row.currency,
            is_active=bool(row.is_active),
            created_at=row.created_at,
            updated_at=row.updated_at,
        )


__all__ = ["SqlAlchemyAccountsRepository"]
