"""Versioned schema migrations for the local tracker database."""

from dataclasses import dataclass

from sqlalchemy import text

from src.application.ports.database import DatabaseEnginePort
from src.domain.constants import ACCOUNT_TYPES
from src.infrastructure.db import translate_storage_errors
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class Migration:
    """A numbered group of DDL statements."""

    version: int
    description: str
    statements: tuple[str, ...]


_ACCOUNT_TYPE_CHECK = ", ".join(f"'{value}'" for value in ACCOUNT_TYPES)

CREATE_MIGRATIONS_TABLE_SQL = """
CREATE TABLE IF NOT EXISTS schema_migrations (
    version INTEGER PRIMARY KEY NOT NULL,
    description TEXT NOT NULL,
    applied_at TEXT NOT NULL DEFAULT (datetime('now'))
)
"""

SELECT_APPLIED_VERSIONS_SQL = text("SELECT version FROM schema_migrations")

INSERT_MIGRATION_SQL = text(
    """
    INSERT INTO schema_migrations (version, description)
    VALUES (:version, :description)
    """
)

MIGRATIONS = (
    Migration(
        version=1,
        description="create_accounts_table",
        statements=(
            f"""
            CREATE TABLE IF NOT EXISTS accounts (
                id TEXT PRIMARY KEY NOT NULL,
                name TEXT NOT NULL,
                account_type TEXT NOT NULL
                    CHECK(account_type IN ({_ACCOUNT_TYPE_CHECK})),
                category TEXT NOT NULL
                    CHECK(category IN ('asset', 'liability')),
                institution TEXT,
                description TEXT,
                currency TEXT NOT NULL DEFAULT 'GBP',
                is_active INTEGER NOT NULL DEFAULT 1,
                created_at TEXT NOT NULL DEFAULT (datetime('now')),
                updated_at TEXT NOT NULL DEFAULT (datetime('now'))
            )
            """,
        ),
    ),
    Migration(
        version=2,
        description="create_balance_entries_table",
        statements=(
            """
            CREATE TABLE IF NOT EXISTS balance_entries (
                id TEXT PRIMARY KEY NOT NULL,
                account_id TEXT NOT NULL
                    REFERENCES accounts(id) ON DELETE CASCADE,
                date TEXT NOT NULL,
                balance REAL NOT NULL,
                notes TEXT,
                created_at TEXT NOT NULL DEFAULT (datetime('now')),
                UNIQUE(account_id, date)
            )
            """,
            """
            CREATE INDEX IF NOT EXISTS idx_balance_entries_account_date
            ON balance_entries(account_id, date)
            """,
            """
            CREATE INDEX IF NOT EXISTS idx_balance_entries_date
            ON balance_entries(date)
            """,
        ),
    ),
    Migration(
        version=3,
        description="create_milestones_table",
        statements=(
            """
            CREATE TABLE IF NOT EXISTS milestones (
                id TEXT PRIMARY KEY NOT NULL,
                date TEXT NOT NULL,
                label TEXT NOT NULL,
                account_id TEXT
                    REFERENCES accounts(id) ON DELETE SET NULL,
                created_at TEXT NOT NULL DEFAULT (datetime('now'))
            )
            """,
            """
            CREATE INDEX IF NOT EXISTS idx_milestones_date
            ON milestones(date)
            """,
        ),
    ),
)


def apply_migrations(
    db_port: DatabaseEnginePort,
    logger=None,
    migrations: tuple[Migration, ...] = MIGRATIONS,
) -> list[int]:
    """Apply pending migrations in version order.

    Args:
        db_port: Port providing access to the tracker engine.
        logger: Optional logger compatible with logging.Logger-like API.
        migrations: Migrations to consider.

    Returns:
        list[int]: Versions applied by this call.
    """
    resolved_logger = logger or get_app_logger()
    engine = db_port.get_engine()
    applied: list[int] = []
    with translate_storage_errors("apply schema migrations"):
        with engine.begin() as conn:
            conn.exec_driver_sql(CREATE_MIGRATIONS_TABLE_SQL)
            existing = {
                row.version
                for row in conn.execute(SELECT_APPLIED_VERSIONS_SQL).all()
            }
            for migration in sorted(migrations, key=lambda m: m.version):
                if migration.version in existing:
                    continue
                for statement in migration.statements:
                    conn.exec_driver_sql(statement)
                conn.execute(
                    INSERT_MIGRATION_SQL,
                    {
                        "version": migration.version,
                        "description": migration.description,
                    },
                )
                applied.append(migration.version)
                resolved_logger.info(
                    f"Applied migration {migration.version}: "
                    f"{migration.description}"
                )
    return applied


__all__ = ["Migration", "MIGRATIONS", "apply_migrations"]
