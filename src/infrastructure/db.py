"""Database infrastructure for the net worth tracker.

This module exposes concrete helpers to create and reuse the SQLAlchemy
engine connected to the local SQLite store, plus the translation of
driver errors into storage errors. It belongs to the infrastructure layer
because it deals with an external system.
"""

from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from src.application.ports.database import DatabaseEnginePort
from src.domain.errors import StorageConstraintError, StorageError
from src.infrastructure.settings import AppSettings


def _enable_sqlite_foreign_keys(dbapi_connection, _connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def _create_engine(db_url: str) -> Engine:
    """Create a configured SQLAlchemy engine.

    Args:
        db_url: Fully qualified database URL.

    Returns:
        Engine: Engine with health checks enabled and, for SQLite, foreign
        key enforcement on every connection.
    """
    engine = create_engine(
        db_url,
        pool_pre_ping=True,
        future=True,
    )
    if engine.dialect.name == "sqlite":
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
    return engine


def _ensure_sqlite_directory(db_url: str) -> None:
    prefix = "sqlite:///"
    if not db_url.startswith(prefix):
        return
    raw_path = db_url[len(prefix):]
    if not raw_path or raw_path == ":memory:":
        return
    Path(raw_path).parent.mkdir(parents=True, exist_ok=True)


_engine: Optional[Engine] = None


def get_engine() -> Engine:
    """Get a singleton SQLAlchemy engine for the tracker database.

    Returns:
        Engine: Lazily initialized engine connected to the local store.
    """
    global _engine
    if _engine is None:
        db_url = AppSettings.from_env().resolved_database_url
        _ensure_sqlite_directory(db_url)
        _engine = _create_engine(db_url)
    return _engine


@contextmanager
def translate_storage_errors(operation: str) -> Iterator[None]:
    """Re-raise SQLAlchemy failures as storage errors.

    Args:
        operation: Short description used in the error message.

    Raises:
        StorageConstraintError: On integrity violations.
        StorageError: On any other database failure.
    """
    try:
        yield
    except IntegrityError as exc:
        raise StorageConstraintError(
            f"Constraint violated while trying to {operation}: {exc.orig}"
        ) from exc
    except SQLAlchemyError as exc:
        raise StorageError(f"Failed to {operation}: {exc}") from exc


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """DatabaseEnginePort implementation backed by a SQLAlchemy engine.

    The adapter hides configuration details (environment variables, file
    locations) behind the port so use cases depend only on the protocol.
    """

    def __init__(self, engine: Engine | None = None) -> None:
        """Initialize the adapter.

        Args:
            engine: Optional engine override, the shared engine otherwise.
        """
        self._engine = engine

    def get_engine(self) -> Engine:
        """Get the engine for the tracker database.

        Returns:
            Engine: SQLAlchemy engine connected to the local store.
        """
        if self._engine is not None:
            return self._engine
        return get_engine()


__all__ = [
    "get_engine",
    "translate_storage_errors",
    "SqlAlchemyDatabaseEngineAdapter",
]
