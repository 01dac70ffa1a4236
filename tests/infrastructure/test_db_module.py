"""Tests for the infrastructure.db module."""

import pytest
from sqlalchemy.exc import IntegrityError, OperationalError

from src.domain.errors import StorageConstraintError, StorageError
from src.infrastructure import db as db_module
from src.infrastructure.settings import AppSettings


def test_create_engine_enables_sqlite_foreign_keys(tmp_path):
    """SQLite connections should enforce foreign keys."""
    engine = db_module._create_engine(f"sqlite:///{tmp_path / 'fk.db'}")

    with engine.connect() as conn:
        enabled = conn.exec_driver_sql("PRAGMA foreign_keys").scalar()

    assert enabled == 1
    engine.dispose()


def test_create_engine_passes_health_checks(monkeypatch):
    """_create_engine should configure pre-ping and the 2.0 API."""
    captured = {}

    class _FakeEngine:
        class dialect:
            name = "postgresql"

    def fake_create_engine(db_url, **kwargs):
        captured["db_url"] = db_url
        captured["kwargs"] = kwargs
        return _FakeEngine()

    monkeypatch.setattr(db_module, "create_engine", fake_create_engine)

    engine = db_module._create_engine("postgresql://tracker")

    assert isinstance(engine, _FakeEngine)
    assert captured["db_url"] == "postgresql://tracker"
    assert captured["kwargs"]["pool_pre_ping"] is True
    assert captured["kwargs"]["future"] is True


def test_get_engine_caches_engine(monkeypatch, tmp_path):
    """get_engine should memoize the created engine."""
    monkeypatch.setattr(db_module, "_engine", None)
    created = []
    db_path = tmp_path / "nested" / "tracker.db"

    def fake_create_engine(url):
        created.append(url)
        return f"engine:{url}"

    monkeypatch.setattr(db_module, "_create_engine", fake_create_engine)
    monkeypatch.setattr(
        db_module.AppSettings,
        "from_env",
        classmethod(lambda cls: AppSettings(database_path=db_path)),
    )

    engine_one = db_module.get_engine()
    engine_two = db_module.get_engine()

    assert engine_one is engine_two
    assert created == [f"sqlite:///{db_path}"]
    assert db_path.parent.exists()


def test_adapter_prefers_injected_engine(monkeypatch):
    """SqlAlchemyDatabaseEngineAdapter should proxy the global helper."""
    monkeypatch.setattr(db_module, "get_engine", lambda: "shared_engine")

    assert db_module.SqlAlchemyDatabaseEngineAdapter().get_engine() == (
        "shared_engine"
    )
    assert db_module.SqlAlchemyDatabaseEngineAdapter(
        engine="custom"
    ).get_engine() == "custom"


def test_translate_storage_errors_maps_driver_failures():
    """Integrity errors and other failures get distinct error kinds."""
    with pytest.raises(StorageConstraintError):
        with db_module.translate_storage_errors("record balance"):
            raise IntegrityError("INSERT", {}, Exception("UNIQUE failed"))

    with pytest.raises(StorageError) as excinfo:
        with db_module.translate_storage_errors("list balances"):
            raise OperationalError("SELECT", {}, Exception("locked"))

    assert not isinstance(excinfo.value, StorageConstraintError)
    assert "list balances" in str(excinfo.value)
