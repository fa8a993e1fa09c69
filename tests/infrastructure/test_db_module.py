"""Tests for the infrastructure.db module."""

import pytest

from honey_ledger.infrastructure import db as db_module
from honey_ledger.infrastructure.settings import LedgerSettings


def test_create_engine_enables_health_checks(monkeypatch):
    """_create_engine should enable pre-ping and the 2.0 API."""
    captured = {}

    def fake_create_engine(db_url, **kwargs):
        captured["db_url"] = db_url
        captured["kwargs"] = kwargs
        return "engine"

    monkeypatch.setattr(db_module, "create_engine", fake_create_engine)

    engine = db_module._create_engine("postgresql://ledger")

    assert engine == "engine"
    assert captured["db_url"] == "postgresql://ledger"
    assert captured["kwargs"]["pool_pre_ping"] is True
    assert captured["kwargs"]["future"] is True
    assert captured["kwargs"]["connect_args"] == {}


def test_create_engine_shares_sqlite_connections(monkeypatch):
    """SQLite engines should allow use from other threads."""
    captured = {}

    def fake_create_engine(db_url, **kwargs):
        captured.update(kwargs)
        return "engine"

    monkeypatch.setattr(db_module, "create_engine", fake_create_engine)

    db_module._create_engine("sqlite:///ledger.db")

    assert captured["connect_args"] == {"check_same_thread": False}


def test_get_store_engine_caches_engine(monkeypatch):
    """get_store_engine should memoize the created engine."""
    db_module._store_engine = None
    created = []

    def fake_create_engine(url):
        created.append(url)
        return f"engine:{url}"

    monkeypatch.setattr(db_module, "_create_engine", fake_create_engine)
    monkeypatch.setattr(
        LedgerSettings,
        "from_env",
        classmethod(lambda cls: cls(db_url="sqlite:///cached.db")),
    )

    engine_one = db_module.get_store_engine()
    engine_two = db_module.get_store_engine()

    assert engine_one is engine_two
    assert engine_one == "engine:sqlite:///cached.db"
    assert created == ["sqlite:///cached.db"]
    db_module._store_engine = None


def test_adapter_returns_underlying_engine(monkeypatch):
    """SqlAlchemyDatabaseEngineAdapter should proxy the global helper."""
    monkeypatch.setattr(db_module, "get_store_engine", lambda: "store_engine")

    adapter = db_module.SqlAlchemyDatabaseEngineAdapter()

    assert adapter.get_store_engine() == "store_engine"


def test_create_engine_rejects_unparseable_url():
    """A malformed URL should surface as a RuntimeError naming the setting."""
    with pytest.raises(RuntimeError, match="LEDGER_DB_URL"):
        db_module._create_engine("not a database url")
