"""Tests for the SQLAlchemy record store."""

from unittest.mock import MagicMock

import pytest
from sqlalchemy import text
from sqlalchemy.exc import OperationalError

from honey_ledger.infrastructure.db import _create_engine
from honey_ledger.infrastructure.record_store import SqlAlchemyRecordStore


class _EnginePort:
    def __init__(self, engine) -> None:
        self._engine = engine

    def get_store_engine(self):
        return self._engine


@pytest.fixture
def engine(tmp_path):
    engine = _create_engine(f"sqlite:///{tmp_path / 'store.db'}")
    yield engine
    engine.dispose()


def _write_raw(engine, key: str, payload: str) -> None:
    with engine.begin() as conn:
        conn.execute(
            text(
                "INSERT INTO ledger_records (record_key, payload, updated_at) "
                "VALUES (:key, :payload, '2024-01-01')"
            ),
            {"key": key, "payload": payload},
        )


def test_missing_keys_return_defaults(engine) -> None:
    store = SqlAlchemyRecordStore(_EnginePort(engine), logger=MagicMock())

    assert store.load("expenses") == []
    assert [item["id"] for item in store.load("accounts")] == ["main"]
    assert len(store.load("categories")) == 8
    assert store.load("dashboard-settings")["showSpendingChart"] is True


def test_save_overwrites_and_namespaces_keys(engine) -> None:
    store = SqlAlchemyRecordStore(
        _EnginePort(engine),
        key_prefix="honey-",
        logger=MagicMock(),
    )

    store.save("goals", [{"id": "g1"}])
    store.save("goals", [{"id": "g2", "note": "café"}])

    assert store.load("goals") == [{"id": "g2", "note": "café"}]
    with engine.connect() as conn:
        keys = conn.execute(text("SELECT record_key FROM ledger_records")).all()
    assert [row.record_key for row in keys] == ["honey-goals"]


def test_prefixes_isolate_stores(engine) -> None:
    first = SqlAlchemyRecordStore(_EnginePort(engine), "a-", MagicMock())
    second = SqlAlchemyRecordStore(_EnginePort(engine), "b-", MagicMock())

    first.save("expenses", [{"id": "e1"}])

    assert second.load("expenses") == []


def test_malformed_json_falls_back_to_default(engine) -> None:
    """Unparseable payloads are logged and replaced by the default."""
    logger = MagicMock()
    store = SqlAlchemyRecordStore(_EnginePort(engine), logger=logger)
    store.load("income")
    _write_raw(engine, "income", "{not json")

    assert store.load("income") == []
    logger.warning.assert_called_once()


def test_payload_of_wrong_shape_falls_back_to_default(engine) -> None:
    logger = MagicMock()
    store = SqlAlchemyRecordStore(_EnginePort(engine), logger=logger)
    store.load("accounts")
    _write_raw(engine, "accounts", '{"id": "main"}')
    _write_raw(engine, "dashboard-settings", "[1, 2]")

    assert [item["id"] for item in store.load("accounts")] == ["main"]
    assert store.load("dashboard-settings")["showGoalProgress"] is True
    assert logger.warning.call_count == 2


def test_repeated_saves_keep_one_row_per_key(engine) -> None:
    """Repeated saves keep one row per key and the latest payload."""
    store = SqlAlchemyRecordStore(_EnginePort(engine), logger=MagicMock())

    for index in range(3):
        store.save("transfers", [{"id": f"t{index}"}])
    store.save("income", [])

    with engine.connect() as conn:
        rows = conn.execute(
            text(
                "SELECT record_key, payload FROM ledger_records "
                "ORDER BY record_key"
            )
        ).all()
    assert [(row.record_key, row.payload) for row in rows] == [
        ("income", "[]"),
        ("transfers", '[{"id": "t2"}]'),
    ]


def test_failed_save_keeps_previous_payload(engine, monkeypatch) -> None:
    """The delete is rolled back when the insert fails."""
    store = SqlAlchemyRecordStore(_EnginePort(engine), logger=MagicMock())
    store.save("goals", [{"id": "g1"}])
    monkeypatch.setattr(
        "honey_ledger.infrastructure.record_store.INSERT_RECORD_SQL",
        text("INSERT INTO missing_table (record_key) VALUES (:key)"),
    )

    with pytest.raises(OperationalError):
        store.save("goals", [{"id": "g2"}])

    assert store.load("goals") == [{"id": "g1"}]
