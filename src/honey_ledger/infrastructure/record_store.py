"""SQLAlchemy-backed key-value record store.

Each collection is one row of ``ledger_records`` holding the JSON document
for that key. Reads fall back to the collection default when the key is
missing or its payload cannot be parsed. Saves delete the row and insert the
new one inside a single transaction.
"""

import json
from datetime import datetime, timezone
from typing import Any

from sqlalchemy import text

from honey_ledger.application.ports.database import DatabaseEnginePort
from honey_ledger.application.ports.record_store import (
    LIST_COLLECTION_KEYS,
    RecordStorePort,
    default_payload,
)
from honey_ledger.infrastructure.logging.logger import get_app_logger

CREATE_RECORDS_SQL = """
CREATE TABLE IF NOT EXISTS ledger_records (
    record_key TEXT PRIMARY KEY,
    payload TEXT NOT NULL,
    updated_at TEXT NOT NULL
)
"""

SELECT_RECORD_SQL = text(
    """
    SELECT payload
    FROM ledger_records
    WHERE record_key = :key
    """
)

DELETE_RECORD_SQL = text(
    """
    DELETE FROM ledger_records
    WHERE record_key = :key
    """
)

INSERT_RECORD_SQL = text(
    """
    INSERT INTO ledger_records (record_key, payload, updated_at)
    VALUES (:key, :payload, :updated_at)
    """
)


class SqlAlchemyRecordStore(RecordStorePort):
    """Record store persisting one JSON document per collection key."""

    def __init__(
        self,
        db_port: DatabaseEnginePort,
        key_prefix: str = "",
        logger=None,
    ) -> None:
        """Initialize the store.

        Args:
            db_port: Port providing the store engine.
            key_prefix: Namespace prepended to every key.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._db_port = db_port
        self._key_prefix = key_prefix
        self._logger = logger or get_app_logger()
        self._schema_ready = False

    def load(self, key: str) -> Any:
        """Return the stored payload, or the default for the collection."""
        engine = self._db_port.get_store_engine()
        self._ensure_schema(engine)
        with engine.connect() as conn:
            row = conn.execute(
                SELECT_RECORD_SQL,
                {"key": self._storage_key(key)},
            ).first()
        if row is None:
            return default_payload(key)
        try:
            payload = json.loads(row.payload)
        except (TypeError, ValueError) as exc:
            self._logger.warning(
                f"Malformed JSON stored under '{key}', using default: {exc}"
            )
            return default_payload(key)
        expected = list if key in LIST_COLLECTION_KEYS else dict
        if not isinstance(payload, expected):
            self._logger.warning(
                f"Unexpected {type(payload).__name__} stored under '{key}', "
                "using default"
            )
            return default_payload(key)
        return payload

    def save(self, key: str, payload: Any) -> None:
        """Overwrite the stored payload for ``key``."""
        engine = self._db_port.get_store_engine()
        self._ensure_schema(engine)
        storage_key = self._storage_key(key)
        with engine.begin() as conn:
            conn.execute(DELETE_RECORD_SQL, {"key": storage_key})
            conn.execute(
                INSERT_RECORD_SQL,
                {
                    "key": storage_key,
                    "payload": json.dumps(payload, ensure_ascii=False),
                    "updated_at": datetime.now(timezone.utc).isoformat(),
                },
            )

    def _storage_key(self, key: str) -> str:
        return f"{self._key_prefix}{key}"

    def _ensure_schema(self, engine) -> None:
        if self._schema_ready:
            return
        with engine.begin() as conn:
            conn.exec_driver_sql(CREATE_RECORDS_SQL)
        self._schema_ready = True


__all__ = ["SqlAlchemyRecordStore"]
