"""Composition root for wiring infrastructure adapters."""

from honey_ledger.application.ports.database import DatabaseEnginePort
from honey_ledger.application.ports.record_store import RecordStorePort
from honey_ledger.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from honey_ledger.infrastructure.logging.logger import get_app_logger
from honey_ledger.infrastructure.record_store import SqlAlchemyRecordStore
from honey_ledger.infrastructure.settings import LedgerSettings


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_record_store(
    db_port: DatabaseEnginePort | None = None,
) -> RecordStorePort:
    """Return the configured record store."""
    resolved_db = db_port or build_database_adapter()
    settings = LedgerSettings.from_env()
    return SqlAlchemyRecordStore(
        resolved_db,
        key_prefix=settings.key_prefix,
        logger=get_app_logger(),
    )


__all__ = ["build_database_adapter", "build_record_store"]
