"""Database infrastructure for the record store.

This module creates and reuses the SQLAlchemy engine behind the record
store. It belongs to the infrastructure layer because it deals with the
external database (SQLite by default).
"""

from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.exc import ArgumentError

from honey_ledger.application.ports.database import DatabaseEnginePort
from honey_ledger.infrastructure.settings import LedgerSettings


def _create_engine(db_url: str) -> Engine:
    """Create a configured SQLAlchemy engine.

    Args:
        db_url: Fully qualified database URL.

    Returns:
        Engine: Engine with health checks enabled. SQLite connections may be
        shared across the UI server threads.

    Raises:
        RuntimeError: If the URL cannot be parsed or names an unknown dialect.
    """
    connect_args = {}
    if db_url.startswith("sqlite"):
        connect_args["check_same_thread"] = False
    try:
        return create_engine(
            db_url,
            pool_pre_ping=True,
            future=True,
            connect_args=connect_args,
        )
    except ArgumentError as exc:
        raise RuntimeError(
            f"Invalid record store URL '{db_url}'. Check LEDGER_DB_URL."
        ) from exc


_store_engine: Optional[Engine] = None


def get_store_engine() -> Engine:
    """Get a singleton SQLAlchemy engine for the record store.

    Returns:
        Engine: Lazily initialized engine connected to the store.
    """
    global _store_engine
    if _store_engine is None:
        settings = LedgerSettings.from_env()
        _store_engine = _create_engine(settings.db_url)
    return _store_engine


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """DatabaseEnginePort implementation backed by a SQLAlchemy engine."""

    def get_store_engine(self) -> Engine:
        """Get the engine for the record store.

        Returns:
            Engine: SQLAlchemy engine connected to the store.
        """
        return get_store_engine()


__all__ = [
    "get_store_engine",
    "SqlAlchemyDatabaseEngineAdapter",
]
