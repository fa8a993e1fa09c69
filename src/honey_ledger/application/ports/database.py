"""Database ports for the ledger.

Infrastructure implementations provide the concrete engine behind this
protocol so that storage adapters do not read configuration themselves.
"""

from typing import Protocol

from sqlalchemy.engine import Engine


class DatabaseEnginePort(Protocol):
    """Port exposing the engine that backs the record store."""

    def get_store_engine(self) -> Engine:
        """Get the engine for the record store database.

        Returns:
            Engine: SQLAlchemy engine connected to the store.
        """


__all__ = ["DatabaseEnginePort"]
