"""Simple CLI to validate the record store connection.

It instantiates the concrete database adapter and runs a basic health check
against the configured store database.
"""

from honey_ledger.infrastructure.container import build_database_adapter
from honey_ledger.infrastructure.logging.logger import get_app_logger


def main() -> None:
    """Run a connectivity check against the store database."""
    adapter = build_database_adapter()
    logger = get_app_logger()

    engine = adapter.get_store_engine()
    logger.info(f"Record store DB: {engine.url}")

    with engine.connect() as conn:
        conn.exec_driver_sql("SELECT 1")

    logger.info("Record store connection is working.")


if __name__ == "__main__":  # pragma: no cover
    main()
