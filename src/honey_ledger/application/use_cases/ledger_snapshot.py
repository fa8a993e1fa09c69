"""Decode record store collections into domain records."""

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from honey_ledger.application.ports.record_store import (
    ACCOUNTS_KEY,
    CATEGORIES_KEY,
    DASHBOARD_SETTINGS_KEY,
    EXPENSES_KEY,
    GOALS_KEY,
    INCOME_KEY,
    TRANSFERS_KEY,
    RecordStorePort,
)
from honey_ledger.domain.models import (
    Account,
    Category,
    CategoryGoal,
    DashboardVisibility,
    Expense,
    Income,
    Transfer,
)

RecordT = TypeVar("RecordT")


@dataclass(frozen=True)
class RecordCollection(Generic[RecordT]):
    """Decoded records of one collection plus the payloads that failed.

    Attributes:
        records: Decoded records in stored order.
        undecoded: Raw items that could not be decoded. They are written back
            unchanged so that saving a collection never loses stored data.
    """

    records: list[RecordT]
    undecoded: list[Any] = field(default_factory=list)


@dataclass(frozen=True)
class LedgerSnapshot:
    """Every record collection read at one point in time."""

    expenses: list[Expense]
    income: list[Income]
    accounts: list[Account]
    categories: list[Category]
    goals: list[CategoryGoal]
    transfers: list[Transfer]
    undecoded: dict[str, list[Any]] = field(default_factory=dict)


def load_collection(
    record_store: RecordStorePort,
    key: str,
    decoder: Callable[[dict[str, Any]], RecordT],
    logger,
) -> RecordCollection[RecordT]:
    """Load and decode one collection, setting undecodable items aside.

    Args:
        record_store: Store holding the collection.
        key: Collection key.
        decoder: Callable turning a payload dict into a record.
        logger: Logger used for warnings.

    Returns:
        RecordCollection: Decoded records and the raw items that failed.
    """
    payload = record_store.load(key)
    if not isinstance(payload, list):
        logger.warning(
            f"Collection '{key}' is not a list, treating it as empty"
        )
        return RecordCollection(records=[])
    records = []
    undecoded = []
    for index, item in enumerate(payload):
        if not isinstance(item, dict):
            logger.warning(f"Skipping non-object record #{index} in '{key}'")
            undecoded.append(item)
            continue
        try:
            records.append(decoder(item))
        except (KeyError, TypeError, ValueError) as exc:
            logger.warning(
                f"Skipping malformed record #{index} in '{key}': {exc!r}"
            )
            undecoded.append(item)
    return RecordCollection(records=records, undecoded=undecoded)


def load_records(
    record_store: RecordStorePort,
    key: str,
    decoder: Callable[[dict[str, Any]], RecordT],
    logger,
) -> list[RecordT]:
    """Load one collection and return only the decoded records."""
    return load_collection(record_store, key, decoder, logger).records


def save_records(
    record_store: RecordStorePort,
    key: str,
    records: Sequence,
    undecoded: Sequence = (),
) -> None:
    """Overwrite a collection with the records, keeping undecoded items.

    Undecoded items are written after the records, unchanged.
    """
    record_store.save(
        key,
        [record.to_dict() for record in records] + list(undecoded),
    )


def load_visibility(record_store: RecordStorePort, logger) -> DashboardVisibility:
    payload = record_store.load(DASHBOARD_SETTINGS_KEY)
    if not isinstance(payload, dict):
        logger.warning("Dashboard settings are not an object, using defaults")
        return DashboardVisibility()
    return DashboardVisibility.from_dict(payload)


def load_ledger_snapshot(record_store: RecordStorePort, logger) -> LedgerSnapshot:
    """Read every record collection from the store.

    Args:
        record_store: Store holding the collections.
        logger: Logger used for warnings about skipped records.

    Returns:
        LedgerSnapshot: Decoded collections and their undecoded items.
    """
    decoders = {
        EXPENSES_KEY: Expense.from_dict,
        INCOME_KEY: Income.from_dict,
        ACCOUNTS_KEY: Account.from_dict,
        CATEGORIES_KEY: Category.from_dict,
        GOALS_KEY: CategoryGoal.from_dict,
        TRANSFERS_KEY: Transfer.from_dict,
    }
    collections = {
        key: load_collection(record_store, key, decoder, logger)
        for key, decoder in decoders.items()
    }
    return LedgerSnapshot(
        expenses=collections[EXPENSES_KEY].records,
        income=collections[INCOME_KEY].records,
        accounts=collections[ACCOUNTS_KEY].records,
        categories=collections[CATEGORIES_KEY].records,
        goals=collections[GOALS_KEY].records,
        transfers=collections[TRANSFERS_KEY].records,
        undecoded={
            key: collection.undecoded
            for key, collection in collections.items()
            if collection.undecoded
        },
    )


__all__ = [
    "RecordCollection",
    "LedgerSnapshot",
    "load_collection",
    "load_records",
    "save_records",
    "load_visibility",
    "load_ledger_snapshot",
]
