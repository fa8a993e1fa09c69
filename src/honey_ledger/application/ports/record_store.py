"""Port for the per-key record store.

The store holds one JSON document per collection key. ``load`` returns the
collection default when the key has never been written; ``save`` overwrites
the whole collection.
"""

import copy
from typing import Any, Protocol

from honey_ledger.domain.constants import DEFAULT_ACCOUNTS, DEFAULT_CATEGORIES
from honey_ledger.domain.models import DashboardVisibility

EXPENSES_KEY = "expenses"
INCOME_KEY = "income"
ACCOUNTS_KEY = "accounts"
CATEGORIES_KEY = "categories"
GOALS_KEY = "goals"
TRANSFERS_KEY = "transfers"
DASHBOARD_SETTINGS_KEY = "dashboard-settings"

LIST_COLLECTION_KEYS = (
    EXPENSES_KEY,
    INCOME_KEY,
    ACCOUNTS_KEY,
    CATEGORIES_KEY,
    GOALS_KEY,
    TRANSFERS_KEY,
)
COLLECTION_KEYS = (*LIST_COLLECTION_KEYS, DASHBOARD_SETTINGS_KEY)

_DEFAULT_PAYLOADS: dict[str, Any] = {
    EXPENSES_KEY: [],
    INCOME_KEY: [],
    ACCOUNTS_KEY: list(DEFAULT_ACCOUNTS),
    CATEGORIES_KEY: list(DEFAULT_CATEGORIES),
    GOALS_KEY: [],
    TRANSFERS_KEY: [],
    DASHBOARD_SETTINGS_KEY: DashboardVisibility().to_dict(),
}


def default_payload(key: str) -> Any:
    """Return a fresh copy of the default payload for a collection.

    Args:
        key: Collection key.

    Returns:
        Any: Default list or object; an empty list for unknown keys.
    """
    return copy.deepcopy(_DEFAULT_PAYLOADS.get(key, []))


class RecordStorePort(Protocol):
    """Port exposing whole-collection reads and writes."""

    def load(self, key: str) -> Any:
        """Return the stored payload for ``key`` or its default."""

    def save(self, key: str, payload: Any) -> None:
        """Overwrite the stored payload for ``key``."""


__all__ = [
    "EXPENSES_KEY",
    "INCOME_KEY",
    "ACCOUNTS_KEY",
    "CATEGORIES_KEY",
    "GOALS_KEY",
    "TRANSFERS_KEY",
    "DASHBOARD_SETTINGS_KEY",
    "LIST_COLLECTION_KEYS",
    "COLLECTION_KEYS",
    "default_payload",
    "RecordStorePort",
]
