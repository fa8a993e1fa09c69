"""Application ports package."""

from .database import DatabaseEnginePort
from .record_store import (
    ACCOUNTS_KEY,
    CATEGORIES_KEY,
    COLLECTION_KEYS,
    DASHBOARD_SETTINGS_KEY,
    EXPENSES_KEY,
    GOALS_KEY,
    INCOME_KEY,
    LIST_COLLECTION_KEYS,
    TRANSFERS_KEY,
    RecordStorePort,
    default_payload,
)

__all__ = [
    "DatabaseEnginePort",
    "RecordStorePort",
    "default_payload",
    "ACCOUNTS_KEY",
    "CATEGORIES_KEY",
    "COLLECTION_KEYS",
    "DASHBOARD_SETTINGS_KEY",
    "EXPENSES_KEY",
    "GOALS_KEY",
    "INCOME_KEY",
    "LIST_COLLECTION_KEYS",
    "TRANSFERS_KEY",
]
