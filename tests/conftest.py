"""Shared fixtures for the test suite."""

import copy
from unittest.mock import MagicMock

import pytest

from honey_ledger.application.ports.record_store import (
    RecordStorePort,
    default_payload,
)


class FakeRecordStore(RecordStorePort):
    """In-memory record store keeping JSON-compatible payloads."""

    def __init__(self, payloads: dict | None = None) -> None:
        self.payloads = copy.deepcopy(payloads or {})
        self.saved_keys: list[str] = []

    def load(self, key: str):
        if key not in self.payloads:
            return default_payload(key)
        return copy.deepcopy(self.payloads[key])

    def save(self, key: str, payload) -> None:
        self.payloads[key] = copy.deepcopy(payload)
        self.saved_keys.append(key)


@pytest.fixture(autouse=True)
def _isolated_home(tmp_path, monkeypatch):
    """Keep data and log files inside the test's temporary directory."""
    monkeypatch.setenv("HONEY_LEDGER_HOME", str(tmp_path))
    for name in (
        "LEDGER_DB_URL",
        "LEDGER_KEY_PREFIX",
        "LEDGER_CURRENCY_SYMBOL",
        "LEDGER_RECENT_LIMIT",
        "LEDGER_PERIOD",
        "LEDGER_START_DATE",
        "LEDGER_END_DATE",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def record_store() -> FakeRecordStore:
    return FakeRecordStore()


@pytest.fixture
def logger() -> MagicMock:
    return MagicMock()
