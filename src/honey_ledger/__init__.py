"""Personal finance ledger with derived balances, rollups and goals."""

__version__ = "0.1.0"
