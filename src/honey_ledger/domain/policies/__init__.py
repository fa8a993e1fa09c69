"""Domain policies package."""

from .ledger_rules import (
    account_deletion_rejection_reason,
    amount_rejection_reason,
    is_valid_account_type,
    transfer_rejection_reason,
)

__all__ = [
    "account_deletion_rejection_reason",
    "amount_rejection_reason",
    "is_valid_account_type",
    "transfer_rejection_reason",
]
