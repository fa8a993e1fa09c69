"""Validation rules for ledger mutations.

Each rule returns a human readable rejection reason, or None when the
mutation is allowed.
"""

import math
from collections.abc import Mapping, Sequence

from honey_ledger.domain.constants import ACCOUNT_TYPES
from honey_ledger.domain.models import Account


def is_valid_account_type(value: str) -> bool:
    return value in ACCOUNT_TYPES


def amount_rejection_reason(amount) -> str | None:
    """Reject amounts that are not positive finite numbers."""
    if isinstance(amount, bool) or not isinstance(amount, (int, float)):
        return "Amount must be a number"
    if not math.isfinite(amount) or amount <= 0:
        return "Amount must be greater than zero"
    return None


def transfer_rejection_reason(
    from_account_id: str,
    to_account_id: str,
    amount: float,
    current_balances: Mapping[str, float],
) -> str | None:
    """Check a transfer against the source account's current balance.

    Args:
        from_account_id: Account debited by the transfer.
        to_account_id: Account credited by the transfer.
        amount: Amount to move.
        current_balances: Current balance per existing account id.

    Returns:
        str | None: Rejection reason, or None when the transfer is allowed.
    """
    if from_account_id == to_account_id:
        return "Cannot transfer to the same account"
    if from_account_id not in current_balances:
        return f"Unknown source account: {from_account_id}"
    if to_account_id not in current_balances:
        return f"Unknown destination account: {to_account_id}"
    reason = amount_rejection_reason(amount)
    if reason:
        return reason
    if current_balances[from_account_id] < amount:
        return "Insufficient balance"
    return None


def account_deletion_rejection_reason(
    account_id: str,
    accounts: Sequence[Account],
) -> str | None:
    """Refuse to delete unknown accounts or the last remaining one."""
    if not any(account.id == account_id for account in accounts):
        return f"Unknown account: {account_id}"
    if len(accounts) <= 1:
        return "You must have at least one account"
    return None


__all__ = [
    "is_valid_account_type",
    "amount_rejection_reason",
    "transfer_rejection_reason",
    "account_deletion_rejection_reason",
]
