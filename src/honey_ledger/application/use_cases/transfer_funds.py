"""Use case to move balance between two accounts."""

from datetime import date

from honey_ledger.application.ports.record_store import (
    TRANSFERS_KEY,
    RecordStorePort,
)
from honey_ledger.application.use_cases.ledger_snapshot import (
    load_ledger_snapshot,
    save_records,
)
from honey_ledger.application.use_cases.mutation_result import (
    MutationResult,
    new_record_id,
)
from honey_ledger.domain.models import Transfer
from honey_ledger.domain.policies import transfer_rejection_reason
from honey_ledger.domain.services import account_current_balance
from honey_ledger.infrastructure.logging.logger import get_app_logger


class TransferFundsUseCase:
    """Record a transfer after checking it against current balances.

    Account records are never rewritten: balances move only through the
    transfer history, which keeps every transfer zero-sum.
    """

    def __init__(self, record_store: RecordStorePort, logger=None) -> None:
        """Initialize the use case.

        Args:
            record_store: Port holding the ledger collections.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._record_store = record_store
        self._logger = logger or get_app_logger()

    def execute(
        self,
        from_account_id: str,
        to_account_id: str,
        amount: float,
        on: date,
        description: str = "",
    ) -> MutationResult:
        """Record the transfer, or reject it without touching the store.

        Args:
            from_account_id: Account debited.
            to_account_id: Account credited.
            amount: Positive amount to move.
            on: Transfer date.
            description: Optional label, defaults to "Transfer".

        Returns:
            MutationResult: Outcome with the transfer id when accepted.
        """
        snapshot = load_ledger_snapshot(self._record_store, self._logger)
        balances = {
            account.id: account_current_balance(
                account,
                snapshot.expenses,
                snapshot.income,
                snapshot.transfers,
            )
            for account in snapshot.accounts
        }
        reason = transfer_rejection_reason(
            from_account_id,
            to_account_id,
            amount,
            balances,
        )
        if reason:
            self._logger.warning(
                f"Transfer {from_account_id} -> {to_account_id} of {amount} "
                f"rejected: {reason}"
            )
            return MutationResult.rejected(reason)

        transfer = Transfer(
            id=new_record_id(),
            amount=float(amount),
            from_account_id=from_account_id,
            to_account_id=to_account_id,
            description=description.strip() or "Transfer",
            date=on,
        )
        save_records(
            self._record_store,
            TRANSFERS_KEY,
            [transfer, *snapshot.transfers],
            snapshot.undecoded.get(TRANSFERS_KEY, []),
        )
        self._logger.info(
            f"Transfer recorded: {transfer.id} {from_account_id} -> "
            f"{to_account_id} ({transfer.amount:.2f})"
        )
        return MutationResult.ok("Transfer completed successfully!", transfer.id)


__all__ = ["TransferFundsUseCase"]
