"""Use case to list accounts with their current balances."""

from dataclasses import dataclass
from datetime import date

from honey_ledger.application.ports.record_store import RecordStorePort
from honey_ledger.application.use_cases.ledger_snapshot import (
    load_ledger_snapshot,
)
from honey_ledger.domain.models import AccountBalance
from honey_ledger.domain.services import (
    compute_account_balances,
    resolve_account_name,
)
from honey_ledger.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class TransferLine:
    """Transfer with resolved account names."""

    transfer_id: str
    amount: float
    description: str
    date: date
    from_name: str
    to_name: str


@dataclass(frozen=True)
class AccountsOverview:
    """Accounts page figures."""

    balances: list[AccountBalance]
    total_balance: float
    recent_transfers: list[TransferLine]


class GetAccountsOverviewUseCase:
    """Compute all-time account balances and the latest transfers."""

    def __init__(self, record_store: RecordStorePort, logger=None) -> None:
        self._record_store = record_store
        self._logger = logger or get_app_logger()

    def execute(self, transfer_limit: int = 5) -> AccountsOverview:
        """Return balances and recent transfers.

        Args:
            transfer_limit: Maximum number of transfers, newest first.

        Returns:
            AccountsOverview: Balances, their total and transfer lines.
        """
        snapshot = load_ledger_snapshot(self._record_store, self._logger)
        balances = compute_account_balances(
            snapshot.accounts,
            snapshot.expenses,
            snapshot.income,
            snapshot.transfers,
        )
        transfers = [
            TransferLine(
                transfer_id=transfer.id,
                amount=transfer.amount,
                description=transfer.description,
                date=transfer.date,
                from_name=resolve_account_name(
                    transfer.from_account_id,
                    snapshot.accounts,
                ),
                to_name=resolve_account_name(
                    transfer.to_account_id,
                    snapshot.accounts,
                ),
            )
            for transfer in snapshot.transfers[: max(transfer_limit, 0)]
        ]
        self._logger.info(f"Fetched {len(balances)} account balances")
        return AccountsOverview(
            balances=balances,
            total_balance=sum(
                (item.current_balance for item in balances),
                start=0.0,
            ),
            recent_transfers=transfers,
        )


__all__ = [
    "GetAccountsOverviewUseCase",
    "AccountsOverview",
    "TransferLine",
]
