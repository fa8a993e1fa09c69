"""Use case to add and delete accounts."""

from honey_ledger.application.ports.record_store import (
    ACCOUNTS_KEY,
    RecordStorePort,
)
from honey_ledger.application.use_cases.ledger_snapshot import (
    load_collection,
    save_records,
)
from honey_ledger.application.use_cases.mutation_result import (
    MutationResult,
    new_record_id,
)
from honey_ledger.domain.constants import DEFAULT_COLOR
from honey_ledger.domain.models import Account
from honey_ledger.domain.policies import (
    account_deletion_rejection_reason,
    is_valid_account_type,
)
from honey_ledger.infrastructure.logging.logger import get_app_logger
from honey_ledger.utils.amount_utils import coerce_amount


class ManageAccountsUseCase:
    """Create and remove accounts while keeping at least one."""

    def __init__(self, record_store: RecordStorePort, logger=None) -> None:
        """Initialize the use case.

        Args:
            record_store: Port holding the accounts collection.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._record_store = record_store
        self._logger = logger or get_app_logger()

    def add_account(
        self,
        name: str,
        balance,
        account_type: str = "checking",
        color: str = DEFAULT_COLOR,
    ) -> MutationResult:
        """Append a new account with a stored base balance.

        Args:
            name: Display name, must not be blank.
            balance: Opening balance; may be negative for credit accounts.
            account_type: One of checking, savings, credit or cash.
            color: Display colour.

        Returns:
            MutationResult: Outcome with the new account id.
        """
        if not name or not name.strip():
            return self._reject("Account name is required")
        if not is_valid_account_type(account_type):
            return self._reject(f"Unknown account type: {account_type}")
        try:
            opening_balance = coerce_amount(balance)
        except (TypeError, ValueError):
            return self._reject("Balance must be a number")

        accounts = load_collection(
            self._record_store,
            ACCOUNTS_KEY,
            Account.from_dict,
            self._logger,
        )
        account = Account(
            id=new_record_id(),
            name=name.strip(),
            balance=opening_balance,
            account_type=account_type,
            color=color or DEFAULT_COLOR,
        )
        save_records(
            self._record_store,
            ACCOUNTS_KEY,
            [*accounts.records, account],
            accounts.undecoded,
        )
        self._logger.info(f"Account added: {account.id} ({account.name})")
        return MutationResult.ok("Account added successfully!", account.id)

    def delete_account(self, account_id: str) -> MutationResult:
        """Delete an account unless it is the last one.

        Expenses, income and transfers referencing the account are kept;
        they resolve to the raw account id afterwards.
        """
        accounts = load_collection(
            self._record_store,
            ACCOUNTS_KEY,
            Account.from_dict,
            self._logger,
        )
        reason = account_deletion_rejection_reason(account_id, accounts.records)
        if reason:
            return self._reject(reason)
        remaining = [
            account for account in accounts.records if account.id != account_id
        ]
        save_records(
            self._record_store,
            ACCOUNTS_KEY,
            remaining,
            accounts.undecoded,
        )
        self._logger.info(f"Account deleted: {account_id}")
        return MutationResult.ok("Account deleted successfully!", account_id)

    def _reject(self, reason: str) -> MutationResult:
        self._logger.warning(f"Account change rejected: {reason}")
        return MutationResult.rejected(reason)


__all__ = ["ManageAccountsUseCase"]
