"""Use case to record and delete expenses and income."""

from datetime import date

from honey_ledger.application.ports.record_store import (
    ACCOUNTS_KEY,
    EXPENSES_KEY,
    INCOME_KEY,
    RecordStorePort,
)
from honey_ledger.application.use_cases.ledger_snapshot import (
    load_collection,
    load_records,
    save_records,
)
from honey_ledger.application.use_cases.mutation_result import (
    MutationResult,
    new_record_id,
)
from honey_ledger.domain.models import Account, Expense, Income
from honey_ledger.domain.policies import amount_rejection_reason
from honey_ledger.infrastructure.logging.logger import get_app_logger


class RecordTransactionsUseCase:
    """Prepend new expenses and income to their collections.

    Expenses may reference any category id; unknown ids are shown as-is.
    Both record kinds must reference an existing account.
    """

    def __init__(self, record_store: RecordStorePort, logger=None) -> None:
        """Initialize the use case.

        Args:
            record_store: Port holding the ledger collections.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._record_store = record_store
        self._logger = logger or get_app_logger()

    def add_expense(
        self,
        amount: float,
        category_id: str,
        description: str,
        on: date,
        account_id: str,
        recurring: bool = False,
    ) -> MutationResult:
        reason = self._common_rejection_reason(amount, description, account_id)
        if not reason and not category_id:
            reason = "Category is required"
        if reason:
            return self._reject("Expense", reason)

        expenses = load_collection(
            self._record_store,
            EXPENSES_KEY,
            Expense.from_dict,
            self._logger,
        )
        expense = Expense(
            id=new_record_id(),
            amount=float(amount),
            category_id=category_id,
            description=description.strip(),
            date=on,
            account_id=account_id,
            recurring=recurring,
        )
        save_records(
            self._record_store,
            EXPENSES_KEY,
            [expense, *expenses.records],
            expenses.undecoded,
        )
        self._logger.info(
            f"Expense recorded: {expense.id} {expense.amount:.2f} "
            f"in {category_id} from {account_id}"
        )
        return MutationResult.ok(
            f"Expense of {expense.amount:.2f} added successfully!",
            expense.id,
        )

    def add_income(
        self,
        amount: float,
        description: str,
        on: date,
        account_id: str,
        recurring: bool = False,
    ) -> MutationResult:
        reason = self._common_rejection_reason(amount, description, account_id)
        if reason:
            return self._reject("Income", reason)

        income = load_collection(
            self._record_store,
            INCOME_KEY,
            Income.from_dict,
            self._logger,
        )
        item = Income(
            id=new_record_id(),
            amount=float(amount),
            description=description.strip(),
            date=on,
            account_id=account_id,
            recurring=recurring,
        )
        save_records(
            self._record_store,
            INCOME_KEY,
            [item, *income.records],
            income.undecoded,
        )
        self._logger.info(
            f"Income recorded: {item.id} {item.amount:.2f} into {account_id}"
        )
        return MutationResult.ok(
            f"Income of {item.amount:.2f} added successfully!",
            item.id,
        )

    def delete_expense(self, expense_id: str) -> MutationResult:
        return self._delete(EXPENSES_KEY, Expense.from_dict, expense_id)

    def delete_income(self, income_id: str) -> MutationResult:
        return self._delete(INCOME_KEY, Income.from_dict, income_id)

    def _delete(self, key: str, decoder, record_id: str) -> MutationResult:
        stored = load_collection(self._record_store, key, decoder, self._logger)
        remaining = [
            record for record in stored.records if record.id != record_id
        ]
        if len(remaining) == len(stored.records):
            return self._reject(key, f"Unknown record: {record_id}")
        save_records(self._record_store, key, remaining, stored.undecoded)
        self._logger.info(f"Deleted {record_id} from {key}")
        return MutationResult.ok("Deleted successfully!", record_id)

    def _common_rejection_reason(
        self,
        amount: float,
        description: str,
        account_id: str,
    ) -> str | None:
        reason = amount_rejection_reason(amount)
        if reason:
            return reason
        if not description or not description.strip():
            return "Description is required"
        accounts = load_records(
            self._record_store,
            ACCOUNTS_KEY,
            Account.from_dict,
            self._logger,
        )
        if not any(account.id == account_id for account in accounts):
            return f"Unknown account: {account_id}"
        return None

    def _reject(self, kind: str, reason: str) -> MutationResult:
        self._logger.warning(f"{kind} rejected: {reason}")
        return MutationResult.rejected(reason)


__all__ = ["RecordTransactionsUseCase"]
