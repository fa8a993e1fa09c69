"""Use case to add and delete categories."""

from honey_ledger.application.ports.record_store import (
    CATEGORIES_KEY,
    GOALS_KEY,
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
from honey_ledger.domain.models import Category, CategoryGoal
from honey_ledger.infrastructure.logging.logger import get_app_logger


class ManageCategoriesUseCase:
    """Maintain categories; deleting one also deletes its goals."""

    def __init__(self, record_store: RecordStorePort, logger=None) -> None:
        self._record_store = record_store
        self._logger = logger or get_app_logger()

    def add_category(
        self,
        name: str,
        emoji: str = "📦",
        color: str = DEFAULT_COLOR,
    ) -> MutationResult:
        if not name or not name.strip():
            self._logger.warning("Category rejected: name is required")
            return MutationResult.rejected("Category name is required")
        categories = load_collection(
            self._record_store,
            CATEGORIES_KEY,
            Category.from_dict,
            self._logger,
        )
        category = Category(
            id=new_record_id(),
            name=name.strip(),
            emoji=emoji.strip(),
            color=color or DEFAULT_COLOR,
        )
        save_records(
            self._record_store,
            CATEGORIES_KEY,
            [*categories.records, category],
            categories.undecoded,
        )
        self._logger.info(f"Category added: {category.id} ({category.name})")
        return MutationResult.ok("Category added successfully!", category.id)

    def delete_category(self, category_id: str) -> MutationResult:
        """Delete a category and every goal referencing it.

        Expenses keep their category id and fall back to showing it raw.
        """
        categories = load_collection(
            self._record_store,
            CATEGORIES_KEY,
            Category.from_dict,
            self._logger,
        )
        remaining = [cat for cat in categories.records if cat.id != category_id]
        if len(remaining) == len(categories.records):
            self._logger.warning(f"Category rejected: unknown {category_id}")
            return MutationResult.rejected(f"Unknown category: {category_id}")
        goals = load_collection(
            self._record_store,
            GOALS_KEY,
            CategoryGoal.from_dict,
            self._logger,
        )
        kept_goals = [
            goal for goal in goals.records if goal.category_id != category_id
        ]
        save_records(
            self._record_store,
            CATEGORIES_KEY,
            remaining,
            categories.undecoded,
        )
        save_records(self._record_store, GOALS_KEY, kept_goals, goals.undecoded)
        self._logger.info(
            f"Category deleted: {category_id}, "
            f"goals removed={len(goals.records) - len(kept_goals)}"
        )
        return MutationResult.ok("Category deleted successfully!", category_id)


__all__ = ["ManageCategoriesUseCase"]
