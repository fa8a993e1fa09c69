"""Use case to set and remove monthly category goals."""

from honey_ledger.application.ports.record_store import (
    CATEGORIES_KEY,
    GOALS_KEY,
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
from honey_ledger.domain.models import Category, CategoryGoal
from honey_ledger.domain.policies import amount_rejection_reason
from honey_ledger.domain.services import resolve_category_color
from honey_ledger.infrastructure.logging.logger import get_app_logger


class ManageGoalsUseCase:
    """Upsert goals keyed by category."""

    def __init__(self, record_store: RecordStorePort, logger=None) -> None:
        self._record_store = record_store
        self._logger = logger or get_app_logger()

    def set_goal(self, category_id: str, monthly_target: float) -> MutationResult:
        """Create the category goal or update its target.

        Args:
            category_id: Category the goal applies to; must exist.
            monthly_target: Positive monthly ceiling.

        Returns:
            MutationResult: Outcome with the goal id.
        """
        reason = amount_rejection_reason(monthly_target)
        categories = load_records(
            self._record_store,
            CATEGORIES_KEY,
            Category.from_dict,
            self._logger,
        )
        if not reason and not any(cat.id == category_id for cat in categories):
            reason = f"Unknown category: {category_id}"
        if reason:
            self._logger.warning(f"Goal rejected: {reason}")
            return MutationResult.rejected(reason)

        stored = load_collection(
            self._record_store,
            GOALS_KEY,
            CategoryGoal.from_dict,
            self._logger,
        )
        goals = stored.records
        existing = next(
            (goal for goal in goals if goal.category_id == category_id),
            None,
        )
        if existing is not None:
            goal_id = existing.id
            goals = [
                CategoryGoal(
                    id=goal.id,
                    category_id=goal.category_id,
                    monthly_target=float(monthly_target),
                    color=goal.color,
                )
                if goal.category_id == category_id
                else goal
                for goal in goals
            ]
        else:
            goal_id = new_record_id()
            goals = [
                *goals,
                CategoryGoal(
                    id=goal_id,
                    category_id=category_id,
                    monthly_target=float(monthly_target),
                    color=resolve_category_color(category_id, categories),
                ),
            ]
        save_records(self._record_store, GOALS_KEY, goals, stored.undecoded)
        self._logger.info(
            f"Goal set for {category_id}: {float(monthly_target):.2f}"
        )
        return MutationResult.ok("Goal updated successfully!", goal_id)

    def remove_goal(self, category_id: str) -> MutationResult:
        stored = load_collection(
            self._record_store,
            GOALS_KEY,
            CategoryGoal.from_dict,
            self._logger,
        )
        goals = stored.records
        kept = [goal for goal in goals if goal.category_id != category_id]
        if len(kept) == len(goals):
            self._logger.warning(f"No goal to remove for {category_id}")
            return MutationResult.rejected(f"No goal for category: {category_id}")
        save_records(self._record_store, GOALS_KEY, kept, stored.undecoded)
        self._logger.info(f"Goal removed for {category_id}")
        return MutationResult.ok("Goal removed successfully!")


__all__ = ["ManageGoalsUseCase"]
