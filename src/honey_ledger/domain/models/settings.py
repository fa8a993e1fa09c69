"""Domain model for dashboard section visibility.

Sections are stored as camelCase ``show*`` flags; snake_case section names
written by earlier versions are still read.
"""

from dataclasses import dataclass, field
from typing import Any

SECTION_FLAGS = {
    "recent_transactions": "showRecentTransactions",
    "spending_chart": "showSpendingChart",
    "budget_overview": "showBudgetOverview",
    "account_balances": "showAccountBalances",
    "goal_progress": "showGoalProgress",
}

DASHBOARD_SECTIONS = tuple(SECTION_FLAGS)


def _all_visible() -> dict[str, bool]:
    return {section: True for section in DASHBOARD_SECTIONS}


@dataclass(frozen=True)
class DashboardVisibility:
    """Which dashboard sections are shown."""

    sections: dict[str, bool] = field(default_factory=_all_visible)

    def is_visible(self, section: str) -> bool:
        return self.sections.get(section, True)

    def with_section(self, section: str, visible: bool) -> "DashboardVisibility":
        updated = dict(self.sections)
        updated[section] = visible
        return DashboardVisibility(sections=updated)

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> "DashboardVisibility":
        """Merge stored flags over the defaults, ignoring unknown sections.

        The camelCase flag wins when both spellings of a section are present.
        """
        sections = _all_visible()
        for section, flag in SECTION_FLAGS.items():
            for key in (section, flag):
                value = payload.get(key)
                if isinstance(value, bool):
                    sections[section] = value
        return cls(sections=sections)

    def to_dict(self) -> dict[str, bool]:
        return {
            flag: self.is_visible(section)
            for section, flag in SECTION_FLAGS.items()
        }


__all__ = ["DASHBOARD_SECTIONS", "SECTION_FLAGS", "DashboardVisibility"]
