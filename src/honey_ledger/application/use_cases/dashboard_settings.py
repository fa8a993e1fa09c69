"""Use case to read and toggle dashboard sections."""

from honey_ledger.application.ports.record_store import (
    DASHBOARD_SETTINGS_KEY,
    RecordStorePort,
)
from honey_ledger.application.use_cases.ledger_snapshot import load_visibility
from honey_ledger.application.use_cases.mutation_result import MutationResult
from honey_ledger.domain.models import DASHBOARD_SECTIONS, DashboardVisibility
from honey_ledger.infrastructure.logging.logger import get_app_logger


class DashboardSettingsUseCase:
    """Persist which dashboard sections are visible."""

    def __init__(self, record_store: RecordStorePort, logger=None) -> None:
        self._record_store = record_store
        self._logger = logger or get_app_logger()

    def get(self) -> DashboardVisibility:
        return load_visibility(self._record_store, self._logger)

    def set_section(self, section: str, visible: bool) -> MutationResult:
        if section not in DASHBOARD_SECTIONS:
            self._logger.warning(f"Unknown dashboard section: {section}")
            return MutationResult.rejected(f"Unknown section: {section}")
        visibility = self.get().with_section(section, visible)
        self._record_store.save(DASHBOARD_SETTINGS_KEY, visibility.to_dict())
        self._logger.info(f"Dashboard section {section} visible={visible}")
        return MutationResult.ok("Dashboard updated")


__all__ = ["DashboardSettingsUseCase"]
