"""Domain models for analytics time windows."""

from dataclasses import dataclass
from datetime import date


PRESET_PERIODS = ("week", "month", "3months", "year")


@dataclass(frozen=True)
class DateRange:
    """Inclusive calendar date range."""

    start: date
    end: date

    def contains(self, day: date) -> bool:
        """Return True when ``day`` lies within the range, bounds included."""
        return self.start <= day <= self.end


@dataclass(frozen=True)
class PresetWindow:
    """Rolling window ending today.

    Attributes:
        period: One of ``week``, ``month``, ``3months`` or ``year``.
    """

    period: str = "month"


@dataclass(frozen=True)
class MonthWindow:
    """A whole calendar month."""

    year: int
    month: int


@dataclass(frozen=True)
class CustomWindow:
    """Explicit range; both bounds are needed for the window to admit data."""

    start: date | None = None
    end: date | None = None


TimeWindow = PresetWindow | MonthWindow | CustomWindow


__all__ = [
    "PRESET_PERIODS",
    "DateRange",
    "PresetWindow",
    "MonthWindow",
    "CustomWindow",
    "TimeWindow",
]
