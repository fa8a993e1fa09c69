"""Time window resolution and filtering."""

from calendar import monthrange
from collections.abc import Iterable
from datetime import date, timedelta
from typing import TypeVar

from honey_ledger.domain.models.windows import (
    CustomWindow,
    DateRange,
    MonthWindow,
    PresetWindow,
    TimeWindow,
)

RecordT = TypeVar("RecordT")


def subtract_months(day: date, months: int) -> date:
    """Move ``day`` back by whole calendar months.

    The day of month is clamped to the length of the target month, so
    March 31 minus one month is the last day of February.
    """
    total = day.year * 12 + (day.month - 1) - months
    year, month_index = divmod(total, 12)
    month = month_index + 1
    last_day = monthrange(year, month)[1]
    return date(year, month, min(day.day, last_day))


def month_range(year: int, month: int) -> DateRange | None:
    """Return the full range of a calendar month, or None when invalid."""
    if not 1 <= month <= 12 or not 1 <= year <= 9999:
        return None
    return DateRange(
        start=date(year, month, 1),
        end=date(year, month, monthrange(year, month)[1]),
    )


def resolve_window(window: TimeWindow, now: date) -> DateRange | None:
    """Resolve a window to an inclusive date range.

    Args:
        window: Preset, month or custom window.
        now: Reference date for rolling presets.

    Returns:
        DateRange | None: The range, or None when the window admits nothing
        (unknown preset, invalid month, custom window with a missing bound).
    """
    if isinstance(window, PresetWindow):
        if window.period == "week":
            return DateRange(start=now - timedelta(days=7), end=now)
        if window.period == "month":
            return DateRange(start=subtract_months(now, 1), end=now)
        if window.period == "3months":
            return DateRange(start=subtract_months(now, 3), end=now)
        if window.period == "year":
            return DateRange(start=subtract_months(now, 12), end=now)
        return None
    if isinstance(window, MonthWindow):
        return month_range(window.year, window.month)
    if isinstance(window, CustomWindow):
        if window.start is None or window.end is None:
            return None
        return DateRange(start=window.start, end=window.end)
    return None


def filter_by_window(
    records: Iterable[RecordT],
    window: TimeWindow | None,
    now: date,
) -> list[RecordT]:
    """Keep the records whose ``date`` falls within the window.

    Args:
        records: Records exposing a ``date`` attribute.
        window: Window to apply; None keeps every record.
        now: Reference date for rolling presets.

    Returns:
        list: Matching records in their original order.
    """
    if window is None:
        return list(records)
    date_range = resolve_window(window, now)
    if date_range is None:
        return []
    return [record for record in records if date_range.contains(record.date)]


__all__ = [
    "subtract_months",
    "month_range",
    "resolve_window",
    "filter_by_window",
]
