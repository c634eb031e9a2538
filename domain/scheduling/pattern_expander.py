"""
Pattern expansion - recurring pattern to calendar dates.

Turns a RecurringPattern into the ordered, deduplicated list of dates on
which a workout occurrence should exist:

- daily: every date from the start date to the end of the window
- weekly: the selected weekdays of every Sunday-based calendar week that
  touches the window, excluding dates before the start date
- custom: ``times_per_week`` evenly spaced dates per 7-day window anchored
  on the start date

Expansion is a pure function of its arguments. Live previews and full
materialization share the same code and differ only in ``window_end``.
"""

from datetime import date, timedelta
from typing import Iterator, List, Optional

from domain.models.pattern import Frequency, RecurringPattern
from domain.scheduling.exceptions import PatternTooLargeError
from domain.scheduling.validation import ensure_valid_pattern

# Safety cap on occurrences produced by a single expansion
MAX_OCCURRENCES = 500

# Default length of a live preview window, in days
DEFAULT_PREVIEW_DAYS = 14

DAYS_PER_WEEK = 7


# =============================================================================
# Calendar helpers
# =============================================================================


def sunday_index(day: date) -> int:
    """Weekday index with 0=Sunday .. 6=Saturday."""
    return (day.weekday() + 1) % DAYS_PER_WEEK


def week_start(day: date) -> date:
    """Sunday of the calendar week containing ``day``."""
    return day - timedelta(days=sunday_index(day))


def custom_offsets(times_per_week: int) -> List[int]:
    """
    Day offsets within a 7-day window for custom frequency.

    Occurrence ``i`` of ``n`` lands on ``floor(7 * i / n)``, which spreads the
    occurrences as evenly as whole days allow:

        >>> custom_offsets(3)
        [0, 2, 4]
        >>> custom_offsets(4)
        [0, 1, 3, 5]
    """
    return [(DAYS_PER_WEEK * i) // times_per_week for i in range(times_per_week)]


def materialization_end(pattern: RecurringPattern) -> date:
    """Last date of the full window, ``start + duration_weeks * 7 - 1``."""
    return pattern.last_date


# =============================================================================
# Per-mode generators
# =============================================================================


def _daily_dates(pattern: RecurringPattern, last: date) -> Iterator[date]:
    current = pattern.start_date
    while current <= last:
        yield current
        current += timedelta(days=1)


def _weekly_dates(pattern: RecurringPattern, last: date) -> Iterator[date]:
    days = sorted(set(pattern.days_of_week or []))
    current_week = week_start(pattern.start_date)
    while current_week <= last:
        for day in days:
            candidate = current_week + timedelta(days=day)
            if pattern.start_date <= candidate <= last:
                yield candidate
        current_week += timedelta(days=DAYS_PER_WEEK)


def _custom_dates(pattern: RecurringPattern, last: date) -> Iterator[date]:
    offsets = custom_offsets(pattern.times_per_week or 1)
    window_start = pattern.start_date
    while window_start <= last:
        for offset in offsets:
            candidate = window_start + timedelta(days=offset)
            if candidate <= last:
                yield candidate
        window_start += timedelta(days=DAYS_PER_WEEK)


_GENERATORS = {
    Frequency.DAILY: _daily_dates,
    Frequency.WEEKLY: _weekly_dates,
    Frequency.CUSTOM: _custom_dates,
}


# =============================================================================
# Public API
# =============================================================================


def expand(
    pattern: RecurringPattern,
    window_end: Optional[date] = None,
    *,
    max_occurrences: int = MAX_OCCURRENCES,
) -> List[date]:
    """
    Expand a pattern into its occurrence dates.

    Args:
        pattern: Pattern to expand
        window_end: Inclusive upper bound of the request. Defaults to the
                    pattern's full materialization window. Never extends past
                    it.
        max_occurrences: Safety cap on the number of dates

    Returns:
        Strictly ascending list of distinct dates in
        ``[start_date, min(window_end, last_date)]``

    Raises:
        InvalidPatternError: If the pattern violates its invariants
        PatternTooLargeError: If more than ``max_occurrences`` dates would
                              be produced
    """
    ensure_valid_pattern(pattern)

    last = materialization_end(pattern)
    if window_end is not None and window_end < last:
        last = window_end
    if last < pattern.start_date:
        return []

    seen = set()
    for occurrence in _GENERATORS[pattern.frequency](pattern, last):
        seen.add(occurrence)
        if len(seen) > max_occurrences:
            raise PatternTooLargeError(pattern.name, max_occurrences)

    return sorted(seen)


def preview(
    pattern: RecurringPattern,
    days: int = DEFAULT_PREVIEW_DAYS,
    *,
    max_occurrences: int = MAX_OCCURRENCES,
) -> List[date]:
    """
    Expand a short window for live feedback while a pattern is being edited.

    Args:
        pattern: Pattern to expand
        days: Preview window length in days, counted from the start date

    Returns:
        Occurrence dates within the first ``days`` days
    """
    window_end = pattern.start_date + timedelta(days=max(days, 0) - 1)
    return expand(pattern, window_end, max_occurrences=max_occurrences)
