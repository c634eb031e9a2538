"""
Recurring workout pattern.

A pattern is a user-defined recurrence rule referencing a workout template.
It is expanded once, at creation time, into concrete workout instances;
changing a pattern never alters instances already generated from it.
"""

from datetime import date, timedelta
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


class Frequency(str, Enum):
    """
    Recurrence modes.

    - DAILY: every calendar day
    - WEEKLY: specific weekdays (0=Sunday .. 6=Saturday)
    - CUSTOM: N evenly spaced occurrences per 7-day window
    """

    DAILY = "daily"
    WEEKLY = "weekly"
    CUSTOM = "custom"


class RecurringPattern(BaseModel):
    """
    Recurrence definition for a workout template.

    The model itself is lenient about mode-dependent payloads so that every
    violated invariant can be reported together by
    ``domain.scheduling.validation.collect_pattern_errors``.

    Examples:
        >>> from datetime import date
        >>> pattern = RecurringPattern(
        ...     name="MWF Strength",
        ...     template_id="tpl-1",
        ...     frequency=Frequency.WEEKLY,
        ...     days_of_week=[1, 3, 5],
        ...     start_date=date(2024, 1, 1),
        ...     duration_weeks=2,
        ... )
        >>> pattern.last_date
        datetime.date(2024, 1, 14)
    """

    id: Optional[str] = Field(default=None, description="Pattern UUID, set when scheduled")
    name: str = Field(..., description="Pattern name")
    description: Optional[str] = Field(default=None)
    template_id: Optional[str] = Field(default=None, description="Referenced template")
    frequency: Frequency
    days_of_week: Optional[List[int]] = Field(
        default=None, description="Weekday indices for weekly mode (0=Sunday)"
    )
    times_per_week: Optional[int] = Field(
        default=None, description="Occurrences per week for custom mode"
    )
    start_date: date = Field(..., description="Inclusive start date")
    duration_weeks: int = Field(..., description="Number of weeks, 1-52")
    end_date: Optional[date] = Field(
        default=None, description="Optional inclusive end date that shortens the window"
    )

    @property
    def last_date(self) -> date:
        """
        Last date of the full materialization window.

        ``start + duration_weeks * 7 - 1``, shortened by ``end_date`` when set.
        """
        last = self.start_date + timedelta(days=self.duration_weeks * 7 - 1)
        if self.end_date is not None and self.end_date < last:
            return self.end_date
        return last
