"""
Copy selections - what the copy engine clones and where to.

A selection is transient: it names one workout, one calendar day or one
calendar week as the source, plus the target anchor date.
"""

from datetime import date, timedelta
from enum import Enum
from typing import Literal, Union

from pydantic import BaseModel, Field


class CopyKind(str, Enum):
    """Selection discriminant."""

    WORKOUT = "workout"
    DAY = "day"
    WEEK = "week"


class WorkoutCopySelection(BaseModel):
    """Copy one workout to ``target_date``."""

    kind: Literal["workout"] = "workout"
    workout_id: str = Field(..., min_length=1)
    target_date: date


class DayCopySelection(BaseModel):
    """Copy every workout scheduled on ``source_date`` to ``target_date``."""

    kind: Literal["day"] = "day"
    source_date: date
    target_date: date


class WeekCopySelection(BaseModel):
    """
    Copy every workout in ``[source_week_start, source_week_start + 6]``.

    Each clone keeps its weekday position relative to the week start.
    """

    kind: Literal["week"] = "week"
    source_week_start: date
    target_week_start: date

    @property
    def source_week_end(self) -> date:
        return self.source_week_start + timedelta(days=6)


CopySelection = Union[WorkoutCopySelection, DayCopySelection, WeekCopySelection]
