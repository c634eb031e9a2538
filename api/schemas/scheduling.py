"""
Pydantic models for the scheduling API.

Request and response models for pattern previews, pattern materialization,
workout copies and exercise copies.
"""

from datetime import date
from typing import Annotated, List, Optional, Union

from pydantic import BaseModel, Field, RootModel

from domain.models import (
    DayCopySelection,
    WeekCopySelection,
    WorkoutCopySelection,
    WorkoutInstance,
)


class PatternPreset(BaseModel):
    """Common recurring pattern offered as a starting point"""
    name: str
    description: str
    frequency: str
    days_of_week: Optional[List[int]] = None
    times_per_week: Optional[int] = None


class PatternPreviewResponse(BaseModel):
    """Occurrence dates of a pattern within the preview window"""
    dates: List[date] = []
    count: int = 0


class SchedulePatternResponse(BaseModel):
    """Workouts created by materializing a pattern"""
    pattern_id: str
    count: int = 0
    dates: List[date] = []
    workouts: List[WorkoutInstance] = []


class CopyRequest(RootModel):
    """Copy selection, discriminated by ``kind``"""
    root: Annotated[
        Union[WorkoutCopySelection, DayCopySelection, WeekCopySelection],
        Field(discriminator="kind"),
    ]


class CopyResponse(BaseModel):
    """Workouts created by a copy"""
    kind: str
    source_count: int = 0
    count: int = 0
    workouts: List[WorkoutInstance] = []


class ExerciseCopyRequest(BaseModel):
    """Copy exercises from another workout into the target workout"""
    source_workout_id: str = Field(..., min_length=1)
    exercise_ids: Optional[List[str]] = Field(
        default=None, description="Exercises to copy; omit to copy all"
    )
    insert_at: Optional[int] = Field(
        default=None, ge=0, description="Order index to insert at; omit to append"
    )
