"""
Domain models for the Schedule API.

This package contains pure domain models that are independent of
infrastructure concerns (database, API, external services).

These models represent the core scheduling concepts:
- WorkoutTemplate: The reusable shape of a workout
- ExercisePrescription: One exercise with its targets and execution history
- RecurringPattern: A recurrence rule referencing a template
- WorkoutInstance: One concrete, dated workout
- CopySelection: What the copy engine clones (workout, day or week)

Usage:
    >>> from datetime import date
    >>> from domain.models import RecurringPattern, Frequency

    >>> pattern = RecurringPattern(
    ...     name="Daily Cardio",
    ...     template_id="tpl-1",
    ...     frequency=Frequency.DAILY,
    ...     start_date=date(2024, 1, 1),
    ...     duration_weeks=1,
    ... )

    >>> # Serialize to JSON
    >>> json_str = pattern.model_dump_json()
"""

from domain.models.copy_selection import (
    CopyKind,
    CopySelection,
    DayCopySelection,
    WeekCopySelection,
    WorkoutCopySelection,
)
from domain.models.exercise import CompletedSet, ExercisePrescription
from domain.models.pattern import Frequency, RecurringPattern
from domain.models.template import WorkoutTemplate
from domain.models.workout import DEFAULT_WORKOUT_TIME, WorkoutInstance, WorkoutType

__all__ = [
    # Main entities
    "WorkoutInstance",
    "WorkoutTemplate",
    "RecurringPattern",
    "ExercisePrescription",
    "CompletedSet",
    # Copy selections
    "CopySelection",
    "WorkoutCopySelection",
    "DayCopySelection",
    "WeekCopySelection",
    # Enums
    "CopyKind",
    "Frequency",
    "WorkoutType",
    # Constants
    "DEFAULT_WORKOUT_TIME",
]
