"""
Domain layer for the Schedule API.

This package contains pure domain models and the scheduling algorithms
(pattern expansion, copy planning). Nothing here performs I/O.
"""

from domain.models import (
    CompletedSet,
    CopySelection,
    DayCopySelection,
    ExercisePrescription,
    Frequency,
    RecurringPattern,
    WeekCopySelection,
    WorkoutCopySelection,
    WorkoutInstance,
    WorkoutTemplate,
    WorkoutType,
)

__all__ = [
    "CompletedSet",
    "CopySelection",
    "DayCopySelection",
    "ExercisePrescription",
    "Frequency",
    "RecurringPattern",
    "WeekCopySelection",
    "WorkoutCopySelection",
    "WorkoutInstance",
    "WorkoutTemplate",
    "WorkoutType",
]
