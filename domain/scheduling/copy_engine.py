"""
Copy engine - clone workouts onto other calendar dates.

Plans copies of a single workout, a whole day or a whole week. Clones are
unsaved WorkoutInstance objects that keep the source's structure (workout
type, duration, exercise prescriptions) and drop everything tied to
execution:

- identity and creation timestamp are cleared
- ``completed_at`` is reset
- completed-set history is dropped from every exercise

The source instances are never mutated. Nothing here checks whether the
target date already holds workouts, so duplicates on a date are allowed.

Also plans exercise copies between two existing workouts.
"""

import logging
from datetime import date, datetime, timedelta
from typing import List, Optional, Sequence

from domain.models.copy_selection import (
    CopySelection,
    DayCopySelection,
    WeekCopySelection,
    WorkoutCopySelection,
)
from domain.models.exercise import ExercisePrescription
from domain.models.workout import WorkoutInstance
from domain.scheduling.pattern_expander import DAYS_PER_WEEK, sunday_index

logger = logging.getLogger(__name__)

COPY_SUFFIX = " (Copy)"
MAX_NAME_LENGTH = 200


# =============================================================================
# Helpers
# =============================================================================


def normalize_week_start(source_week_start: date, target_week_start: date) -> date:
    """
    Move ``target_week_start`` back onto the weekday of ``source_week_start``.

    Returns the latest date on or before ``target_week_start`` that shares the
    source week start's weekday, so the copy offset is always a whole number
    of weeks.

    Example:
        >>> normalize_week_start(date(2024, 1, 7), date(2024, 1, 16))
        datetime.date(2024, 1, 14)
    """
    drift = (sunday_index(target_week_start) - sunday_index(source_week_start)) % DAYS_PER_WEEK
    return target_week_start - timedelta(days=drift)


def copy_name(name: str) -> str:
    """Name given to a single-workout copy."""
    return name[: MAX_NAME_LENGTH - len(COPY_SUFFIX)] + COPY_SUFFIX


def clone_instance(
    source: WorkoutInstance,
    target_date: date,
    name: Optional[str] = None,
) -> WorkoutInstance:
    """
    Clone a workout onto ``target_date`` with execution state reset.

    The time of day of ``scheduled_at`` is kept on the new date.

    Args:
        source: Workout to clone (left untouched)
        target_date: Date of the clone
        name: Optional replacement name

    Returns:
        Unsaved WorkoutInstance
    """
    scheduled_at = None
    if source.scheduled_at is not None:
        scheduled_at = datetime.combine(
            target_date, source.scheduled_at.timetz()
        )

    return source.model_copy(
        update={
            "id": None,
            "name": name if name is not None else source.name,
            "scheduled_date": target_date,
            "scheduled_at": scheduled_at,
            "exercises": [e.as_prescription() for e in source.exercises],
            "completed_at": None,
            "created_at": None,
        },
        deep=True,
    )


# =============================================================================
# Per-selection planners
# =============================================================================


def _plan_workout_copy(
    selection: WorkoutCopySelection, sources: Sequence[WorkoutInstance]
) -> List[WorkoutInstance]:
    for source in sources:
        if source.id == selection.workout_id:
            return [
                clone_instance(source, selection.target_date, name=copy_name(source.name))
            ]
    return []


def _plan_day_copy(
    selection: DayCopySelection, sources: Sequence[WorkoutInstance]
) -> List[WorkoutInstance]:
    return [
        clone_instance(source, selection.target_date)
        for source in sources
        if source.scheduled_date == selection.source_date
    ]


def _plan_week_copy(
    selection: WeekCopySelection, sources: Sequence[WorkoutInstance]
) -> List[WorkoutInstance]:
    target_week_start = normalize_week_start(
        selection.source_week_start, selection.target_week_start
    )
    offset = target_week_start - selection.source_week_start

    in_week = [
        source
        for source in sources
        if selection.source_week_start <= source.scheduled_date <= selection.source_week_end
    ]
    # sorted() is stable, so same-day workouts keep their creation order
    in_week = sorted(in_week, key=lambda s: s.scheduled_date)

    return [clone_instance(source, source.scheduled_date + offset) for source in in_week]


# =============================================================================
# Public API
# =============================================================================


def plan_copy(
    selection: CopySelection,
    source_instances: Sequence[WorkoutInstance],
) -> List[WorkoutInstance]:
    """
    Plan the clones for a copy selection.

    Source instances are filtered by the selection, so passing extra rows is
    harmless. A selection that matches nothing yields an empty plan.

    Args:
        selection: What to copy and where to
        source_instances: Candidate source workouts, in creation order

    Returns:
        Unsaved clones, in source order
    """
    if isinstance(selection, WorkoutCopySelection):
        plan = _plan_workout_copy(selection, source_instances)
    elif isinstance(selection, DayCopySelection):
        plan = _plan_day_copy(selection, source_instances)
    elif isinstance(selection, WeekCopySelection):
        plan = _plan_week_copy(selection, source_instances)
    else:
        raise TypeError(f"Unsupported copy selection: {type(selection).__name__}")

    logger.debug(f"Planned {len(plan)} clone(s) for {selection.kind} copy")
    return plan


def plan_exercise_copy(
    source: WorkoutInstance,
    target: WorkoutInstance,
    exercise_ids: Optional[Sequence[str]] = None,
    insert_at: Optional[int] = None,
) -> List[ExercisePrescription]:
    """
    Plan the exercise list of ``target`` after copying exercises from ``source``.

    Args:
        source: Workout to copy exercises from (left untouched)
        target: Workout receiving the exercises (left untouched)
        exercise_ids: Exercises to copy; None copies all of them. Unknown
                      ids are ignored.
        insert_at: Order index to insert at; None appends at the end.
                   Clamped to the target's exercise count.

    Returns:
        The target's new exercise list, re-indexed from 0. Equal to the
        target's current exercises when nothing is selected.
    """
    if exercise_ids is None:
        selected = list(source.exercises)
    else:
        wanted = set(exercise_ids)
        selected = [e for e in source.exercises if e.exercise_id in wanted]

    existing = list(target.exercises)
    position = len(existing) if insert_at is None else max(0, min(insert_at, len(existing)))

    copied = [e.as_prescription() for e in selected]
    merged = existing[:position] + copied + existing[position:]
    return [
        exercise.model_copy(update={"order_index": index}, deep=True)
        for index, exercise in enumerate(merged)
    ]
