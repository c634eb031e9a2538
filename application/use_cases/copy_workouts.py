"""
CopyWorkouts and CopyExercises Use Cases.

Resolve a copy selection against the Workout Store, plan the clones with the
copy engine and persist them in one atomic batch. Exercise copies move
prescriptions between two existing workouts.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from application.exceptions import WorkoutNotFoundError
from application.ports import WorkoutStore
from domain.models import (
    CopySelection,
    DayCopySelection,
    WeekCopySelection,
    WorkoutCopySelection,
    WorkoutInstance,
)
from domain.scheduling import plan_copy, plan_exercise_copy

logger = logging.getLogger(__name__)


@dataclass
class CopyWorkoutsResult:
    """Result of the CopyWorkouts use case execution."""

    source_count: int = 0
    instances: List[WorkoutInstance] = field(default_factory=list)

    @property
    def is_noop(self) -> bool:
        return not self.instances

    @property
    def instance_ids(self) -> List[str]:
        return [i.id for i in self.instances if i.id]


class CopyWorkoutsUseCase:
    """
    Use case for copying a workout, a day or a week of workouts.

    A selection matching nothing is a successful no-op and never reaches
    the store's write path.
    """

    def __init__(self, workout_store: WorkoutStore) -> None:
        self._workout_store = workout_store

    def execute(self, selection: CopySelection, user_id: str) -> CopyWorkoutsResult:
        """
        Copy the selected workouts for a user.

        Args:
            selection: What to copy and where to
            user_id: Owning user

        Returns:
            CopyWorkoutsResult with the persisted clones

        Raises:
            WorkoutPersistenceError: If the store rejected the batch
        """
        sources = self._resolve_sources(selection, user_id)
        plan = plan_copy(selection, sources)

        result = CopyWorkoutsResult(source_count=len(sources))
        if not plan:
            logger.info(f"Nothing to copy for {selection.kind} selection (user {user_id})")
            return result

        result.instances = self._workout_store.create_instances(user_id, plan)
        logger.info(
            f"Copied {len(result.instances)} workout(s) for {selection.kind} "
            f"selection (user {user_id})"
        )
        return result

    def _resolve_sources(
        self, selection: CopySelection, user_id: str
    ) -> List[WorkoutInstance]:
        if isinstance(selection, WorkoutCopySelection):
            workout = self._workout_store.find_by_id(selection.workout_id, user_id)
            return [workout] if workout is not None else []
        if isinstance(selection, DayCopySelection):
            return self._workout_store.find_by_date(user_id, selection.source_date)
        if isinstance(selection, WeekCopySelection):
            return self._workout_store.find_by_date_range(
                user_id, selection.source_week_start, selection.source_week_end
            )
        raise TypeError(f"Unsupported copy selection: {type(selection).__name__}")


class CopyExercisesUseCase:
    """
    Use case for copying exercise prescriptions into an existing workout.

    Usage:
        >>> use_case = CopyExercisesUseCase(workout_store=store)
        >>> updated = use_case.execute(
        ...     source_workout_id="w-1",
        ...     target_workout_id="w-2",
        ...     user_id="user-123",
        ...     exercise_ids=["squat"],
        ... )
    """

    def __init__(self, workout_store: WorkoutStore) -> None:
        self._workout_store = workout_store

    def execute(
        self,
        source_workout_id: str,
        target_workout_id: str,
        user_id: str,
        *,
        exercise_ids: Optional[Sequence[str]] = None,
        insert_at: Optional[int] = None,
    ) -> WorkoutInstance:
        """
        Copy exercises from one workout into another.

        Args:
            source_workout_id: Workout to copy exercises from
            target_workout_id: Workout receiving the exercises
            user_id: Owning user
            exercise_ids: Exercises to copy; None copies all
            insert_at: Order index to insert at; None appends

        Returns:
            The target workout after the copy

        Raises:
            WorkoutNotFoundError: If either workout does not exist
            WorkoutPersistenceError: If the update failed
        """
        source = self._workout_store.find_by_id(source_workout_id, user_id)
        if source is None:
            raise WorkoutNotFoundError(source_workout_id)
        target = self._workout_store.find_by_id(target_workout_id, user_id)
        if target is None:
            raise WorkoutNotFoundError(target_workout_id)

        exercises = plan_exercise_copy(
            source, target, exercise_ids=exercise_ids, insert_at=insert_at
        )
        if len(exercises) == len(target.exercises):
            logger.info(f"No exercises selected to copy into {target_workout_id}")
            return target

        updated = self._workout_store.replace_exercises(
            target_workout_id, user_id, exercises
        )
        logger.info(
            f"Copied {len(exercises) - len(target.exercises)} exercise(s) from "
            f"{source_workout_id} into {target_workout_id}"
        )
        return updated
