"""
Workout Store Interface (Port).

This module defines the abstract interface for scheduled workout instance
persistence. Implementations may use Supabase, in-memory storage, or other
backends.
"""
from datetime import date
from typing import List, Optional, Protocol, Sequence

from domain.models import ExercisePrescription, WorkoutInstance


class WorkoutStore(Protocol):
    """
    Abstract interface for workout instance persistence.

    Every operation is scoped to a user. Domain types are used instead of
    database rows to maintain clean architecture boundaries.
    """

    def create_instances(
        self,
        user_id: str,
        instances: Sequence[WorkoutInstance],
    ) -> List[WorkoutInstance]:
        """
        Persist a batch of new workout instances atomically.

        Either every instance is committed or none is.

        Args:
            user_id: Owning user
            instances: Unsaved instances (id is None)

        Returns:
            The persisted instances with their generated ids, in input order

        Raises:
            WorkoutPersistenceError: If the batch could not be committed
        """
        ...

    def find_by_id(
        self,
        workout_id: str,
        user_id: str,
    ) -> Optional[WorkoutInstance]:
        """
        Get a single workout instance by ID.

        Args:
            workout_id: Workout UUID
            user_id: User ID (for authorization)

        Returns:
            WorkoutInstance or None if not found/unauthorized
        """
        ...

    def find_by_date(
        self,
        user_id: str,
        on_date: date,
    ) -> List[WorkoutInstance]:
        """
        Get all instances scheduled on a date, in creation order.
        """
        ...

    def find_by_date_range(
        self,
        user_id: str,
        start: date,
        end: date,
    ) -> List[WorkoutInstance]:
        """
        Get all instances scheduled in ``[start, end]`` (inclusive).

        Returns:
            Instances ordered by scheduled date, then creation order
        """
        ...

    def replace_exercises(
        self,
        workout_id: str,
        user_id: str,
        exercises: Sequence[ExercisePrescription],
    ) -> WorkoutInstance:
        """
        Replace the exercise list of an existing workout.

        Args:
            workout_id: Workout UUID
            user_id: User ID (for authorization)
            exercises: New exercise list, order indices 0..n-1

        Returns:
            The updated workout

        Raises:
            WorkoutNotFoundError: If the workout does not exist for the user
            WorkoutPersistenceError: If the update failed
        """
        ...
