"""
Exercise prescription value objects.

An ExercisePrescription is one exercise inside a workout template or a
scheduled workout instance: which exercise, where it sits in the execution
order, and the optional targets the athlete is asked to hit.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field


class CompletedSet(BaseModel):
    """
    One set actually performed during execution of a workout.

    Completed sets are execution history. They are recorded only after the
    workout has been started and are never carried over by copy operations.
    """

    set_number: int = Field(..., ge=1, description="1-based set number")
    reps: Optional[int] = Field(default=None, ge=0, description="Reps performed")
    weight: Optional[float] = Field(default=None, ge=0, description="Weight used")
    duration: Optional[int] = Field(
        default=None, ge=0, description="Duration performed in seconds"
    )
    distance: Optional[float] = Field(
        default=None, ge=0, description="Distance covered"
    )
    completed_at: Optional[datetime] = Field(
        default=None, description="When the set was logged"
    )


class ExercisePrescription(BaseModel):
    """
    Value object representing one exercise within a workout.

    All targets are independent optionals. Cardio exercises conventionally
    use ``duration``/``distance`` while strength exercises use
    ``sets``/``reps``/``weight``, but nothing enforces that split.

    Examples:
        >>> squat = ExercisePrescription(
        ...     exercise_id="back-squat", order_index=0, sets=5, reps=5, weight=100
        ... )
        >>> squat.is_rep_based
        True

        >>> run = ExercisePrescription(
        ...     exercise_id="easy-run", order_index=1, duration=1800, distance=5.0
        ... )
        >>> run.is_timed
        True
    """

    exercise_id: str = Field(..., min_length=1, description="Exercise library identifier")
    order_index: int = Field(
        ..., ge=0, description="Zero-based execution order within the workout"
    )

    # Targets
    sets: Optional[int] = Field(default=None, ge=1, description="Target number of sets")
    reps: Optional[int] = Field(default=None, ge=1, description="Target reps per set")
    weight: Optional[float] = Field(default=None, ge=0, description="Target weight")
    duration: Optional[int] = Field(
        default=None, ge=1, description="Target duration in seconds"
    )
    distance: Optional[float] = Field(default=None, ge=0, description="Target distance")
    rest_between_sets: Optional[int] = Field(
        default=None, ge=0, description="Rest between sets in seconds"
    )

    notes: Optional[str] = Field(default=None, description="Coaching notes")

    # Execution history
    completed_sets: List[CompletedSet] = Field(
        default_factory=list,
        description="Sets logged during execution (empty until the workout starts)",
    )

    @property
    def is_timed(self) -> bool:
        """True if the prescription has a duration target."""
        return self.duration is not None

    @property
    def is_rep_based(self) -> bool:
        """True if the prescription has a reps target."""
        return self.reps is not None

    @property
    def has_history(self) -> bool:
        """True if any set has been logged against this exercise."""
        return bool(self.completed_sets)

    def as_prescription(self, order_index: Optional[int] = None) -> "ExercisePrescription":
        """
        Return a deep copy carrying targets only.

        Completed-set history is dropped. The order index is kept unless a new
        one is given.

        Args:
            order_index: Optional replacement order index

        Returns:
            New ExercisePrescription with an empty execution history.
        """
        update = {"completed_sets": []}
        if order_index is not None:
            update["order_index"] = order_index
        return self.model_copy(update=update, deep=True)


def validate_exercise_order(
    exercises: List[ExercisePrescription],
) -> List[ExercisePrescription]:
    """
    Ensure order indices are unique, zero-based and contiguous.

    Returns the exercises sorted by order index.

    Raises:
        ValueError: If the indices are not exactly 0..n-1
    """
    ordered = sorted(exercises, key=lambda e: e.order_index)
    indices = [e.order_index for e in ordered]
    if indices != list(range(len(ordered))):
        raise ValueError(
            f"Exercise order indices must be contiguous from 0, got {indices}"
        )
    return ordered
