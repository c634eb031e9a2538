"""
Scheduled workout instance - the aggregate the scheduler produces.

A WorkoutInstance is one concrete, dated occurrence of a workout. Instances
are created by pattern materialization, ad hoc creation or the copy engine,
and carry a by-value snapshot of their exercise prescriptions so later
template edits never reach already-scheduled workouts.
"""

from datetime import date, datetime, time
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from domain.models.exercise import ExercisePrescription, validate_exercise_order

# Time of day used when a workout is scheduled without one
DEFAULT_WORKOUT_TIME = time(9, 0)


class WorkoutType(str, Enum):
    """Workout categories."""

    STRENGTH = "strength"
    CARDIO = "cardio"
    FLEXIBILITY = "flexibility"
    MIXED = "mixed"


class WorkoutInstance(BaseModel):
    """
    Aggregate root representing one scheduled workout.

    Identity is None until the Workout Store persists the instance. The
    execution state is ``scheduled_at`` (always set), ``completed_at`` and the
    per-exercise ``completed_sets``.

    Examples:
        >>> from datetime import date
        >>> workout = WorkoutInstance(
        ...     name="Leg Day",
        ...     scheduled_date=date(2024, 1, 1),
        ...     workout_type=WorkoutType.STRENGTH,
        ...     estimated_duration=45,
        ... )
        >>> workout.scheduled_at.hour
        9
    """

    # Identity
    id: Optional[str] = Field(
        default=None,
        description="Unique identifier (UUID). None for new, unsaved instances.",
    )
    user_id: Optional[str] = Field(default=None, description="Owning user")

    # Origin
    template_id: Optional[str] = Field(
        default=None, description="Template this instance was snapshotted from"
    )
    pattern_id: Optional[str] = Field(
        default=None, description="Recurring pattern that generated this instance"
    )

    # Description
    name: str = Field(..., min_length=1, max_length=200, description="Workout name")
    description: Optional[str] = Field(default=None, max_length=2000)
    notes: Optional[str] = Field(default=None, max_length=2000)

    # Schedule
    scheduled_date: date = Field(..., description="Calendar date of the occurrence")
    scheduled_at: Optional[datetime] = Field(
        default=None,
        description="Scheduled date-time; defaults to the scheduled date at 09:00",
    )

    # Shape
    workout_type: WorkoutType = Field(default=WorkoutType.MIXED)
    estimated_duration: Optional[int] = Field(
        default=None, ge=1, description="Estimated duration in minutes"
    )
    exercises: List[ExercisePrescription] = Field(default_factory=list)

    # Execution
    completed_at: Optional[datetime] = Field(default=None)
    created_at: Optional[datetime] = Field(default=None)

    @field_validator("exercises")
    @classmethod
    def validate_exercises(
        cls, v: List[ExercisePrescription]
    ) -> List[ExercisePrescription]:
        """Keep exercises sorted by a contiguous zero-based order index."""
        return validate_exercise_order(v)

    @model_validator(mode="after")
    def fill_scheduled_at(self) -> "WorkoutInstance":
        """Derive scheduled_at from the date when missing, and keep both aligned."""
        if self.scheduled_at is None:
            self.scheduled_at = datetime.combine(self.scheduled_date, DEFAULT_WORKOUT_TIME)
        elif self.scheduled_at.date() != self.scheduled_date:
            raise ValueError(
                f"scheduled_at {self.scheduled_at.isoformat()} does not fall on "
                f"scheduled_date {self.scheduled_date.isoformat()}"
            )
        return self

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------

    @property
    def is_completed(self) -> bool:
        """True once the workout has been completed."""
        return self.completed_at is not None

    @property
    def has_execution_history(self) -> bool:
        """True if the workout was completed or any set was logged."""
        return self.is_completed or any(e.has_history for e in self.exercises)

    @property
    def exercise_ids(self) -> List[str]:
        """Exercise identifiers in execution order."""
        return [e.exercise_id for e in self.exercises]

    # -------------------------------------------------------------------------
    # Domain Methods
    # -------------------------------------------------------------------------

    def with_id(self, workout_id: str) -> "WorkoutInstance":
        """Return a copy carrying the given persisted identity."""
        return self.model_copy(update={"id": workout_id})
