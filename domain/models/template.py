"""
Workout template - the reusable shape of a workout.

Templates are authored by a user and referenced by recurring patterns.
Scheduling takes a by-value snapshot of the template for every generated
instance.
"""

from datetime import date, datetime, time
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from domain.models.exercise import ExercisePrescription, validate_exercise_order
from domain.models.workout import WorkoutInstance, WorkoutType


class WorkoutTemplate(BaseModel):
    """
    Reusable workout definition.

    Examples:
        >>> template = WorkoutTemplate(
        ...     id="tpl-1",
        ...     name="Leg Day",
        ...     workout_type=WorkoutType.STRENGTH,
        ...     estimated_duration=45,
        ...     exercises=[ExercisePrescription(exercise_id="squat", order_index=0)],
        ... )
        >>> template.exercise_count
        1
    """

    id: Optional[str] = Field(default=None, description="Template UUID")
    user_id: Optional[str] = Field(default=None, description="Authoring user")
    name: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = Field(default=None, max_length=2000)
    workout_type: WorkoutType = Field(default=WorkoutType.MIXED)
    estimated_duration: Optional[int] = Field(
        default=None, ge=1, description="Estimated duration in minutes"
    )
    exercises: List[ExercisePrescription] = Field(default_factory=list)
    created_at: Optional[datetime] = Field(default=None)

    @field_validator("exercises")
    @classmethod
    def validate_exercises(
        cls, v: List[ExercisePrescription]
    ) -> List[ExercisePrescription]:
        """Keep exercises sorted by a contiguous zero-based order index."""
        return validate_exercise_order(v)

    @property
    def exercise_count(self) -> int:
        return len(self.exercises)

    def instantiate(
        self,
        scheduled_date: date,
        *,
        name: str,
        scheduled_time: time,
        description: Optional[str] = None,
        user_id: Optional[str] = None,
        pattern_id: Optional[str] = None,
    ) -> WorkoutInstance:
        """
        Build an unsaved WorkoutInstance from this template.

        Exercise prescriptions are deep-copied without execution history, so
        the instance never shares state with the template.

        Args:
            scheduled_date: Date of the occurrence
            name: Instance name
            scheduled_time: Time of day for scheduled_at
            description: Optional instance description
            user_id: Owning user
            pattern_id: Generating pattern, if any

        Returns:
            Unsaved WorkoutInstance
        """
        return WorkoutInstance(
            user_id=user_id,
            template_id=self.id,
            pattern_id=pattern_id,
            name=name,
            description=description,
            scheduled_date=scheduled_date,
            scheduled_at=datetime.combine(scheduled_date, scheduled_time),
            workout_type=self.workout_type,
            estimated_duration=self.estimated_duration,
            exercises=[e.as_prescription() for e in self.exercises],
        )
