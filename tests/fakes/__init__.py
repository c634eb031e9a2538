"""
Fake Repository Implementations for Testing.

This package provides in-memory fake implementations of repository interfaces
for fast, isolated testing. No database or external dependencies required.

Features:
- All fakes implement the same Protocol interfaces as real implementations
- Supports seeding with test data
- Supports reset() for test isolation
- Factory functions for common test scenarios

Usage:
    from tests.fakes import FakeWorkoutStore, create_template_repo

    store = FakeWorkoutStore()
    store.seed([make_workout(date(2024, 2, 5))])

    templates = create_template_repo(template_id="tpl-1")
"""
from datetime import date, datetime, time
from typing import List, Optional

from domain.models import (
    CompletedSet,
    ExercisePrescription,
    WorkoutInstance,
    WorkoutTemplate,
    WorkoutType,
)
from tests.fakes.template_repository import FakeTemplateRepository
from tests.fakes.workout_store import FakeWorkoutStore


# =============================================================================
# Factory Functions
# =============================================================================


def make_exercises(*, with_history: bool = False) -> List[ExercisePrescription]:
    """Three prescriptions: two strength exercises and one timed cardio finisher."""
    history = (
        [CompletedSet(set_number=1, reps=5, weight=100), CompletedSet(set_number=2, reps=5, weight=100)]
        if with_history
        else []
    )
    return [
        ExercisePrescription(
            exercise_id="back-squat", order_index=0, sets=5, reps=5, weight=100,
            rest_between_sets=180, completed_sets=history,
        ),
        ExercisePrescription(
            exercise_id="romanian-deadlift", order_index=1, sets=3, reps=8, weight=80,
            completed_sets=list(history),
        ),
        ExercisePrescription(
            exercise_id="bike-sprint", order_index=2, duration=600, distance=5.0,
        ),
    ]


def make_workout(
    scheduled_date: date,
    *,
    name: str = "Leg Day",
    user_id: str = "test-user-123",
    workout_id: Optional[str] = None,
    completed: bool = False,
    scheduled_at: Optional[datetime] = None,
) -> WorkoutInstance:
    """Build a workout instance, optionally with execution history."""
    return WorkoutInstance(
        id=workout_id,
        user_id=user_id,
        template_id="tpl-legs",
        name=name,
        scheduled_date=scheduled_date,
        scheduled_at=scheduled_at,
        workout_type=WorkoutType.STRENGTH,
        estimated_duration=60,
        exercises=make_exercises(with_history=completed),
        completed_at=datetime.combine(scheduled_date, time(10, 30)) if completed else None,
    )


def make_template(
    *,
    template_id: str = "tpl-legs",
    user_id: Optional[str] = None,
    name: str = "Leg Day",
) -> WorkoutTemplate:
    return WorkoutTemplate(
        id=template_id,
        user_id=user_id,
        name=name,
        workout_type=WorkoutType.STRENGTH,
        estimated_duration=60,
        exercises=make_exercises(),
    )


def create_template_repo(*, template_id: str = "tpl-legs") -> FakeTemplateRepository:
    """Create a FakeTemplateRepository holding one leg-day template."""
    repo = FakeTemplateRepository()
    repo.seed([make_template(template_id=template_id)])
    return repo


__all__ = [
    "FakeWorkoutStore",
    "FakeTemplateRepository",
    "make_exercises",
    "make_workout",
    "make_template",
    "create_template_repo",
]
