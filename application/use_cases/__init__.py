"""
Application Use Cases for the Schedule API.

This package contains application-level use cases that orchestrate the
scheduling algorithms and coordinate between ports/adapters.

Architecture follows Clean Architecture / Hexagonal pattern:
- Use cases orchestrate domain functions and repository ports
- Dependencies are injected via constructors for testability
- Use cases return domain models, not API responses

Usage:
    from application.use_cases import SchedulePatternUseCase, CopyWorkoutsUseCase

    schedule = SchedulePatternUseCase(
        workout_store=workout_store,
        template_repo=template_repo,
    )
    result = schedule.execute(pattern, user_id="user-123")

    copy = CopyWorkoutsUseCase(workout_store=workout_store)
    result = copy.execute(selection, user_id="user-123")
"""

from application.use_cases.copy_workouts import (
    CopyExercisesUseCase,
    CopyWorkoutsResult,
    CopyWorkoutsUseCase,
)
from application.use_cases.schedule_pattern import (
    SchedulePatternResult,
    SchedulePatternUseCase,
    generated_description,
    generated_name,
)

__all__ = [
    # SchedulePattern
    "SchedulePatternUseCase",
    "SchedulePatternResult",
    "generated_name",
    "generated_description",
    # CopyWorkouts
    "CopyWorkoutsUseCase",
    "CopyWorkoutsResult",
    "CopyExercisesUseCase",
]
