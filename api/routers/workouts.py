"""
Scheduled workouts router.

Operations on a single existing workout.
"""

from fastapi import APIRouter, Depends

from api.deps import get_copy_exercises_use_case, get_current_user
from api.errors import SCHEDULING_ERRORS, to_http_error
from api.schemas import ExerciseCopyRequest
from application.use_cases import CopyExercisesUseCase
from domain.models import WorkoutInstance

router = APIRouter(
    prefix="/workouts",
    tags=["Workouts"],
)


@router.post("/{workout_id}/exercises/copy", response_model=WorkoutInstance)
def copy_exercises(
    workout_id: str,
    request: ExerciseCopyRequest,
    user_id: str = Depends(get_current_user),
    use_case: CopyExercisesUseCase = Depends(get_copy_exercises_use_case),
):
    """
    Copy exercises from another workout into this one.

    Copied exercises keep their targets and lose their logged sets.
    Order indices of the resulting list are renumbered from 0.

    Returns:
        The updated workout
    """
    try:
        return use_case.execute(
            source_workout_id=request.source_workout_id,
            target_workout_id=workout_id,
            user_id=user_id,
            exercise_ids=request.exercise_ids,
            insert_at=request.insert_at,
        )
    except SCHEDULING_ERRORS as e:
        raise to_http_error(e) from e
