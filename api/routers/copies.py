"""
Workout copies router.

Copies a single workout, every workout of a day or every workout of a week
onto another date. Copies never carry execution state.
"""

from fastapi import APIRouter, Depends

from api.deps import get_copy_workouts_use_case, get_current_user
from api.errors import SCHEDULING_ERRORS, to_http_error
from api.schemas import CopyRequest, CopyResponse
from application.use_cases import CopyWorkoutsUseCase

router = APIRouter(
    prefix="/copies",
    tags=["Copies"],
)


@router.post("", response_model=CopyResponse, status_code=201)
def copy_workouts(
    request: CopyRequest,
    user_id: str = Depends(get_current_user),
    use_case: CopyWorkoutsUseCase = Depends(get_copy_workouts_use_case),
):
    """
    Copy workouts according to the selection.

    A selection matching no workouts succeeds with an empty result.
    """
    selection = request.root
    try:
        result = use_case.execute(selection, user_id)
    except SCHEDULING_ERRORS as e:
        raise to_http_error(e) from e

    return CopyResponse(
        kind=selection.kind,
        source_count=result.source_count,
        count=len(result.instances),
        workouts=result.instances,
    )
