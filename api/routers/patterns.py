"""
Recurring patterns router.

This router provides endpoints for recurring workout patterns:
- List the common pattern presets
- Preview the occurrence dates of a pattern being edited
- Materialize a pattern into scheduled workouts
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from api.deps import get_current_user, get_schedule_pattern_use_case, get_settings
from api.errors import SCHEDULING_ERRORS, to_http_error
from api.schemas import PatternPreset, PatternPreviewResponse, SchedulePatternResponse
from application.use_cases import SchedulePatternUseCase
from backend.settings import Settings
from domain.models import RecurringPattern
from domain.scheduling import InvalidPatternError, PatternTooLargeError, get_common_patterns, preview

router = APIRouter(
    prefix="/patterns",
    tags=["Patterns"],
)


@router.get("/presets", response_model=List[PatternPreset])
def list_presets():
    """Common recurring patterns to start from."""
    return get_common_patterns()


@router.post("/preview", response_model=PatternPreviewResponse)
def preview_pattern(
    pattern: RecurringPattern,
    days: Optional[int] = Query(default=None, ge=1, le=366),
    settings: Settings = Depends(get_settings),
):
    """
    Preview the occurrence dates of a pattern.

    Pure computation: nothing is read or written. Called on every edit of
    the pattern form.

    Args:
        pattern: Pattern being edited
        days: Preview window length (defaults to the configured preview length)

    Returns:
        PatternPreviewResponse with the dates in the window
    """
    try:
        dates = preview(
            pattern,
            days or settings.preview_days,
            max_occurrences=settings.max_occurrences,
        )
    except (InvalidPatternError, PatternTooLargeError) as e:
        raise to_http_error(e) from e

    return PatternPreviewResponse(dates=dates, count=len(dates))


@router.post("", response_model=SchedulePatternResponse, status_code=201)
def schedule_pattern(
    pattern: RecurringPattern,
    user_id: str = Depends(get_current_user),
    use_case: SchedulePatternUseCase = Depends(get_schedule_pattern_use_case),
):
    """
    Materialize a pattern into scheduled workouts.

    The pattern is validated and expanded over its full window, then one
    workout per date is created from the referenced template in a single
    atomic batch.

    Returns:
        SchedulePatternResponse with the created workouts
    """
    try:
        result = use_case.execute(pattern, user_id)
    except SCHEDULING_ERRORS as e:
        raise to_http_error(e) from e

    return SchedulePatternResponse(
        pattern_id=result.pattern_id,
        count=len(result.instances),
        dates=result.dates,
        workouts=result.instances,
    )
