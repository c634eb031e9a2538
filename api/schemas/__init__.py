"""
Pydantic schemas for API requests and responses.

Organized by feature/domain:
- scheduling: Pattern, copy and exercise copy models
"""

from api.schemas.scheduling import (
    CopyRequest,
    CopyResponse,
    ExerciseCopyRequest,
    PatternPreset,
    PatternPreviewResponse,
    SchedulePatternResponse,
)

__all__ = [
    "CopyRequest",
    "CopyResponse",
    "ExerciseCopyRequest",
    "PatternPreset",
    "PatternPreviewResponse",
    "SchedulePatternResponse",
]
