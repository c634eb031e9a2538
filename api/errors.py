"""
HTTP translations of scheduling and persistence errors.
"""

from fastapi import HTTPException

from application.exceptions import (
    TemplateNotFoundError,
    WorkoutNotFoundError,
    WorkoutPersistenceError,
)
from domain.scheduling import InvalidPatternError, PatternTooLargeError


class PatternRejectedError(HTTPException):
    """Raised when a pattern is invalid or would expand past the safety cap."""

    def __init__(self, message: str, errors=None):
        super().__init__(
            status_code=422,
            detail={"message": message, "errors": list(errors or [])},
        )


class ResourceNotFoundError(HTTPException):
    """Raised when a template or workout cannot be found."""

    def __init__(self, message: str):
        super().__init__(status_code=404, detail=message)


class PersistenceFailedError(HTTPException):
    """Raised when the Workout Store rejected a write."""

    def __init__(self, message: str):
        super().__init__(
            status_code=502,
            detail=f"Failed to persist workouts: {message}",
        )


def to_http_error(error: Exception) -> HTTPException:
    """
    Map a scheduling or persistence error to its HTTP response.

    Only the types listed in SCHEDULING_ERRORS are supported.
    """
    if isinstance(error, InvalidPatternError):
        return PatternRejectedError(error.message, error.errors)
    if isinstance(error, PatternTooLargeError):
        return PatternRejectedError(str(error), [str(error)])
    if isinstance(error, (TemplateNotFoundError, WorkoutNotFoundError)):
        return ResourceNotFoundError(str(error))
    if isinstance(error, WorkoutPersistenceError):
        return PersistenceFailedError(str(error))
    raise TypeError(f"No HTTP mapping for {type(error).__name__}")


# Errors every scheduling endpoint translates
SCHEDULING_ERRORS = (
    InvalidPatternError,
    PatternTooLargeError,
    TemplateNotFoundError,
    WorkoutNotFoundError,
    WorkoutPersistenceError,
)
