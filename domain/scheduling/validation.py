"""
Recurring pattern validation.

Structural typing is handled by pydantic; the invariants here depend on the
frequency mode and are collected together so a caller sees every problem
in one response.
"""

import logging
from typing import List

from domain.models.pattern import Frequency, RecurringPattern
from domain.scheduling.exceptions import InvalidPatternError

logger = logging.getLogger(__name__)

MIN_DURATION_WEEKS = 1
MAX_DURATION_WEEKS = 52
MIN_TIMES_PER_WEEK = 1
MAX_TIMES_PER_WEEK = 7
# Leaves room for the " - Mon DD" suffix within the 200 character instance name
MAX_PATTERN_NAME_LENGTH = 191


def collect_pattern_errors(pattern: RecurringPattern) -> List[str]:
    """
    Check a pattern against its invariants.

    Args:
        pattern: Pattern to check

    Returns:
        List of violated invariants (empty if valid)
    """
    errors: List[str] = []

    if not pattern.name or not pattern.name.strip():
        errors.append("Pattern name is required")
    elif len(pattern.name) > MAX_PATTERN_NAME_LENGTH:
        errors.append(
            f"Pattern name must be at most {MAX_PATTERN_NAME_LENGTH} characters, "
            f"got {len(pattern.name)}"
        )

    if not pattern.template_id:
        errors.append("Workout template ID is required")

    if not MIN_DURATION_WEEKS <= pattern.duration_weeks <= MAX_DURATION_WEEKS:
        errors.append(
            f"Duration must be between {MIN_DURATION_WEEKS} and "
            f"{MAX_DURATION_WEEKS} weeks, got {pattern.duration_weeks}"
        )

    if pattern.frequency == Frequency.WEEKLY and not pattern.days_of_week:
        errors.append("Days of week must be specified for weekly frequency")

    if pattern.days_of_week:
        invalid_days = sorted({d for d in pattern.days_of_week if d < 0 or d > 6})
        if invalid_days:
            errors.append(
                f"Days of week must be between 0 (Sunday) and 6 (Saturday), got {invalid_days}"
            )

    if pattern.frequency == Frequency.CUSTOM:
        times = pattern.times_per_week
        if times is None or not MIN_TIMES_PER_WEEK <= times <= MAX_TIMES_PER_WEEK:
            errors.append(
                f"Times per week must be between {MIN_TIMES_PER_WEEK} and "
                f"{MAX_TIMES_PER_WEEK} for custom frequency"
            )

    if pattern.end_date is not None and pattern.end_date < pattern.start_date:
        errors.append("End date cannot be before start date")

    return errors


def ensure_valid_pattern(pattern: RecurringPattern) -> None:
    """
    Raise if the pattern violates any invariant.

    Raises:
        InvalidPatternError: With the full list of violations
    """
    errors = collect_pattern_errors(pattern)
    if errors:
        logger.warning(f"Pattern '{pattern.name}' rejected: {errors}")
        raise InvalidPatternError("Invalid recurring pattern", errors=errors)
