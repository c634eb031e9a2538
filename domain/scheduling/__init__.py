"""
Scheduling algorithms: pattern expansion, pattern validation and copy planning.

Everything in this package is a pure function of its inputs.
"""

from domain.scheduling.copy_engine import (
    clone_instance,
    normalize_week_start,
    plan_copy,
    plan_exercise_copy,
)
from domain.scheduling.exceptions import (
    InvalidPatternError,
    PatternTooLargeError,
    SchedulingError,
)
from domain.scheduling.pattern_expander import (
    DEFAULT_PREVIEW_DAYS,
    MAX_OCCURRENCES,
    custom_offsets,
    expand,
    materialization_end,
    preview,
    week_start,
)
from domain.scheduling.presets import COMMON_PATTERNS, get_common_patterns
from domain.scheduling.validation import collect_pattern_errors, ensure_valid_pattern

__all__ = [
    # Expansion
    "expand",
    "preview",
    "materialization_end",
    "custom_offsets",
    "week_start",
    "MAX_OCCURRENCES",
    "DEFAULT_PREVIEW_DAYS",
    # Validation
    "collect_pattern_errors",
    "ensure_valid_pattern",
    # Copy
    "plan_copy",
    "plan_exercise_copy",
    "clone_instance",
    "normalize_week_start",
    # Presets
    "COMMON_PATTERNS",
    "get_common_patterns",
    # Errors
    "SchedulingError",
    "InvalidPatternError",
    "PatternTooLargeError",
]
