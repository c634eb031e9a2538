"""
Scheduling errors raised by the pure domain algorithms.

Both errors are local validation failures detected before any side effect.
"""

from typing import List, Optional


class SchedulingError(Exception):
    """Base class for scheduling errors."""

    pass


class InvalidPatternError(SchedulingError):
    """
    Raised when a recurring pattern violates its invariants.

    ``errors`` lists every violated invariant, not just the first one.
    """

    def __init__(self, message: str, errors: Optional[List[str]] = None):
        super().__init__(message)
        self.message = message
        self.errors = errors or []


class PatternTooLargeError(SchedulingError):
    """Raised when an expansion would exceed the occurrence safety cap."""

    def __init__(self, pattern_name: str, limit: int):
        super().__init__(
            f"Pattern '{pattern_name}' would generate more than {limit} occurrences"
        )
        self.pattern_name = pattern_name
        self.limit = limit
