"""
SchedulePattern Use Case.

Turns a recurring pattern into persisted workout instances:
validate, expand, snapshot the template, persist atomically.
"""

import logging
import uuid
from dataclasses import dataclass, field
from datetime import date, time
from typing import List, Optional

from application.exceptions import TemplateNotFoundError
from application.ports import TemplateRepository, WorkoutStore
from domain.models import DEFAULT_WORKOUT_TIME, RecurringPattern, WorkoutInstance, WorkoutTemplate
from domain.scheduling import (
    DEFAULT_PREVIEW_DAYS,
    MAX_OCCURRENCES,
    ensure_valid_pattern,
    expand,
    preview,
)

logger = logging.getLogger(__name__)


def generated_name(pattern_name: str, occurrence: date) -> str:
    """Name of a generated instance, e.g. ``"MWF Strength - Jan 08"``."""
    return f"{pattern_name} - {occurrence.strftime('%b %d')}"


def generated_description(pattern_name: str) -> str:
    return f"Generated from recurring pattern: {pattern_name}"


@dataclass
class SchedulePatternResult:
    """Result of the SchedulePattern use case execution."""

    pattern_id: str
    dates: List[date] = field(default_factory=list)
    instances: List[WorkoutInstance] = field(default_factory=list)

    @property
    def instance_ids(self) -> List[str]:
        return [i.id for i in self.instances if i.id]


class SchedulePatternUseCase:
    """
    Use case for materializing recurring patterns.

    Orchestrates the following workflow:
    1. Validate the pattern invariants
    2. Expand the pattern over its full window
    3. Load the referenced template
    4. Snapshot the template into one instance per date
    5. Persist all instances in one atomic batch

    Every local failure is raised before the store is touched.

    Usage:
        >>> use_case = SchedulePatternUseCase(
        ...     workout_store=store, template_repo=templates
        ... )
        >>> result = use_case.execute(pattern, user_id="user-123")
        >>> len(result.instances)
        6
    """

    def __init__(
        self,
        workout_store: WorkoutStore,
        template_repo: TemplateRepository,
        *,
        max_occurrences: int = MAX_OCCURRENCES,
        preview_days: int = DEFAULT_PREVIEW_DAYS,
        default_time: time = DEFAULT_WORKOUT_TIME,
    ) -> None:
        """
        Initialize the use case with required dependencies.

        Args:
            workout_store: Store persisting the generated instances
            template_repo: Repository resolving the pattern's template
            max_occurrences: Safety cap on a single expansion
            preview_days: Default preview window length
            default_time: Time of day for generated instances
        """
        self._workout_store = workout_store
        self._template_repo = template_repo
        self._max_occurrences = max_occurrences
        self._preview_days = preview_days
        self._default_time = default_time

    def preview(self, pattern: RecurringPattern, days: Optional[int] = None) -> List[date]:
        """
        Expand a short window without touching persistence.

        Args:
            pattern: Pattern being edited
            days: Window length, defaults to the configured preview length

        Returns:
            Occurrence dates in the preview window
        """
        return preview(
            pattern,
            self._preview_days if days is None else days,
            max_occurrences=self._max_occurrences,
        )

    def execute(self, pattern: RecurringPattern, user_id: str) -> SchedulePatternResult:
        """
        Materialize the pattern for a user.

        Args:
            pattern: Pattern to materialize
            user_id: Owning user

        Returns:
            SchedulePatternResult with the persisted instances

        Raises:
            InvalidPatternError: If the pattern violates its invariants
            PatternTooLargeError: If the expansion exceeds the safety cap
            TemplateNotFoundError: If the template does not exist for the user
            WorkoutPersistenceError: If the store rejected the batch
        """
        ensure_valid_pattern(pattern)
        dates = expand(pattern, max_occurrences=self._max_occurrences)

        template = self._template_repo.get_template(pattern.template_id, user_id)
        if template is None:
            logger.warning(
                f"Template {pattern.template_id} not found for pattern '{pattern.name}'"
            )
            raise TemplateNotFoundError(pattern.template_id)

        pattern_id = pattern.id or str(uuid.uuid4())
        result = SchedulePatternResult(pattern_id=pattern_id, dates=dates)
        if not dates:
            logger.info(f"Pattern '{pattern.name}' produced no occurrences")
            return result

        planned = self._build_instances(pattern, pattern_id, template, dates, user_id)
        result.instances = self._workout_store.create_instances(user_id, planned)

        logger.info(
            f"Materialized pattern '{pattern.name}' ({pattern_id}) into "
            f"{len(result.instances)} workouts for user {user_id}"
        )
        return result

    def _build_instances(
        self,
        pattern: RecurringPattern,
        pattern_id: str,
        template: WorkoutTemplate,
        dates: List[date],
        user_id: str,
    ) -> List[WorkoutInstance]:
        description = generated_description(pattern.name)
        return [
            template.instantiate(
                occurrence,
                name=generated_name(pattern.name, occurrence),
                scheduled_time=self._default_time,
                description=description,
                user_id=user_id,
                pattern_id=pattern_id,
            )
            for occurrence in dates
        ]
