"""
Template repository port (interface).

This Protocol defines the contract for workout template lookups.
Infrastructure implementations (e.g., Supabase) must satisfy this interface.
"""

from typing import Optional, Protocol

from domain.models import WorkoutTemplate


class TemplateRepository(Protocol):
    """Repository interface for workout templates referenced by patterns."""

    def get_template(
        self,
        template_id: str,
        user_id: str,
    ) -> Optional[WorkoutTemplate]:
        """
        Get a template by its ID.

        Args:
            template_id: The template's UUID as string
            user_id: User ID (for authorization)

        Returns:
            WorkoutTemplate if found, None otherwise
        """
        ...
