"""
Supabase implementation of TemplateRepository.

This implementation uses the Supabase Python client to read the
workout_templates table.
"""

from typing import Optional

from supabase import Client

from domain.models import WorkoutTemplate


class SupabaseTemplateRepository:
    """
    Supabase-backed template repository implementation.

    Exercise prescriptions are stored in the ``exercises`` JSONB column.
    """

    def __init__(self, client: Client):
        """
        Initialize repository with Supabase client.

        Args:
            client: Authenticated Supabase client
        """
        self._client = client

    def get_template(self, template_id: str, user_id: str) -> Optional[WorkoutTemplate]:
        """
        Get a template by its ID.

        Args:
            template_id: The template's UUID as string
            user_id: Owning user

        Returns:
            WorkoutTemplate if found, None otherwise
        """
        response = (
            self._client.table("workout_templates")
            .select("*")
            .eq("id", template_id)
            .eq("user_id", user_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        row = dict(response.data[0])
        row["exercises"] = row.get("exercises") or []
        return WorkoutTemplate.model_validate(row)
