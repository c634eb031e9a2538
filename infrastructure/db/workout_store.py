"""
Supabase implementation of WorkoutStore.

This module provides the concrete Supabase implementation for scheduled
workout instance persistence. Batches are written through the
``create_workout_instances`` PostgreSQL function so that every insert of a
batch happens in a single transaction.
"""
import json
import logging
from datetime import date
from typing import Any, Dict, List, Optional, Sequence

from supabase import Client

from application.exceptions import WorkoutNotFoundError, WorkoutPersistenceError
from domain.models import ExercisePrescription, WorkoutInstance

logger = logging.getLogger(__name__)

TABLE = "workout_instances"
CREATE_RPC = "create_workout_instances"


def instance_to_row(instance: WorkoutInstance, user_id: str) -> Dict[str, Any]:
    """Convert an unsaved instance to a JSON-ready table row."""
    row = instance.model_dump(mode="json", exclude={"id", "created_at"})
    row["user_id"] = user_id
    return row


def row_to_instance(row: Dict[str, Any]) -> WorkoutInstance:
    """Convert a table row to a WorkoutInstance."""
    data = dict(row)
    data["exercises"] = data.get("exercises") or []
    return WorkoutInstance.model_validate(data)


class SupabaseWorkoutStore:
    """
    Supabase implementation of WorkoutStore protocol.

    Queries against the workout_instances table. Exercise prescriptions,
    including completed sets, are stored in the ``exercises`` JSONB column.
    The client is injected via constructor for testability.
    """

    def __init__(self, client: Client):
        """
        Initialize with Supabase client.

        Args:
            client: Supabase client instance (injected, not global)
        """
        self._client = client

    def create_instances(
        self,
        user_id: str,
        instances: Sequence[WorkoutInstance],
    ) -> List[WorkoutInstance]:
        """
        Create a batch of workout instances atomically.

        Uses a PostgreSQL stored procedure to ensure all inserts happen
        in a single transaction. If any insert fails, the entire operation
        is rolled back.

        Raises:
            WorkoutPersistenceError: If the RPC call fails
        """
        if not instances:
            return []

        rows = [instance_to_row(instance, user_id) for instance in instances]
        try:
            response = self._client.rpc(
                CREATE_RPC,
                {
                    "p_user_id": user_id,
                    "p_instances": json.dumps(rows),
                },
            ).execute()

            if not response.data:
                raise WorkoutPersistenceError("RPC returned no data")
            if len(response.data) != len(rows):
                raise WorkoutPersistenceError(
                    f"RPC created {len(response.data)} of {len(rows)} instances"
                )

            created = [row_to_instance(row) for row in response.data]
        except Exception as e:
            logger.error(f"Failed to create {len(rows)} workout instances for user {user_id}: {e}")
            if isinstance(e, WorkoutPersistenceError):
                raise
            raise WorkoutPersistenceError(f"Atomic instance creation failed: {e}") from e

        logger.info(f"Created {len(created)} workout instances for user {user_id}")
        return created

    def find_by_id(
        self,
        workout_id: str,
        user_id: str,
    ) -> Optional[WorkoutInstance]:
        """Get a single workout instance by ID."""
        result = (
            self._client.table(TABLE)
            .select("*")
            .eq("id", workout_id)
            .eq("user_id", user_id)
            .limit(1)
            .execute()
        )
        if not result.data:
            return None
        return row_to_instance(result.data[0])

    def find_by_date(
        self,
        user_id: str,
        on_date: date,
    ) -> List[WorkoutInstance]:
        """Get the instances scheduled on a date, in creation order."""
        result = (
            self._client.table(TABLE)
            .select("*")
            .eq("user_id", user_id)
            .eq("scheduled_date", on_date.isoformat())
            .order("created_at")
            .execute()
        )
        return [row_to_instance(row) for row in result.data or []]

    def find_by_date_range(
        self,
        user_id: str,
        start: date,
        end: date,
    ) -> List[WorkoutInstance]:
        """Get the instances scheduled in ``[start, end]``, by date then creation order."""
        result = (
            self._client.table(TABLE)
            .select("*")
            .eq("user_id", user_id)
            .gte("scheduled_date", start.isoformat())
            .lte("scheduled_date", end.isoformat())
            .order("scheduled_date")
            .order("created_at")
            .execute()
        )
        return [row_to_instance(row) for row in result.data or []]

    def replace_exercises(
        self,
        workout_id: str,
        user_id: str,
        exercises: Sequence[ExercisePrescription],
    ) -> WorkoutInstance:
        """
        Replace the exercise list of a workout.

        Raises:
            WorkoutNotFoundError: If no row matched
            WorkoutPersistenceError: If the update failed
        """
        payload = [e.model_dump(mode="json") for e in exercises]
        try:
            result = (
                self._client.table(TABLE)
                .update({"exercises": payload})
                .eq("id", workout_id)
                .eq("user_id", user_id)
                .execute()
            )
        except Exception as e:
            logger.error(f"Failed to update exercises of workout {workout_id}: {e}")
            raise WorkoutPersistenceError(f"Exercise update failed: {e}") from e

        if not result.data:
            raise WorkoutNotFoundError(workout_id)
        return row_to_instance(result.data[0])
