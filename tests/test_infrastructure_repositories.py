"""
Tests for the Supabase adapters in infrastructure/db.

These tests verify that the Supabase implementations issue the expected
queries and translate rows and failures correctly. The Supabase client is
replaced with MagicMock query chains, so no database is required.
"""
import json
from datetime import date
from unittest.mock import MagicMock, Mock

import pytest

# All tests in this module are pure logic tests with mocks - mark as unit
pytestmark = pytest.mark.unit


def _row(workout_id="w-1", scheduled_date="2024-02-05", **overrides):
    row = {
        "id": workout_id,
        "user_id": "user-1",
        "template_id": "tpl-legs",
        "pattern_id": None,
        "name": "Leg Day",
        "description": None,
        "notes": None,
        "scheduled_date": scheduled_date,
        "scheduled_at": f"{scheduled_date}T09:00:00",
        "workout_type": "strength",
        "estimated_duration": 60,
        "exercises": [{"exercise_id": "back-squat", "order_index": 0, "sets": 5, "reps": 5}],
        "completed_at": None,
        "created_at": "2024-01-01T00:00:00+00:00",
    }
    row.update(overrides)
    return row


def _client_returning(data):
    """Mock client whose every query chain executes to ``data``."""
    client = MagicMock()
    response = Mock(data=data)
    client.rpc.return_value.execute.return_value = response
    table = client.table.return_value
    for method in ("select", "update", "eq", "gte", "lte", "order", "limit"):
        getattr(table, method).return_value = table
    table.execute.return_value = response
    return client


# ============================================================================
# Imports and instantiation
# ============================================================================

class TestRepositoryImports:
    """Test that the adapters can be imported."""

    def test_import_from_infrastructure_package(self):
        """Adapters should be importable from the infrastructure package."""
        from infrastructure import SupabaseTemplateRepository, SupabaseWorkoutStore
        assert SupabaseWorkoutStore is not None
        assert SupabaseTemplateRepository is not None

    def test_instantiation_keeps_client(self):
        """Adapters should accept an injected Supabase client."""
        from infrastructure.db import SupabaseTemplateRepository, SupabaseWorkoutStore
        mock_client = Mock()
        assert SupabaseWorkoutStore(mock_client)._client is mock_client
        assert SupabaseTemplateRepository(mock_client)._client is mock_client


# ============================================================================
# Row conversion
# ============================================================================

class TestRowConversion:
    """Test the instance/row helpers."""

    def test_instance_to_row_omits_generated_columns(self):
        """id and created_at are assigned by the database."""
        from infrastructure.db.workout_store import instance_to_row, row_to_instance
        instance = row_to_instance(_row())

        row = instance_to_row(instance, "user-2")

        assert "id" not in row
        assert "created_at" not in row
        assert row["user_id"] == "user-2"
        assert row["scheduled_date"] == "2024-02-05"
        assert row["exercises"][0]["exercise_id"] == "back-squat"
        json.dumps(row)

    def test_row_to_instance_tolerates_null_exercises(self):
        from infrastructure.db.workout_store import row_to_instance
        instance = row_to_instance(_row(exercises=None))
        assert instance.exercises == []
        assert instance.scheduled_date == date(2024, 2, 5)


# ============================================================================
# SupabaseWorkoutStore
# ============================================================================

class TestCreateInstances:
    """Test the atomic batch insert."""

    def _instances(self):
        from infrastructure.db.workout_store import row_to_instance
        return [
            row_to_instance(_row(workout_id=None, scheduled_date="2024-02-05")),
            row_to_instance(_row(workout_id=None, scheduled_date="2024-02-07")),
        ]

    def test_calls_rpc_with_json_payload(self):
        from infrastructure.db import SupabaseWorkoutStore
        client = _client_returning(
            [_row("w-1", "2024-02-05"), _row("w-2", "2024-02-07")]
        )
        store = SupabaseWorkoutStore(client)

        created = store.create_instances("user-1", self._instances())

        name, params = client.rpc.call_args.args
        assert name == "create_workout_instances"
        assert params["p_user_id"] == "user-1"
        payload = json.loads(params["p_instances"])
        assert [r["scheduled_date"] for r in payload] == ["2024-02-05", "2024-02-07"]
        assert [w.id for w in created] == ["w-1", "w-2"]

    def test_empty_batch_skips_rpc(self):
        from infrastructure.db import SupabaseWorkoutStore
        client = _client_returning([])
        assert SupabaseWorkoutStore(client).create_instances("user-1", []) == []
        client.rpc.assert_not_called()

    def test_no_data_raises(self):
        from application.exceptions import WorkoutPersistenceError
        from infrastructure.db import SupabaseWorkoutStore
        store = SupabaseWorkoutStore(_client_returning([]))

        with pytest.raises(WorkoutPersistenceError, match="no data"):
            store.create_instances("user-1", self._instances())

    def test_partial_result_raises(self):
        from application.exceptions import WorkoutPersistenceError
        from infrastructure.db import SupabaseWorkoutStore
        store = SupabaseWorkoutStore(_client_returning([_row("w-1")]))

        with pytest.raises(WorkoutPersistenceError, match="1 of 2"):
            store.create_instances("user-1", self._instances())

    def test_client_errors_are_wrapped(self):
        from application.exceptions import WorkoutPersistenceError
        from infrastructure.db import SupabaseWorkoutStore
        client = MagicMock()
        client.rpc.return_value.execute.side_effect = RuntimeError("connection reset")

        with pytest.raises(WorkoutPersistenceError) as exc_info:
            SupabaseWorkoutStore(client).create_instances("user-1", self._instances())

        assert "connection reset" in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, RuntimeError)


class TestFindQueries:
    """Test the user-scoped read queries."""

    def test_find_by_id(self):
        from infrastructure.db import SupabaseWorkoutStore
        client = _client_returning([_row("w-9")])

        workout = SupabaseWorkoutStore(client).find_by_id("w-9", "user-1")

        assert workout.id == "w-9"
        client.table.assert_called_with("workout_instances")
        table = client.table.return_value
        table.eq.assert_any_call("id", "w-9")
        table.eq.assert_any_call("user_id", "user-1")

    def test_find_by_id_missing(self):
        from infrastructure.db import SupabaseWorkoutStore
        assert SupabaseWorkoutStore(_client_returning([])).find_by_id("w-9", "user-1") is None

    def test_find_by_date(self):
        from infrastructure.db import SupabaseWorkoutStore
        client = _client_returning([_row("w-1"), _row("w-2")])

        workouts = SupabaseWorkoutStore(client).find_by_date("user-1", date(2024, 2, 5))

        assert [w.id for w in workouts] == ["w-1", "w-2"]
        table = client.table.return_value
        table.eq.assert_any_call("scheduled_date", "2024-02-05")
        table.order.assert_called_with("created_at")

    def test_find_by_date_range(self):
        from infrastructure.db import SupabaseWorkoutStore
        client = _client_returning([_row("w-1", "2024-02-04"), _row("w-2", "2024-02-10")])

        workouts = SupabaseWorkoutStore(client).find_by_date_range(
            "user-1", date(2024, 2, 4), date(2024, 2, 10)
        )

        assert len(workouts) == 2
        table = client.table.return_value
        table.gte.assert_called_once_with("scheduled_date", "2024-02-04")
        table.lte.assert_called_once_with("scheduled_date", "2024-02-10")

    def test_find_by_date_range_handles_none_data(self):
        from infrastructure.db import SupabaseWorkoutStore
        client = _client_returning(None)
        assert SupabaseWorkoutStore(client).find_by_date_range(
            "user-1", date(2024, 2, 4), date(2024, 2, 10)
        ) == []


class TestReplaceExercises:
    """Test exercise list updates."""

    def test_updates_exercises_column(self):
        from domain.models import ExercisePrescription
        from infrastructure.db import SupabaseWorkoutStore
        client = _client_returning([_row("w-1")])
        exercises = [ExercisePrescription(exercise_id="back-squat", order_index=0, sets=5, reps=5)]

        updated = SupabaseWorkoutStore(client).replace_exercises("w-1", "user-1", exercises)

        payload = client.table.return_value.update.call_args.args[0]
        assert payload["exercises"][0]["exercise_id"] == "back-squat"
        assert payload["exercises"][0]["completed_sets"] == []
        assert updated.id == "w-1"

    def test_missing_workout(self):
        from application.exceptions import WorkoutNotFoundError
        from infrastructure.db import SupabaseWorkoutStore

        with pytest.raises(WorkoutNotFoundError):
            SupabaseWorkoutStore(_client_returning([])).replace_exercises("w-1", "user-1", [])

    def test_client_errors_are_wrapped(self):
        from application.exceptions import WorkoutPersistenceError
        from infrastructure.db import SupabaseWorkoutStore
        client = _client_returning([])
        client.table.return_value.execute.side_effect = RuntimeError("timeout")

        with pytest.raises(WorkoutPersistenceError):
            SupabaseWorkoutStore(client).replace_exercises("w-1", "user-1", [])


# ============================================================================
# SupabaseTemplateRepository
# ============================================================================

class TestTemplateRepository:
    """Test template lookups."""

    def test_get_template(self):
        from infrastructure.db import SupabaseTemplateRepository
        client = _client_returning([
            {
                "id": "tpl-legs",
                "user_id": "user-1",
                "name": "Leg Day",
                "workout_type": "strength",
                "estimated_duration": 60,
                "exercises": [{"exercise_id": "back-squat", "order_index": 0}],
            }
        ])

        template = SupabaseTemplateRepository(client).get_template("tpl-legs", "user-1")

        client.table.assert_called_with("workout_templates")
        assert template.id == "tpl-legs"
        assert template.exercise_count == 1

    def test_missing_template(self):
        from infrastructure.db import SupabaseTemplateRepository
        repo = SupabaseTemplateRepository(_client_returning([]))
        assert repo.get_template("missing", "user-1") is None
