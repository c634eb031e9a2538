"""
Integration tests for the copies and exercise copy APIs.
"""

from datetime import date

import pytest

from domain.models import ExercisePrescription
from tests.conftest import OTHER_USER_ID, TEST_USER_ID
from tests.fakes import make_workout


@pytest.fixture
def seeded_store(workout_store):
    workout_store.seed(
        [
            make_workout(date(2024, 2, 5), workout_id="w-mon", name="Monday Lift", completed=True),
            make_workout(date(2024, 2, 6), workout_id="w-tue", name="Tuesday Run"),
            make_workout(date(2024, 2, 6), workout_id="w-foreign", user_id=OTHER_USER_ID),
            make_workout(date(2024, 2, 8), workout_id="w-push", name="Push Day").model_copy(
                update={
                    "exercises": [
                        ExercisePrescription(exercise_id="bench-press", order_index=0, sets=5, reps=5)
                    ]
                }
            ),
        ]
    )
    return workout_store


# ---------------------------------------------------------------------------
# Copies
# ---------------------------------------------------------------------------


@pytest.mark.integration
class TestCopyWorkouts:
    """Integration tests for POST /copies."""

    def test_copy_single_workout(self, client, seeded_store):
        response = client.post(
            "/copies",
            json={"kind": "workout", "workout_id": "w-mon", "target_date": "2024-03-01"},
        )

        assert response.status_code == 201
        data = response.json()
        assert data["kind"] == "workout"
        assert data["count"] == 1
        clone = data["workouts"][0]
        assert clone["scheduled_date"] == "2024-03-01"
        assert clone["completed_at"] is None
        assert clone["name"] == "Monday Lift (Copy)"
        assert [e["exercise_id"] for e in clone["exercises"]] == [
            "back-squat",
            "romanian-deadlift",
            "bike-sprint",
        ]
        assert all(e["completed_sets"] == [] for e in clone["exercises"])

    def test_copy_day_only_copies_own_workouts(self, client, seeded_store):
        response = client.post(
            "/copies",
            json={"kind": "day", "source_date": "2024-02-06", "target_date": "2024-02-13"},
        )

        assert response.status_code == 201
        data = response.json()
        assert data["count"] == 1
        assert data["workouts"][0]["name"] == "Tuesday Run"
        assert data["workouts"][0]["user_id"] == TEST_USER_ID

    def test_copy_week(self, client, seeded_store):
        response = client.post(
            "/copies",
            json={
                "kind": "week",
                "source_week_start": "2024-02-04",
                "target_week_start": "2024-02-11",
            },
        )

        assert response.status_code == 201
        assert [w["scheduled_date"] for w in response.json()["workouts"]] == [
            "2024-02-12",
            "2024-02-13",
            "2024-02-15",
        ]

    def test_copy_empty_day_is_noop(self, client, seeded_store):
        response = client.post(
            "/copies",
            json={"kind": "day", "source_date": "2024-02-07", "target_date": "2024-02-14"},
        )

        assert response.status_code == 201
        assert response.json()["count"] == 0
        assert response.json()["workouts"] == []

    def test_unknown_kind(self, client):
        response = client.post(
            "/copies",
            json={"kind": "month", "source_date": "2024-02-07", "target_date": "2024-02-14"},
        )
        assert response.status_code == 422

    def test_day_copy_requires_source_date(self, client):
        response = client.post("/copies", json={"kind": "day", "target_date": "2024-02-14"})
        assert response.status_code == 422

    def test_persistence_failure(self, client, seeded_store):
        seeded_store.simulate_failure()

        response = client.post(
            "/copies",
            json={"kind": "workout", "workout_id": "w-mon", "target_date": "2024-03-01"},
        )

        assert response.status_code == 502
        assert seeded_store.count() == 4


# ---------------------------------------------------------------------------
# Exercise copies
# ---------------------------------------------------------------------------


@pytest.mark.integration
class TestCopyExercises:
    """Integration tests for POST /workouts/{workout_id}/exercises/copy."""

    def test_copy_selected_exercises(self, client, seeded_store):
        response = client.post(
            "/workouts/w-push/exercises/copy",
            json={"source_workout_id": "w-mon", "exercise_ids": ["back-squat"], "insert_at": 0},
        )

        assert response.status_code == 200
        exercises = response.json()["exercises"]
        assert [(e["exercise_id"], e["order_index"]) for e in exercises] == [
            ("back-squat", 0),
            ("bench-press", 1),
        ]
        assert exercises[0]["completed_sets"] == []

    def test_copy_all_exercises(self, client, seeded_store):
        response = client.post(
            "/workouts/w-push/exercises/copy", json={"source_workout_id": "w-tue"}
        )

        assert response.status_code == 200
        assert len(response.json()["exercises"]) == 4

    def test_missing_target(self, client, seeded_store):
        response = client.post(
            "/workouts/missing/exercises/copy", json={"source_workout_id": "w-mon"}
        )
        assert response.status_code == 404

    def test_other_users_source(self, client, seeded_store):
        response = client.post(
            "/workouts/w-push/exercises/copy", json={"source_workout_id": "w-foreign"}
        )
        assert response.status_code == 404

    def test_negative_insert_position(self, client, seeded_store):
        response = client.post(
            "/workouts/w-push/exercises/copy",
            json={"source_workout_id": "w-mon", "insert_at": -1},
        )
        assert response.status_code == 422
