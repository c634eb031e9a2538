"""
Application-layer exceptions.

These exceptions are used across application and infrastructure layers.
"""


class WorkoutPersistenceError(Exception):
    """Error during atomic creation or update of workout instances.

    Raised when the Workout Store fails to persist a batch. Nothing from
    the batch is committed when this is raised.
    """

    pass


class TemplateNotFoundError(Exception):
    """Raised when a recurring pattern references a missing template."""

    def __init__(self, template_id: str):
        super().__init__(f"Workout template not found: {template_id}")
        self.template_id = template_id


class WorkoutNotFoundError(Exception):
    """Raised when an operation needs an existing workout that is missing."""

    def __init__(self, workout_id: str):
        super().__init__(f"Workout not found: {workout_id}")
        self.workout_id = workout_id
