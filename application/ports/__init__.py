"""
Repository Interfaces (Ports) for the Schedule API.

This package defines abstract interfaces that decouple scheduling logic from
infrastructure (database, external services). Implementations are provided
in the infrastructure layer.

Architecture follows the Ports & Adapters (Hexagonal) pattern:
- Ports: Abstract interfaces defined here (what the application needs)
- Adapters: Concrete implementations in infrastructure/ (how it's provided)

Usage:
    from application.ports import WorkoutStore, TemplateRepository

    class ScheduleService:
        def __init__(self, workout_store: WorkoutStore):
            self.workout_store = workout_store
"""

# Workout instance persistence
from application.ports.workout_store import WorkoutStore

# Template lookup
from application.ports.template_repository import TemplateRepository

__all__ = [
    "WorkoutStore",
    "TemplateRepository",
]
