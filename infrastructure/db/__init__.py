"""
Infrastructure Database Layer.

This package provides Supabase-backed implementations of the repository
interfaces defined in application.ports.

Usage:
    from supabase import create_client
    from infrastructure.db import SupabaseWorkoutStore, SupabaseTemplateRepository

    client = create_client(SUPABASE_URL, SUPABASE_KEY)
    workout_store = SupabaseWorkoutStore(client)
    template_repo = SupabaseTemplateRepository(client)
"""

from infrastructure.db.workout_store import SupabaseWorkoutStore
from infrastructure.db.template_repository import SupabaseTemplateRepository

__all__ = [
    "SupabaseWorkoutStore",
    "SupabaseTemplateRepository",
]
