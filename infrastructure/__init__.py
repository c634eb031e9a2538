"""
Infrastructure Layer for the Schedule API.

This package contains concrete implementations of repository interfaces:
- db/: Supabase database implementations
"""

from infrastructure.db import SupabaseTemplateRepository, SupabaseWorkoutStore

__all__ = [
    "SupabaseWorkoutStore",
    "SupabaseTemplateRepository",
]
