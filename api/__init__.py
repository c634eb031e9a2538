"""
API package for the Schedule API.

This package contains:
- deps.py: FastAPI dependency providers for DI
- errors.py: HTTP translations of scheduling errors
- schemas/: Request and response models
- routers/: API route handlers
"""

# Re-export dependency providers for convenient access
from api.deps import (
    get_settings,
    get_supabase_client,
    get_supabase_client_required,
    get_workout_store,
    get_template_repo,
    get_current_user,
)

__all__ = [
    # Settings
    "get_settings",
    # Database
    "get_supabase_client",
    "get_supabase_client_required",
    # Repositories
    "get_workout_store",
    "get_template_repo",
    # Authentication
    "get_current_user",
]
