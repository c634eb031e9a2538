"""
FastAPI Dependency Providers for the Schedule API.

This module provides FastAPI dependency injection functions that return
interface types (Protocols) rather than concrete implementations.

Architecture:
- Settings and Supabase client are cached per-process (lru_cache)
- Repository providers create new instances per-request
- Use case providers wire repositories and settings together
- Auth providers extract user from headers

Usage in routers:
    from api.deps import get_copy_workouts_use_case, get_current_user

    @router.post("/copies")
    def copy(
        user_id: str = Depends(get_current_user),
        use_case: CopyWorkoutsUseCase = Depends(get_copy_workouts_use_case),
    ):
        ...

Testing:
    # Override dependencies in tests
    app.dependency_overrides[get_workout_store] = lambda: FakeWorkoutStore()
"""

from functools import lru_cache
from typing import Optional

from fastapi import Depends, Header, HTTPException
from supabase import Client, create_client

from application.ports import TemplateRepository, WorkoutStore
from application.use_cases import (
    CopyExercisesUseCase,
    CopyWorkoutsUseCase,
    SchedulePatternUseCase,
)
from infrastructure.db import SupabaseTemplateRepository, SupabaseWorkoutStore
from backend.settings import Settings, get_settings as _get_settings


# =============================================================================
# Settings Provider
# =============================================================================


def get_settings() -> Settings:
    """
    Get application settings.

    Returns cached Settings instance from backend.settings.
    Use this as a FastAPI dependency for settings access.

    Returns:
        Settings: Application settings instance
    """
    return _get_settings()


# =============================================================================
# Supabase Client Provider
# =============================================================================


@lru_cache
def get_supabase_client() -> Optional[Client]:
    """
    Get Supabase client instance (cached).

    Creates a Supabase client using credentials from settings.
    Returns None if credentials are not configured.

    Returns:
        Client: Supabase client instance, or None if not configured
    """
    settings = _get_settings()

    if not settings.supabase_url or not settings.supabase_key:
        return None

    return create_client(settings.supabase_url, settings.supabase_key)


def get_supabase_client_required() -> Client:
    """
    Get Supabase client instance, raising if not configured.

    Raises:
        HTTPException: 503 if Supabase is not configured
    """
    client = get_supabase_client()
    if client is None:
        raise HTTPException(
            status_code=503,
            detail="Database not available. Supabase credentials not configured.",
        )
    return client


# =============================================================================
# Repository Providers
# =============================================================================


def get_workout_store(
    client: Client = Depends(get_supabase_client_required),
) -> WorkoutStore:
    """
    Get WorkoutStore implementation.

    Returns a SupabaseWorkoutStore instance with injected client.
    The return type is the Protocol to enable easy mocking.
    """
    return SupabaseWorkoutStore(client)


def get_template_repo(
    client: Client = Depends(get_supabase_client_required),
) -> TemplateRepository:
    """
    Get TemplateRepository implementation.

    Returns a SupabaseTemplateRepository instance with injected client.
    """
    return SupabaseTemplateRepository(client)


# =============================================================================
# Use Case Providers
# =============================================================================


def get_schedule_pattern_use_case(
    workout_store: WorkoutStore = Depends(get_workout_store),
    template_repo: TemplateRepository = Depends(get_template_repo),
    settings: Settings = Depends(get_settings),
) -> SchedulePatternUseCase:
    """Get SchedulePatternUseCase configured from settings."""
    return SchedulePatternUseCase(
        workout_store=workout_store,
        template_repo=template_repo,
        max_occurrences=settings.max_occurrences,
        preview_days=settings.preview_days,
        default_time=settings.default_workout_time,
    )


def get_copy_workouts_use_case(
    workout_store: WorkoutStore = Depends(get_workout_store),
) -> CopyWorkoutsUseCase:
    return CopyWorkoutsUseCase(workout_store=workout_store)


def get_copy_exercises_use_case(
    workout_store: WorkoutStore = Depends(get_workout_store),
) -> CopyExercisesUseCase:
    return CopyExercisesUseCase(workout_store=workout_store)


# =============================================================================
# Authentication Providers
# =============================================================================


async def get_current_user(
    authorization: Optional[str] = Header(None),
    settings: Settings = Depends(get_settings),
) -> str:
    """
    Get the current authenticated user ID.

    Extracts user ID from the Authorization header.
    Supports Bearer token authentication via Clerk.

    Args:
        authorization: Bearer token header

    Returns:
        str: User ID from authentication

    Raises:
        HTTPException: 401 if authentication fails
        RuntimeError: If auth stub is used in production
    """
    # Block production deployment with the auth stub
    if settings.is_production:
        raise RuntimeError(
            "Authentication stub cannot be used in production. "
            "Implement Clerk JWT validation before deploying."
        )

    if not authorization:
        raise HTTPException(
            status_code=401,
            detail="Missing authorization header",
        )

    if not authorization.startswith("Bearer "):
        raise HTTPException(
            status_code=401,
            detail="Invalid authorization header format",
        )

    token = authorization[7:]  # Remove "Bearer " prefix

    # TODO: validate the token against Clerk's JWKS for settings.clerk_domain
    if not token:
        raise HTTPException(
            status_code=401,
            detail="Invalid token",
        )

    # Stub: the token is the user id
    return token


# =============================================================================
# Exports
# =============================================================================

__all__ = [
    # Settings
    "get_settings",
    # Database
    "get_supabase_client",
    "get_supabase_client_required",
    # Repositories
    "get_workout_store",
    "get_template_repo",
    # Use cases
    "get_schedule_pattern_use_case",
    "get_copy_workouts_use_case",
    "get_copy_exercises_use_case",
    # Authentication
    "get_current_user",
]
