"""
Router package for the Schedule API.

This package contains all API routers organized by domain:
- health: Health check endpoints
- patterns: Recurring pattern presets, previews and materialization
- copies: Workout, day and week copies
- workouts: Exercise copies between scheduled workouts
"""

from api.routers.health import router as health_router
from api.routers.patterns import router as patterns_router
from api.routers.copies import router as copies_router
from api.routers.workouts import router as workouts_router

__all__ = [
    "health_router",
    "patterns_router",
    "copies_router",
    "workouts_router",
]
