"""
API package for the workout log.

This package contains:
- deps.py: FastAPI dependency providers for DI
- routers/: API route handlers
"""

# Re-export dependency providers for convenient access
from api.deps import (
    get_settings,
    get_key_value_store,
    get_workout_repo,
    get_save_workout_use_case,
    get_get_workout_use_case,
    get_delete_workout_use_case,
)

__all__ = [
    # Settings
    "get_settings",
    # Storage
    "get_key_value_store",
    "get_workout_repo",
    # Use cases
    "get_save_workout_use_case",
    "get_get_workout_use_case",
    "get_delete_workout_use_case",
]
