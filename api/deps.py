"""
FastAPI Dependency Providers for the workout log.

This module provides FastAPI dependency injection functions that return
interface types (Protocols) rather than concrete implementations. This
enables clean separation of concerns and easy testing with fake
implementations.

Architecture:
- Settings and the key-value backend are cached per-process (lru_cache),
  so the in-memory backend keeps its data across requests
- The workout store and use cases are created per-request

Usage in routers:
    from api.deps import get_workout_repo
    from application.ports import WorkoutRepository

    @router.get("/workouts")
    async def list_workouts(
        workout_repo: WorkoutRepository = Depends(get_workout_repo),
    ):
        return await workout_repo.list_workouts()

Testing:
    # Override dependencies in tests
    app.dependency_overrides[get_key_value_store] = lambda: InMemoryKeyValueStore()
"""

from functools import lru_cache

from fastapi import Depends

# Protocol types (interfaces)
from application.ports import KeyValueStore, WorkoutRepository

# Use cases
from application.use_cases import (
    DeleteWorkoutUseCase,
    GetWorkoutUseCase,
    SaveWorkoutUseCase,
)

# Concrete implementations
from infrastructure import (
    FileKeyValueStore,
    InMemoryKeyValueStore,
    KeyValueWorkoutStore,
)

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
# Storage Providers
# =============================================================================


@lru_cache
def _build_key_value_store(storage_backend: str, storage_dir: str) -> KeyValueStore:
    """Create the key-value backend once per (backend, directory) pair."""
    if storage_backend == "file":
        return FileKeyValueStore(storage_dir)
    return InMemoryKeyValueStore()


def get_key_value_store(
    settings: Settings = Depends(get_settings),
) -> KeyValueStore:
    """
    Get the key-value backend configured in settings (cached).

    Returns:
        KeyValueStore: In-memory or file-backed store
    """
    return _build_key_value_store(settings.storage_backend, settings.storage_dir)


def get_workout_repo(
    backend: KeyValueStore = Depends(get_key_value_store),
    settings: Settings = Depends(get_settings),
) -> WorkoutRepository:
    """
    Get workout store instance.

    Returns:
        WorkoutRepository: Key-value implementation of the workout store
    """
    return KeyValueWorkoutStore(backend, prefix=settings.workout_key_prefix)


# =============================================================================
# Use Case Providers
# =============================================================================


def get_save_workout_use_case(
    workout_repo: WorkoutRepository = Depends(get_workout_repo),
) -> SaveWorkoutUseCase:
    """Get SaveWorkoutUseCase with injected store."""
    return SaveWorkoutUseCase(workout_repo=workout_repo)


def get_get_workout_use_case(
    workout_repo: WorkoutRepository = Depends(get_workout_repo),
) -> GetWorkoutUseCase:
    """Get GetWorkoutUseCase with injected store."""
    return GetWorkoutUseCase(workout_repo=workout_repo)


def get_delete_workout_use_case(
    workout_repo: WorkoutRepository = Depends(get_workout_repo),
) -> DeleteWorkoutUseCase:
    """Get DeleteWorkoutUseCase with injected store."""
    return DeleteWorkoutUseCase(workout_repo=workout_repo)
