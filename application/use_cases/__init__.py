"""
Application Use Cases for the workout log.

This package contains application-level use cases that orchestrate domain
logic and the workout store port. Use cases are the entry points for
business operations:
- SaveWorkoutUseCase: validate a draft and persist it
- GetWorkoutUseCase: list past workouts, view one in detail
- DeleteWorkoutUseCase: remove a workout

Dependencies are injected via constructors for testability, and use cases
report failures through result dataclasses rather than raising.

Usage:
    from application.use_cases import SaveWorkoutUseCase, GetWorkoutUseCase

    save_use_case = SaveWorkoutUseCase(workout_repo=workout_repo)
    result = await save_use_case.execute(draft)

    get_use_case = GetWorkoutUseCase(workout_repo=workout_repo)
    listing = await get_use_case.list_workouts()
"""

from application.use_cases.delete_workout import (
    DeleteWorkoutResult,
    DeleteWorkoutUseCase,
)
from application.use_cases.get_workout import (
    GetWorkoutResult,
    GetWorkoutUseCase,
    ListWorkoutsResult,
)
from application.use_cases.save_workout import (
    SaveWorkoutResult,
    SaveWorkoutUseCase,
)

__all__ = [
    # SaveWorkout
    "SaveWorkoutUseCase",
    "SaveWorkoutResult",
    # GetWorkout
    "GetWorkoutUseCase",
    "GetWorkoutResult",
    "ListWorkoutsResult",
    # DeleteWorkout
    "DeleteWorkoutUseCase",
    "DeleteWorkoutResult",
]
