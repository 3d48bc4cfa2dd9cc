"""
Domain layer for the workout log.

This package contains pure domain models and services that are independent
of infrastructure concerns (key-value storage, API, configuration).
"""

from domain.models import (
    DraftExercise,
    DraftSet,
    DraftWorkout,
    Exercise,
    ValidationErrorCode,
    Workout,
    WorkoutSet,
    WorkoutValidationError,
)

__all__ = [
    "DraftExercise",
    "DraftSet",
    "DraftWorkout",
    "Exercise",
    "ValidationErrorCode",
    "Workout",
    "WorkoutSet",
    "WorkoutValidationError",
]
