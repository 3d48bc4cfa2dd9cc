"""
Domain models for the workout log.

These models are pure domain values, independent of storage and API
concerns:
- Workout: The aggregate root, a validated record of one session
- Exercise: A named group of sets within a Workout
- WorkoutSet: A validated rep/weight pair
- DraftWorkout / DraftExercise / DraftSet: The editable, unvalidated shape
  of a workout while it is being composed
- WorkoutValidationError: Why a draft could not be saved

Usage:
    >>> from domain.models import Exercise, Workout, WorkoutSet

    >>> workout = Workout(
    ...     id="w-1",
    ...     date="2024-03-01T09:30:00Z",
    ...     exercises=[
    ...         Exercise(
    ...             id="e-1",
    ...             name="Bench Press",
    ...             sets=[WorkoutSet(reps=10, weight=20)],
    ...         )
    ...     ],
    ... )

    >>> # Serialize to JSON
    >>> json_str = workout.model_dump_json(indent=2)

    >>> # Deserialize from JSON
    >>> workout = Workout.model_validate_json(json_str)
"""

from domain.models.draft import DraftExercise, DraftSet, DraftWorkout
from domain.models.exercise import Exercise
from domain.models.validation import ValidationErrorCode, WorkoutValidationError
from domain.models.workout import Workout, ensure_utc
from domain.models.workout_set import WorkoutSet

__all__ = [
    # Persisted entities
    "Workout",
    "Exercise",
    "WorkoutSet",
    # Drafts
    "DraftWorkout",
    "DraftExercise",
    "DraftSet",
    # Validation
    "ValidationErrorCode",
    "WorkoutValidationError",
    # Helpers
    "ensure_utc",
]
