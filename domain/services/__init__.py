"""
Domain services for the workout log.

- workout_session: pure draft transformations and save-time validation
"""

from domain.services.workout_session import (
    ExerciseNotFoundError,
    SetIndexError,
    ValidationResult,
    add_exercise,
    add_set,
    remove_exercise,
    remove_set,
    rename_exercise,
    set_date,
    start_draft,
    update_set_field,
    validate_for_save,
)

__all__ = [
    "start_draft",
    "set_date",
    "add_exercise",
    "remove_exercise",
    "rename_exercise",
    "add_set",
    "remove_set",
    "update_set_field",
    "validate_for_save",
    "ValidationResult",
    "ExerciseNotFoundError",
    "SetIndexError",
]
