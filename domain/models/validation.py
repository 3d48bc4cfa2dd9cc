"""
Validation errors raised when a draft cannot be saved.
"""

from enum import Enum
from typing import Any, Dict, Optional


class ValidationErrorCode(str, Enum):
    """Reason a draft was rejected. Only the first violation is reported."""

    NO_EXERCISES = "no_exercises"
    MISSING_EXERCISE_NAME = "missing_exercise_name"
    INVALID_REPS = "invalid_reps"
    INVALID_WEIGHT = "invalid_weight"


DEFAULT_MESSAGES = {
    ValidationErrorCode.NO_EXERCISES: "Please add at least one exercise",
    ValidationErrorCode.MISSING_EXERCISE_NAME: "Please enter exercise name",
    ValidationErrorCode.INVALID_REPS: "Reps must be greater than 0",
    ValidationErrorCode.INVALID_WEIGHT: "Weight must be 0 or greater",
}


class WorkoutValidationError(Exception):
    """
    Raised (or returned) when a draft workout fails save-time validation.

    Attributes:
        code: Which rule was violated
        message: User-facing description
        exercise_id: Offending exercise, when the rule is per exercise/set
        set_index: 0-based offending set, when the rule is per set
    """

    def __init__(
        self,
        code: ValidationErrorCode,
        message: Optional[str] = None,
        *,
        exercise_id: Optional[str] = None,
        set_index: Optional[int] = None,
    ):
        self.code = code
        self.message = message or DEFAULT_MESSAGES[code]
        self.exercise_id = exercise_id
        self.set_index = set_index
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code.value,
            "message": self.message,
            "exercise_id": self.exercise_id,
            "set_index": self.set_index,
        }

    def __repr__(self) -> str:
        return (
            f"WorkoutValidationError(code={self.code.value!r}, "
            f"exercise_id={self.exercise_id!r}, set_index={self.set_index!r})"
        )
