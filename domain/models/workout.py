"""
Workout aggregate root - a persisted record of one training session.
"""

from datetime import datetime, timezone
from typing import List, Tuple

from pydantic import BaseModel, Field, field_validator, model_validator

from domain.models.exercise import Exercise


def ensure_utc(value: datetime) -> datetime:
    """
    Normalize a timestamp to timezone-aware UTC.

    Naive datetimes are interpreted as UTC; aware ones are converted.
    """
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class Workout(BaseModel):
    """
    Aggregate root representing a validated, persistable workout.

    A Workout is produced by validating a DraftWorkout
    (see domain.services.workout_session.validate_for_save) or by reading a
    stored record back. It is immutable; edits happen on a draft and are
    saved as a full rewrite under the same id.

    Examples:
        >>> from domain.models import Exercise, Workout, WorkoutSet

        >>> workout = Workout(
        ...     id="w-1",
        ...     date="2024-03-01T09:30:00Z",
        ...     exercises=[
        ...         Exercise(id="e-1", name="Squat", sets=[WorkoutSet(reps=5, weight=100)]),
        ...     ],
        ... )
        >>> workout.exercise_count
        1

        >>> # Serialize to JSON
        >>> json_str = workout.model_dump_json()

        >>> # Deserialize from JSON
        >>> workout = Workout.model_validate_json(json_str)
    """

    # Identity
    id: str = Field(..., min_length=1, description="Stable unique identifier")

    # When the session happened (chosen by the user, not necessarily "now")
    date: datetime = Field(..., description="Session timestamp, normalized to UTC")

    # Structure
    exercises: Tuple[Exercise, ...] = Field(
        ..., min_length=1, description="Exercises in entry order"
    )

    @field_validator("date")
    @classmethod
    def validate_date(cls, v: datetime) -> datetime:
        return ensure_utc(v)

    @model_validator(mode="after")
    def validate_unique_exercise_ids(self) -> "Workout":
        """Exercise ids must be unique within the workout."""
        ids = [exercise.id for exercise in self.exercises]
        if len(ids) != len(set(ids)):
            raise ValueError("Exercise ids must be unique within a workout")
        return self

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------

    @property
    def exercise_count(self) -> int:
        return len(self.exercises)

    @property
    def total_sets(self) -> int:
        """
        Get total number of sets across all exercises.

        Returns:
            Total set count.
        """
        return sum(exercise.set_count for exercise in self.exercises)

    @property
    def exercise_names(self) -> List[str]:
        """
        Get exercise names in entry order.

        Returns:
            List of exercise names.
        """
        return [exercise.name for exercise in self.exercises]

    def get_exercise(self, exercise_id: str) -> Exercise:
        """
        Look up an exercise by id.

        Raises:
            KeyError: If no exercise has that id.
        """
        for exercise in self.exercises:
            if exercise.id == exercise_id:
                return exercise
        raise KeyError(exercise_id)

    def __str__(self) -> str:
        count = self.exercise_count
        return f"{self.date:%a %d %b %Y} ({count} exercise{'s' if count != 1 else ''})"

    model_config = {"frozen": True}
