"""
Exercise value object for a logged workout.
"""

from typing import Tuple

from pydantic import BaseModel, Field, field_validator

from domain.models.workout_set import WorkoutSet


class Exercise(BaseModel):
    """
    Value object representing a named group of sets within a workout.

    Sets keep their entry order. The name is stored trimmed; a name that is
    blank after trimming is rejected.

    Examples:
        >>> exercise = Exercise(
        ...     id="ex-1",
        ...     name="  Bench Press ",
        ...     sets=[WorkoutSet(reps=10, weight=20)],
        ... )
        >>> exercise.name
        'Bench Press'
        >>> exercise.set_count
        1
    """

    id: str = Field(..., min_length=1, description="Identifier, unique within its workout")
    name: str = Field(..., description="Exercise name (trimmed, non-empty)")
    sets: Tuple[WorkoutSet, ...] = Field(
        ..., min_length=1, description="Performed sets in entry order"
    )

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Trim the name and reject blanks."""
        name = v.strip()
        if not name:
            raise ValueError("Exercise name must not be blank")
        return name

    @property
    def set_count(self) -> int:
        return len(self.sets)

    def __str__(self) -> str:
        return f"{self.name} ({self.set_count} set{'s' if self.set_count != 1 else ''})"

    model_config = {"frozen": True}
