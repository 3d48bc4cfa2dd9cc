"""
Draft models: the in-memory, not-yet-validated shape of a workout.

Drafts mirror the Workout aggregate but keep raw user input: names are not
trimmed, the exercise list may be empty and set fields are plain text. They
are frozen; editing a draft always produces a new value
(see domain.services.workout_session).
"""

from datetime import datetime
from typing import Tuple

from pydantic import BaseModel, Field, field_validator, model_validator

from domain.models.workout import ensure_utc


class DraftSet(BaseModel):
    """A set as typed by the user; empty strings mean "not filled in yet"."""

    reps: str = Field(default="", description="Raw reps input")
    weight: str = Field(default="", description="Raw weight input (kg)")

    model_config = {"frozen": True}


class DraftExercise(BaseModel):
    """An exercise being composed. New exercises start with one empty set."""

    id: str = Field(..., min_length=1)
    name: str = Field(default="", description="Raw name input, untrimmed")
    sets: Tuple[DraftSet, ...] = Field(default_factory=lambda: (DraftSet(),))

    model_config = {"frozen": True}


class DraftWorkout(BaseModel):
    """
    A workout being composed.

    The id is assigned when the draft is started so that UI keys stay stable
    before the first save.
    """

    id: str = Field(..., min_length=1)
    date: datetime
    exercises: Tuple[DraftExercise, ...] = Field(default_factory=tuple)

    @field_validator("date")
    @classmethod
    def validate_date(cls, v: datetime) -> datetime:
        return ensure_utc(v)

    @model_validator(mode="after")
    def validate_unique_exercise_ids(self) -> "DraftWorkout":
        ids = [exercise.id for exercise in self.exercises]
        if len(ids) != len(set(ids)):
            raise ValueError("Exercise ids must be unique within a workout")
        return self

    @property
    def is_empty(self) -> bool:
        return not self.exercises

    model_config = {"frozen": True}
