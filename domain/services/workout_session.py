"""
Workout session model: editing a draft workout and validating it for save.

Every operation here is a pure transformation. It takes a DraftWorkout and
returns a new DraftWorkout, leaving the caller's value untouched, so an
orchestrating layer can keep previous drafts around for undo or diffing.
Whoever drives the session (an API handler, a UI) owns the current draft
and threads it through these functions.

Usage:
    >>> from domain.services.workout_session import (
    ...     start_draft, add_exercise, rename_exercise, update_set_field,
    ...     validate_for_save,
    ... )

    >>> draft = add_exercise(start_draft())
    >>> exercise_id = draft.exercises[0].id
    >>> draft = rename_exercise(draft, exercise_id, "Bench Press")
    >>> draft = update_set_field(draft, exercise_id, 0, "reps", "10")
    >>> result = validate_for_save(draft)
    >>> result.success
    True
"""

import logging
import math
import re
import uuid
from dataclasses import dataclass
from datetime import date as date_type
from datetime import datetime, time, timezone
from typing import Callable, Literal, Optional, Union

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

logger = logging.getLogger(__name__)

SetField = Literal["reps", "weight"]

_INTEGER_RE = re.compile(r"^[+-]?\d+$", re.ASCII)
_NUMBER_RE = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?$", re.ASCII)


class ExerciseNotFoundError(LookupError):
    """Raised when an edit targets an exercise id the draft does not contain."""

    def __init__(self, exercise_id: str):
        super().__init__(f"Exercise not found in draft: {exercise_id}")
        self.exercise_id = exercise_id


class SetIndexError(IndexError):
    """Raised when an edit targets a set index outside the exercise's sets."""

    def __init__(self, exercise_id: str, set_index: int, set_count: int):
        super().__init__(
            f"Set index {set_index} out of range for exercise {exercise_id} "
            f"({set_count} sets)"
        )
        self.exercise_id = exercise_id
        self.set_index = set_index
        self.set_count = set_count


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validate_for_save: either a Workout or the first error."""

    success: bool
    workout: Optional[Workout] = None
    error: Optional[WorkoutValidationError] = None


def _new_id() -> str:
    return str(uuid.uuid4())


# =============================================================================
# Draft lifecycle
# =============================================================================


def start_draft(now: Optional[datetime] = None) -> DraftWorkout:
    """
    Start a new, empty draft.

    Args:
        now: Session timestamp; defaults to the current UTC time

    Returns:
        DraftWorkout with a fresh id and no exercises
    """
    if now is None:
        now = datetime.now(timezone.utc)
    return DraftWorkout(id=_new_id(), date=now, exercises=())


def set_date(draft: DraftWorkout, date: Union[datetime, date_type]) -> DraftWorkout:
    """
    Replace the draft's date.

    A calendar date (as picked in a date input) becomes midnight UTC of
    that day.
    """
    if not isinstance(date, datetime):
        date = datetime.combine(date, time.min, tzinfo=timezone.utc)
    return DraftWorkout(id=draft.id, date=date, exercises=draft.exercises)


# =============================================================================
# Exercise edits
# =============================================================================


def add_exercise(draft: DraftWorkout) -> DraftWorkout:
    """Append a new unnamed exercise holding one empty set."""
    exercise = DraftExercise(id=_new_id(), name="", sets=(DraftSet(),))
    return draft.model_copy(update={"exercises": draft.exercises + (exercise,)})


def remove_exercise(draft: DraftWorkout, exercise_id: str) -> DraftWorkout:
    """Remove an exercise; the others keep their order. Unknown ids are ignored."""
    remaining = tuple(ex for ex in draft.exercises if ex.id != exercise_id)
    return draft.model_copy(update={"exercises": remaining})


def rename_exercise(draft: DraftWorkout, exercise_id: str, name: str) -> DraftWorkout:
    """Replace an exercise's name. Trimming is left to validate_for_save."""
    return _update_exercise(
        draft, exercise_id, lambda ex: ex.model_copy(update={"name": name})
    )


# =============================================================================
# Set edits
# =============================================================================


def add_set(draft: DraftWorkout, exercise_id: str) -> DraftWorkout:
    """Append an empty set to an exercise."""
    return _update_exercise(
        draft,
        exercise_id,
        lambda ex: ex.model_copy(update={"sets": ex.sets + (DraftSet(),)}),
    )


def remove_set(draft: DraftWorkout, exercise_id: str, set_index: int) -> DraftWorkout:
    """Remove the set at set_index (0-based) from an exercise."""

    def _remove(ex: DraftExercise) -> DraftExercise:
        _check_set_index(ex, set_index)
        sets = ex.sets[:set_index] + ex.sets[set_index + 1:]
        return ex.model_copy(update={"sets": sets})

    return _update_exercise(draft, exercise_id, _remove)


def update_set_field(
    draft: DraftWorkout,
    exercise_id: str,
    set_index: int,
    field: SetField,
    value: str,
) -> DraftWorkout:
    """
    Set the raw reps or weight text of one set.

    Args:
        draft: Current draft
        exercise_id: Exercise owning the set
        set_index: 0-based index into that exercise's sets
        field: "reps" or "weight"
        value: Raw user input, stored as-is

    Raises:
        ExerciseNotFoundError: Unknown exercise_id
        SetIndexError: set_index out of bounds
        ValueError: field is not "reps" or "weight"
    """
    if field not in ("reps", "weight"):
        raise ValueError(f"Unknown set field: {field!r}")

    def _update(ex: DraftExercise) -> DraftExercise:
        _check_set_index(ex, set_index)
        updated = ex.sets[set_index].model_copy(update={field: value})
        sets = ex.sets[:set_index] + (updated,) + ex.sets[set_index + 1:]
        return ex.model_copy(update={"sets": sets})

    return _update_exercise(draft, exercise_id, _update)


def _check_set_index(exercise: DraftExercise, set_index: int) -> None:
    if not 0 <= set_index < len(exercise.sets):
        raise SetIndexError(exercise.id, set_index, len(exercise.sets))


def _update_exercise(
    draft: DraftWorkout,
    exercise_id: str,
    change: Callable[[DraftExercise], DraftExercise],
) -> DraftWorkout:
    for position, exercise in enumerate(draft.exercises):
        if exercise.id == exercise_id:
            exercises = (
                draft.exercises[:position]
                + (change(exercise),)
                + draft.exercises[position + 1:]
            )
            return draft.model_copy(update={"exercises": exercises})
    raise ExerciseNotFoundError(exercise_id)


# =============================================================================
# Validation
# =============================================================================


def parse_reps(raw: str) -> Optional[int]:
    """Parse reps text as a positive integer; None if it is not one."""
    text = raw.strip()
    if not _INTEGER_RE.match(text):
        return None
    try:
        reps = int(text)
    except ValueError:
        # Digit strings beyond the interpreter's int conversion limit
        return None
    return reps if reps > 0 else None


def parse_weight(raw: str) -> Optional[float]:
    """
    Parse weight text as a finite, non-negative number.

    Raises:
        ValueError: If the text is not such a number. Callers check for
            blank input (bodyweight) before calling.
    """
    text = raw.strip()
    if not _NUMBER_RE.match(text):
        raise ValueError(f"Not a number: {raw!r}")
    weight = float(text)
    if not math.isfinite(weight) or weight < 0:
        raise ValueError(f"Weight out of range: {raw!r}")
    # -0.0 would otherwise round-trip as "-0.0"
    return weight + 0.0


def _validate_set(exercise_id: str, set_index: int, draft_set: DraftSet) -> WorkoutSet:
    reps = parse_reps(draft_set.reps)
    if reps is None:
        raise WorkoutValidationError(
            ValidationErrorCode.INVALID_REPS,
            exercise_id=exercise_id,
            set_index=set_index,
        )

    weight: Optional[float] = None
    if draft_set.weight.strip():
        try:
            weight = parse_weight(draft_set.weight)
        except ValueError:
            raise WorkoutValidationError(
                ValidationErrorCode.INVALID_WEIGHT,
                exercise_id=exercise_id,
                set_index=set_index,
            ) from None

    return WorkoutSet(reps=reps, weight=weight)


def _validate_exercise(exercise: DraftExercise) -> Exercise:
    name = exercise.name.strip()
    if not name:
        raise WorkoutValidationError(
            ValidationErrorCode.MISSING_EXERCISE_NAME,
            exercise_id=exercise.id,
        )
    # An exercise with its last set removed has nothing to record
    if not exercise.sets:
        raise WorkoutValidationError(
            ValidationErrorCode.INVALID_REPS,
            exercise_id=exercise.id,
            set_index=0,
        )
    sets = [
        _validate_set(exercise.id, index, draft_set)
        for index, draft_set in enumerate(exercise.sets)
    ]
    return Exercise(id=exercise.id, name=name, sets=sets)


def validate_for_save(draft: DraftWorkout) -> ValidationResult:
    """
    Validate a draft and convert it into a persistable Workout.

    Rules are checked in order and the first violation wins:
    1. At least one exercise (NO_EXERCISES)
    2. Per exercise, in order: non-blank name (MISSING_EXERCISE_NAME)
    3. Per set, in order: reps is an integer > 0 (INVALID_REPS), then a
       non-blank weight is a number >= 0 (INVALID_WEIGHT)

    The draft is never modified.

    Returns:
        ValidationResult carrying the Workout on success, or the error
    """
    try:
        if not draft.exercises:
            raise WorkoutValidationError(ValidationErrorCode.NO_EXERCISES)
        exercises = [_validate_exercise(exercise) for exercise in draft.exercises]
    except WorkoutValidationError as e:
        logger.debug(f"Draft {draft.id} failed validation: {e!r}")
        return ValidationResult(success=False, error=e)

    workout = Workout(id=draft.id, date=draft.date, exercises=exercises)
    return ValidationResult(success=True, workout=workout)
