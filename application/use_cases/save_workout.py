"""
SaveWorkout Use Case.

Validates a draft workout and persists the resulting Workout through the
workout store. Saving an id that already exists rewrites the whole record.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from application.exceptions import StoreWriteError
from application.ports import WorkoutRepository
from domain.models import DraftWorkout, Workout, WorkoutValidationError
from domain.services.workout_session import validate_for_save

logger = logging.getLogger(__name__)


@dataclass
class SaveWorkoutResult:
    """Result of the SaveWorkout use case execution."""

    success: bool
    workout: Optional[Workout] = None
    workout_id: Optional[str] = None
    error: Optional[str] = None
    validation_error: Optional[WorkoutValidationError] = None


class SaveWorkoutUseCase:
    """
    Use case for saving a draft workout.

    Orchestrates the following workflow:
    1. Validate the draft (first failing rule wins)
    2. Persist the validated Workout via the store
    3. Return the saved Workout

    On any failure the caller's draft is left as it was, so the user can fix
    it or simply retry.

    Usage:
        >>> use_case = SaveWorkoutUseCase(workout_repo=workout_repo)
        >>> result = await use_case.execute(draft)
        >>> if result.success:
        ...     print(f"Saved workout: {result.workout_id}")
    """

    def __init__(
        self,
        workout_repo: WorkoutRepository,
    ) -> None:
        """
        Initialize the use case with required dependencies.

        Args:
            workout_repo: Store for persisting workouts
        """
        self._workout_repo = workout_repo

    async def execute(self, draft: DraftWorkout) -> SaveWorkoutResult:
        """
        Execute the save workout workflow.

        Args:
            draft: Draft to validate and save

        Returns:
            SaveWorkoutResult with success status and saved workout
        """
        # Step 1: Validate
        validation = validate_for_save(draft)
        if not validation.success:
            error = validation.error
            logger.warning(f"Workout {draft.id} rejected: {error.code.value}")
            return SaveWorkoutResult(
                success=False,
                workout_id=draft.id,
                error=error.message,
                validation_error=error,
            )

        workout = validation.workout

        # Step 2: Persist
        try:
            await self._workout_repo.save_workout(workout)
        except StoreWriteError as e:
            logger.error(f"Failed to save workout {workout.id}: {e}")
            return SaveWorkoutResult(
                success=False,
                workout_id=workout.id,
                error=str(e),
            )

        logger.info(
            f"Workout saved successfully: {workout.id} "
            f"({workout.exercise_count} exercises, {workout.total_sets} sets)"
        )
        return SaveWorkoutResult(
            success=True,
            workout=workout,
            workout_id=workout.id,
        )
