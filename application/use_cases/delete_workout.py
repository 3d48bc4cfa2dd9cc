"""
DeleteWorkout Use Case.

Removes a workout from the store. Deleting a workout that was never saved
(or is already gone) succeeds.
"""
import logging
from dataclasses import dataclass
from typing import Optional

from application.exceptions import StoreWriteError
from application.ports import WorkoutRepository

logger = logging.getLogger(__name__)


@dataclass
class DeleteWorkoutResult:
    """Result of deleting a workout."""
    success: bool
    workout_id: str
    error: Optional[str] = None


class DeleteWorkoutUseCase:
    """Use case for deleting a workout by id."""

    def __init__(self, workout_repo: WorkoutRepository):
        self._workout_repo = workout_repo

    async def execute(self, workout_id: str) -> DeleteWorkoutResult:
        """
        Delete a workout.

        Args:
            workout_id: ID of the workout to delete

        Returns:
            DeleteWorkoutResult; success is False only on a backend failure
        """
        try:
            await self._workout_repo.delete_workout(workout_id)
        except StoreWriteError as e:
            logger.error(f"Failed to delete workout {workout_id}: {e}")
            return DeleteWorkoutResult(
                success=False,
                workout_id=workout_id,
                error=str(e),
            )

        logger.info(f"Workout deleted: {workout_id}")
        return DeleteWorkoutResult(success=True, workout_id=workout_id)
