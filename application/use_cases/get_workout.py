"""
Get Workout Use Case.

This use case handles reading workouts back from the store: the list of
past sessions and a single session in detail.
"""
import logging
from dataclasses import dataclass, field
from typing import List, Optional

from application.exceptions import StoreUnavailable
from application.ports import WorkoutRepository
from domain.models import Workout

logger = logging.getLogger(__name__)


@dataclass
class GetWorkoutResult:
    """Result of getting a single workout."""
    success: bool
    workout: Optional[Workout] = None
    error: Optional[str] = None
    store_available: bool = True


@dataclass
class ListWorkoutsResult:
    """Result of listing workouts."""
    success: bool
    workouts: List[Workout] = field(default_factory=list)
    count: int = 0
    error: Optional[str] = None
    store_available: bool = True


class GetWorkoutUseCase:
    """
    Use case for retrieving workouts.

    Listing never fails outright: if the store cannot be read, the result is
    an empty list with store_available=False, and the failure is logged.
    """

    def __init__(self, workout_repo: WorkoutRepository):
        """
        Initialize with required dependencies.

        Args:
            workout_repo: Store for workout persistence
        """
        self._workout_repo = workout_repo

    async def get_workout(self, workout_id: str) -> GetWorkoutResult:
        """
        Get a single workout by ID.

        Args:
            workout_id: ID of the workout to retrieve

        Returns:
            GetWorkoutResult with the workout or an error
        """
        try:
            workout = await self._workout_repo.get_workout(workout_id)
        except StoreUnavailable as e:
            logger.error(f"Could not read workout {workout_id}: {e}")
            return GetWorkoutResult(
                success=False,
                error="Workout storage unavailable",
                store_available=False,
            )

        if workout is None:
            return GetWorkoutResult(
                success=False,
                error="Workout not found",
            )
        return GetWorkoutResult(success=True, workout=workout)

    async def list_workouts(self) -> ListWorkoutsResult:
        """
        List all workouts, most recent first.

        Returns:
            ListWorkoutsResult with the workout list (empty if the store
            is unavailable)
        """
        try:
            workouts = await self._workout_repo.list_workouts()
        except StoreUnavailable as e:
            logger.warning(f"No workouts found or error loading: {e}")
            return ListWorkoutsResult(
                success=True,
                workouts=[],
                count=0,
                error=str(e),
                store_available=False,
            )

        return ListWorkoutsResult(
            success=True,
            workouts=workouts,
            count=len(workouts),
        )
