"""
Workout Repository Interface (Port).

This module defines the abstract interface for workout persistence
operations (the workout store). The default implementation keeps one JSON
record per workout in a KeyValueStore.
"""
from typing import List, Optional, Protocol

from domain.models import Workout


class WorkoutRepository(Protocol):
    """
    Abstract interface for workout persistence operations.

    Only validated Workout values are accepted; drafts never reach storage.
    There is no locking: a single caller is assumed, and no two writes for
    the same workout id are expected to race.
    """

    async def list_workouts(self) -> List[Workout]:
        """
        List all stored workouts, most recent date first.

        Records that cannot be deserialized are skipped.

        Returns:
            Workouts sorted by date descending

        Raises:
            StoreUnavailable: If the backend could not be read
        """
        ...

    async def get_workout(self, workout_id: str) -> Optional[Workout]:
        """
        Get a single workout by ID.

        Returns:
            The workout, or None if absent or unreadable

        Raises:
            StoreUnavailable: If the backend could not be read
        """
        ...

    async def save_workout(self, workout: Workout) -> None:
        """
        Write a workout, replacing any record with the same id.

        Raises:
            StoreWriteError: If the backend write failed
        """
        ...

    async def delete_workout(self, workout_id: str) -> None:
        """
        Delete a workout. Deleting an unknown id is not an error.

        Raises:
            StoreWriteError: If the backend delete failed
        """
        ...
