"""
Key-value implementation of WorkoutRepository (the workout store).

Each workout is stored as one JSON string under "workout:<id>" in an
injected KeyValueStore backend. Backend exceptions are mapped to
StoreUnavailable (reads) and StoreWriteError (writes).
"""
import asyncio
import logging
from typing import List, Optional

from application.exceptions import StoreUnavailable, StoreWriteError
from application.ports import KeyValueStore
from domain.converters.record_converters import (
    WORKOUT_KEY_PREFIX,
    json_to_workout,
    workout_id_from_key,
    workout_key,
    workout_to_json,
)
from domain.models import Workout

logger = logging.getLogger(__name__)


class KeyValueWorkoutStore:
    """
    Workout store over a string key-value backend.

    The backend is injected via constructor so the same store logic runs
    against the in-memory backend in tests and the file backend in a
    deployment.
    """

    def __init__(self, backend: KeyValueStore, prefix: str = WORKOUT_KEY_PREFIX):
        """
        Initialize with a key-value backend.

        Args:
            backend: KeyValueStore instance (injected, not global)
            prefix: Key namespace for workout records
        """
        self._backend = backend
        self._prefix = prefix

    async def list_workouts(self) -> List[Workout]:
        """List all readable workouts, most recent date first."""
        try:
            keys = await self._backend.list_keys(self._prefix)
        except Exception as e:
            logger.error(f"Failed to list workout keys: {e}")
            raise StoreUnavailable(f"Failed to list workouts: {e}") from e

        keys = [key for key in keys if key.startswith(self._prefix)]
        try:
            values = await asyncio.gather(*(self._backend.get(key) for key in keys))
        except Exception as e:
            logger.error(f"Failed to fetch workout records: {e}")
            raise StoreUnavailable(f"Failed to fetch workouts: {e}") from e

        workouts: List[Workout] = []
        for key, value in zip(keys, values):
            workout = self._deserialize(key, value)
            if workout is not None:
                workouts.append(workout)

        # list.sort is stable, so equal dates keep their fetch order
        workouts.sort(key=lambda w: w.date, reverse=True)
        return workouts

    async def get_workout(self, workout_id: str) -> Optional[Workout]:
        """Get a single workout; None if it is absent or unreadable."""
        key = workout_key(workout_id, self._prefix)
        try:
            value = await self._backend.get(key)
        except Exception as e:
            logger.error(f"Failed to fetch workout {workout_id}: {e}")
            raise StoreUnavailable(f"Failed to fetch workout {workout_id}: {e}") from e
        return self._deserialize(key, value)

    async def save_workout(self, workout: Workout) -> None:
        """Write a workout, overwriting any record with the same id."""
        key = workout_key(workout.id, self._prefix)
        value = workout_to_json(workout)
        try:
            await self._backend.set(key, value)
        except Exception as e:
            raise StoreWriteError(f"Failed to save workout {workout.id}: {e}", key=key) from e
        logger.debug(f"Wrote {key} ({len(value)} bytes)")

    async def delete_workout(self, workout_id: str) -> None:
        """Delete a workout; unknown ids are a no-op."""
        key = workout_key(workout_id, self._prefix)
        try:
            await self._backend.delete(key)
        except Exception as e:
            raise StoreWriteError(f"Failed to delete workout {workout_id}: {e}", key=key) from e

    def _deserialize(self, key: str, value: Optional[str]) -> Optional[Workout]:
        """Parse a stored value, returning None for missing or corrupt records."""
        if value is None:
            return None
        try:
            expected_id = workout_id_from_key(key, self._prefix)
            workout = json_to_workout(value)
        except ValueError as e:
            logger.warning(f"Skipping corrupt workout record {key}: {e}")
            return None

        # A record filed under another id could never be deleted by id
        if workout.id != expected_id:
            logger.warning(f"Skipping workout record {key}: stored id is {workout.id}")
            return None
        return workout
