"""
Fake Implementations for Testing.

This package provides in-memory fake implementations of the port interfaces
for fast, isolated testing. No filesystem or external dependencies required.

Features:
- Fakes implement the same Protocol interfaces as real implementations
- Supports seeding with test data and reset() for test isolation
- Failure injection for backend error paths
- Factory functions for common test scenarios

Usage:
    from tests.fakes import FakeKeyValueStore, create_workout, create_seeded_store

    store = FakeKeyValueStore()
    store.fail_on("set")

    store = create_seeded_store(num_workouts=3)
"""
import uuid
from datetime import datetime, timedelta, timezone
from typing import Optional

from domain.converters import workout_key, workout_to_json
from domain.models import Exercise, Workout, WorkoutSet
from tests.fakes.key_value_store import FakeBackendError, FakeKeyValueStore


# =============================================================================
# Factory Functions
# =============================================================================


def create_workout(
    *,
    workout_id: Optional[str] = None,
    date: Optional[datetime] = None,
    exercise_names: tuple = ("Bench Press",),
    reps: int = 10,
    weight: Optional[float] = 20.0,
) -> Workout:
    """
    Create a valid Workout for tests.

    Args:
        workout_id: Workout id (random if omitted)
        date: Session date (2024-03-01 09:30 UTC if omitted)
        exercise_names: One exercise with a single set per name
        reps: Reps for every set
        weight: Weight for every set

    Returns:
        Workout instance
    """
    return Workout(
        id=workout_id or str(uuid.uuid4()),
        date=date or datetime(2024, 3, 1, 9, 30, tzinfo=timezone.utc),
        exercises=[
            Exercise(
                id=f"ex-{index}",
                name=name,
                sets=[WorkoutSet(reps=reps, weight=weight)],
            )
            for index, name in enumerate(exercise_names)
        ],
    )


def create_seeded_store(*, num_workouts: int = 0) -> FakeKeyValueStore:
    """
    Create a FakeKeyValueStore holding num_workouts workouts on consecutive days.

    Workout i is dated 2024-03-01 + i days and has id "w{i}".
    """
    store = FakeKeyValueStore()
    start = datetime(2024, 3, 1, 9, 30, tzinfo=timezone.utc)
    for i in range(num_workouts):
        workout = create_workout(workout_id=f"w{i}", date=start + timedelta(days=i))
        store.seed({workout_key(workout.id): workout_to_json(workout)})
    return store


__all__ = [
    "FakeKeyValueStore",
    "FakeBackendError",
    "create_workout",
    "create_seeded_store",
]
