"""
Repository Interfaces (Ports) for the workout log.

This package defines abstract interfaces that decouple domain logic from
infrastructure. Implementations are provided in the infrastructure layer.

Architecture follows the Ports & Adapters (Hexagonal) pattern:
- Ports: Abstract interfaces defined here (what the application needs)
- Adapters: Concrete implementations in infrastructure/ (how it's provided)

Usage:
    from application.ports import KeyValueStore, WorkoutRepository

    class WorkoutService:
        def __init__(self, workout_repo: WorkoutRepository):
            self.workout_repo = workout_repo

        async def save(self, workout):
            await self.workout_repo.save_workout(workout)
"""

# Storage backend
from application.ports.key_value_store import KeyValueStore

# Workout persistence
from application.ports.workout_repository import WorkoutRepository

__all__ = [
    "KeyValueStore",
    "WorkoutRepository",
]
