"""
Key-value storage adapters.

- KeyValueWorkoutStore: WorkoutRepository over any KeyValueStore
- InMemoryKeyValueStore: dict-backed backend (development, tests)
- FileKeyValueStore: one-file-per-key backend for local persistence

Usage:
    from infrastructure.kv import FileKeyValueStore, KeyValueWorkoutStore

    backend = FileKeyValueStore("./data")
    workout_repo = KeyValueWorkoutStore(backend)
    workouts = await workout_repo.list_workouts()
"""

from infrastructure.kv.file_store import FileKeyValueStore
from infrastructure.kv.memory_store import InMemoryKeyValueStore
from infrastructure.kv.workout_store import KeyValueWorkoutStore

__all__ = [
    "KeyValueWorkoutStore",
    "InMemoryKeyValueStore",
    "FileKeyValueStore",
]
