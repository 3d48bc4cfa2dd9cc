"""
Infrastructure Layer for the workout log.

This package contains concrete implementations of the application ports:
- kv/: The key-value workout store and its storage backends
"""

from infrastructure.kv import (
    FileKeyValueStore,
    InMemoryKeyValueStore,
    KeyValueWorkoutStore,
)

__all__ = [
    "KeyValueWorkoutStore",
    "InMemoryKeyValueStore",
    "FileKeyValueStore",
]
