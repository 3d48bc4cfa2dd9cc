"""
Key-Value Store Interface (Port).

This module defines the abstract interface for the string key-value backend
that workouts are persisted in. Implementations may keep data in memory,
on disk, or in an external service; each call is atomic per key.
"""
from typing import List, Optional, Protocol


class KeyValueStore(Protocol):
    """
    Abstract interface for a namespaced, string-keyed persistence backend.

    All methods are coroutines. Implementations raise their own exceptions
    on backend failure; the workout store maps them to StoreUnavailable or
    StoreWriteError.
    """

    async def list_keys(self, prefix: str) -> List[str]:
        """
        List all keys starting with prefix.

        Args:
            prefix: Namespace prefix, e.g. "workout:"

        Returns:
            Matching keys, in no particular order
        """
        ...

    async def get(self, key: str) -> Optional[str]:
        """
        Get the value stored under key.

        Returns:
            The stored string, or None if the key is absent
        """
        ...

    async def set(self, key: str, value: str) -> None:
        """Store value under key, replacing any existing value."""
        ...

    async def delete(self, key: str) -> None:
        """Remove key. Removing an absent key is a no-op."""
        ...
