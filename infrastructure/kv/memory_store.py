"""
In-memory implementation of KeyValueStore.

Data lives in a dict for the lifetime of the process. Used as the default
backend in development and in tests.
"""
from typing import Dict, List, Optional


class InMemoryKeyValueStore:
    """Dict-backed KeyValueStore. Values are plain strings."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    async def list_keys(self, prefix: str) -> List[str]:
        return [key for key in self._data if key.startswith(prefix)]

    async def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    async def set(self, key: str, value: str) -> None:
        if not isinstance(value, str):
            raise TypeError(f"Value for {key!r} must be str, got {type(value).__name__}")
        self._data[key] = value

    async def delete(self, key: str) -> None:
        self._data.pop(key, None)

    def __len__(self) -> int:
        return len(self._data)
