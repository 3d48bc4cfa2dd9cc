"""
File-backed implementation of KeyValueStore.

Each key is one UTF-8 file in a directory. Keys are percent-encoded into
file names, so any string (including "workout:<id>") is a valid key.
Writes go to a temporary file that is then renamed over the target, which
keeps every write atomic per key. Blocking file I/O runs in a worker thread
via asyncio.to_thread.
"""
import asyncio
import logging
import os
import tempfile
from pathlib import Path
from typing import List, Optional, Union
from urllib.parse import quote, unquote

logger = logging.getLogger(__name__)

_SUFFIX = ".kv"


class FileKeyValueStore:
    """KeyValueStore that keeps one file per key under a root directory."""

    def __init__(self, root: Union[str, Path]):
        """
        Initialize the store, creating the directory if needed.

        Args:
            root: Directory holding the value files
        """
        self._root = Path(root)
        self._root.mkdir(parents=True, exist_ok=True)

    @property
    def root(self) -> Path:
        return self._root

    def _path_for(self, key: str) -> Path:
        if not key:
            raise ValueError("Key must not be empty")
        return self._root / f"{quote(key, safe='')}{_SUFFIX}"

    # -------------------------------------------------------------------------
    # Blocking helpers (run in a worker thread)
    # -------------------------------------------------------------------------

    def _list_keys_sync(self, prefix: str) -> List[str]:
        keys = []
        for entry in os.scandir(self._root):
            if not entry.is_file() or not entry.name.endswith(_SUFFIX):
                continue
            key = unquote(entry.name[: -len(_SUFFIX)])
            if key.startswith(prefix):
                keys.append(key)
        return keys

    def _get_sync(self, key: str) -> Optional[str]:
        try:
            return self._path_for(key).read_text(encoding="utf-8")
        except FileNotFoundError:
            return None

    def _set_sync(self, key: str, value: str) -> None:
        target = self._path_for(key)
        fd, tmp_name = tempfile.mkstemp(dir=self._root, prefix=".tmp-", suffix=".part")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(value)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_name, target)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def _delete_sync(self, key: str) -> None:
        self._path_for(key).unlink(missing_ok=True)

    # -------------------------------------------------------------------------
    # KeyValueStore Protocol Methods
    # -------------------------------------------------------------------------

    async def list_keys(self, prefix: str) -> List[str]:
        return await asyncio.to_thread(self._list_keys_sync, prefix)

    async def get(self, key: str) -> Optional[str]:
        return await asyncio.to_thread(self._get_sync, key)

    async def set(self, key: str, value: str) -> None:
        await asyncio.to_thread(self._set_sync, key, value)

    async def delete(self, key: str) -> None:
        await asyncio.to_thread(self._delete_sync, key)
