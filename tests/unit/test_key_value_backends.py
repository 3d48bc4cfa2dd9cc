"""
Unit tests for the key-value backends.

Tests for:
- InMemoryKeyValueStore
- FileKeyValueStore (on a pytest tmp_path)
"""

from pathlib import Path

import pytest

from infrastructure.kv import FileKeyValueStore, InMemoryKeyValueStore, KeyValueWorkoutStore
from tests.fakes import create_workout


@pytest.fixture(params=["memory", "file"])
def backend(request, tmp_path: Path):
    """Each backend implementation, fresh per test."""
    if request.param == "memory":
        return InMemoryKeyValueStore()
    return FileKeyValueStore(tmp_path / "kv")


class TestKeyValueContract:
    """Behaviour shared by every KeyValueStore implementation."""

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_get_missing_returns_none(self, backend):
        assert await backend.get("workout:missing") is None

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_set_then_get(self, backend):
        await backend.set("workout:1", '{"a": "ü"}')
        assert await backend.get("workout:1") == '{"a": "ü"}'

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_set_overwrites(self, backend):
        await backend.set("workout:1", "old")
        await backend.set("workout:1", "new")
        assert await backend.get("workout:1") == "new"

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_list_keys_filters_by_prefix(self, backend):
        await backend.set("workout:1", "a")
        await backend.set("workout:2", "b")
        await backend.set("profile:1", "c")
        assert sorted(await backend.list_keys("workout:")) == ["workout:1", "workout:2"]

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_delete(self, backend):
        await backend.set("workout:1", "a")
        await backend.delete("workout:1")
        assert await backend.get("workout:1") is None
        assert await backend.list_keys("workout:") == []

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_delete_missing_is_noop(self, backend):
        await backend.delete("workout:missing")

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_workout_store_round_trip(self, backend):
        store = KeyValueWorkoutStore(backend)
        workout = create_workout(workout_id="w1")
        await store.save_workout(workout)
        assert await store.list_workouts() == [workout]


class TestFileKeyValueStore:
    """File backend specifics."""

    @pytest.mark.unit
    def test_creates_root_directory(self, tmp_path: Path):
        root = tmp_path / "a" / "b"
        store = FileKeyValueStore(root)
        assert store.root == root
        assert root.is_dir()

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_keys_with_separators_stay_in_root(self, tmp_path: Path):
        store = FileKeyValueStore(tmp_path)
        await store.set("workout:../../etc/passwd", "x")
        files = [p.name for p in tmp_path.iterdir()]
        assert len(files) == 1
        assert "/" not in files[0]
        assert await store.list_keys("workout:") == ["workout:../../etc/passwd"]

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_no_temp_files_left_after_write(self, tmp_path: Path):
        store = FileKeyValueStore(tmp_path)
        await store.set("workout:1", "a")
        assert [p.name for p in tmp_path.iterdir()] == ["workout%3A1.kv"]

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_data_survives_new_instance(self, tmp_path: Path):
        await FileKeyValueStore(tmp_path).set("workout:1", "a")
        assert await FileKeyValueStore(tmp_path).get("workout:1") == "a"

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_empty_key_rejected(self, tmp_path: Path):
        with pytest.raises(ValueError):
            await FileKeyValueStore(tmp_path).set("", "a")


class TestInMemoryKeyValueStore:
    """In-memory backend specifics."""

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_initial_data(self):
        store = InMemoryKeyValueStore({"workout:1": "a"})
        assert len(store) == 1
        assert await store.get("workout:1") == "a"

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_non_string_value_rejected(self):
        with pytest.raises(TypeError):
            await InMemoryKeyValueStore().set("workout:1", {"id": "1"})
