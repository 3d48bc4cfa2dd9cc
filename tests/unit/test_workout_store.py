"""
Unit tests for KeyValueWorkoutStore.

Tests for:
- save/list/get/delete against a fake key-value backend
- Ordering by date, most recent first
- Skipping corrupt records
- Mapping backend failures to StoreUnavailable / StoreWriteError
"""

import json
from datetime import datetime, timedelta, timezone

import pytest

from application.exceptions import StoreUnavailable, StoreWriteError
from domain.converters import workout_key, workout_to_json
from infrastructure.kv import KeyValueWorkoutStore
from tests.fakes import FakeBackendError, FakeKeyValueStore, create_seeded_store, create_workout


BASE_DATE = datetime(2024, 3, 1, 9, 30, tzinfo=timezone.utc)


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def backend() -> FakeKeyValueStore:
    """Create a fresh fake key-value backend."""
    return FakeKeyValueStore()


@pytest.fixture
def store(backend: FakeKeyValueStore) -> KeyValueWorkoutStore:
    """Create a workout store over the fake backend."""
    return KeyValueWorkoutStore(backend)


# =============================================================================
# Save / List Tests
# =============================================================================


class TestSaveAndList:
    """Tests for save_workout followed by list_workouts."""

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_empty_store_lists_nothing(self, store: KeyValueWorkoutStore):
        assert await store.list_workouts() == []

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_save_writes_under_namespaced_key(
        self, store: KeyValueWorkoutStore, backend: FakeKeyValueStore
    ):
        workout = create_workout(workout_id="w1")
        await store.save_workout(workout)
        assert list(backend.get_all()) == ["workout:w1"]

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_saved_workout_round_trips(self, store: KeyValueWorkoutStore):
        workout = create_workout(workout_id="w1", exercise_names=("Squat", "Row"))
        await store.save_workout(workout)

        workouts = await store.list_workouts()

        assert workouts == [workout]

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_save_overwrites_same_id(self, store: KeyValueWorkoutStore):
        await store.save_workout(create_workout(workout_id="w1", reps=5))
        await store.save_workout(create_workout(workout_id="w1", reps=8))

        workouts = await store.list_workouts()

        assert len(workouts) == 1
        assert workouts[0].exercises[0].sets[0].reps == 8

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_list_sorted_by_date_descending(self, store: KeyValueWorkoutStore):
        for offset in (2, 0, 5, 1):
            await store.save_workout(
                create_workout(workout_id=f"w{offset}", date=BASE_DATE + timedelta(days=offset))
            )

        workouts = await store.list_workouts()

        assert [w.id for w in workouts] == ["w5", "w2", "w1", "w0"]

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_list_ignores_other_namespaces(self):
        seeded = create_seeded_store(num_workouts=2)
        seeded.seed({"settings:theme": "dark"})

        workouts = await KeyValueWorkoutStore(seeded).list_workouts()

        assert {w.id for w in workouts} == {"w0", "w1"}

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_custom_prefix(self, backend: FakeKeyValueStore):
        store = KeyValueWorkoutStore(backend, prefix="gym:workout:")
        await store.save_workout(create_workout(workout_id="w1"))

        assert list(backend.get_all()) == ["gym:workout:w1"]
        assert [w.id for w in await store.list_workouts()] == ["w1"]


# =============================================================================
# Corrupt Record Tests
# =============================================================================


class TestCorruptRecords:
    """Corrupt records are skipped rather than failing the whole list."""

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_corrupt_records_are_skipped(
        self, store: KeyValueWorkoutStore, backend: FakeKeyValueStore
    ):
        good = create_workout(workout_id="good")
        backend.seed(
            {
                workout_key("good"): workout_to_json(good),
                workout_key("garbage"): "{not json",
                workout_key("empty"): json.dumps(
                    {"id": "empty", "date": "2024-03-01T00:00:00Z", "exercises": []}
                ),
            }
        )

        workouts = await store.list_workouts()

        assert workouts == [good]

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_record_under_wrong_key_is_skipped(
        self, store: KeyValueWorkoutStore, backend: FakeKeyValueStore
    ):
        backend.seed({workout_key("other"): workout_to_json(create_workout(workout_id="w1"))})

        assert await store.list_workouts() == []

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_get_corrupt_record_returns_none(
        self, store: KeyValueWorkoutStore, backend: FakeKeyValueStore
    ):
        backend.seed({workout_key("bad"): "42"})

        assert await store.get_workout("bad") is None


# =============================================================================
# Get / Delete Tests
# =============================================================================


class TestGetAndDelete:
    """Tests for get_workout and delete_workout."""

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_get_existing(self, store: KeyValueWorkoutStore):
        workout = create_workout(workout_id="w1")
        await store.save_workout(workout)

        assert await store.get_workout("w1") == workout

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_get_missing_returns_none(self, store: KeyValueWorkoutStore):
        assert await store.get_workout("missing") is None

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_delete_removes_from_listing(self, store: KeyValueWorkoutStore):
        await store.save_workout(create_workout(workout_id="w1"))
        await store.save_workout(create_workout(workout_id="w2"))

        await store.delete_workout("w1")

        assert [w.id for w in await store.list_workouts()] == ["w2"]
        assert await store.get_workout("w1") is None

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_delete_never_saved_id_is_noop(
        self, store: KeyValueWorkoutStore, backend: FakeKeyValueStore
    ):
        await store.delete_workout("never-saved")
        assert ("delete", "workout:never-saved") in backend.calls


# =============================================================================
# Backend Failure Tests
# =============================================================================


class TestBackendFailures:
    """Backend errors map to the store's error taxonomy."""

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_list_keys_failure_raises_store_unavailable(
        self, store: KeyValueWorkoutStore, backend: FakeKeyValueStore
    ):
        backend.fail_on("list_keys")
        with pytest.raises(StoreUnavailable) as exc_info:
            await store.list_workouts()
        assert isinstance(exc_info.value.__cause__, FakeBackendError)

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_fetch_failure_raises_store_unavailable(
        self, store: KeyValueWorkoutStore, backend: FakeKeyValueStore
    ):
        await store.save_workout(create_workout(workout_id="w1"))
        backend.fail_on_key("workout:w1")
        with pytest.raises(StoreUnavailable):
            await store.list_workouts()
        with pytest.raises(StoreUnavailable):
            await store.get_workout("w1")

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_set_failure_raises_store_write_error(
        self, store: KeyValueWorkoutStore, backend: FakeKeyValueStore
    ):
        backend.fail_on("set")
        with pytest.raises(StoreWriteError) as exc_info:
            await store.save_workout(create_workout(workout_id="w1"))
        assert exc_info.value.key == "workout:w1"
        assert backend.get_all() == {}

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_delete_failure_raises_store_write_error(
        self, store: KeyValueWorkoutStore, backend: FakeKeyValueStore
    ):
        await store.save_workout(create_workout(workout_id="w1"))
        backend.fail_on("delete")
        with pytest.raises(StoreWriteError):
            await store.delete_workout("w1")
        assert await store.get_workout("w1") is not None
