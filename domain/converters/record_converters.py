"""
Converters: stored key-value record <-> domain Workout.

Workouts are stored one per key, under "workout:<id>", as a flat JSON
object:

    {
        "id": "3f2b...",
        "date": "2024-03-01T09:30:00Z",
        "exercises": [
            {"id": "a1c4...", "name": "Bench Press",
             "sets": [{"reps": 10, "weight": 20.0}, {"reps": 8, "weight": null}]}
        ]
    }

Only validated values are written: reps as integers, weight as a number or
null for bodyweight. Records written by earlier versions stored the raw
form input instead ("10", "" for no weight); those still load, because the
Workout model coerces numeric strings and treats a blank weight as null.
"""

import json
from typing import Any, Dict

from pydantic import ValidationError

from domain.models import Workout

WORKOUT_KEY_PREFIX = "workout:"


def workout_key(workout_id: str, prefix: str = WORKOUT_KEY_PREFIX) -> str:
    """
    Build the storage key for a workout.

    Examples:
        >>> workout_key("123")
        'workout:123'
    """
    return f"{prefix}{workout_id}"


def workout_id_from_key(key: str, prefix: str = WORKOUT_KEY_PREFIX) -> str:
    """
    Extract the workout id from a storage key.

    Raises:
        ValueError: If the key is not in the workout namespace.
    """
    if not key.startswith(prefix) or len(key) == len(prefix):
        raise ValueError(f"Not a workout key: {key!r}")
    return key[len(prefix):]


def workout_to_record(workout: Workout) -> Dict[str, Any]:
    """Convert a Workout to its JSON-compatible stored form."""
    return workout.model_dump(mode="json")


def workout_to_json(workout: Workout) -> str:
    """Serialize a Workout to the string value written to the store."""
    return json.dumps(workout_to_record(workout), ensure_ascii=False)


def record_to_workout(record: Dict[str, Any]) -> Workout:
    """
    Convert a stored record to a Workout.

    Raises:
        ValueError: If the record does not describe a valid workout.
    """
    if not isinstance(record, dict):
        raise ValueError(f"Workout record must be an object, got {type(record).__name__}")
    try:
        return Workout.model_validate(record)
    except ValidationError as e:
        raise ValueError(f"Invalid workout record: {e.error_count()} error(s)") from e


def json_to_workout(value: str) -> Workout:
    """
    Deserialize a stored string value to a Workout.

    Raises:
        ValueError: If the value is not JSON or not a valid workout.
    """
    try:
        record = json.loads(value)
    except (TypeError, json.JSONDecodeError) as e:
        raise ValueError(f"Workout record is not valid JSON: {e}") from e
    return record_to_workout(record)
