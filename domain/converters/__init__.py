"""
Domain converters between the Workout model and its stored form.

- workout_key / workout_id_from_key: key naming in the "workout:" namespace
- workout_to_record / record_to_workout: Workout <-> JSON-compatible dict
- workout_to_json / json_to_workout: Workout <-> stored string value

All converters are pure functions with no side effects.
"""

from domain.converters.record_converters import (
    WORKOUT_KEY_PREFIX,
    json_to_workout,
    record_to_workout,
    workout_id_from_key,
    workout_key,
    workout_to_json,
    workout_to_record,
)

__all__ = [
    "WORKOUT_KEY_PREFIX",
    "workout_key",
    "workout_id_from_key",
    "workout_to_record",
    "record_to_workout",
    "workout_to_json",
    "json_to_workout",
]
