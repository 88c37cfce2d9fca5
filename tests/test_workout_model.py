from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

import pytest

from workout_log.workout.draft import init_from_record
from workout_log.workout.model import (
    WorkoutPayloadError,
    WorkoutSet,
    parse_timestamp,
    serialize_date,
    set_to_payload,
    workout_from_payload,
)


def test_workout_from_payload_full_record() -> None:
    workout = workout_from_payload(
        {
            "id": "w1",
            "date": "2024-01-01T00:00:00.000Z",
            "name": "Leg Day",
            "duration": 30,
            "exercises": [
                {"name": "Squats", "sets": [{"reps": 10, "weight": 50}, {"duration": 45}]},
            ],
            "notes": "Heavy",
        }
    )

    assert workout.id == "w1"
    assert workout.date == datetime(2024, 1, 1, tzinfo=timezone.utc)
    assert workout.duration_min == 30
    assert workout.exercise_names == ("Squats",)
    assert workout.exercises[0].sets == (
        WorkoutSet(reps=10, weight=50),
        WorkoutSet(duration_sec=45),
    )
    assert workout.notes == "Heavy"


def test_workout_from_payload_reads_underscore_id_and_defaults() -> None:
    workout = workout_from_payload({"_id": 42, "date": "2024-03-05", "name": "Cardio"})

    assert workout.id == "42"
    assert workout.date == datetime(2024, 3, 5, tzinfo=timezone.utc)
    assert workout.duration_min is None
    assert workout.exercises == ()
    assert workout.notes is None


@pytest.mark.parametrize(
    "payload",
    [
        [],
        {"date": "2024-01-01", "name": "No id"},
        {"id": "w1", "name": "No date"},
        {"id": "w1", "date": "yesterday", "name": "Bad date"},
        {"id": "w1", "date": "2024-01-01", "name": "x", "exercises": {"name": "Squats"}},
        {"id": "w1", "date": "2024-01-01", "name": "x", "duration": "long"},
        {"id": "w1", "date": "2024-01-01", "name": "x", "exercises": [{"name": "Rows", "sets": [{"reps": "ten"}]}]},
    ],
)
def test_workout_from_payload_rejects_malformed(payload: object) -> None:
    with pytest.raises(WorkoutPayloadError):
        workout_from_payload(payload)


def test_parse_timestamp_normalizes_offsets_to_utc() -> None:
    parsed = parse_timestamp("2024-01-01T02:00:00+02:00")
    assert parsed == datetime(2024, 1, 1, 0, 0, tzinfo=timezone.utc)
    assert parsed.tzinfo == timezone.utc


def test_serialize_date_is_utc_midnight() -> None:
    assert serialize_date(date(2024, 1, 1)) == "2024-01-01T00:00:00+00:00"


def test_set_to_payload_omits_absent_values() -> None:
    assert set_to_payload(WorkoutSet(reps=0, weight=0)) == {"reps": 0, "weight": 0}
    assert set_to_payload(WorkoutSet(duration_sec=60)) == {"duration": 60}


UTC_PLUS_2 = timezone(timedelta(hours=2))


def test_local_midnight_stored_as_utc_keeps_its_calendar_day() -> None:
    record = workout_from_payload(
        {"id": "w1", "date": "2023-12-31T22:00:00.000Z", "name": "New Year"},
        UTC_PLUS_2,
    )

    assert record.date == datetime(2024, 1, 1, tzinfo=UTC_PLUS_2)
    assert init_from_record(record).date == date(2024, 1, 1)


def test_default_calendar_is_utc() -> None:
    record = workout_from_payload({"id": "w1", "date": "2023-12-31T22:00:00.000Z", "name": "x"})

    assert init_from_record(record).date == date(2023, 12, 31)


def test_serialize_date_writes_local_midnight_as_utc() -> None:
    assert serialize_date(date(2024, 1, 1), UTC_PLUS_2) == "2023-12-31T22:00:00+00:00"
    assert parse_timestamp(serialize_date(date(2024, 1, 1), UTC_PLUS_2), UTC_PLUS_2).date() == date(2024, 1, 1)
