"""Workout domain models and their wire representation."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time, timezone, tzinfo
from typing import Any, Mapping


class WorkoutPayloadError(ValueError):
    """Raised when a record received from the backend is malformed."""


@dataclass(frozen=True)
class WorkoutSet:
    reps: float | None = None
    weight: float | None = None
    duration_sec: float | None = None


@dataclass(frozen=True)
class Exercise:
    name: str
    sets: tuple[WorkoutSet, ...] = ()


@dataclass(frozen=True)
class Workout:
    id: str
    date: datetime
    name: str
    duration_min: float | None = None
    exercises: tuple[Exercise, ...] = ()
    notes: str | None = None

    @property
    def exercise_names(self) -> tuple[str, ...]:
        return tuple(exercise.name for exercise in self.exercises)


def parse_timestamp(text: str, tz: tzinfo = timezone.utc) -> datetime:
    """Parse a backend ISO-8601 timestamp into an aware datetime in ``tz``.

    Accepts a trailing ``Z``, an explicit offset, or a naive value, which is
    taken as UTC. The calendar day of a record is its day in ``tz``, so a
    local midnight stored as UTC (``2023-12-31T22:00:00Z`` for UTC+2) lands
    on the intended day when ``tz`` is that local zone.
    """
    raw = text.strip()
    if raw.endswith(("Z", "z")):
        raw = raw[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(raw)
    except ValueError as exc:
        raise WorkoutPayloadError(f"Invalid date '{text}'") from exc
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(tz)


def serialize_date(day: date, tz: tzinfo = timezone.utc) -> str:
    """Midnight of ``day`` in ``tz``, written as a UTC timestamp."""
    return datetime.combine(day, time.min, tzinfo=tz).astimezone(timezone.utc).isoformat()


def _number(value: Any, field: str) -> float | None:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise WorkoutPayloadError(f"Field '{field}' must be a number")
    return value


def _set_from_payload(raw: Any) -> WorkoutSet:
    if not isinstance(raw, Mapping):
        raise WorkoutPayloadError("Set must be an object")
    return WorkoutSet(
        reps=_number(raw.get("reps"), "reps"),
        weight=_number(raw.get("weight"), "weight"),
        duration_sec=_number(raw.get("duration"), "duration"),
    )


def _exercise_from_payload(raw: Any) -> Exercise:
    if not isinstance(raw, Mapping):
        raise WorkoutPayloadError("Exercise must be an object")
    sets = raw.get("sets") or []
    if not isinstance(sets, list):
        raise WorkoutPayloadError("Exercise field 'sets' must be an array")
    return Exercise(
        name=str(raw.get("name") or ""),
        sets=tuple(_set_from_payload(item) for item in sets),
    )


def workout_from_payload(raw: Any, tz: tzinfo = timezone.utc) -> Workout:
    if not isinstance(raw, Mapping):
        raise WorkoutPayloadError("Workout must be an object")

    record_id = raw.get("id", raw.get("_id"))
    if record_id is None or record_id == "":
        raise WorkoutPayloadError("Workout has no identity")

    date_obj = raw.get("date")
    if not isinstance(date_obj, str):
        raise WorkoutPayloadError("Workout field 'date' must be a string")

    exercises = raw.get("exercises") or []
    if not isinstance(exercises, list):
        raise WorkoutPayloadError("Workout field 'exercises' must be an array")

    notes = raw.get("notes")
    return Workout(
        id=str(record_id),
        date=parse_timestamp(date_obj, tz),
        name=str(raw.get("name") or ""),
        duration_min=_number(raw.get("duration"), "duration"),
        exercises=tuple(_exercise_from_payload(item) for item in exercises),
        notes=str(notes) if notes is not None else None,
    )


def set_to_payload(item: WorkoutSet) -> dict[str, float]:
    payload: dict[str, float] = {}
    if item.reps is not None:
        payload["reps"] = item.reps
    if item.weight is not None:
        payload["weight"] = item.weight
    if item.duration_sec is not None:
        payload["duration"] = item.duration_sec
    return payload

