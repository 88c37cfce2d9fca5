"""Editable workout drafts.

A draft is the in-memory form state of a workout being created or edited.
Every operation here returns a new draft; nothing is persisted. Exercises
and sets are addressed by their position, so the UI only needs to know
``(exercise_index, set_index)`` to route an edit.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date, timezone, tzinfo
from typing import Any, Literal

from workout_log.workout.model import (
    Exercise,
    Workout,
    WorkoutSet,
    serialize_date,
    set_to_payload,
)

SetField = Literal["reps", "weight", "duration_sec"]

BLANK_SET = WorkoutSet(reps=0, weight=0)
BLANK_EXERCISE = Exercise(name="", sets=(BLANK_SET,))


@dataclass(frozen=True)
class WorkoutDraft:
    date: date | None = None
    name: str = ""
    duration_min: float | None = None
    exercises: tuple[Exercise, ...] = ()
    notes: str | None = None


def init_blank(today: date | None = None) -> WorkoutDraft:
    return WorkoutDraft(
        date=today or date.today(),
        exercises=(BLANK_EXERCISE,),
    )


def init_from_record(record: Workout) -> WorkoutDraft:
    return WorkoutDraft(
        date=record.date.date(),
        name=record.name,
        duration_min=record.duration_min,
        exercises=record.exercises,
        notes=record.notes,
    )


def _check_index(items: tuple[Any, ...], index: int, what: str) -> None:
    if not 0 <= index < len(items):
        raise IndexError(f"{what} index {index} out of range")


def _replace_exercise(draft: WorkoutDraft, index: int, exercise: Exercise) -> WorkoutDraft:
    exercises = list(draft.exercises)
    exercises[index] = exercise
    return replace(draft, exercises=tuple(exercises))


def add_exercise(draft: WorkoutDraft) -> WorkoutDraft:
    return replace(draft, exercises=draft.exercises + (BLANK_EXERCISE,))


def remove_exercise(draft: WorkoutDraft, index: int) -> WorkoutDraft:
    _check_index(draft.exercises, index, "Exercise")
    return replace(draft, exercises=draft.exercises[:index] + draft.exercises[index + 1 :])


def add_set(draft: WorkoutDraft, exercise_index: int) -> WorkoutDraft:
    _check_index(draft.exercises, exercise_index, "Exercise")
    exercise = draft.exercises[exercise_index]
    return _replace_exercise(
        draft, exercise_index, replace(exercise, sets=exercise.sets + (BLANK_SET,))
    )


def remove_set(draft: WorkoutDraft, exercise_index: int, set_index: int) -> WorkoutDraft:
    _check_index(draft.exercises, exercise_index, "Exercise")
    exercise = draft.exercises[exercise_index]
    _check_index(exercise.sets, set_index, "Set")
    sets = exercise.sets[:set_index] + exercise.sets[set_index + 1 :]
    return _replace_exercise(draft, exercise_index, replace(exercise, sets=sets))


def _non_negative(value: Any) -> float | None:
    # Mirrors a numeric input with min=0: empty means absent, negatives clamp.
    if value is None or value == "":
        return None
    number = float(value)
    if number.is_integer():
        number = int(number)
    return max(0, number)


def set_date(draft: WorkoutDraft, value: date | str | None) -> WorkoutDraft:
    if isinstance(value, str):
        value = date.fromisoformat(value) if value.strip() else None
    return replace(draft, date=value)


def set_name(draft: WorkoutDraft, value: str | None) -> WorkoutDraft:
    return replace(draft, name=value or "")


def set_duration(draft: WorkoutDraft, value: Any) -> WorkoutDraft:
    return replace(draft, duration_min=_non_negative(value))


def set_notes(draft: WorkoutDraft, value: str | None) -> WorkoutDraft:
    return replace(draft, notes=value or None)


def set_exercise_name(draft: WorkoutDraft, exercise_index: int, value: str | None) -> WorkoutDraft:
    _check_index(draft.exercises, exercise_index, "Exercise")
    exercise = draft.exercises[exercise_index]
    return _replace_exercise(draft, exercise_index, replace(exercise, name=value or ""))


def set_set_value(
    draft: WorkoutDraft,
    exercise_index: int,
    set_index: int,
    field: SetField,
    value: Any,
) -> WorkoutDraft:
    if field not in ("reps", "weight", "duration_sec"):
        raise ValueError(f"Unknown set field '{field}'")
    _check_index(draft.exercises, exercise_index, "Exercise")
    exercise = draft.exercises[exercise_index]
    _check_index(exercise.sets, set_index, "Set")
    sets = list(exercise.sets)
    sets[set_index] = replace(sets[set_index], **{field: _non_negative(value)})
    return _replace_exercise(draft, exercise_index, replace(exercise, sets=tuple(sets)))


def draft_to_payload(draft: WorkoutDraft, tz: tzinfo = timezone.utc) -> dict[str, Any]:
    """Serialize a validated draft into the backend record shape (no id)."""
    if draft.date is None:
        raise ValueError("Draft has no date")
    payload: dict[str, Any] = {
        "date": serialize_date(draft.date, tz),
        "name": draft.name.strip(),
        "exercises": [
            {
                "name": exercise.name.strip(),
                "sets": [set_to_payload(item) for item in exercise.sets],
            }
            for exercise in draft.exercises
        ],
    }
    if draft.duration_min is not None:
        payload["duration"] = draft.duration_min
    if draft.notes is not None:
        payload["notes"] = draft.notes
    return payload
