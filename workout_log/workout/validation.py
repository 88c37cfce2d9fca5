"""Required-field checks for workout drafts."""

from __future__ import annotations

from dataclasses import dataclass

from workout_log.workout.draft import WorkoutDraft


@dataclass(frozen=True)
class FieldError:
    field: str
    message: str


def validate_draft(draft: WorkoutDraft) -> list[FieldError]:
    errors: list[FieldError] = []
    if draft.date is None:
        errors.append(FieldError("date", "Please select a date"))
    if not draft.name.strip():
        errors.append(FieldError("name", "Please enter workout name"))
    for index, exercise in enumerate(draft.exercises):
        if not exercise.name.strip():
            errors.append(FieldError(f"exercises.{index}.name", "Please enter exercise name"))
    return errors


def errors_by_field(errors: list[FieldError]) -> dict[str, str]:
    return {error.field: error.message for error in errors}
