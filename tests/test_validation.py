from __future__ import annotations

from datetime import date

from workout_log.workout.draft import WorkoutDraft, add_exercise, init_blank, set_exercise_name, set_name
from workout_log.workout.validation import FieldError, errors_by_field, validate_draft


def test_blank_draft_reports_name_and_exercise_name() -> None:
    errors = validate_draft(init_blank(date(2024, 1, 1)))

    assert errors == [
        FieldError("name", "Please enter workout name"),
        FieldError("exercises.0.name", "Please enter exercise name"),
    ]


def test_missing_date_is_reported() -> None:
    errors = errors_by_field(validate_draft(WorkoutDraft(name="Leg Day")))

    assert errors == {"date": "Please select a date"}


def test_whitespace_only_names_are_blank() -> None:
    draft = set_name(init_blank(date(2024, 1, 1)), "   ")
    draft = set_exercise_name(add_exercise(draft), 0, "Squats")

    fields = [error.field for error in validate_draft(draft)]

    assert fields == ["name", "exercises.1.name"]


def test_complete_draft_is_valid_even_without_exercises() -> None:
    draft = WorkoutDraft(date=date(2024, 1, 1), name="Rest day walk")

    assert validate_draft(draft) == []
