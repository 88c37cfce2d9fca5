"""Exercise names offered by the exercise picker."""

from __future__ import annotations

COMMON_EXERCISES: tuple[str, ...] = (
    "Push-ups",
    "Pull-ups",
    "Squats",
    "Deadlifts",
    "Bench Press",
    "Overhead Press",
    "Rows",
    "Lunges",
    "Planks",
    "Burpees",
    "Bicep Curls",
    "Tricep Dips",
    "Leg Press",
    "Chest Fly",
    "Lat Pulldowns",
    "Shoulder Raises",
    "Calf Raises",
    "Running",
    "Cycling",
    "Swimming",
    "Jumping Jacks",
)


def exercise_options(current: str | None = None) -> list[str]:
    """Picker options; a free-text name not in the catalog is kept selectable."""
    options = list(COMMON_EXERCISES)
    if current and current not in options:
        options.append(current)
    return options
