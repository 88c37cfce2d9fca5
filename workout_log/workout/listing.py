"""Table rows, ordering and pagination for the workout history."""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Iterable, Sequence, TypeVar

from workout_log.workout.model import Workout

PAGE_SIZE_OPTIONS: tuple[int, ...] = (10, 20, 50, 100)
DEFAULT_PAGE_SIZE = 10
MAX_EXERCISE_TAGS = 3
DURATION_PLACEHOLDER = "N/A"

_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

T = TypeVar("T")


@dataclass(frozen=True)
class WorkoutRow:
    id: str
    date_label: str
    name: str
    tags: tuple[str, ...]
    more_label: str | None
    duration_label: str

    def as_table_row(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "date": self.date_label,
            "name": self.name,
            "tags": list(self.tags),
            "more": self.more_label,
            "duration": self.duration_label,
        }


def sort_workouts(records: Iterable[Workout], ascending: bool = False) -> list[Workout]:
    # sorted() keeps equal dates in collection order, also with reverse=True.
    return sorted(records, key=lambda record: record.date, reverse=not ascending)


def date_column_label(ascending: bool) -> str:
    return "Date \u25b2" if ascending else "Date \u25bc"


def format_date(value: datetime) -> str:
    # Month names are fixed so the label does not depend on the process locale.
    return f"{_MONTHS[value.month - 1]} {value.day:02d}, {value.year:04d}"


def exercise_tags(
    names: Sequence[str],
    limit: int = MAX_EXERCISE_TAGS,
) -> tuple[tuple[str, ...], str | None]:
    shown = tuple(names[:limit])
    hidden = len(names) - len(shown)
    return shown, (f"+{hidden} more" if hidden > 0 else None)


def _fmt_number(value: float) -> str:
    return f"{value:g}"


def format_duration(minutes: float | None) -> str:
    if not minutes:
        return DURATION_PLACEHOLDER
    return f"{_fmt_number(minutes)} min"


def build_row(record: Workout) -> WorkoutRow:
    tags, more = exercise_tags(record.exercise_names)
    return WorkoutRow(
        id=record.id,
        date_label=format_date(record.date),
        name=record.name,
        tags=tags,
        more_label=more,
        duration_label=format_duration(record.duration_min),
    )


def build_rows(records: Iterable[Workout]) -> list[WorkoutRow]:
    return [build_row(record) for record in records]


@dataclass
class Pagination:
    page_size: int = DEFAULT_PAGE_SIZE
    page: int = 1

    def page_count(self, total: int) -> int:
        return max(1, math.ceil(total / self.page_size))

    def go_to(self, page: int, total: int) -> int:
        self.page = min(max(1, int(page)), self.page_count(total))
        return self.page

    def set_page_size(self, size: int, total: int) -> None:
        if size <= 0:
            raise ValueError("Page size must be positive")
        first_visible = (self.page - 1) * self.page_size
        self.page_size = size
        self.go_to(first_visible // size + 1, total)

    def slice(self, rows: Sequence[T]) -> list[T]:
        page = min(self.page, self.page_count(len(rows)))
        start = (page - 1) * self.page_size
        return list(rows[start : start + self.page_size])

    @staticmethod
    def total_label(total: int) -> str:
        return f"Total {total} workouts"
