"""Workout history state: loading, ordering, paging and deletion."""

from __future__ import annotations

import logging
from datetime import timezone, tzinfo

from workout_log.entity.client import EntityClient, EntityClientError
from workout_log.ui.events import ConfirmRequest, EventSink, Toast
from workout_log.workout.listing import (
    DEFAULT_PAGE_SIZE,
    Pagination,
    WorkoutRow,
    build_rows,
    date_column_label,
    sort_workouts,
)
from workout_log.workout.model import Workout, WorkoutPayloadError, workout_from_payload

logger = logging.getLogger(__name__)


def _decode_records(raw_records: object, tz: tzinfo) -> list[Workout]:
    if not isinstance(raw_records, list):
        raise WorkoutPayloadError("Workout list payload must be an array")
    out: list[Workout] = []
    for raw in raw_records:
        try:
            out.append(workout_from_payload(raw, tz))
        except WorkoutPayloadError as exc:
            logger.warning("Skipping malformed workout record: %s", exc)
    return out


class ListView:
    def __init__(
        self,
        client: EntityClient,
        sink: EventSink,
        page_size: int = DEFAULT_PAGE_SIZE,
        tz: tzinfo = timezone.utc,
    ) -> None:
        self._client = client
        self._sink = sink
        self._tz = tz
        self._collection: list[Workout] = []
        self._records: list[Workout] = []
        self.ascending = False
        self._deleting: set[str] = set()
        self.loading = False
        self.pagination = Pagination(page_size=page_size)

    @property
    def records(self) -> list[Workout]:
        return list(self._records)

    @property
    def total(self) -> int:
        return len(self._records)

    @property
    def rows(self) -> list[WorkoutRow]:
        return build_rows(self._records)

    @property
    def page_rows(self) -> list[WorkoutRow]:
        return self.pagination.slice(self.rows)

    @property
    def total_label(self) -> str:
        return self.pagination.total_label(self.total)

    def find(self, record_id: str) -> Workout | None:
        for record in self._records:
            if record.id == record_id:
                return record
        return None

    @property
    def date_label(self) -> str:
        return date_column_label(self.ascending)

    def set_date_order(self, ascending: bool) -> None:
        self.ascending = ascending
        self._records = sort_workouts(self._collection, ascending=ascending)
        self.pagination.go_to(1, self.total)

    def toggle_date_order(self) -> None:
        self.set_date_order(not self.ascending)

    def is_deleting(self, record_id: str) -> bool:
        return record_id in self._deleting

    def go_to_page(self, page: int) -> None:
        self.pagination.go_to(page, self.total)

    def set_page_size(self, size: int) -> None:
        self.pagination.set_page_size(size, self.total)

    async def load(self) -> bool:
        self.loading = True
        try:
            response = await self._client.list()
            if not response.success:
                raise EntityClientError("list() reported failure")
            records = _decode_records(response.data or [], self._tz)
        except (EntityClientError, WorkoutPayloadError) as exc:
            logger.error("Failed to load workouts: %s", exc)
            self._sink(Toast("error", "Failed to load workouts"))
            return False
        finally:
            self.loading = False

        self._collection = records
        self._records = sort_workouts(records, ascending=self.ascending)
        self.pagination.go_to(self.pagination.page, self.total)
        logger.debug("Loaded %d workouts", self.total)
        return True

    def request_delete(self, record_id: str) -> None:
        async def _confirmed() -> bool:
            return await self.delete(record_id)

        self._sink(
            ConfirmRequest(
                title="Delete Workout",
                message=(
                    "Are you sure you want to delete this workout? "
                    "This action cannot be undone."
                ),
                ok_label="Delete",
                on_confirm=_confirmed,
                danger=True,
            )
        )

    async def delete(self, record_id: str) -> bool:
        if record_id in self._deleting:
            return False
        self._deleting.add(record_id)
        try:
            response = await self._client.delete(record_id)
            if not response.success:
                raise EntityClientError("delete() reported failure")
        except EntityClientError as exc:
            logger.error("Failed to delete workout %s: %s", record_id, exc)
            self._sink(Toast("error", "Failed to delete workout"))
            return False
        finally:
            self._deleting.discard(record_id)

        self._sink(Toast("success", "Workout deleted successfully"))
        await self.load()
        return True
