"""Async controller used by the web UI."""

from __future__ import annotations

from datetime import date, timezone, tzinfo
from typing import Callable

from workout_log.entity.client import EntityClient
from workout_log.ui.dialog import DialogController
from workout_log.ui.events import EventSink
from workout_log.ui.list_view import ListView
from workout_log.workout.listing import DEFAULT_PAGE_SIZE


class WorkoutTrackerController:
    def __init__(
        self,
        client: EntityClient,
        sink: EventSink,
        page_size: int = DEFAULT_PAGE_SIZE,
        today: Callable[[], date] = date.today,
        tz: tzinfo = timezone.utc,
    ) -> None:
        self.list_view = ListView(client, sink, page_size=page_size, tz=tz)
        self.dialog = DialogController(
            client,
            sink,
            on_saved=self.list_view.load,
            today=today,
            tz=tz,
        )

    async def mount(self) -> bool:
        return await self.list_view.load()

    def open_for_create(self) -> None:
        self.dialog.open_for_create()

    def open_for_edit(self, record_id: str) -> bool:
        record = self.list_view.find(record_id)
        if record is None:
            return False
        self.dialog.open_for_edit(record)
        return True

    def request_delete(self, record_id: str) -> None:
        self.list_view.request_delete(record_id)
