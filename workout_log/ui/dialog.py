"""Create/edit dialog state machine for a single workout."""

from __future__ import annotations

import logging
from datetime import date, timezone, tzinfo
from typing import Any, Awaitable, Callable, Literal, Optional

from workout_log.entity.client import EntityClient, EntityClientError
from workout_log.ui.events import EventSink, Toast
from workout_log.workout.draft import WorkoutDraft, draft_to_payload, init_blank, init_from_record
from workout_log.workout.model import Workout
from workout_log.workout.validation import FieldError, validate_draft

logger = logging.getLogger(__name__)

DialogMode = Literal["create", "edit"]
SavedCallback = Callable[[], Awaitable[object]]


class DialogController:
    def __init__(
        self,
        client: EntityClient,
        sink: EventSink,
        on_saved: Optional[SavedCallback] = None,
        today: Callable[[], date] = date.today,
        tz: tzinfo = timezone.utc,
    ) -> None:
        self._client = client
        self._sink = sink
        self._on_saved = on_saved
        self._today = today
        self._tz = tz
        self.is_open = False
        self.mode: DialogMode = "create"
        self.editing_id: str | None = None
        self.draft: WorkoutDraft = init_blank(today())
        self.errors: list[FieldError] = []
        self.submitting = False

    @property
    def title(self) -> str:
        return "Edit Workout" if self.mode == "edit" else "Log New Workout"

    @property
    def submit_label(self) -> str:
        return "Update Workout" if self.mode == "edit" else "Save Workout"

    def open_for_create(self) -> None:
        self.mode = "create"
        self.editing_id = None
        self.draft = init_blank(self._today())
        self.errors = []
        self.is_open = True

    def open_for_edit(self, record: Workout) -> None:
        self.mode = "edit"
        self.editing_id = record.id
        self.draft = init_from_record(record)
        self.errors = []
        self.is_open = True

    def cancel(self) -> None:
        self._reset()

    def update(self, handler: Callable[..., WorkoutDraft], *args: Any) -> WorkoutDraft:
        """Apply a draft handler, e.g. ``update(set_name, "Leg Day")``."""
        self.draft = handler(self.draft, *args)
        return self.draft

    def _reset(self) -> None:
        self.is_open = False
        self.mode = "create"
        self.editing_id = None
        self.draft = init_blank(self._today())
        self.errors = []

    async def submit(self) -> bool:
        if not self.is_open or self.submitting:
            return False

        self.errors = validate_draft(self.draft)
        if self.errors:
            return False

        editing = self.mode == "edit"
        if editing and self.editing_id is None:
            raise RuntimeError("Edit dialog has no record to update")
        payload = draft_to_payload(self.draft, self._tz)
        self.submitting = True
        try:
            if self.editing_id is not None:
                response = await self._client.update(self.editing_id, payload)
            else:
                response = await self._client.create(payload)
            if not response.success:
                raise EntityClientError(f"{'update' if editing else 'create'}() reported failure")
        except EntityClientError as exc:
            logger.error("Failed to save workout: %s", exc)
            self._sink(Toast("error", "Failed to save workout"))
            return False
        finally:
            self.submitting = False

        self._sink(
            Toast(
                "success",
                "Workout updated successfully" if editing else "Workout logged successfully",
            )
        )
        self._reset()
        if self._on_saved is not None:
            await self._on_saved()
        return True
