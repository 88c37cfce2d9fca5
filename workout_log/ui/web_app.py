"""NiceGUI web UI for the workout log."""

from __future__ import annotations

import logging
from datetime import date, timezone, tzinfo
from typing import Any

from nicegui import ui

from workout_log.entity.client import EntityClient
from workout_log.ui.controller import WorkoutTrackerController
from workout_log.ui.events import ConfirmRequest, Toast, UIEvent
from workout_log.workout.catalog import exercise_options
from workout_log.workout.draft import (
    add_exercise,
    add_set,
    remove_exercise,
    remove_set,
    set_date,
    set_duration,
    set_exercise_name,
    set_name,
    set_notes,
    set_set_value,
)
from workout_log.workout.listing import PAGE_SIZE_OPTIONS
from workout_log.workout.validation import errors_by_field

logger = logging.getLogger(__name__)

TOAST_COLORS = {"success": "positive", "error": "negative", "info": "info"}

TABLE_COLUMNS: list[dict[str, Any]] = [
    {"name": "date", "label": "Date", "field": "date", "align": "left"},
    {"name": "name", "label": "Workout", "field": "name", "align": "left"},
    {"name": "exercises", "label": "Exercises", "field": "tags", "align": "left"},
    {"name": "duration", "label": "Duration", "field": "duration", "align": "left"},
    {"name": "actions", "label": "Actions", "field": "id", "align": "right"},
]

EXERCISES_SLOT = r"""
<q-td key="exercises" :props="props">
  <q-chip v-for="tag in props.row.tags" :key="tag" dense square>{{ tag }}</q-chip>
  <q-chip v-if="props.row.more" dense square outline>{{ props.row.more }}</q-chip>
</q-td>
"""

DATE_HEADER_SLOT = r"""
<q-th :props="props" class="cursor-pointer" @click="() => $parent.$emit('sort_date')">
  {{ props.col.label }}
</q-th>
"""

ACTIONS_SLOT = r"""
<q-td key="actions" :props="props">
  <q-btn flat dense round icon="edit" @click="() => $parent.$emit('edit', props.row)" />
  <q-btn flat dense round icon="delete" color="negative"
         @click="() => $parent.$emit('delete', props.row)" />
</q-td>
"""


def _parse_day(text: str | None) -> date | None:
    if not text or not text.strip():
        return None
    try:
        return date.fromisoformat(text.strip())
    except ValueError:
        return None


def _field_error(message: str | None) -> None:
    if message:
        ui.label(message).classes("text-negative text-xs")


def run_web_ui(
    client: EntityClient,
    host: str = "127.0.0.1",
    port: int = 8088,
    page_size: int = 10,
    demo: bool = False,
    tz: tzinfo = timezone.utc,
) -> int:
    pending_confirm: ConfirmRequest | None = None

    def on_event(event: UIEvent) -> None:
        nonlocal pending_confirm
        if isinstance(event, Toast):
            ui.notify(event.message, color=TOAST_COLORS[event.level])
            return
        pending_confirm = event
        confirm_title.text = event.title
        confirm_message.text = event.message
        confirm_ok_btn.text = event.ok_label
        confirm_ok_btn.props("color=negative" if event.danger else "color=primary")
        confirm_dialog.open()

    controller = WorkoutTrackerController(client, on_event, page_size=page_size, tz=tz)
    list_view = controller.list_view
    dialog = controller.dialog

    ui.add_head_html(
        """
        <style>
          .wl-card {
            border-radius: 12px;
            box-shadow: 0 10px 20px rgba(15, 23, 42, 0.12);
          }
          .wl-exercise {
            background: #f8fafc;
            border-radius: 10px;
          }
          .wl-muted {
            color: #64748b;
          }
        </style>
        """
    )

    with ui.column().classes("w-full max-w-6xl mx-auto p-6 gap-6"):
        with ui.column().classes("w-full items-center gap-1"):
            ui.label("Workout Tracker").classes("text-3xl font-semibold")
            ui.label("Track your fitness journey and monitor your progress").classes("wl-muted")
            if demo:
                ui.label("DEMO MODE - in-memory data, nothing is saved").classes(
                    "text-orange-500 font-bold"
                )

        with ui.row().classes("w-full justify-center"):
            new_btn = ui.button("Log New Workout", icon="add").props("size=lg color=primary")

        with ui.card().classes("w-full wl-card"):
            table = ui.table(
                columns=[dict(column) for column in TABLE_COLUMNS],
                rows=[],
                row_key="id",
                pagination=0,
            ).classes("w-full").props("hide-bottom")
            table.add_slot("header-cell-date", DATE_HEADER_SLOT)
            table.add_slot("body-cell-exercises", EXERCISES_SLOT)
            table.add_slot("body-cell-actions", ACTIONS_SLOT)
            with ui.row().classes("w-full items-center justify-end gap-4"):
                total_label = ui.label(list_view.total_label).classes("wl-muted")
                pager = ui.pagination(1, 1, direction_links=True, value=1)
                jump_input = ui.number("Go to page", min=1, step=1, format="%d").classes("w-28")
                page_size_select = ui.select(
                    list(PAGE_SIZE_OPTIONS),
                    value=list_view.pagination.page_size,
                    label="Per page",
                ).classes("w-28")

    with ui.dialog().props("persistent") as form_dialog, ui.card().classes(
        "w-[800px] max-w-[96vw] wl-card"
    ):

        @ui.refreshable
        def render_form() -> None:
            draft = dialog.draft
            errors = errors_by_field(dialog.errors)

            ui.label(dialog.title).classes("text-lg font-semibold")
            with ui.row().classes("w-full gap-4 no-wrap"):
                with ui.column().classes("flex-1 gap-0"):
                    day_text = draft.date.isoformat() if draft.date else ""
                    with ui.input(
                        "Workout Date",
                        value=day_text,
                        on_change=lambda e: dialog.update(set_date, _parse_day(e.value)),
                    ).classes("w-full") as date_input:
                        with ui.menu().props("no-parent-event") as date_menu:
                            ui.date(
                                value=day_text,
                                on_change=lambda e: date_input.set_value(e.value),
                            )
                        with date_input.add_slot("append"):
                            ui.icon("event").on("click", date_menu.open).classes("cursor-pointer")
                    _field_error(errors.get("date"))
                with ui.column().classes("flex-1 gap-0"):
                    ui.input(
                        "Workout Name",
                        value=draft.name,
                        placeholder="e.g., Upper Body, Leg Day, Cardio",
                        on_change=lambda e: dialog.update(set_name, e.value),
                    ).classes("w-full")
                    _field_error(errors.get("name"))

            ui.number(
                "Duration (minutes)",
                value=draft.duration_min,
                min=0,
                placeholder="How long was your workout?",
                on_change=lambda e: dialog.update(set_duration, e.value),
            ).classes("w-full")

            ui.separator()
            ui.label("Exercises").classes("text-sm wl-muted self-center")

            for ex_idx, exercise in enumerate(draft.exercises):
                with ui.card().classes("w-full wl-exercise"):
                    with ui.row().classes("w-full items-start no-wrap"):
                        with ui.column().classes("flex-1 gap-0"):
                            ui.select(
                                exercise_options(exercise.name),
                                label="Exercise",
                                value=exercise.name or None,
                                with_input=True,
                                new_value_mode="add-unique",
                                clearable=True,
                                on_change=lambda e, i=ex_idx: dialog.update(
                                    set_exercise_name, i, e.value
                                ),
                            ).classes("w-full")
                            _field_error(errors.get(f"exercises.{ex_idx}.name"))
                        ui.button(
                            icon="delete",
                            on_click=lambda i=ex_idx: on_remove_exercise(i),
                        ).props("flat round color=negative")

                    for set_idx, item in enumerate(exercise.sets):
                        with ui.row().classes("w-full items-center gap-2 no-wrap"):
                            ui.label(f"Set {set_idx + 1}:").classes("w-12")
                            ui.number(
                                "Reps",
                                value=item.reps,
                                min=0,
                                on_change=lambda e, i=ex_idx, j=set_idx: dialog.update(
                                    set_set_value, i, j, "reps", e.value
                                ),
                            ).classes("flex-1")
                            ui.label("×")
                            ui.number(
                                "Weight",
                                value=item.weight,
                                min=0,
                                on_change=lambda e, i=ex_idx, j=set_idx: dialog.update(
                                    set_set_value, i, j, "weight", e.value
                                ),
                            ).classes("flex-1")
                            ui.number(
                                "Duration (s)",
                                value=item.duration_sec,
                                min=0,
                                on_change=lambda e, i=ex_idx, j=set_idx: dialog.update(
                                    set_set_value, i, j, "duration_sec", e.value
                                ),
                            ).classes("flex-1")
                            ui.button(
                                icon="delete",
                                on_click=lambda i=ex_idx, j=set_idx: on_remove_set(i, j),
                            ).props("flat dense size=sm color=negative")
                    ui.button(
                        "Add Set",
                        on_click=lambda i=ex_idx: on_add_set(i),
                    ).props("outline").classes("w-full")

            ui.button("Add Exercise", icon="add", on_click=lambda: on_add_exercise()).props(
                "outline"
            ).classes("w-full")

            ui.textarea(
                "Notes",
                value=draft.notes or "",
                placeholder="Any additional notes about your workout...",
                on_change=lambda e: dialog.update(set_notes, e.value),
            ).props("rows=3").classes("w-full")

            with ui.row().classes("w-full justify-end gap-2"):
                ui.button("Cancel", on_click=lambda: on_cancel()).props("outline")
                ui.button(dialog.submit_label, on_click=lambda: on_submit()).props(
                    "color=primary"
                ).bind_enabled_from(dialog, "submitting", backward=lambda busy: not busy)

        render_form()

    with ui.dialog() as confirm_dialog, ui.card().classes("wl-card"):
        confirm_title = ui.label("").classes("text-lg font-semibold")
        confirm_message = ui.label("")
        with ui.row().classes("w-full justify-end gap-2"):
            confirm_cancel_btn = ui.button("Cancel").props("outline")
            confirm_ok_btn = ui.button("OK")

    def refresh_table() -> None:
        if list_view.loading:
            table.props("loading")
        else:
            table.props(remove="loading")
        table.columns[0]["label"] = list_view.date_label
        table.rows = [row.as_table_row() for row in list_view.page_rows]
        table.update()
        pager.max = list_view.pagination.page_count(list_view.total)
        if pager.value != list_view.pagination.page:
            pager.value = list_view.pagination.page
        total_label.text = list_view.total_label

    async def reload() -> None:
        table.props("loading")
        await list_view.load()
        refresh_table()

    def on_new() -> None:
        controller.open_for_create()
        render_form.refresh()
        form_dialog.open()

    def on_edit(row: dict[str, Any]) -> None:
        if not controller.open_for_edit(str(row["id"])):
            ui.notify("Workout no longer exists", color="negative")
            return
        render_form.refresh()
        form_dialog.open()

    def on_delete(row: dict[str, Any]) -> None:
        controller.request_delete(str(row["id"]))

    def on_add_exercise() -> None:
        dialog.update(add_exercise)
        render_form.refresh()

    def on_remove_exercise(index: int) -> None:
        dialog.update(remove_exercise, index)
        render_form.refresh()

    def on_add_set(exercise_index: int) -> None:
        dialog.update(add_set, exercise_index)
        render_form.refresh()

    def on_remove_set(exercise_index: int, set_index: int) -> None:
        dialog.update(remove_set, exercise_index, set_index)
        render_form.refresh()

    def on_cancel() -> None:
        dialog.cancel()
        form_dialog.close()

    async def on_submit() -> None:
        if dialog.submitting:
            return
        table.props("loading")
        saved = await dialog.submit()
        refresh_table()
        if saved:
            form_dialog.close()
        else:
            render_form.refresh()

    def on_confirm_cancel() -> None:
        nonlocal pending_confirm
        pending_confirm = None
        confirm_dialog.close()

    async def on_confirm_ok() -> None:
        nonlocal pending_confirm
        request = pending_confirm
        pending_confirm = None
        confirm_dialog.close()
        if request is None:
            return
        table.props("loading")
        await request.on_confirm()
        refresh_table()

    def on_page_change() -> None:
        list_view.go_to_page(int(pager.value or 1))
        refresh_table()

    def on_jump() -> None:
        if jump_input.value is None:
            return
        list_view.go_to_page(int(jump_input.value))
        jump_input.set_value(None)
        refresh_table()

    def on_sort_date() -> None:
        list_view.toggle_date_order()
        refresh_table()

    def on_page_size_change() -> None:
        list_view.set_page_size(int(page_size_select.value or page_size))
        refresh_table()

    new_btn.on_click(on_new)
    table.on("edit", lambda e: on_edit(e.args))
    table.on("delete", lambda e: on_delete(e.args))
    table.on("sort_date", lambda _: on_sort_date())
    jump_input.on("keydown.enter", lambda _: on_jump())
    pager.on_value_change(lambda _: on_page_change())
    page_size_select.on_value_change(lambda _: on_page_size_change())
    confirm_cancel_btn.on_click(on_confirm_cancel)
    confirm_ok_btn.on_click(on_confirm_ok)

    ui.timer(0.1, reload, once=True)
    logger.info("Serving workout log on http://%s:%d", host, port)
    ui.run(host=host, port=port, reload=False, title="Workout Tracker")
    return 0
