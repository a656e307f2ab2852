"""NiceGUI web UI for Repwise."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

from loguru import logger
from nicegui import ui

from repwise.core.engine import WorkoutEngine
from repwise.workout.export import EmptyLogError, write_export
from repwise.workout.library import MOODS, WEEKDAYS
from repwise.workout.model import (
    ExerciseTemplate,
    StrengthPrescription,
    TimedPrescription,
    WorkoutEntry,
)
from repwise.workout.resolver import list_programs
from repwise.workout.session_log import EntryValidationError
from repwise.workout.timer import TimerCompleted

CLOCK_INTERVAL_SEC = 1.0

LOG_COLUMNS: tuple[tuple[str, str], ...] = (
    ("date", "Date"),
    ("workout_name", "Workout"),
    ("exercise", "Exercise"),
    ("kind", "Type"),
    ("detail", "Details"),
)


def _entry_detail(entry: WorkoutEntry) -> str:
    prescription = entry.prescription
    if isinstance(prescription, TimedPrescription):
        return f"Duration: {prescription.duration or '-'}"
    text = f"{prescription.sets} x {prescription.reps}"
    if isinstance(prescription, StrengthPrescription):
        text += f" @ {prescription.weight} lbs"
    if prescription.rest:
        text += f" (rest {prescription.rest})"
    return text


def run_web_ui(
    *,
    table: Mapping[str, Any] | None = None,
    host: str = "127.0.0.1",
    port: int = 8090,
    export_dir: Path | None = None,
) -> int:
    def on_rest_complete(event: TimerCompleted) -> None:
        ui.notify("Rest Complete - time to start your next set!", color="positive")

    engine = WorkoutEngine(table=table, on_rest_complete=on_rest_complete)
    ui.add_head_html(
        """
        <style>
          body { background: #0b1220; color: #e5e7eb; font-family: Arial, "Segoe UI", sans-serif; }
          .rw-card {
            background: linear-gradient(180deg, #0f1b35 0%, #132449 100%);
            border: 1px solid rgba(148, 163, 184, 0.22);
            border-radius: 14px;
          }
          .rw-muted { color: #9caecf; }
        </style>
        """
    )

    summary_labels: dict[str, ui.label] = {}
    rest_widgets: dict[str, tuple[ui.button, ui.label]] = {}

    with ui.column().classes("w-full gap-1"):
        ui.label("Workout Planner").classes("text-xl font-semibold tracking-wide")
        ui.label("Generate suggested workouts or build your own session").classes("rw-muted")

    with ui.card().classes("w-full rw-card"):
        with ui.row().classes("w-full items-end gap-2"):
            session_label = ui.label("Rest Timer: 60s").classes("text-lg font-semibold")
            session_rest_input = ui.input("Rest", value="60s").classes("w-24")
            session_start_btn = ui.button("Start Rest")
            session_pause_btn = ui.button("Pause")
            session_reset_btn = ui.button("Reset").props("outline")

    with ui.card().classes("w-full rw-card"):
        ui.label("Today's Activity").classes("text-lg font-semibold")
        with ui.row().classes("w-full items-end gap-2"):
            program_select = ui.select(
                list_programs(engine.table), value=engine.state.program or None, label="Program"
            ).classes("min-w-[200px]")
            day_select = ui.select(
                [day.capitalize() for day in WEEKDAYS], value=engine.state.day, label="Day"
            )
            mood_select = ui.select(
                [mood.capitalize() for mood in MOODS], value=engine.state.mood, label="Feeling"
            )
            generate_btn = ui.button("Generate Workout")

    with ui.card().classes("w-full rw-card"):
        ui.label("Suggested Workout").classes("text-lg font-semibold")
        suggestions_box = ui.column().classes("w-full gap-2")
        save_suggested_btn = ui.button("Save This Workout").props("color=primary")

    with ui.card().classes("w-full rw-card"):
        ui.label("Add Custom Exercise").classes("text-lg font-semibold")
        with ui.row().classes("w-full items-end gap-2"):
            workout_name_input = ui.input("Workout name")
            exercise_input = ui.input("Exercise")
            sets_input = ui.number("Sets", value=3, min=1)
            reps_input = ui.number("Reps", value=10, min=1)
            weight_input = ui.number("Weight (lbs)", value=0, min=0)
            rest_input = ui.input("Rest", value="60s")
            duration_input = ui.input("Duration", value="30min")
            add_custom_btn = ui.button("Add Exercise")

    with ui.card().classes("w-full rw-card"):
        ui.label("Workout Log").classes("text-lg font-semibold")
        log_table = ui.table(
            columns=[{"name": name, "label": label, "field": name} for name, label in LOG_COLUMNS],
            rows=[],
            row_key="key",
        ).classes("w-full")
        with ui.row().classes("w-full gap-2"):
            export_btn = ui.button("Export as CSV")
            clear_btn = ui.button("Clear Log").props("color=negative outline")

    with ui.dialog() as clear_dialog, ui.card():
        ui.label("Are you sure you want to clear your workout log?")
        with ui.row().classes("gap-2"):
            cancel_clear_btn = ui.button("Cancel").props("outline")
            confirm_clear_btn = ui.button("Clear").props("color=negative")

    def refresh_log() -> None:
        log_table.rows = [
            {
                "key": entry.key,
                "date": entry.date.isoformat(),
                "workout_name": entry.workout_name,
                "exercise": entry.exercise,
                "kind": entry.kind,
                "detail": _entry_detail(entry),
            }
            for entry in engine.log
        ]
        log_table.update()

    def refresh_timers() -> None:
        session = engine.timers.session
        session_label.text = f"Rest Timer: {session.remaining_sec}s"
        session_pause_btn.text = "Pause" if session.is_active else "Resume"
        exercise = engine.timers.exercise
        for key, (button, resting_label) in rest_widgets.items():
            template = engine.find_suggestion(key)
            resting = exercise.is_active and exercise.owner_key == key
            button.set_visibility(not resting)
            resting_label.set_visibility(resting)
            if resting:
                resting_label.text = f"Resting: {exercise.remaining_sec}s left"
            elif template is not None:
                button.text = f"Start {template.rest or '60s'} Rest"

    def render_exercise(template: ExerciseTemplate) -> None:
        key = template.key
        prescription = template.prescription
        with ui.card().classes("w-full rw-card"):
            ui.label(template.name).classes("text-base font-semibold")
            summary_labels[key] = ui.label(template.summary()).classes("rw-muted")
            with ui.row().classes("w-full items-end gap-2"):
                if isinstance(prescription, TimedPrescription):
                    ui.input(
                        "Duration",
                        value=prescription.duration or "",
                        placeholder="e.g., 30min",
                        on_change=lambda e, k=key: on_edit(k, duration=e.value),
                    )
                    return
                if isinstance(prescription, StrengthPrescription):
                    ui.number(
                        "Weight (lbs)",
                        value=prescription.weight,
                        min=0,
                        on_change=lambda e, k=key: on_edit(k, weight=e.value),
                    )
                ui.number(
                    "Sets",
                    value=prescription.sets,
                    min=1,
                    on_change=lambda e, k=key: on_edit(k, sets=e.value),
                )
                ui.input(
                    "Reps",
                    value=str(prescription.reps),
                    on_change=lambda e, k=key: on_edit(k, reps=e.value),
                )
                ui.input(
                    "Rest",
                    value=prescription.rest or "",
                    placeholder="e.g., 60s",
                    on_change=lambda e, k=key: on_edit(k, rest=e.value),
                )
                rest_btn = ui.button(
                    f"Start {prescription.rest or '60s'} Rest",
                    on_click=lambda k=key: on_exercise_rest(k),
                ).props("outline")
                resting_label = ui.label("").classes("font-semibold")
                resting_label.set_visibility(False)
                rest_widgets[key] = (rest_btn, resting_label)

    def render_suggestions() -> None:
        suggestions_box.clear()
        summary_labels.clear()
        rest_widgets.clear()
        with suggestions_box:
            if not engine.suggestions:
                ui.label("Generate a workout based on your day and energy level").classes(
                    "rw-muted"
                )
            for template in engine.suggestions:
                render_exercise(template)
        refresh_timers()

    def on_edit(key: str, **changes: object) -> None:
        updated = engine.customize(key, **changes)
        label = summary_labels.get(key)
        if label is not None:
            label.text = updated.summary()
        refresh_timers()

    def on_exercise_rest(key: str) -> None:
        engine.start_exercise_rest(key)
        refresh_timers()

    def on_generate() -> None:
        engine.select(
            program=str(program_select.value or ""),
            day=str(day_select.value or "Monday"),
            mood=str(mood_select.value or "Good"),
        )
        if not engine.suggest():
            ui.notify("No workout configured for this day and mood", color="warning")
        render_suggestions()

    def on_save_suggested() -> None:
        if not engine.suggestions:
            ui.notify("Generate a workout first", color="negative")
            return
        engine.save_suggestions()
        ui.notify("Workout saved to your log!", color="positive")
        refresh_log()

    def on_add_custom() -> None:
        engine.select(
            program=str(program_select.value or ""),
            day=str(day_select.value or "Monday"),
            mood=str(mood_select.value or "Good"),
            workout_name=str(workout_name_input.value or ""),
        )
        try:
            engine.add_custom_entry(
                str(exercise_input.value or ""),
                sets=sets_input.value,
                reps=reps_input.value,
                weight=weight_input.value,
                rest=rest_input.value,
                duration=duration_input.value,
            )
        except EntryValidationError as exc:
            ui.notify(str(exc), color="negative")
            return
        exercise_input.value = ""
        weight_input.value = 0
        ui.notify("Exercise added to your workout!", color="positive")
        refresh_log()

    def on_export() -> None:
        try:
            path = write_export(engine.log, out_dir=export_dir)
        except EmptyLogError:
            ui.notify("No workouts to save", color="negative")
            return
        except OSError as exc:
            logger.bind(error=str(exc)).warning("Failed to write workout log export")
            ui.notify("Failed to save workout log", color="negative")
            return
        ui.notify(f"Workout log saved: {path.name}", color="positive")
        ui.download(str(path), filename=path.name)

    def on_confirm_clear() -> None:
        engine.clear_log()
        clear_dialog.close()
        refresh_log()

    def on_session_start() -> None:
        engine.start_timer("session", str(session_rest_input.value or ""))
        refresh_timers()

    def on_session_pause() -> None:
        session = engine.timers.session
        if session.is_active:
            session.pause()
        else:
            session.resume()
        refresh_timers()

    def on_session_reset() -> None:
        engine.stop_timer("session")
        refresh_timers()

    def on_clock() -> None:
        engine.timers.tick_active()
        refresh_timers()

    generate_btn.on_click(on_generate)
    save_suggested_btn.on_click(on_save_suggested)
    add_custom_btn.on_click(on_add_custom)
    export_btn.on_click(on_export)
    clear_btn.on_click(clear_dialog.open)
    cancel_clear_btn.on_click(clear_dialog.close)
    confirm_clear_btn.on_click(on_confirm_clear)
    session_start_btn.on_click(on_session_start)
    session_pause_btn.on_click(on_session_pause)
    session_reset_btn.on_click(on_session_reset)

    render_suggestions()
    refresh_log()
    ui.timer(CLOCK_INTERVAL_SEC, on_clock)
    ui.run(host=host, port=port, reload=False, title="Repwise Workout Planner")
    return 0
