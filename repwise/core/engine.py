"""Session-scoped entry point tying suggestions, rest timers and the log together."""

from __future__ import annotations

from typing import Any, Iterable, Mapping

from loguru import logger

from repwise.core.state import SessionState
from repwise.workout.classifier import classify
from repwise.workout.customize import customize_template
from repwise.workout.export import export_log
from repwise.workout.library import DEFAULT_TEMPLATE_TABLE
from repwise.workout.model import ExerciseKind, ExerciseTemplate, WorkoutEntry
from repwise.workout.resolver import list_programs, resolve
from repwise.workout.session_log import SessionLog, build_custom_entry, entries_from_templates
from repwise.workout.timer import CompletionCallback, RestTimers


class WorkoutEngine:
    def __init__(
        self,
        table: Mapping[str, Any] | None = None,
        log: SessionLog | None = None,
        on_rest_complete: CompletionCallback | None = None,
    ) -> None:
        self.table: Mapping[str, Any] = DEFAULT_TEMPLATE_TABLE if table is None else table
        self.log = log if log is not None else SessionLog()
        self.timers = RestTimers()
        self.suggestions: list[ExerciseTemplate] = []
        programs = list_programs(self.table)
        self.state = SessionState(program=programs[0] if programs else "")
        if on_rest_complete is not None:
            self.timers.add_listener(on_rest_complete)

    def select(
        self,
        *,
        program: str | None = None,
        day: str | None = None,
        mood: str | None = None,
        workout_name: str | None = None,
    ) -> SessionState:
        if program is not None:
            self.state.program = program
        if day is not None:
            self.state.day = day
        if mood is not None:
            self.state.mood = mood
        if workout_name is not None:
            self.state.workout_name = workout_name
        return self.state

    def classify(self, name: str) -> ExerciseKind:
        return classify(name)

    def resolve(self, program: str, weekday: str, mood: str) -> list[ExerciseTemplate]:
        return resolve(self.table, program, weekday, mood)

    def suggest(self) -> list[ExerciseTemplate]:
        """Resolve the current selection and keep it as the editable suggestion list."""
        self.suggestions = self.resolve(self.state.program, self.state.day, self.state.mood)
        owner = self.timers.exercise.owner_key
        if owner is not None and self.find_suggestion(owner) is None:
            self.timers.exercise.stop()
        logger.bind(
            program=self.state.program,
            day=self.state.day,
            mood=self.state.mood,
            count=len(self.suggestions),
        ).info("Generated suggestion")
        return list(self.suggestions)

    def find_suggestion(self, key: str) -> ExerciseTemplate | None:
        return next((item for item in self.suggestions if item.key == key), None)

    def customize(self, key: str, **changes: object) -> ExerciseTemplate:
        for index, template in enumerate(self.suggestions):
            if template.key == key:
                updated = customize_template(template, **changes)
                self.suggestions[index] = updated
                return updated
        raise KeyError(f"No suggested exercise with key '{key}'")

    def start_timer(
        self,
        timer_id: str,
        duration_text: str | None = None,
        owner_key: str | None = None,
    ) -> int:
        return self.timers.start_timer(timer_id, duration_text, owner_key=owner_key)

    def start_exercise_rest(self, key: str) -> int:
        template = self.find_suggestion(key)
        if template is None:
            raise KeyError(f"No suggested exercise with key '{key}'")
        return self.timers.start_timer("exercise", template.rest, owner_key=key)

    def tick(self, timer_id: str) -> bool:
        return self.timers.tick(timer_id)

    def stop_timer(self, timer_id: str) -> None:
        self.timers.stop_timer(timer_id)

    def append_to_log(self, entries: Iterable[WorkoutEntry]) -> None:
        self.log.append(*entries)

    def save_suggestions(self) -> list[WorkoutEntry]:
        entries = entries_from_templates(
            self.suggestions,
            program=self.state.program,
            day=self.state.day,
            mood=self.state.mood,
        )
        self.append_to_log(entries)
        return entries

    def add_custom_entry(self, exercise: str, **fields: object) -> WorkoutEntry:
        entry = build_custom_entry(
            workout_name=self.state.workout_name,
            exercise=exercise,
            program=self.state.program,
            day=self.state.day,
            mood=self.state.mood,
            **fields,  # type: ignore[arg-type]
        )
        self.log.append(entry)
        return entry

    def clear_log(self) -> None:
        self.log.clear()

    def export_log(self) -> str:
        return export_log(self.log)
