"""In-memory log of exercises performed during the current session."""

from __future__ import annotations

import threading
from datetime import date
from typing import Iterable, Iterator
from uuid import uuid4

from loguru import logger

from repwise.workout.classifier import classify
from repwise.workout.customize import coerce_int, coerce_number, coerce_text
from repwise.workout.model import (
    BodyweightPrescription,
    ExerciseTemplate,
    Prescription,
    StrengthPrescription,
    TimedPrescription,
    WorkoutEntry,
)


class EntryValidationError(ValueError):
    """Raised when a manually added exercise misses a required field."""


def new_entry_key() -> str:
    return f"entry-{uuid4().hex}"


class SessionLog:
    """Append-only, insertion-ordered collection of ``WorkoutEntry``."""

    def __init__(self, entries: Iterable[WorkoutEntry] = ()) -> None:
        self._entries: list[WorkoutEntry] = list(entries)
        self._lock = threading.Lock()

    def append(self, *entries: WorkoutEntry) -> None:
        if not entries:
            return
        with self._lock:
            self._entries.extend(entries)
            size = len(self._entries)
        logger.bind(added=len(entries), size=size).info("Logged exercises")

    def clear(self) -> None:
        with self._lock:
            removed = len(self._entries)
            self._entries.clear()
        logger.bind(removed=removed).info("Cleared session log")

    @property
    def entries(self) -> tuple[WorkoutEntry, ...]:
        with self._lock:
            return tuple(self._entries)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __iter__(self) -> Iterator[WorkoutEntry]:
        return iter(self.entries)

    def __bool__(self) -> bool:
        return len(self) > 0


def entries_from_templates(
    templates: Iterable[ExerciseTemplate],
    *,
    program: str,
    day: str,
    mood: str,
    on: date | None = None,
) -> list[WorkoutEntry]:
    """Turn a (customized) suggestion list into log entries."""
    logged_on = on or date.today()
    return [
        WorkoutEntry(
            key=new_entry_key(),
            date=logged_on,
            day=day,
            mood=mood,
            program=program,
            workout_name=f"{program} Workout",
            exercise=template.name,
            kind=template.kind,
            prescription=template.prescription,
        )
        for template in templates
    ]


def build_custom_entry(
    *,
    workout_name: str,
    exercise: str,
    program: str,
    day: str,
    mood: str,
    sets: object = 3,
    reps: object = 10,
    weight: object = 0,
    rest: object = "60s",
    duration: object = "30min",
    on: date | None = None,
) -> WorkoutEntry:
    """Build a manually entered exercise; fields the kind does not carry are dropped."""
    workout_name = workout_name.strip()
    exercise = exercise.strip()
    missing = [
        label
        for label, value in (("workout name", workout_name), ("exercise", exercise))
        if not value
    ]
    if missing:
        raise EntryValidationError(f"Please fill in: {', '.join(missing)}")

    kind = classify(exercise)
    prescription: Prescription
    if kind == "weight":
        prescription = StrengthPrescription(
            sets=max(1, coerce_int(sets, 1)),
            reps=max(1, coerce_int(reps, 1)),
            weight=coerce_number(weight, 0),
            rest=coerce_text(rest),
        )
    elif kind == "bodyweight":
        prescription = BodyweightPrescription(
            sets=max(1, coerce_int(sets, 1)),
            reps=max(1, coerce_int(reps, 1)),
            rest=coerce_text(rest),
        )
    else:
        prescription = TimedPrescription(duration=coerce_text(duration))

    return WorkoutEntry(
        key=new_entry_key(),
        date=on or date.today(),
        day=day,
        mood=mood,
        program=program,
        workout_name=workout_name,
        exercise=exercise,
        kind=kind,
        prescription=prescription,
    )
