"""Resolve (program, weekday, mood) to a suggested exercise list.

Records are coerced, never rejected: sets are at least one, loads at least
zero, and unreadable or non-finite numbers fall back to the defaults.
"""

from __future__ import annotations

import re
from typing import Any, Mapping
from uuid import uuid4

from loguru import logger

from repwise.workout.classifier import classify
from repwise.workout.customize import coerce_int, coerce_number, coerce_reps, coerce_text
from repwise.workout.model import (
    DEFAULT_REPS,
    DEFAULT_SETS,
    DEFAULT_WEIGHT,
    EXERCISE_KINDS,
    BodyweightPrescription,
    ExerciseKind,
    ExerciseTemplate,
    Prescription,
    StrengthPrescription,
    TimedPrescription,
)


_SETS_X_REPS = re.compile(r"^(\d+)\s*[xX]\s*(\d+)\s+(.+)$")


def new_template_key() -> str:
    return f"ex-{uuid4().hex}"


def resolve(
    table: Mapping[str, Any],
    program: str,
    weekday: str,
    mood: str,
) -> list[ExerciseTemplate]:
    """Return the suggested exercises for a day, or ``[]`` when none are configured."""
    records = _lookup(table, program, weekday.strip().lower(), mood.strip().lower())
    if records is None:
        logger.bind(program=program, weekday=weekday, mood=mood).debug(
            "No suggestion configured"
        )
        return []

    templates: list[ExerciseTemplate] = []
    for index, raw in enumerate(records):
        template = _build_template(raw)
        if template is None:
            logger.bind(program=program, index=index).debug("Skipping unusable record")
            continue
        templates.append(template)
    return templates


def list_programs(table: Mapping[str, Any]) -> list[str]:
    return [name for name, days in table.items() if isinstance(days, Mapping)]


def list_days(table: Mapping[str, Any], program: str) -> list[str]:
    days = table.get(program)
    if not isinstance(days, Mapping):
        return []
    return [day for day, moods in days.items() if isinstance(moods, Mapping)]


def list_moods(table: Mapping[str, Any], program: str, weekday: str) -> list[str]:
    days = table.get(program)
    if not isinstance(days, Mapping):
        return []
    moods = days.get(weekday.strip().lower())
    if not isinstance(moods, Mapping):
        return []
    return [mood for mood, records in moods.items() if isinstance(records, list)]


def _lookup(
    table: Mapping[str, Any], program: str, weekday: str, mood: str
) -> list[Any] | None:
    node: Any = table
    for key in (program, weekday, mood):
        if not isinstance(node, Mapping):
            return None
        node = node.get(key)
    if not isinstance(node, list):
        return None
    return node


def _build_template(raw: object) -> ExerciseTemplate | None:
    if isinstance(raw, str):
        return _template_from_text(raw)
    if isinstance(raw, Mapping):
        return _template_from_record(raw)
    return None


def _template_from_text(text: str) -> ExerciseTemplate | None:
    name = text.strip()
    sets, reps = DEFAULT_SETS, DEFAULT_REPS
    match = _SETS_X_REPS.match(name)
    if match is not None:
        sets, reps, name = int(match.group(1)), int(match.group(2)), match.group(3).strip()
    if not name:
        return None
    kind = classify(name)
    return ExerciseTemplate(
        key=new_template_key(),
        name=name,
        kind=kind,
        prescription=_prescription(kind, {"sets": sets, "reps": reps}),
    )


def _template_from_record(record: Mapping[str, Any]) -> ExerciseTemplate | None:
    name = coerce_text(record.get("name"))
    if name is None:
        return None
    kind_obj = record.get("type")
    if isinstance(kind_obj, str) and kind_obj.strip().lower() in EXERCISE_KINDS:
        kind: ExerciseKind = kind_obj.strip().lower()  # type: ignore[assignment]
    else:
        kind = classify(name)
    key = coerce_text(record.get("key")) or new_template_key()
    return ExerciseTemplate(
        key=key,
        name=name,
        kind=kind,
        prescription=_prescription(kind, record),
    )


def _prescription(kind: ExerciseKind, record: Mapping[str, Any]) -> Prescription:
    if kind == "weight":
        return StrengthPrescription(
            sets=max(1, coerce_int(record.get("sets"), DEFAULT_SETS)),
            reps=coerce_reps(record.get("reps"), DEFAULT_REPS),
            weight=max(0, coerce_number(record.get("weight"), DEFAULT_WEIGHT)),
            rest=coerce_text(record.get("rest")),
        )
    if kind == "bodyweight":
        return BodyweightPrescription(
            sets=max(1, coerce_int(record.get("sets"), DEFAULT_SETS)),
            reps=coerce_reps(record.get("reps"), DEFAULT_REPS),
            rest=coerce_text(record.get("rest")),
        )
    return TimedPrescription(duration=coerce_text(record.get("duration")))
