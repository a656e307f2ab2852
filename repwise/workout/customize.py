"""Trainee edits of suggested exercises.

Numeric input is coerced rather than rejected: text that does not start with a
number falls back to a default, the same way the entry form has always behaved.
"""

from __future__ import annotations

import math
import re
from dataclasses import replace

from repwise.workout.model import KIND_FIELDS, ExerciseTemplate, Reps


_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")
_LEADING_NUMBER = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+))")


def coerce_int(raw: object, default: int) -> int:
    """Leading integer of ``raw``; zero or unparseable input gives ``default``."""
    if isinstance(raw, bool):
        return default
    if isinstance(raw, int):
        return raw or default
    if isinstance(raw, float):
        if not math.isfinite(raw):
            return default
        return int(raw) or default
    if raw is None:
        return default
    match = _LEADING_INT.match(str(raw))
    if match is None:
        return default
    return int(match.group(1)) or default


def coerce_number(raw: object, default: float) -> float:
    if isinstance(raw, bool) or raw is None:
        return default
    if isinstance(raw, int):
        return raw or default
    if isinstance(raw, float):
        value = raw
    else:
        match = _LEADING_NUMBER.match(str(raw))
        if match is None:
            return default
        value = float(match.group(1))
    if not value or not math.isfinite(value):
        return default
    return int(value) if value.is_integer() else value


def coerce_text(raw: object) -> str | None:
    if raw is None:
        return None
    text = str(raw).strip()
    return text or None


def coerce_reps(raw: object, default: int) -> Reps:
    """Reps from configuration: a count, or a scheme such as ``AMRAP``."""
    if isinstance(raw, str) and _LEADING_INT.match(raw) is None:
        return raw.strip() or default
    return coerce_int(raw, default)


# Trainee input: counts are clamped to at least one, loads to at least zero.
# Reps schemes are not typed.
_COERCERS = {
    "sets": lambda raw: max(1, coerce_int(raw, 1)),
    "reps": lambda raw: max(1, coerce_int(raw, 1)),
    "weight": lambda raw: max(0, coerce_number(raw, 0)),
    "rest": coerce_text,
    "duration": coerce_text,
}


def customize_template(template: ExerciseTemplate, **changes: object) -> ExerciseTemplate:
    """Return a copy of ``template`` with trainee edits applied.

    Only fields carried by the template's kind may be edited, so a customized
    template always keeps a payload that matches its kind.
    """
    allowed = KIND_FIELDS[template.kind]
    unknown = sorted(set(changes) - set(allowed))
    if unknown:
        raise ValueError(
            f"{template.kind} exercise '{template.name}' has no field(s): {', '.join(unknown)}"
        )
    coerced = {name: _COERCERS[name](value) for name, value in changes.items()}
    return replace(template, prescription=replace(template.prescription, **coerced))
