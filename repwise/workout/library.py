"""Built-in workout template table and loader for external tables.

A template table maps program name -> lowercase weekday -> lowercase mood ->
list of exercise records. Records are either objects (``name``, ``type``,
``sets``, ``reps``, ``weight``, ``rest``, ``duration``, optional ``key``) or
plain strings such as ``"4x8 Bench press"``.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Mapping

from loguru import logger


TemplateTable = Mapping[str, Mapping[str, Mapping[str, list[Any]]]]

WEEKDAYS: tuple[str, ...] = (
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
    "sunday",
)
MOODS: tuple[str, ...] = ("okay", "good", "great")


class TemplateTableError(ValueError):
    """Raised when a template table file cannot be read."""


def _default_templates_path() -> Path:
    return Path.home() / ".repwise" / "workout_templates.json"


def _rest_days(*, good: list[Any], great: list[Any]) -> dict[str, list[Any]]:
    return {
        "okay": [{"name": "Stretch", "type": "yoga", "duration": "10min"}],
        "good": good,
        "great": great,
    }


_PUSH = {
    "okay": [
        {"name": "Bench Press", "type": "weight", "sets": 3, "reps": 8, "rest": "90s"},
        {"name": "Overhead Press", "type": "weight", "sets": 3, "reps": 8, "rest": "90s"},
        {"name": "Triceps Dips", "type": "bodyweight", "sets": 3, "reps": "AMRAP", "rest": "60s"},
    ],
    "good": [
        {"name": "Bench Press", "type": "weight", "sets": 4, "reps": 8, "rest": "120s"},
        {"name": "Incline Dumbbell Press", "type": "weight", "sets": 3, "reps": 10, "rest": "90s"},
        {"name": "Overhead Press", "type": "weight", "sets": 3, "reps": 8, "rest": "90s"},
        {"name": "Lateral Raises", "type": "weight", "sets": 3, "reps": 15, "rest": "60s"},
        {"name": "Cable Triceps Pushdowns", "type": "weight", "sets": 3, "reps": 12, "rest": "60s"},
    ],
    "great": [
        {"name": "Bench Press", "type": "weight", "sets": 5, "reps": 5, "rest": "180s"},
        {"name": "Incline Dumbbell Press", "type": "weight", "sets": 4, "reps": 10, "rest": "90s"},
        {"name": "Overhead Press", "type": "weight", "sets": 4, "reps": 8, "rest": "120s"},
        {"name": "Lateral Raises", "type": "weight", "sets": 4, "reps": 15, "rest": "60s"},
        {"name": "Cable Flys", "type": "weight", "sets": 3, "reps": 12, "rest": "60s"},
        {"name": "Skull Crushers", "type": "weight", "sets": 3, "reps": 10, "rest": "60s"},
        {"name": "Pushup", "type": "bodyweight", "sets": 2, "reps": "AMRAP", "rest": "60s"},
    ],
}

_PULL = {
    "okay": [
        {"name": "Deadlifts", "type": "weight", "sets": 3, "reps": 5, "rest": "180s"},
        {"name": "Pull-Ups", "type": "bodyweight", "sets": 3, "reps": "AMRAP", "rest": "90s"},
        {"name": "Barbell Rows", "type": "weight", "sets": 3, "reps": 8, "rest": "90s"},
    ],
    "good": [
        {"name": "Deadlifts", "type": "weight", "sets": 3, "reps": 5, "rest": "180s"},
        {"name": "Pull-Ups", "type": "bodyweight", "sets": 4, "reps": 8, "rest": "90s"},
        {"name": "Barbell Rows", "type": "weight", "sets": 4, "reps": 8, "rest": "90s"},
        {"name": "Face Pulls", "type": "weight", "sets": 3, "reps": 15, "rest": "60s"},
        {"name": "Dumbbell Curls", "type": "weight", "sets": 3, "reps": 12, "rest": "60s"},
    ],
    "great": [
        {"name": "Deadlifts", "type": "weight", "sets": 5, "reps": 3, "rest": "180s"},
        {"name": "Pull-Ups", "type": "bodyweight", "sets": 4, "reps": 10, "rest": "90s"},
        {"name": "Barbell Rows", "type": "weight", "sets": 4, "reps": 8, "rest": "90s"},
        {"name": "T-Bar Rows", "type": "weight", "sets": 3, "reps": 10, "rest": "90s"},
        {"name": "Face Pulls", "type": "weight", "sets": 3, "reps": 15, "rest": "60s"},
        {"name": "Hammer Curls", "type": "weight", "sets": 3, "reps": 12, "rest": "60s"},
        {"name": "Preacher Curls", "type": "weight", "sets": 3, "reps": 12, "rest": "60s"},
    ],
}

_LEGS = {
    "okay": [
        {"name": "Squats", "type": "weight", "sets": 3, "reps": 8, "rest": "120s"},
        {"name": "Romanian Deadlifts", "type": "weight", "sets": 3, "reps": 10, "rest": "90s"},
        {"name": "Leg Press", "type": "weight", "sets": 3, "reps": 12, "rest": "90s"},
    ],
    "good": [
        {"name": "Squats", "type": "weight", "sets": 4, "reps": 8, "rest": "120s"},
        {"name": "Romanian Deadlifts", "type": "weight", "sets": 3, "reps": 10, "rest": "90s"},
        {"name": "Leg Press", "type": "weight", "sets": 3, "reps": 12, "rest": "90s"},
        {"name": "Leg Curls", "type": "weight", "sets": 3, "reps": 12, "rest": "60s"},
        {"name": "Calf Raises", "type": "weight", "sets": 4, "reps": 15, "rest": "45s"},
    ],
    "great": [
        {"name": "Squats", "type": "weight", "sets": 5, "reps": 5, "rest": "180s"},
        {"name": "Romanian Deadlifts", "type": "weight", "sets": 4, "reps": 8, "rest": "120s"},
        {"name": "Bulgarian Split Squats", "type": "weight", "sets": 3, "reps": 10, "rest": "90s"},
        {"name": "Leg Extensions", "type": "weight", "sets": 3, "reps": 12, "rest": "60s"},
        {"name": "Seated Leg Curls", "type": "weight", "sets": 3, "reps": 12, "rest": "60s"},
        {"name": "Seated Calf Raises", "type": "weight", "sets": 4, "reps": 15, "rest": "45s"},
        {"name": "Situp", "type": "bodyweight", "sets": 3, "reps": 20, "rest": "45s"},
    ],
}

DEFAULT_TEMPLATE_TABLE: dict[str, dict[str, dict[str, list[Any]]]] = {
    "6-Day PPL": {
        "monday": _PUSH,
        "tuesday": _PULL,
        "wednesday": _LEGS,
        "thursday": _PUSH,
        "friday": _PULL,
        "saturday": _LEGS,
        "sunday": _rest_days(
            good=[{"name": "Walk", "type": "cardio", "duration": "30min"}],
            great=[
                {"name": "Jog", "type": "cardio", "duration": "30min"},
                {"name": "Stretch", "type": "yoga", "duration": "15min"},
            ],
        ),
    },
    "Basic": {
        "monday": {
            "okay": ["Incline DB press", "Dips"],
            "good": ["4x8 Bench press", "3x10 Incline bench press", "Pec fly", "Tricep pushdown"],
            "great": [
                "5x5 Bench press",
                "3x10 Incline bench press",
                "Pec fly",
                "Dips",
                "Cable crossover",
                "Tricep pushdown",
            ],
        },
        "tuesday": {
            "okay": ["Lat pulldown", "Straight-arm pulldown"],
            "good": ["3x8 Pullup", "Barbell row", "Seated cable row", "Face pulls", "Bicep curls"],
            "great": [
                "4x8 Pullup",
                "Barbell row",
                "T-bar row",
                "Lat pulldown",
                "Seated cable row",
                "Face pulls",
                "Bicep curls",
                "Hammer curls",
            ],
        },
        "wednesday": _rest_days(
            good=[{"name": "Walk", "type": "cardio", "duration": "30min"}],
            great=[{"name": "Run", "type": "cardio", "duration": "30min"}],
        ),
        "thursday": {
            "okay": ["Lateral raises", "Overhead press"],
            "good": ["Overhead press", "Lateral raises", "Front raises", "Rear delt fly"],
            "great": [
                "Overhead press",
                "Arnold press",
                "Lateral raises",
                "Front raises",
                "Rear delt fly",
                "Shrugs",
            ],
        },
        "friday": {
            "okay": ["Bodyweight", "Leg curl machine"],
            "good": ["Back squat", "Leg press", "Leg curl", "Walking lunges", "Calf raises"],
            "great": [
                "5x5 Back squat",
                "Hack squat",
                "Romanian deadlift",
                "Leg press",
                "Walking lunges",
                "Calf raises",
                "Hip thrusts",
            ],
        },
        "saturday": _rest_days(
            good=[{"name": "Walk", "type": "cardio", "duration": "30min"}],
            great=[{"name": "Bike", "type": "cardio", "duration": "45min"}],
        ),
        "sunday": _rest_days(
            good=[{"name": "Yoga", "type": "yoga", "duration": "20min"}],
            great=[
                {"name": "Swim", "type": "cardio", "duration": "30min"},
                {"name": "Meditation", "type": "yoga", "duration": "10min"},
            ],
        ),
    },
}


def load_template_table(path: str | Path | None = None) -> TemplateTable:
    """Load a template table from JSON.

    Without an explicit path the default location is tried and the built-in
    table is used when no file exists there.
    """
    if path is None:
        default_path = _default_templates_path()
        if not default_path.exists():
            logger.debug("No template file at {}, using built-in table", default_path)
            return DEFAULT_TEMPLATE_TABLE
        path = default_path

    file_path = Path(path)
    try:
        data = json.loads(file_path.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise TemplateTableError(f"Template file not found: {file_path}") from exc
    except json.JSONDecodeError as exc:
        raise TemplateTableError(f"Invalid JSON: {exc}") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise TemplateTableError(f"Cannot read template file {file_path}: {exc}") from exc

    if not isinstance(data, dict):
        raise TemplateTableError("Template table JSON must be an object")

    logger.bind(path=str(file_path), programs=len(data)).info("Loaded template table")
    return data
