from __future__ import annotations

import json
from dataclasses import replace

from repwise.workout.library import DEFAULT_TEMPLATE_TABLE
from repwise.workout.model import (
    BodyweightPrescription,
    StrengthPrescription,
    TimedPrescription,
)
from repwise.workout.resolver import list_days, list_moods, list_programs, resolve


TABLE = {
    "Strength": {
        "monday": {
            "good": [
                {"name": "Bench Press", "type": "weight", "sets": 4, "reps": 8, "rest": "90s"},
                {"name": "Dips", "type": "bodyweight", "reps": "AMRAP"},
                {"name": "Run", "type": "cardio", "duration": "20min"},
                {"name": "Stretch", "type": "yoga", "duration": "10min", "key": "cfg-stretch"},
            ],
            "okay": "not a list",
        },
        "tuesday": ["not", "a", "mapping"],
    },
}


def test_resolve_normalizes_case_of_day_and_mood() -> None:
    templates = resolve(TABLE, "Strength", "Monday", "GOOD")

    assert [t.name for t in templates] == ["Bench Press", "Dips", "Run", "Stretch"]
    assert [t.kind for t in templates] == ["weight", "bodyweight", "cardio", "yoga"]


def test_resolve_builds_kind_specific_prescriptions() -> None:
    bench, dips, run, stretch = resolve(TABLE, "Strength", "monday", "good")

    assert bench.prescription == StrengthPrescription(sets=4, reps=8, weight=0, rest="90s")
    assert dips.prescription == BodyweightPrescription(sets=3, reps="AMRAP", rest=None)
    assert run.prescription == TimedPrescription(duration="20min")
    assert stretch.prescription == TimedPrescription(duration="10min")


def test_resolve_missing_levels_return_empty_list() -> None:
    assert resolve(TABLE, "Unknown", "monday", "good") == []
    assert resolve(TABLE, "strength", "monday", "good") == []  # program is exact-match
    assert resolve(TABLE, "Strength", "friday", "good") == []
    assert resolve(TABLE, "Strength", "monday", "great") == []
    assert resolve(TABLE, "Strength", "monday", "okay") == []
    assert resolve(TABLE, "Strength", "tuesday", "good") == []
    assert resolve({}, "Strength", "monday", "good") == []


def test_resolve_keys_are_fresh_unless_configured() -> None:
    first = resolve(TABLE, "Strength", "monday", "good")
    second = resolve(TABLE, "Strength", "monday", "good")

    assert first[0].key != second[0].key
    assert first[0].key.startswith("ex-")
    assert first[3].key == second[3].key == "cfg-stretch"
    assert len({t.key for t in first}) == len(first)


def test_resolve_is_deterministic_apart_from_keys() -> None:
    first = resolve(DEFAULT_TEMPLATE_TABLE, "6-Day PPL", "Thursday", "Great")
    second = resolve(DEFAULT_TEMPLATE_TABLE, "6-Day PPL", "Thursday", "Great")

    assert first
    assert [replace(t, key="") for t in first] == [replace(t, key="") for t in second]


def test_resolve_parses_sets_by_reps_text_records() -> None:
    table = {"Basic": {"monday": {"good": ["4x8 Bench press", "Pec fly", "3x12 Pullup", "  "]}}}

    bench, fly, pullup = resolve(table, "Basic", "monday", "good")

    assert bench.name == "Bench press"
    assert bench.prescription == StrengthPrescription(sets=4, reps=8, weight=0)
    assert fly.prescription == StrengthPrescription(sets=3, reps=10, weight=0)
    assert pullup.kind == "bodyweight"
    assert pullup.prescription == BodyweightPrescription(sets=3, reps=12)


def test_resolve_coerces_malformed_records() -> None:
    table = {
        "P": {
            "monday": {
                "good": [
                    {"name": "Squat", "sets": "five", "reps": None, "weight": "abc"},
                    {"name": "swim", "type": "unknown"},
                    {"type": "weight"},
                    42,
                ]
            }
        }
    }

    squat, swim = resolve(table, "P", "monday", "good")

    assert squat.kind == "weight"
    assert squat.prescription == StrengthPrescription(sets=3, reps=10, weight=0)
    assert swim.kind == "cardio"


def test_resolve_defaults_non_finite_and_negative_numbers() -> None:
    table = json.loads(
        '{"P": {"monday": {"good": ['
        '{"name": "Bench", "type": "weight", "sets": 1e400, "reps": NaN, "weight": -Infinity},'
        '{"name": "Row", "type": "weight", "sets": -Infinity, "weight": -20},'
        '{"name": "Dips", "type": "bodyweight", "sets": NaN, "reps": 1e400}'
        ']}}}'
    )

    bench, row, dips = resolve(table, "P", "Monday", "Good")

    assert bench.prescription == StrengthPrescription(sets=3, reps=10, weight=0)
    assert row.prescription == StrengthPrescription(sets=3, reps=10, weight=0)
    assert dips.prescription == BodyweightPrescription(sets=3, reps=10)


def test_list_helpers_enumerate_table() -> None:
    assert list_programs(DEFAULT_TEMPLATE_TABLE) == ["6-Day PPL", "Basic"]
    assert list_days(TABLE, "Strength") == ["monday"]
    assert list_moods(TABLE, "Strength", "Monday") == ["good"]
    assert list_moods(TABLE, "Missing", "monday") == []
