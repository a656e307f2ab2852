from __future__ import annotations

import pytest

from repwise.workout.customize import coerce_int, coerce_number, coerce_reps, customize_template
from repwise.workout.model import (
    BodyweightPrescription,
    ExerciseTemplate,
    StrengthPrescription,
    TimedPrescription,
)


BENCH = ExerciseTemplate(
    key="ex-1",
    name="Bench Press",
    kind="weight",
    prescription=StrengthPrescription(sets=3, reps=10, weight=0, rest="60s"),
)


def test_coerce_int_takes_leading_integer() -> None:
    assert coerce_int("12 reps", 1) == 12
    assert coerce_int("abc", 1) == 1
    assert coerce_int("0", 3) == 3
    assert coerce_int(None, 3) == 3
    assert coerce_int(7.9, 3) == 7
    assert coerce_int(True, 3) == 3


def test_coerce_number_keeps_fractional_loads() -> None:
    assert coerce_number("22.5", 0) == 22.5
    assert coerce_number("135lbs", 0) == 135
    assert isinstance(coerce_number(135.0, 0), int)
    assert coerce_number("", 0) == 0
    assert coerce_number(float("inf"), 0) == 0
    assert coerce_number("9" * 400, 0) == 0
    assert coerce_number(10**400, 0) == 10**400


def test_coerce_int_defaults_non_finite_floats() -> None:
    assert coerce_int(float("inf"), 3) == 3
    assert coerce_int(float("nan"), 3) == 3


def test_coerce_reps_accepts_schemes() -> None:
    assert coerce_reps("AMRAP", 10) == "AMRAP"
    assert coerce_reps("8", 10) == 8
    assert coerce_reps("  ", 10) == 10


def test_customize_updates_fields_of_the_kind() -> None:
    updated = customize_template(BENCH, weight="185", sets="5", reps="5", rest="120s")

    assert updated.key == BENCH.key
    assert updated.prescription == StrengthPrescription(sets=5, reps=5, weight=185, rest="120s")
    assert BENCH.prescription.weight == 0


def test_customize_coerces_invalid_input() -> None:
    updated = customize_template(BENCH, sets="", reps="-3", weight="x", rest="  ")

    assert updated.prescription == StrengthPrescription(sets=1, reps=1, weight=0, rest=None)
    assert customize_template(BENCH, weight="-45").prescription.weight == 0


def test_customize_rejects_fields_outside_kind() -> None:
    walk = ExerciseTemplate(
        key="ex-2",
        name="Walk",
        kind="cardio",
        prescription=TimedPrescription(duration="30min"),
    )
    dips = ExerciseTemplate(
        key="ex-3",
        name="Dips",
        kind="bodyweight",
        prescription=BodyweightPrescription(),
    )

    assert customize_template(walk, duration="45min").prescription.duration == "45min"
    with pytest.raises(ValueError):
        customize_template(walk, sets=3)
    with pytest.raises(ValueError):
        customize_template(dips, weight=20)
