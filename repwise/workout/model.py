"""Workout domain models."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Literal, Union


ExerciseKind = Literal["weight", "bodyweight", "cardio", "yoga"]
EXERCISE_KINDS: tuple[ExerciseKind, ...] = ("weight", "bodyweight", "cardio", "yoga")

DEFAULT_SETS = 3
DEFAULT_REPS = 10
DEFAULT_WEIGHT = 0

Reps = Union[int, str]

# Flattened column order of a logged exercise.
ENTRY_FIELDS: tuple[str, ...] = (
    "date",
    "day",
    "mood",
    "program",
    "workout_name",
    "exercise",
    "sets",
    "reps",
    "weight",
    "duration",
    "rest",
    "kind",
)


@dataclass(frozen=True)
class StrengthPrescription:
    sets: int = DEFAULT_SETS
    reps: Reps = DEFAULT_REPS
    weight: float = DEFAULT_WEIGHT
    rest: str | None = None


@dataclass(frozen=True)
class BodyweightPrescription:
    sets: int = DEFAULT_SETS
    reps: Reps = DEFAULT_REPS
    rest: str | None = None


@dataclass(frozen=True)
class TimedPrescription:
    duration: str | None = None


Prescription = Union[StrengthPrescription, BodyweightPrescription, TimedPrescription]

PRESCRIPTION_TYPES: dict[ExerciseKind, type] = {
    "weight": StrengthPrescription,
    "bodyweight": BodyweightPrescription,
    "cardio": TimedPrescription,
    "yoga": TimedPrescription,
}

KIND_FIELDS: dict[ExerciseKind, tuple[str, ...]] = {
    "weight": ("sets", "reps", "weight", "rest"),
    "bodyweight": ("sets", "reps", "rest"),
    "cardio": ("duration",),
    "yoga": ("duration",),
}


def default_prescription(kind: ExerciseKind) -> Prescription:
    return PRESCRIPTION_TYPES[kind]()


def _check_payload(kind: str, prescription: object) -> None:
    expected = PRESCRIPTION_TYPES.get(kind)  # type: ignore[arg-type]
    if expected is None:
        raise ValueError(f"Unknown exercise kind '{kind}'")
    if not isinstance(prescription, expected):
        raise ValueError(
            f"{kind} exercise needs {expected.__name__}, "
            f"got {type(prescription).__name__}"
        )


@dataclass(frozen=True)
class ExerciseTemplate:
    key: str
    name: str
    kind: ExerciseKind
    prescription: Prescription

    def __post_init__(self) -> None:
        _check_payload(self.kind, self.prescription)

    @property
    def rest(self) -> str | None:
        return getattr(self.prescription, "rest", None)

    def summary(self) -> str:
        if isinstance(self.prescription, TimedPrescription):
            return f"Duration: {self.prescription.duration or 'Not specified'}"
        text = f"Suggested: {self.prescription.sets} sets x {self.prescription.reps} reps"
        if self.prescription.rest:
            text += f" (Rest: {self.prescription.rest})"
        return text


@dataclass(frozen=True)
class WorkoutEntry:
    key: str
    date: date
    day: str
    mood: str
    program: str
    workout_name: str
    exercise: str
    kind: ExerciseKind
    prescription: Prescription

    def __post_init__(self) -> None:
        _check_payload(self.kind, self.prescription)

    @property
    def field_names(self) -> tuple[str, ...]:
        """Columns this entry carries, in flattened order, without the key."""
        carried = set(KIND_FIELDS[self.kind])
        return tuple(
            name
            for name in ENTRY_FIELDS
            if name in carried or name not in _PRESCRIPTION_FIELDS
        )

    def value_of(self, field_name: str) -> object:
        """Return a flattened field value, None when the kind does not carry it."""
        if field_name in _PRESCRIPTION_FIELDS:
            return getattr(self.prescription, field_name, None)
        if field_name == "date":
            return self.date.isoformat()
        if field_name not in ENTRY_FIELDS:
            raise KeyError(field_name)
        return getattr(self, field_name)


_PRESCRIPTION_FIELDS = frozenset({"sets", "reps", "weight", "duration", "rest"})
