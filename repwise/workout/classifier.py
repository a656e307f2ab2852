"""Map freeform exercise names to an exercise kind."""

from __future__ import annotations

from repwise.workout.model import ExerciseKind


CARDIO_NAMES = frozenset({"walk", "run", "jog", "bike", "swim"})
YOGA_NAMES = frozenset({"yoga", "stretch", "meditation"})
BODYWEIGHT_NAMES = frozenset({"pushup", "pullup", "situp", "bodyweight"})

# Checked in order; first match wins.
_VOCABULARIES: tuple[tuple[ExerciseKind, frozenset[str]], ...] = (
    ("cardio", CARDIO_NAMES),
    ("yoga", YOGA_NAMES),
    ("bodyweight", BODYWEIGHT_NAMES),
)


def classify(name: str) -> ExerciseKind:
    """Classify by exact lowercased name; anything unknown is a weight exercise."""
    normalized = name.strip().lower()
    for kind, vocabulary in _VOCABULARIES:
        if normalized in vocabulary:
            return kind
    return "weight"
