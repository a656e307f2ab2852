"""Selections made by the trainee for the current session."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class SessionState:
    program: str = ""
    day: str = "Monday"
    mood: str = "Good"
    workout_name: str = ""
