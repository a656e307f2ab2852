"""Rest countdown state machine driven by external ticks.

A timer does not schedule anything itself: something else (``TimerDriver``,
a UI timer) calls ``tick()`` once per second while the timer is active.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Literal

from loguru import logger


TimerId = Literal["session", "exercise"]
TimerStatus = Literal["idle", "running", "completed"]

DEFAULT_REST_SEC = 60

_NON_DIGITS = re.compile(r"\D")


def parse_rest_seconds(text: str | None) -> int:
    """Seconds from a rest value like ``"90s"``; digits only, 60 when none or zero."""
    digits = _NON_DIGITS.sub("", text or "")
    if not digits:
        return DEFAULT_REST_SEC
    return int(digits) or DEFAULT_REST_SEC


@dataclass(frozen=True)
class RestTimerState:
    remaining_sec: int
    is_active: bool
    owner_key: str | None
    status: TimerStatus


@dataclass(frozen=True)
class TimerCompleted:
    timer_id: TimerId
    owner_key: str | None


CompletionCallback = Callable[[TimerCompleted], None]


class RestTimer:
    def __init__(self, timer_id: TimerId, *, owned: bool, idle_sec: int = 0) -> None:
        self._timer_id = timer_id
        self._owned = owned
        self._idle_sec = idle_sec
        self._remaining_sec = idle_sec
        self._active = False
        self._completed = False
        self._owner_key: str | None = None
        self._listeners: list[CompletionCallback] = []

    @property
    def timer_id(self) -> TimerId:
        return self._timer_id

    @property
    def remaining_sec(self) -> int:
        return self._remaining_sec

    @property
    def is_active(self) -> bool:
        return self._active

    @property
    def owner_key(self) -> str | None:
        return self._owner_key

    @property
    def status(self) -> TimerStatus:
        if self._active:
            return "running"
        if self._completed:
            return "completed"
        return "idle"

    def snapshot(self) -> RestTimerState:
        return RestTimerState(
            remaining_sec=self._remaining_sec,
            is_active=self._active,
            owner_key=self._owner_key,
            status=self.status,
        )

    def add_listener(self, callback: CompletionCallback) -> None:
        self._listeners.append(callback)

    def remove_listener(self, callback: CompletionCallback) -> None:
        self._listeners.remove(callback)

    def start(self, duration_text: str | None, owner_key: str | None = None) -> int:
        """(Re)start the countdown; a running countdown is replaced."""
        if owner_key is not None and not self._owned:
            raise ValueError(f"{self._timer_id} timer does not take an owner key")
        seconds = parse_rest_seconds(duration_text)
        if self._active:
            logger.bind(timer=self._timer_id, previous_owner=self._owner_key).debug(
                "Replacing running rest timer"
            )
        self._remaining_sec = seconds
        self._active = True
        self._completed = False
        self._owner_key = owner_key
        logger.bind(timer=self._timer_id, owner=owner_key, seconds=seconds).debug(
            "Rest timer started"
        )
        return seconds

    def tick(self) -> bool:
        """Advance one second; True only on the tick that completes the countdown."""
        if not self._active:
            return False
        self._remaining_sec = max(0, self._remaining_sec - 1)
        if self._remaining_sec > 0:
            return False

        owner_key = self._owner_key
        self._active = False
        self._completed = True
        self._owner_key = None
        logger.bind(timer=self._timer_id, owner=owner_key).info("Rest complete")
        event = TimerCompleted(timer_id=self._timer_id, owner_key=owner_key)
        for callback in list(self._listeners):
            callback(event)
        return True

    def pause(self) -> None:
        """Stop ticking but keep the remaining time."""
        self._active = False

    def resume(self) -> None:
        if self._active:
            return
        if self._remaining_sec <= 0:
            self._remaining_sec = self._idle_sec or DEFAULT_REST_SEC
        self._active = True
        self._completed = False

    def stop(self) -> None:
        """Cancel without notifying and go back to idle."""
        if self._active:
            logger.bind(timer=self._timer_id, owner=self._owner_key).debug(
                "Rest timer cancelled"
            )
        self._active = False
        self._completed = False
        self._owner_key = None
        self._remaining_sec = self._idle_sec


class RestTimers:
    """The session-wide rest timer and the per-exercise rest timer."""

    def __init__(self) -> None:
        self.session = RestTimer("session", owned=False, idle_sec=DEFAULT_REST_SEC)
        self.exercise = RestTimer("exercise", owned=True)

    def get(self, timer_id: str) -> RestTimer:
        if timer_id == "session":
            return self.session
        if timer_id == "exercise":
            return self.exercise
        raise KeyError(f"Unknown timer '{timer_id}'")

    def add_listener(self, callback: CompletionCallback) -> None:
        self.session.add_listener(callback)
        self.exercise.add_listener(callback)

    def start_timer(
        self,
        timer_id: str,
        duration_text: str | None,
        owner_key: str | None = None,
    ) -> int:
        return self.get(timer_id).start(duration_text, owner_key=owner_key)

    def tick(self, timer_id: str) -> bool:
        return self.get(timer_id).tick()

    def stop_timer(self, timer_id: str) -> None:
        self.get(timer_id).stop()

    def tick_active(self) -> list[TimerId]:
        """Tick every running timer; return the ids that completed on this tick."""
        completed: list[TimerId] = []
        for timer in (self.session, self.exercise):
            if timer.tick():
                completed.append(timer.timer_id)
        return completed
