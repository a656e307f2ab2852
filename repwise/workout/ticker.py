"""Asyncio clock that ticks a rest timer once per interval."""

from __future__ import annotations

import asyncio
from typing import Callable, Optional

from repwise.workout.timer import RestTimer


TickCallback = Callable[[RestTimer], None]


class TimerDriver:
    def __init__(self, interval_sec: float = 1.0) -> None:
        self._interval_sec = interval_sec
        self._task: Optional[asyncio.Task[None]] = None
        self._stop_event = asyncio.Event()

    @property
    def is_running(self) -> bool:
        return self._task is not None and not self._task.done()

    async def start(self, timer: RestTimer, on_tick: TickCallback | None = None) -> None:
        if self.is_running:
            raise RuntimeError("Timer driver already running")

        self._stop_event = asyncio.Event()
        self._task = asyncio.create_task(self._run(timer, on_tick))

    async def stop(self) -> None:
        if not self.is_running:
            return

        self._stop_event.set()
        assert self._task is not None
        await self._task
        self._task = None

    async def wait(self) -> None:
        """Wait until the driven timer stops or ``stop()`` is called."""
        if self._task is not None:
            await self._task

    async def _run(self, timer: RestTimer, on_tick: TickCallback | None) -> None:
        while timer.is_active and not self._stop_event.is_set():
            try:
                await asyncio.wait_for(self._stop_event.wait(), timeout=self._interval_sec)
            except asyncio.TimeoutError:
                pass
            if self._stop_event.is_set() or not timer.is_active:
                return
            timer.tick()
            if on_tick is not None:
                on_tick(timer)
