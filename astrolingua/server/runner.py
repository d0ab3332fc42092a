# astrolingua/server/runner.py
"""Background game loop that steps the session and streams snapshots."""

from __future__ import annotations

import asyncio
import json
import logging
import time
from typing import TYPE_CHECKING

from ..session.clock import FrameClock
from ..sim.state import SessionStatus

if TYPE_CHECKING:
    from ..session.controller import Session
    from .sse import SnapshotHub

logger = logging.getLogger("astrolingua.server")


class SessionRunner:
    """
    Drives one Session from the event loop.

    All mutation happens on the event loop thread (routes are ``async def``),
    so the session keeps a single writer.
    """

    def __init__(self, session: Session, hub: SnapshotHub, tick_hz: float = 60.0):
        self.session = session
        self.hub = hub
        self.period_s = 1.0 / max(1.0, float(tick_hz))
        self.clock = FrameClock(session.config.frame_ms)
        self._task: asyncio.Task[None] | None = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def publish(self, events: list[dict] | None = None) -> int:
        payload = {"snapshot": self.session.snapshot().to_dict(), "events": events or []}
        return self.hub.publish("snapshot", json.dumps(payload, ensure_ascii=False))

    def advance(self, ticks: int, dt: float) -> list[dict]:
        events: list[dict] = []
        for _ in range(int(ticks)):
            if self.session.status != SessionStatus.RUNNING:
                break
            events.extend(self.session.step(None, dt))
        return events

    async def _loop(self) -> None:
        logger.info(f"Game loop started at {1.0 / self.period_s:.0f} Hz")
        while True:
            dt = self.clock.tick(time.perf_counter() * 1000.0)
            if self.session.status == SessionStatus.RUNNING:
                self.publish(self.session.step(None, dt))
            else:
                # Paused or idle: keep the clock fresh so resuming doesn't jump.
                self.clock.reset()
            await asyncio.sleep(self.period_s)

    @staticmethod
    def _log_crash(task: asyncio.Task[None]) -> None:
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            logger.error(f"Game loop crashed: {exc!r}", exc_info=exc)

    def start(self) -> None:
        if self.running:
            return
        self.clock.reset()
        self._task = asyncio.create_task(self._loop())
        self._task.add_done_callback(self._log_crash)

    async def stop(self) -> None:
        if self._task is None:
            return
        self._task.cancel()
        # A crash was already logged by _log_crash.
        await asyncio.gather(self._task, return_exceptions=True)
        self._task = None
        logger.info("Game loop stopped")
