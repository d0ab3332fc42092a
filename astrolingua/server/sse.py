# astrolingua/server/sse.py
"""Snapshot fan-out to SSE viewers.

Each viewer holds one slot with the newest frame. The game loop overwrites
the slot every tick and never waits on a viewer; a viewer that falls behind
simply skips to the latest snapshot when it next reads.
"""

from __future__ import annotations

import asyncio
import logging
import time
import uuid
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

from .config import settings

logger = logging.getLogger("astrolingua.server")

Frame = tuple[int, str, str]  # (frame_id, event_type, data)


def format_frame(frame_id: int, event_type: str, data: str) -> str:
    return f"id: {frame_id}\nevent: {event_type}\ndata: {data}\n\n"


@dataclass
class StreamClient:
    """A connected viewer with a single latest-frame slot."""

    client_id: str
    connected_at: float = field(default_factory=time.time)
    frames_skipped: int = 0
    _frame: Frame | None = field(default=None, repr=False)
    _ready: asyncio.Event = field(default_factory=asyncio.Event, repr=False)
    _cancelled: bool = field(default=False, repr=False)

    @property
    def is_cancelled(self) -> bool:
        return self._cancelled

    @property
    def pending(self) -> Frame | None:
        return self._frame

    def offer(self, frame: Frame) -> None:
        """Replace the slot with ``frame``; an unread frame is skipped."""
        if self._frame is not None:
            self.frames_skipped += 1
        self._frame = frame
        self._ready.set()

    def cancel(self) -> None:
        self._cancelled = True
        self._ready.set()

    async def next_frame(self, timeout: float) -> Frame | None:
        """Wait up to ``timeout`` seconds for a frame.

        Returns None on timeout or when the client was cancelled with an
        empty slot.
        """
        if self._frame is None and not self._cancelled:
            try:
                await asyncio.wait_for(self._ready.wait(), timeout=timeout)
            except TimeoutError:
                return None
        self._ready.clear()
        frame, self._frame = self._frame, None
        return frame


class SnapshotHub:
    """
    Viewer registry for one app.

    - Hard limit on viewers (the oldest is evicted when exceeded)
    - Publishing never blocks the game loop
    - ``close_all`` is synchronous so signal handlers can call it
    """

    def __init__(self) -> None:
        self._clients: dict[str, StreamClient] = {}
        self._lock = asyncio.Lock()
        self._frame_counter = 0
        self._closed = False

    async def register(self) -> StreamClient:
        async with self._lock:
            if len(self._clients) >= settings.SSE_MAX_CLIENTS:
                oldest = min(self._clients.values(), key=lambda c: c.connected_at)
                oldest.cancel()
                del self._clients[oldest.client_id]
                logger.warning(f"Evicted oldest viewer {oldest.client_id}")

            client = StreamClient(client_id=uuid.uuid4().hex[:8])
            if self._closed:
                client.cancel()
                return client
            self._clients[client.client_id] = client
            logger.info(f"Viewer {client.client_id} connected (total={len(self._clients)})")
            return client

    async def unregister(self, client: StreamClient) -> None:
        async with self._lock:
            if self._clients.pop(client.client_id, None) is not None:
                logger.info(f"Viewer {client.client_id} disconnected (total={len(self._clients)})")

    def publish(self, event_type: str, data: str) -> int:
        """Put a frame in every viewer's slot. Returns the number of viewers reached."""
        self._frame_counter += 1
        frame = (self._frame_counter, event_type, data)
        reached = 0
        for client in list(self._clients.values()):
            if client.is_cancelled:
                continue
            client.offer(frame)
            reached += 1
        return reached

    @property
    def client_count(self) -> int:
        return len(self._clients)

    @property
    def is_closed(self) -> bool:
        return self._closed

    def close_all(self) -> None:
        """Disconnect every viewer and refuse new ones."""
        self._closed = True
        for client in self._clients.values():
            client.cancel()
        self._clients.clear()
        logger.info("Snapshot hub closed")


async def snapshot_stream(client: StreamClient, hub: SnapshotHub) -> AsyncIterator[str]:
    """SSE body for one viewer: newest frames, with keepalive comments while idle."""
    try:
        while not client.is_cancelled and not hub.is_closed:
            frame = await client.next_frame(settings.SSE_KEEPALIVE_S)
            if frame is not None:
                yield format_frame(*frame)
            elif not client.is_cancelled:
                yield f": keepalive {int(time.time())}\n\n"
    finally:
        await hub.unregister(client)
