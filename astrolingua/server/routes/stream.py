# astrolingua/server/routes/stream.py
"""Live snapshot stream."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, HTTPException
from fastapi.responses import StreamingResponse

from ..sse import snapshot_stream

if TYPE_CHECKING:
    from ..sse import SnapshotHub

router = APIRouter()

# Module-level state set by init_stream_routes
_hub: SnapshotHub | None = None


def init_stream_routes(hub: SnapshotHub) -> None:
    global _hub
    _hub = hub


def _get_hub() -> SnapshotHub:
    if _hub is None:
        raise HTTPException(503, "Stream not initialized")
    return _hub


@router.get("/events")
async def stream_snapshots() -> StreamingResponse:
    """`snapshot` events carrying {"snapshot": ..., "events": [...]} after every running tick."""
    hub = _get_hub()
    client = await hub.register()
    return StreamingResponse(
        snapshot_stream(client, hub),
        media_type="text/event-stream",
        headers={"Cache-Control": "no-cache", "X-Accel-Buffering": "no"},
    )
