# astrolingua/server/routes/session.py
"""Session control endpoints: lifecycle, input, vocabulary and snapshots."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from fastapi import APIRouter, HTTPException

from ...errors import InvalidVocabularyError
from ...vocab import parse_csv, parse_json
from ..models import InputUpdate, StepRequest, TransitionResponse, VocabResponse, VocabUpload

if TYPE_CHECKING:
    from ..runner import SessionRunner

logger = logging.getLogger("astrolingua.server")

router = APIRouter(prefix="/api/session", tags=["session"])

# Module-level state set by init_session_routes
_runner: SessionRunner | None = None


def init_session_routes(runner: SessionRunner) -> None:
    """Initialize routes with the runner instance."""
    global _runner
    _runner = runner


def _get_runner() -> SessionRunner:
    if _runner is None:
        raise HTTPException(503, "Session not initialized")
    return _runner


def _transition(changed: bool) -> TransitionResponse:
    session = _get_runner().session
    return TransitionResponse(
        changed=changed,
        status=session.status.value,
        snapshot=session.snapshot().to_dict(),
    )


@router.get("")
async def get_snapshot() -> dict[str, Any]:
    """Current read-only snapshot."""
    return _get_runner().session.snapshot().to_dict()


@router.post("/start")
async def start_session() -> TransitionResponse:
    runner = _get_runner()
    try:
        changed = runner.session.start()
    except InvalidVocabularyError as e:
        raise HTTPException(422, str(e)) from e
    runner.clock.reset()
    return _transition(changed)


@router.post("/pause")
async def pause_session() -> TransitionResponse:
    return _transition(_get_runner().session.pause())


@router.post("/resume")
async def resume_session() -> TransitionResponse:
    return _transition(_get_runner().session.resume())


@router.post("/toggle-pause")
async def toggle_pause() -> TransitionResponse:
    return _transition(_get_runner().session.toggle_pause())


@router.post("/reset")
async def reset_session() -> TransitionResponse:
    _get_runner().session.reset()
    return _transition(True)


@router.put("/input")
async def set_input(update: InputUpdate) -> dict[str, bool]:
    """Latch control flags; the next step reads them."""
    latch = _get_runner().session.input
    for name, value in update.model_dump(exclude_none=True).items():
        setattr(latch, name, bool(value))
    snap = latch.snapshot()
    return {
        "thrust_forward": snap.thrust_forward,
        "rotate_left": snap.rotate_left,
        "rotate_right": snap.rotate_right,
        "fire": snap.fire,
    }


@router.post("/step")
async def step_session(req: StepRequest) -> dict[str, Any]:
    """Advance by hand; refused while the background loop owns the clock."""
    runner = _get_runner()
    if runner.running:
        raise HTTPException(409, "Game loop is running")
    events = runner.advance(req.ticks, req.dt)
    return {"events": events, "snapshot": runner.session.snapshot().to_dict()}


@router.post("/vocab")
async def upload_vocab(upload: VocabUpload) -> VocabResponse:
    """Replace the vocabulary; takes effect from the next wave."""
    session = _get_runner().session
    if upload.entries is not None:
        pairs: list[Any] = [e.model_dump() for e in upload.entries]
    elif upload.content is not None:
        try:
            pairs = parse_json(upload.content) if upload.format == "json" else parse_csv(upload.content)
        except json.JSONDecodeError as e:
            raise HTTPException(422, f"Failed to read vocabulary: {e}") from e
    else:
        raise HTTPException(422, "Provide 'content' or 'entries'")

    try:
        session.set_vocabulary(pairs)
    except InvalidVocabularyError as e:
        raise HTTPException(
            422, "No valid vocab found. Use CSV: english, chinese or JSON array of {\"en\",\"zh\"}."
        ) from e
    logger.info(f"Vocabulary uploaded ({len(session.vocabulary)} pairs)")
    return VocabResponse(status="ok", count=len(session.vocabulary))
