# astrolingua/server/models.py
"""Pydantic models for API requests/responses."""

from typing import Any, Literal

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    clients: int
    uptime_s: float
    session: str


class InputUpdate(BaseModel):
    """Control flags; omitted flags keep their current value."""

    thrust_forward: bool | None = None
    rotate_left: bool | None = None
    rotate_right: bool | None = None
    fire: bool | None = None


class VocabEntry(BaseModel):
    en: str
    zh: str


class VocabUpload(BaseModel):
    """Either raw file text (``content`` + ``format``) or explicit ``entries``."""

    format: Literal["csv", "json"] = "csv"
    content: str | None = None
    entries: list[VocabEntry] | None = None


class VocabResponse(BaseModel):
    status: str
    count: int


class StepRequest(BaseModel):
    """Advance the session by hand (for drivers that own the clock)."""

    ticks: int = Field(1, ge=1, le=3600)
    dt: float = Field(1.0, gt=0.0, le=10.0)


class TransitionResponse(BaseModel):
    changed: bool
    status: str
    snapshot: dict[str, Any]
