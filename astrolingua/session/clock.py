from __future__ import annotations


class FrameClock:
    """Turns wall-clock frame timestamps (ms) into normalized tick deltas."""

    def __init__(self, frame_ms: float = 16.67):
        self.frame_ms = float(frame_ms)
        self.last_ms: float | None = None

    def tick(self, now_ms: float) -> float:
        # First frame after (re)start counts as one nominal tick.
        dt = 1.0 if self.last_ms is None else (now_ms - self.last_ms) / self.frame_ms
        self.last_ms = float(now_ms)
        return max(0.0, dt)

    def reset(self) -> None:
        self.last_ms = None
