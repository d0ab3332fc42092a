from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any

from ..constants import ACCURACY_GOOD_PCT, ACCURACY_WARN_PCT
from .geometry import round_half_up
from .ship import ShipState

if TYPE_CHECKING:
    from ..config import GameConfig
    from ..vocab import VocabPair
    from .projectile import Projectile
    from .target import Target


class SessionStatus(str, Enum):
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    ENDED = "ended"


def accuracy_pct(hits: int, misses: int) -> int:
    """Share of correct hits among all target hits, as a rounded percentage (0 with no hits)."""
    total = hits + misses
    if total <= 0:
        return 0
    return round_half_up(hits / total * 100.0)


def accuracy_band(pct: int) -> str:
    if pct < ACCURACY_WARN_PCT:
        return "bad"
    if pct < ACCURACY_GOOD_PCT:
        return "warn"
    return "good"


@dataclass(frozen=True)
class RunSummary:
    """Final tally produced when a run ends."""

    level: int
    score: int
    hits: int
    misses: int

    @property
    def accuracy(self) -> int:
        return accuracy_pct(self.hits, self.misses)

    @property
    def band(self) -> str:
        return accuracy_band(self.accuracy)

    def to_dict(self) -> dict[str, Any]:
        return {
            "level": self.level,
            "score": self.score,
            "hits": self.hits,
            "misses": self.misses,
            "accuracy": self.accuracy,
            "band": self.band,
        }


@dataclass
class SimulationState:
    """Everything one run mutates. Owned by a single Session."""

    ship: ShipState
    lives: int
    level: int = 1
    score: int = 0
    hits: int = 0
    misses: int = 0
    projectiles: list[Projectile] = field(default_factory=list)
    targets: list[Target] = field(default_factory=list)
    prompt: VocabPair | None = None
    status: SessionStatus = SessionStatus.IDLE
    # Simulation clock in milliseconds; drives the weapon cooldown.
    time_ms: float = 0.0
    last_shot_ms: float | None = None
    tick: int = 0
    summary: RunSummary | None = None

    @classmethod
    def fresh(cls, config: GameConfig) -> SimulationState:
        return cls(ship=ShipState.spawn(config), lives=int(config.lives))

    @property
    def accuracy(self) -> int:
        return accuracy_pct(self.hits, self.misses)

    @property
    def correct_target(self) -> Target | None:
        for t in self.targets:
            if t.is_correct and t.alive:
                return t
        return None

    def make_summary(self) -> RunSummary:
        return RunSummary(level=self.level, score=self.score, hits=self.hits, misses=self.misses)
