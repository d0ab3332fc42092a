"""Read-only views of a session for renderers and HUDs."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ..actions import ShipInput
    from ..sim.state import SimulationState


@dataclass(frozen=True)
class ShipView:
    x: float
    y: float
    angle: float
    invuln: float
    invulnerable: bool
    thrusting: bool


@dataclass(frozen=True)
class ProjectileView:
    x: float
    y: float


@dataclass(frozen=True)
class TargetView:
    # No correctness flag: the display text is all a player gets.
    x: float
    y: float
    angle: float
    size: float
    text: str


@dataclass(frozen=True)
class Snapshot:
    status: str
    tick: int
    level: int
    score: int
    lives: int
    hits: int
    misses: int
    accuracy: int
    prompt: str | None
    ship: ShipView
    projectiles: tuple[ProjectileView, ...]
    targets: tuple[TargetView, ...]
    summary: dict[str, Any] | None = None

    def to_dict(self) -> dict[str, Any]:
        d = asdict(self)
        d["projectiles"] = [asdict(p) for p in self.projectiles]
        d["targets"] = [asdict(t) for t in self.targets]
        return d


def take_snapshot(state: SimulationState, inp: ShipInput | None = None) -> Snapshot:
    ship = state.ship
    return Snapshot(
        status=state.status.value,
        tick=state.tick,
        level=state.level,
        score=state.score,
        lives=state.lives,
        hits=state.hits,
        misses=state.misses,
        accuracy=state.accuracy,
        prompt=state.prompt.en if state.prompt is not None else None,
        ship=ShipView(
            x=float(ship.pos[0]),
            y=float(ship.pos[1]),
            angle=float(ship.angle),
            invuln=float(ship.invuln),
            invulnerable=ship.invulnerable,
            thrusting=bool(inp is not None and inp.thrust_forward),
        ),
        projectiles=tuple(ProjectileView(x=float(p.pos[0]), y=float(p.pos[1])) for p in state.projectiles),
        targets=tuple(
            TargetView(x=float(t.pos[0]), y=float(t.pos[1]), angle=float(t.angle), size=float(t.size), text=t.text)
            for t in state.targets
            if t.alive
        ),
        summary=state.summary.to_dict() if state.summary is not None else None,
    )
