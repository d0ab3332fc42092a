from __future__ import annotations

import math
from typing import TYPE_CHECKING

from ..actions import IDLE, ShipInput
from ..sim.geometry import wrapped_delta

if TYPE_CHECKING:
    from ..sim.state import SimulationState


def _wrap_pi(angle: float) -> float:
    return (angle + math.pi) % (2 * math.pi) - math.pi


class Autopilot:
    """
    Scripted pilot (cheats by reading the correct-target flag off the state).

    Behavior:
    - Turn toward the correct target along the shortest wrapped path.
    - Fire when the nose is within ``fire_cone`` of it.
    - Thrust while it is farther than ``standoff`` and roughly ahead.
    - With no correct target on the field, idle.
    """

    def __init__(
        self,
        width: float,
        height: float,
        fire_cone: float = 0.12,
        standoff: float = 220.0,
        thrust_cone: float = 0.5,
    ):
        self.width = float(width)
        self.height = float(height)
        self.fire_cone = float(fire_cone)
        self.standoff = float(standoff)
        self.thrust_cone = float(thrust_cone)

    def act(self, state: SimulationState) -> ShipInput:
        target = state.correct_target
        if target is None:
            return IDLE

        ship = state.ship
        d = wrapped_delta(ship.pos, target.pos, self.width, self.height)
        dist = math.hypot(float(d[0]), float(d[1]))
        err = _wrap_pi(math.atan2(float(d[1]), float(d[0])) - ship.angle)

        return ShipInput(
            thrust_forward=dist > self.standoff and abs(err) < self.thrust_cone,
            rotate_left=err < -self.fire_cone / 2,
            rotate_right=err > self.fire_cone / 2,
            fire=abs(err) < self.fire_cone,
        )
