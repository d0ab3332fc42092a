from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from ..constants import DEFAULT_HEADING

if TYPE_CHECKING:
    from ..config import GameConfig


@dataclass
class ShipState:
    pos: np.ndarray  # float64[2], always wrapped into the field
    vel: np.ndarray  # float64[2], units / tick
    angle: float  # heading, radians
    invuln: float = 0.0  # ticks of invulnerability left

    @classmethod
    def spawn(cls, config: GameConfig) -> ShipState:
        """Fresh ship at the field center, nose up, with a new invulnerability window."""
        cx, cy = config.center
        return cls(
            pos=np.asarray([cx, cy], dtype=np.float64),
            vel=np.zeros(2, dtype=np.float64),
            angle=DEFAULT_HEADING,
            invuln=float(config.ship.invuln_ticks),
        )

    @property
    def invulnerable(self) -> bool:
        return self.invuln > 0.0
