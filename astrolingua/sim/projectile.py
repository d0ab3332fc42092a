from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import numpy as np


@dataclass
class Projectile:
    pos: np.ndarray  # float64[2]
    vel: np.ndarray  # float64[2]
    life: float  # ticks remaining; removed at <= 0

    @property
    def alive(self) -> bool:
        return self.life > 0.0
