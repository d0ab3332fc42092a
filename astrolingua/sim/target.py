from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import numpy as np


@dataclass
class Target:
    pos: np.ndarray  # float64[2]; spawns outside the field, wrapped once it moves
    vel: np.ndarray  # float64[2]
    angle: float
    spin: float  # radians / tick
    size: float  # collision radius
    text: str  # displayed translation
    is_correct: bool = False
    alive: bool = True
