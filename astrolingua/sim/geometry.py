from __future__ import annotations

import math
from typing import TYPE_CHECKING, TypeVar

import numpy as np

from ..errors import EmptyCollectionError

if TYPE_CHECKING:
    from collections.abc import Sequence

T = TypeVar("T")


def wrap(x: float, bound: float) -> float:
    """Wrap ``x`` into [0, bound) on a toroidal axis, negative inputs included."""
    r = float(x) % bound
    # -1e-20 % 960.0 == 960.0 in floating point.
    if r >= bound:
        r = 0.0
    return r


def wrap_pos(pos: np.ndarray, width: float, height: float) -> np.ndarray:
    """Wrap a float[2] position in place and return it."""
    pos[0] = wrap(pos[0], width)
    pos[1] = wrap(pos[1], height)
    return pos


def distance(a: np.ndarray, b: np.ndarray) -> float:
    return math.hypot(float(a[0] - b[0]), float(a[1] - b[1]))


def heading_to_unit(angle: float) -> np.ndarray:
    return np.asarray([math.cos(angle), math.sin(angle)], dtype=np.float64)


def wrapped_delta(src: np.ndarray, dst: np.ndarray, width: float, height: float) -> np.ndarray:
    """Shortest displacement from ``src`` to ``dst`` across the torus seams."""
    d = np.asarray(dst, dtype=np.float64) - np.asarray(src, dtype=np.float64)
    d[0] = (d[0] + width / 2.0) % width - width / 2.0
    d[1] = (d[1] + height / 2.0) % height - height / 2.0
    return d


def clamp(v: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, v))


def round_half_up(x: float) -> int:
    # Python's round() is banker's rounding; game quantities round .5 upward.
    return math.floor(x + 0.5)


def uniform(rng: np.random.Generator, lo: float, hi: float) -> float:
    return lo + float(rng.random()) * (hi - lo)


def choose(rng: np.random.Generator, pool: Sequence[T]) -> T:
    """Uniform pick with replacement."""
    if len(pool) == 0:
        raise EmptyCollectionError("cannot choose from an empty collection")
    return pool[int(rng.integers(0, len(pool)))]
