from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from ..constants import MIN_WAVE_SIZE, SPAWN_EDGES
from ..sim.geometry import choose, heading_to_unit, round_half_up, uniform
from ..sim.target import Target
from ..vocab import validate_vocabulary

if TYPE_CHECKING:
    from collections.abc import Sequence

    from ..config import GameConfig
    from ..vocab import VocabPair

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Wave:
    level: int
    prompt: VocabPair
    targets: tuple[Target, ...]


def wave_size(level: int, config: GameConfig) -> int:
    """Number of targets for ``level``; non-decreasing, never below MIN_WAVE_SIZE."""
    level = max(1, int(level))
    lc = config.level
    return max(MIN_WAVE_SIZE, round_half_up(lc.base_count + (level - 1) * lc.growth))


def _spawn_point(rng: np.random.Generator, config: GameConfig) -> np.ndarray:
    pad = config.target.spawn_padding
    edge = choose(rng, SPAWN_EDGES)
    if edge == "top":
        x, y = uniform(rng, 0.0, config.width), -pad
    elif edge == "bottom":
        x, y = uniform(rng, 0.0, config.width), config.height + pad
    elif edge == "left":
        x, y = -pad, uniform(rng, 0.0, config.height)
    else:
        x, y = config.width + pad, uniform(rng, 0.0, config.height)
    return np.asarray([x, y], dtype=np.float64)


def generate_wave(
    level: int,
    vocabulary: Sequence[VocabPair],
    ship_pos: np.ndarray,
    rng: np.random.Generator,
    config: GameConfig,
) -> Wave:
    """
    Build the targets for one wave.

    Exactly one target carries the prompt's translation with ``is_correct``
    set; the others draw their text from the whole vocabulary with
    replacement, so a decoy may show the same text as the prompt without
    being correct. Targets spawn just outside a random edge, drifting
    roughly toward ``ship_pos``.

    Raises InvalidVocabularyError for an empty or malformed vocabulary.
    """
    pool = validate_vocabulary(vocabulary)
    level = max(1, int(level))
    tc = config.target
    lc = config.level

    prompt = choose(rng, pool)
    count = wave_size(level, config)
    correct_index = int(rng.integers(0, count))

    size_scale = 1.0 + level * lc.size_growth
    speed_scale = 1.0 + level * lc.speed_growth

    targets: list[Target] = []
    for i in range(count):
        text = choose(rng, pool).zh
        is_correct = i == correct_index
        if is_correct:
            text = prompt.zh

        pos = _spawn_point(rng, config)
        size = uniform(rng, tc.min_size, tc.max_size) * size_scale
        heading = math.atan2(float(ship_pos[1] - pos[1]), float(ship_pos[0] - pos[0]))
        heading += uniform(rng, -tc.aim_jitter, tc.aim_jitter)
        speed = tc.base_speed * speed_scale * uniform(rng, tc.speed_mult_min, tc.speed_mult_max)
        spin = uniform(rng, -tc.max_spin, tc.max_spin)

        targets.append(
            Target(
                pos=pos,
                vel=heading_to_unit(heading) * speed,
                angle=uniform(rng, 0.0, 2.0 * math.pi),
                spin=spin,
                size=size,
                text=text,
                is_correct=is_correct,
            )
        )

    logger.debug(f"Wave {level}: prompt={prompt.en!r} targets={count} correct_index={correct_index}")
    return Wave(level=level, prompt=prompt, targets=tuple(targets))
