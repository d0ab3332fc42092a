from __future__ import annotations

import math

# ==============================================================================
# Scoring
# ==============================================================================

# Points for destroying the correct target: base + bonus * size (rounded).
CORRECT_HIT_BASE_POINTS = 100
CORRECT_HIT_SIZE_BONUS = 5.0

# Points lost for destroying a decoy. Score is floored at zero.
DECOY_HIT_PENALTY = 50

# ==============================================================================
# Waves
# ==============================================================================

# A wave never has fewer targets than this, whatever the level.
MIN_WAVE_SIZE = 3

# Spawn edges, chosen uniformly per target.
SPAWN_EDGES = ("top", "bottom", "left", "right")

# ==============================================================================
# Ship
# ==============================================================================

# Nose pointing "up" the screen (y grows downward).
DEFAULT_HEADING = -math.pi / 2

# ==============================================================================
# Game-over accuracy bands (percent)
# ==============================================================================

ACCURACY_GOOD_PCT = 85
ACCURACY_WARN_PCT = 60
