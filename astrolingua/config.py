from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ShipConfig:
    thrust: float = 0.12  # velocity gained per tick while thrusting
    rot_speed: float = 0.07  # radians per tick
    friction: float = 0.99  # velocity multiplier per tick
    radius: float = 14.0
    invuln_ticks: float = 120.0


@dataclass(frozen=True)
class BulletConfig:
    speed: float = 7.0
    life: float = 70.0  # ticks
    radius: float = 2.0
    cooldown_ms: float = 180.0  # at level 0; shrinks with level


@dataclass(frozen=True)
class TargetConfig:
    base_speed: float = 0.8
    min_size: float = 18.0
    max_size: float = 42.0
    spawn_padding: float = 40.0
    # Heading jitter around "straight at the ship", radians.
    aim_jitter: float = 0.6
    speed_mult_min: float = 0.8
    speed_mult_max: float = 1.3
    max_spin: float = 0.03  # radians per tick, cosmetic


@dataclass(frozen=True)
class LevelConfig:
    base_count: int = 5
    growth: float = 1.5  # extra targets per level
    size_growth: float = 0.05
    speed_growth: float = 0.08
    cooldown_reduction: float = 0.05


@dataclass(frozen=True)
class GameConfig:
    width: float = 960.0
    height: float = 600.0
    ship: ShipConfig = field(default_factory=ShipConfig)
    bullet: BulletConfig = field(default_factory=BulletConfig)
    target: TargetConfig = field(default_factory=TargetConfig)
    level: LevelConfig = field(default_factory=LevelConfig)
    lives: int = 3
    # Wall-clock length of one nominal tick (~60 fps).
    frame_ms: float = 16.67
    seed: int | None = None

    @property
    def center(self) -> tuple[float, float]:
        return (self.width / 2.0, self.height / 2.0)

    def cooldown_ms(self, level: int) -> float:
        """Weapon cooldown for ``level``; strictly decreasing in level."""
        return self.bullet.cooldown_ms / (1.0 + max(1, int(level)) * self.level.cooldown_reduction)
