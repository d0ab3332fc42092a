from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np

from ..constants import CORRECT_HIT_BASE_POINTS, CORRECT_HIT_SIZE_BONUS, DECOY_HIT_PENALTY
from ..gen.wave import generate_wave
from .geometry import distance, heading_to_unit, round_half_up, wrap_pos
from .projectile import Projectile
from .ship import ShipState
from .state import SessionStatus

if TYPE_CHECKING:
    from collections.abc import Sequence

    from ..actions import ShipInput
    from ..config import GameConfig
    from ..gen.wave import Wave
    from ..vocab import VocabPair
    from .state import SimulationState

logger = logging.getLogger(__name__)


def _pos_list(pos: np.ndarray) -> list[float]:
    return [float(pos[0]), float(pos[1])]


class Sim:
    """
    Per-tick update of one SimulationState.

    ``step`` mutates the state in place and returns a list of event dicts
    describing what happened (shots, hits, misses, ship hits, new waves,
    game over). Every rate is per nominal tick and scaled by ``dt``.
    """

    def __init__(self, config: GameConfig, rng: np.random.Generator):
        self.config = config
        self.rng = rng

    def new_wave(self, state: SimulationState, vocabulary: Sequence[VocabPair]) -> Wave:
        return generate_wave(state.level, vocabulary, state.ship.pos, self.rng, self.config)

    @staticmethod
    def apply_wave(state: SimulationState, wave: Wave) -> None:
        """Swap in a new wave's targets and prompt in one go."""
        state.targets = list(wave.targets)
        state.prompt = wave.prompt

    # ------------------------------------------------------------------
    # Ship

    def _apply_controls(self, ship: ShipState, inp: ShipInput, dt: float) -> None:
        sc = self.config.ship
        if inp.rotate_left:
            ship.angle -= sc.rot_speed * dt
        if inp.rotate_right:
            ship.angle += sc.rot_speed * dt
        if inp.thrust_forward:
            ship.vel += heading_to_unit(ship.angle) * (sc.thrust * dt)

    def _integrate_ship(self, ship: ShipState, dt: float) -> None:
        ship.vel *= self.config.ship.friction**dt
        ship.pos += ship.vel * dt
        wrap_pos(ship.pos, self.config.width, self.config.height)
        ship.invuln = max(0.0, ship.invuln - dt)

    # ------------------------------------------------------------------
    # Weapon

    def cooldown_ready(self, state: SimulationState) -> bool:
        if state.last_shot_ms is None:
            return True
        return state.time_ms - state.last_shot_ms > self.config.cooldown_ms(state.level)

    def _try_fire(self, state: SimulationState, inp: ShipInput) -> list[dict]:
        if not inp.fire or not self.cooldown_ready(state):
            return []
        ship = state.ship
        bc = self.config.bullet
        heading = heading_to_unit(ship.angle)
        nose = ship.pos + heading * self.config.ship.radius
        state.projectiles.append(Projectile(pos=nose, vel=heading * bc.speed, life=float(bc.life)))
        state.last_shot_ms = state.time_ms
        return [{"type": "shot", "pos": _pos_list(nose)}]

    # ------------------------------------------------------------------
    # Movers

    def _update_projectiles(self, state: SimulationState, dt: float) -> None:
        keep = []
        for p in state.projectiles:
            p.pos += p.vel * dt
            wrap_pos(p.pos, self.config.width, self.config.height)
            p.life -= dt
            if p.alive:
                keep.append(p)
        state.projectiles = keep

    def _update_targets(self, state: SimulationState, dt: float) -> None:
        for t in state.targets:
            t.pos += t.vel * dt
            wrap_pos(t.pos, self.config.width, self.config.height)
            t.angle += t.spin * dt

    # ------------------------------------------------------------------
    # Collisions

    def _resolve_projectile_hits(self, state: SimulationState) -> tuple[list[dict], bool]:
        # Literal pairwise scan: a projectile that already hit keeps being
        # tested against the remaining live targets in this pass.
        events: list[dict] = []
        correct_hit = False
        for p in state.projectiles:
            for t in state.targets:
                if not t.alive:
                    continue
                if distance(p.pos, t.pos) >= t.size:
                    continue
                t.alive = False
                p.life = 0.0
                if t.is_correct:
                    points = CORRECT_HIT_BASE_POINTS + round_half_up(CORRECT_HIT_SIZE_BONUS * t.size)
                    state.score += points
                    state.hits += 1
                    correct_hit = True
                    events.append({"type": "hit", "text": t.text, "points": points, "pos": _pos_list(t.pos)})
                else:
                    state.score = max(0, state.score - DECOY_HIT_PENALTY)
                    state.misses += 1
                    events.append(
                        {"type": "miss", "text": t.text, "points": -DECOY_HIT_PENALTY, "pos": _pos_list(t.pos)}
                    )
        state.projectiles = [p for p in state.projectiles if p.alive]
        state.targets = [t for t in state.targets if t.alive]
        return events, correct_hit

    def _resolve_ship_hit(self, state: SimulationState) -> list[dict]:
        ship = state.ship
        if ship.invuln > 0.0:
            return []
        reach = self.config.ship.radius
        for t in state.targets:
            if distance(ship.pos, t.pos) < t.size + reach:
                state.lives -= 1
                state.ship = ShipState.spawn(self.config)
                logger.debug(f"Ship hit by {t.text!r}; lives={state.lives}")
                return [{"type": "ship_hit", "lives": state.lives, "pos": _pos_list(ship.pos)}]
        return []

    # ------------------------------------------------------------------

    def step(
        self,
        state: SimulationState,
        inp: ShipInput,
        dt: float,
        vocabulary: Sequence[VocabPair],
    ) -> list[dict]:
        if state.status != SessionStatus.RUNNING:
            return []
        dt = max(0.0, float(dt))
        events: list[dict] = []
        state.tick += 1
        state.time_ms += dt * self.config.frame_ms

        ship = state.ship
        self._apply_controls(ship, inp, dt)
        self._integrate_ship(ship, dt)
        events.extend(self._try_fire(state, inp))
        self._update_projectiles(state, dt)
        self._update_targets(state, dt)

        hit_events, correct_hit = self._resolve_projectile_hits(state)
        events.extend(hit_events)
        events.extend(self._resolve_ship_hit(state))

        if correct_hit:
            wave = generate_wave(state.level + 1, vocabulary, state.ship.pos, self.rng, self.config)
            state.level += 1
            state.projectiles = []
            self.apply_wave(state, wave)
            logger.debug(f"Level {state.level}: prompt={wave.prompt.en!r}")
            events.append({"type": "wave", "level": state.level, "prompt": wave.prompt.en, "count": len(wave.targets)})

        if state.lives <= 0:
            state.status = SessionStatus.ENDED
            state.summary = state.make_summary()
            logger.info(f"Game over: {state.summary.to_dict()}")
            events.append({"type": "game_over", **state.summary.to_dict()})

        return events
